# companies_api/api/routes/companies.py
import re
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import ValidationError

from companies_api.api.deps import get_registry
from companies_api.core.errors import InvalidPayload
from companies_api.crud.companies import CompanyRegistry
from companies_api.schemas.companies import (
    CompanyCreate,
    CompanyOut,
    CompanySummary,
    CompanyUpdate,
)

API_PREFIX = "/rest/v1"
COMPANIES_PATH = f"{API_PREFIX}/companies"

# Leading ASCII base-10 integer, like parseInt: "7abc" -> 7, "abc" -> None
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

router = APIRouter(prefix="/companies", tags=["companies"])


def parse_company_id(raw: str) -> Optional[int]:
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # past the int-string digit limit; no such id can exist
        return None


# GET /rest/v1/companies
@router.get("", response_model=List[CompanySummary])
def list_companies(registry: CompanyRegistry = Depends(get_registry)):
    return registry.list_summaries()


# POST /rest/v1/companies
@router.post("", response_model=CompanyOut, status_code=status.HTTP_201_CREATED)
def create_company(
    response: Response,
    payload: Optional[CompanyCreate] = None,
    registry: CompanyRegistry = Depends(get_registry),
):
    if payload is None:
        payload = CompanyCreate()
    company = registry.create(payload.name, payload.industry, payload.address)
    response.headers["Location"] = f"{COMPANIES_PATH}/{company.id}"
    return company


# GET /rest/v1/companies/{companyId}
@router.get("/{companyId}", response_model=CompanyOut)
def get_company(companyId: str, registry: CompanyRegistry = Depends(get_registry)):
    return registry.get(parse_company_id(companyId))


# PATCH /rest/v1/companies/{companyId}
@router.patch("/{companyId}", response_model=CompanyOut)
def update_company(
    companyId: str,
    payload: Any = Body(None),
    registry: CompanyRegistry = Depends(get_registry),
):
    company_id = parse_company_id(companyId)
    # unknown id is a 404 whatever the body holds
    registry.get(company_id)
    try:
        patch = CompanyUpdate.model_validate({} if payload is None else payload)
    except ValidationError:
        raise InvalidPayload()
    return registry.update(
        company_id,
        name=patch.name,
        industry=patch.industry,
        address=patch.address,
    )


# DELETE /rest/v1/companies/{companyId}
@router.delete("/{companyId}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_company(companyId: str, registry: CompanyRegistry = Depends(get_registry)):
    registry.delete(parse_company_id(companyId))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

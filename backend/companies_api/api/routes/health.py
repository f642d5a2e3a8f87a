# companies_api/api/routes/health.py
from fastapi import APIRouter, Depends

from companies_api.api.deps import get_registry
from companies_api.crud.companies import CompanyRegistry

router = APIRouter()

@router.get("/health")
def health(registry: CompanyRegistry = Depends(get_registry)):
    return {"ok": True, "companies": len(registry)}

# companies_api/api/routes/catalog.py
from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from companies_api.catalog.openapi_doc import OPENAPI_DOCUMENT, build_openapi_document

router = APIRouter(prefix="/metadata-catalog/companies", tags=["catalog"])

OPENAPI_JSON_PATH = "/rest/v1/metadata-catalog/companies/openapi.json"


@router.get("/openapi.json", response_model=dict)
def openapi_json():
    return build_openapi_document()


@router.get("", response_class=HTMLResponse)
def swagger_ui():
    """Swagger UI pointed at the document above."""
    return get_swagger_ui_html(
        openapi_url=OPENAPI_JSON_PATH,
        title=f"{OPENAPI_DOCUMENT['info']['title']} - Swagger UI",
    )

# companies_api/catalog/openapi_doc.py
"""
Hand-authored OpenAPI description of the companies endpoints.

FastAPI's generated schema is disabled; this document is what the
metadata catalog serves and what Swagger UI renders, so it lists only
the public companies operations and their 400/404 contracts.
"""
import copy

_COMPANY_ID_PARAM = {
    "name": "companyId",
    "in": "path",
    "required": True,
    "schema": {"type": "integer", "example": 1},
}


def _json(schema: dict) -> dict:
    return {"application/json": {"schema": schema}}


def _ref(name: str) -> dict:
    return {"$ref": f"#/components/schemas/{name}"}


OPENAPI_DOCUMENT = {
    "openapi": "3.0.0",
    "info": {
        "title": "Company API",
        "description": "A simple API to manage companies, departments, and users.",
        "version": "1.0.0",
    },
    "servers": [{"url": "/", "description": "Current server"}],
    "paths": {
        "/rest/v1/companies": {
            "get": {
                "summary": "Get all companies",
                "operationId": "getCompanies",
                "responses": {
                    "200": {
                        "description": "A list of companies.",
                        "content": _json({"type": "array", "items": _ref("CompanySummary")}),
                    }
                },
            },
            "post": {
                "summary": "Create a new company",
                "operationId": "createCompany",
                "requestBody": {"required": True, "content": _json(_ref("CompanyCreateRequest"))},
                "responses": {
                    "201": {
                        "description": "Company created successfully.",
                        "headers": {
                            "Location": {
                                "description": "The URL of the newly created company.",
                                "schema": {"type": "string", "example": "/rest/v1/companies/123"},
                            }
                        },
                        "content": _json(_ref("Company")),
                    },
                    "400": {"description": "Invalid request payload."},
                },
            },
        },
        "/rest/v1/companies/{companyId}": {
            "delete": {
                "summary": "Delete a company by ID",
                "operationId": "deleteCompanyById",
                "parameters": [_COMPANY_ID_PARAM],
                "responses": {
                    "204": {"description": "Company deleted successfully."},
                    "404": {"description": "Company not found."},
                },
            },
            "get": {
                "summary": "Get a company by ID",
                "operationId": "getCompanyById",
                "parameters": [_COMPANY_ID_PARAM],
                "responses": {
                    "200": {"description": "The company object.", "content": _json(_ref("Company"))},
                    "404": {"description": "Company not found."},
                },
            },
            "patch": {
                "summary": "Update a company",
                "operationId": "updateCompany",
                "parameters": [_COMPANY_ID_PARAM],
                "requestBody": {"required": True, "content": _json(_ref("CompanyUpdateRequest"))},
                "responses": {
                    "200": {"description": "Company updated successfully.", "content": _json(_ref("Company"))},
                    "400": {"description": "Invalid request payload."},
                    "404": {"description": "Company not found."},
                },
            },
        },
    },
    "components": {
        "schemas": {
            "CompanySummary": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "example": 1},
                    "name": {"type": "string", "example": "Acme Corp"},
                },
            },
            "Company": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "example": 123},
                    "name": {"type": "string", "example": "New Company"},
                    "industry": {"type": "string", "example": "Technology"},
                    "address": {"type": "string", "example": "123 Test Street"},
                },
            },
            "CompanyCreateRequest": {
                "type": "object",
                "required": ["name", "industry"],
                "properties": {
                    "name": {"type": "string", "example": "New Company"},
                    "industry": {"type": "string", "example": "Finance"},
                    "address": {"type": "string", "example": "123 Test Street"},
                },
            },
            "CompanyUpdateRequest": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "example": "Updated Company Name"},
                    "industry": {"type": "string", "example": "Manufacturing"},
                    "address": {"type": "string", "example": "456 New Avenue"},
                },
            },
        }
    },
}


def build_openapi_document() -> dict:
    return copy.deepcopy(OPENAPI_DOCUMENT)

from fastapi import Request

from companies_api.crud.companies import CompanyRegistry


def get_registry(request: Request) -> CompanyRegistry:
    """
    Usage in routes:
        def endpoint(registry: CompanyRegistry = Depends(get_registry)):
            ...
    """
    return request.app.state.registry

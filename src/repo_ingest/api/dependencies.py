"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from repo_ingest.config import get_settings
from repo_ingest.services.loading import LoadingService


def get_loading_service(request: Request) -> LoadingService:
    """Get the loading service from app state."""
    if hasattr(request.app.state, "loading_service"):
        return request.app.state.loading_service

    service = LoadingService(settings=get_settings())
    request.app.state.loading_service = service
    return service


# Type alias for dependency injection
LoadingServiceDep = Annotated[LoadingService, Depends(get_loading_service)]

"""Loading API endpoints."""

import re
from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from repo_ingest.api.dependencies import LoadingServiceDep
from repo_ingest.core.exceptions import (
    ConfigurationError,
    FetchError,
    TraversalError,
)
from repo_ingest.core.models.ignore import PatternRule
from repo_ingest.core.models.repository import UnknownHandling

router = APIRouter(prefix="/loading")


# --- Request/Response models ---

class LoadRepositoryRequest(BaseModel):
    """Request to load a hosted repository."""

    url: str = Field(..., min_length=1, max_length=2000)
    branch: str | None = Field(default=None, max_length=255)
    recursive: bool = True
    unknown: UnknownHandling = UnknownHandling.WARN
    ignore_files: list[str] = Field(default_factory=list)
    ignore_patterns: list[str] = Field(default_factory=list)
    access_token: str | None = None
    include_hidden: bool = False


class DocumentResponse(BaseModel):
    """A loaded document."""

    content: str
    metadata: dict[str, Any]


class LoadRepositoryResult(BaseModel):
    """Result of a repository load."""

    owner: str
    repository_name: str
    subpath: str
    count: int
    documents: list[DocumentResponse]


@router.post("/repositories", response_model=LoadRepositoryResult)
async def load_repository(
    request: LoadRepositoryRequest,
    service: LoadingServiceDep,
) -> LoadRepositoryResult:
    """Clone a repository and return its text documents."""
    try:
        patterns = [PatternRule(re.compile(p)) for p in request.ignore_patterns]
    except re.error as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid ignore pattern: {e}",
        )

    try:
        loader = service.create_loader(
            request.url,
            branch=request.branch,
            recursive=request.recursive,
            unknown=request.unknown,
            ignore_files=[*request.ignore_files, *patterns],
            access_token=request.access_token,
            include_hidden=request.include_hidden,
        )
        documents = await loader.load()
    except ConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except FetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except TraversalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    coordinate = loader.coordinate
    return LoadRepositoryResult(
        owner=coordinate.owner,
        repository_name=coordinate.repository_name,
        subpath=coordinate.subpath,
        count=len(documents),
        documents=[DocumentResponse(content=d.content, metadata=d.metadata) for d in documents],
    )

"""Health check endpoint."""

from fastapi import APIRouter

from repo_ingest import __version__

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Report service liveness."""
    return {"status": "ok", "version": __version__}

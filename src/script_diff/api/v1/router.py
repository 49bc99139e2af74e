"""API v1 router aggregator."""
from fastapi import APIRouter

from script_diff.api.v1.diff import router as diff_router

router = APIRouter()

router.include_router(diff_router, tags=["diff"])


@router.get("/", summary="API Information")
async def api_info():
    """Get API version and status information."""
    return {
        "version": "v1",
        "status": "active",
        "endpoints": {
            "diff": "/api/v1/diff",
        },
    }

"""API v1 router aggregator."""
from fastapi import APIRouter

from whisper_diary.api.v1.merge import router as merge_router

router = APIRouter()

router.include_router(merge_router, tags=["merge"])


@router.get("/", summary="API Information")
async def api_info():
    """Get API version and status information."""
    return {
        "version": "v1",
        "status": "active",
        "endpoints": {
            "merge": "/api/v1/merge",
        },
    }

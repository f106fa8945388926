from fastapi import APIRouter

from rssagg.core.exceptions import InternalError

router = APIRouter(prefix="/v1", tags=["Diagnostics"])


@router.get("/healthz", summary="Readiness Check")
async def healthz():
    """Health check endpoint"""
    return {"status": "ok"}


@router.get("/err", summary="Error Check")
async def err():
    """Always fails with 500, to exercise the error path"""
    raise InternalError("Internal Server Error")

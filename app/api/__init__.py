"""
API routes for the SIP calculator.
"""

from fastapi import APIRouter

from app.api import calculations, sip

router = APIRouter()

# Include sub-routers
router.include_router(sip.router, prefix="/sip", tags=["sip"])
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])


@router.get("/health")
async def api_health():
    """Liveness check used by browser front-ends."""
    return {"status": "ok", "message": "Calculator API is running!"}

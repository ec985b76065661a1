"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results.
"""

from fastapi import APIRouter

from app.api.schemas import ERROR_RESPONSES, ExtendedSipResponse, SipInput, extended_response
from app.calculations import sip

router = APIRouter()


@router.post("/sip", response_model=ExtendedSipResponse, responses=ERROR_RESPONSES)
async def calculate_sip(inputs: SipInput):
    """Calculate SIP future value, total invested and wealth gained."""
    result = sip.summarize(inputs.monthly_investment, inputs.annual_return_pct, inputs.years)
    return extended_response(inputs, result)

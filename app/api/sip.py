"""
Basic SIP endpoint: future value and an echo of the inputs.
"""

from fastapi import APIRouter

from app.api.schemas import ERROR_RESPONSES, BasicSipResponse, SipInput, basic_response
from app.calculations import sip

router = APIRouter()


@router.post("", response_model=BasicSipResponse, responses=ERROR_RESPONSES)
async def calculate_sip_future_value(inputs: SipInput):
    """Calculate the future value of a monthly SIP."""
    result = sip.summarize(inputs.monthly_investment, inputs.annual_return_pct, inputs.years)
    return basic_response(inputs, result)

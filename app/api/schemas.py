"""
Request and response models shared by the SIP endpoints.

Both endpoints parse the same SipInput; they differ only in how the
result is presented.
"""

from typing import Union

from pydantic import AliasChoices, BaseModel, Field, StrictFloat, StrictInt

from app.calculations.sip import SipResult

# Strict so that "5000", true and null are rejected instead of coerced
Number = Union[StrictInt, StrictFloat]


class SipInput(BaseModel):
    """Validated SIP request body."""

    monthly_investment: Number = Field(validation_alias="monthlyInvestment")
    annual_return_pct: Number = Field(
        validation_alias=AliasChoices("annualReturnPct", "annualReturn")
    )
    years: Number = Field(validation_alias=AliasChoices("years", "investmentYears"))


class BasicSipInputs(BaseModel):
    monthlyInvestment: Number
    annualReturnPct: Number
    years: Number


class BasicSipResponse(BaseModel):
    """Future value plus an echo of the inputs."""

    futureValue: float
    inputs: BasicSipInputs


class ExtendedSipInputs(BaseModel):
    monthlyInvestment: Number
    annualReturn: Number
    investmentYears: Number


class ExtendedSipResponse(BaseModel):
    """Future value with invested total and gain."""

    success: bool = True
    futureValue: float
    totalInvested: float
    wealthGained: float
    operation: str = "sip"
    inputs: ExtendedSipInputs


class ErrorResponse(BaseModel):
    error: str
    kind: str
    message: str


def basic_response(inputs: SipInput, result: SipResult) -> BasicSipResponse:
    return BasicSipResponse(
        futureValue=result.future_value,
        inputs=BasicSipInputs(
            monthlyInvestment=inputs.monthly_investment,
            annualReturnPct=inputs.annual_return_pct,
            years=inputs.years,
        ),
    )


def extended_response(inputs: SipInput, result: SipResult) -> ExtendedSipResponse:
    return ExtendedSipResponse(
        futureValue=result.future_value,
        totalInvested=result.total_invested,
        wealthGained=result.wealth_gained,
        inputs=ExtendedSipInputs(
            monthlyInvestment=inputs.monthly_investment,
            annualReturn=inputs.annual_return_pct,
            investmentYears=inputs.years,
        ),
    )


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing, non-numeric or out-of-range input"},
    500: {"model": ErrorResponse, "description": "Calculation or server failure"},
}

"""
SIP Calculation Engine

Pure functions for Systematic Investment Plan projections.
All calculations are designed to match Excel formula behavior.
"""

from app.calculations import sip

__all__ = ["sip"]

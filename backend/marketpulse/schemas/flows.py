"""
CONTRACT 4: Institutional Flows

Daily FII / DII net activity (INR crore).
"""

from pydantic import BaseModel, Field


class FIIFlow(BaseModel):
    date: str = Field(..., description="DD Mon YYYY")
    index: float
    debt: float
    hybrid: float


class DIIFlow(BaseModel):
    date: str
    equity: float
    debt: float
    hybrid: float


class FIIDIIResponse(BaseModel):
    """Most recent trading days first."""

    fii_data: list[FIIFlow]
    dii_data: list[DIIFlow]

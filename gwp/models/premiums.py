# gwp/models/premiums.py

from typing import List

from pydantic import BaseModel, Field


class GwpRequest(BaseModel):
    country: str = Field(..., description="Country code (case-insensitive)", examples=["ae"])
    lob: List[str] = Field(
        ...,
        description="Lines of business (case-sensitive)",
        examples=[["property", "transport"]],
    )


class HealthOut(BaseModel):
    status: str
    records: int

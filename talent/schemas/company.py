"""Company schemas."""

from pydantic import BaseModel, Field


class CompanyName(BaseModel):
    """Company referenced by its natural key (job payloads and DTOs)."""

    name: str = Field(..., min_length=1, max_length=255)


class CompanyResponse(BaseModel):
    """Company as exposed by entity projections."""

    id: int
    name: str

    class Config:
        from_attributes = True

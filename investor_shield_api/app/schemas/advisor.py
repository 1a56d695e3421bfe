"""
Pydantic models for advisor data and verification results.

Verification answers with one of two explicit variants distinguished
by ``found``: ``AdvisorFound`` carries the advisor and its rating
summary, ``AdvisorNotFound`` carries an explanatory message.  An
unknown advisor is a normal answer, not an error.
"""

from typing import List, Literal, Optional, Union

from pydantic import Field, field_validator

from .base import APIModel


class AdvisorBase(APIModel):
    name: str = Field(..., min_length=1, examples=["Rajesh Kumar"])
    reg_number: Optional[str] = Field(None, examples=["INH200001234"])
    is_registered: bool = False
    complaints_count: int = Field(0, ge=0)
    trust_score: int = Field(0, ge=0, le=100)
    years_experience: int = Field(0, ge=0)
    specialization: Optional[str] = Field(None, examples=["Investment Advisory"])


class AdvisorCreate(AdvisorBase):
    """Schema for creating an advisor."""
    pass


class AdvisorRead(AdvisorBase):
    id: str


class RatedAdvisorRead(AdvisorRead):
    """Advisor decorated with its rating summary."""

    avg_rating: float
    review_count: int


class VerifyAdvisorRequest(APIModel):
    name: str = Field(..., min_length=1, examples=["Priya Sharma"])
    reg_number: Optional[str] = Field(None, examples=["INH200005678"])

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    @field_validator("reg_number")
    @classmethod
    def blank_reg_number(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class AdvisorFound(APIModel):
    found: Literal[True] = True
    advisor: AdvisorRead
    reviews: int
    avg_rating: float


class AdvisorNotFound(APIModel):
    found: Literal[False] = False
    message: str = "Advisor not found in SEBI database"


VerifyAdvisorResponse = Union[AdvisorFound, AdvisorNotFound]


class AdvisorList(APIModel):
    advisors: List[AdvisorRead]


class RatedAdvisorList(APIModel):
    advisors: List[RatedAdvisorRead]

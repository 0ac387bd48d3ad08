"""
SerialSmith - Pydantic Models
Normalizer policy, token variants, and DTOs for API
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ==================== Core Models ====================


class NormalizePolicy(BaseModel):
    """Policy choices where inventory line conventions disagree."""

    keyword_occurrence: Literal["first", "last"] = Field(
        "first", description="Which serial keyword occurrence splits description from serials"
    )
    bare_token_prefix: Literal["retain", "clear"] = Field(
        "retain",
        description="Carried prefix after a full serial with no trailing digits: the token itself, or empty",
    )
    multi_segment_first: bool = Field(
        True, description="Try semicolon multi-segment ranges before simple ranges"
    )
    max_range_items: int = Field(
        1000, ge=1, le=100000, description="Largest range a matcher will expand"
    )


class PrefixState(BaseModel):
    """Alphanumeric lead-in carried between serial tokens of one line."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field("", description="Most recent full-serial prefix")


class SerialToken(BaseModel):
    """A classified serial token: a full serial, or a partial inheriting the carried prefix."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["full", "partial"] = Field(..., description="Token classification")
    raw: str = Field(..., description="Token as typed")
    resolved: str = Field(..., description="Fully-qualified serial")


# ==================== Request DTOs ====================


class CleanseRequest(BaseModel):
    """Request to normalize pasted inventory text."""

    raw_text: str = Field(..., description="Raw multi-line inventory text")
    policy: Optional[NormalizePolicy] = Field(
        None, description="Policy override. Server defaults are used when omitted"
    )


# ==================== Response DTOs ====================


class CleanseResponse(BaseModel):
    """Normalized inventory records."""

    lines: List[str] = Field(..., description="Normalizer output, empty strings separate blocks")
    records: List[str] = Field(..., description="One record per item, separators removed")
    display_text: str = Field(..., description="Lines joined for block-structured display")
    count: int = Field(..., description="Number of records")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    env: str = ""

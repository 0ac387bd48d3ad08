"""
SerialSmith - Cleanse API
Normalize pasted inventory text into one record per item
"""

from fastapi import APIRouter

from ..core.config import settings
from ..core.errors import InputTooLargeError, NoDataError
from ..core.logging import get_logger
from ..core.models import CleanseRequest, CleanseResponse, NormalizePolicy
from ..core.normalize import default_policy, normalize, to_display_text, to_records

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cleanse", tags=["cleanse"])


@router.post("", response_model=CleanseResponse)
async def cleanse(request: CleanseRequest) -> CleanseResponse:
    """
    Normalize raw inventory text.

    - Expands numeric ranges and abbreviated serial lists
    - Keeps block separators in `lines` and `display_text`
    - Returns `records` ready to write one per cell
    """
    size = len(request.raw_text)
    if size > settings.SERIALSMITH_MAX_INPUT_CHARS:
        raise InputTooLargeError(size, settings.SERIALSMITH_MAX_INPUT_CHARS)

    lines = normalize(request.raw_text, request.policy)
    records = to_records(lines)
    if not records:
        raise NoDataError(size)

    logger.info(f"Cleansed {size} chars into {len(records)} record(s)")

    return CleanseResponse(
        lines=lines,
        records=records,
        display_text=to_display_text(lines),
        count=len(records),
    )


@router.get("/policy", response_model=NormalizePolicy)
async def get_default_policy() -> NormalizePolicy:
    """Get the normalize policy used when a request does not send one."""
    return default_policy()

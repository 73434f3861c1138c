import logging

from fastapi import APIRouter, Request

from .. import schemas
from ..compat_engine import compute_compatibility, interleave
from ..config import settings
from ..hangul import decompose_for_display
from ..limiter import limiter

router = APIRouter(prefix="/v1/compat", tags=["compat"])
logger = logging.getLogger("gunghap.compat")


def _log_decomposition(name: str, label: str) -> None:
    if not settings.log_decomposition or not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("Decomposition [%s] %s", label, name)
    for i, row in enumerate(decompose_for_display(name)):
        logger.debug(
            "  %d %s | idx=%d/%d/%d | strokes=%s+%s+%s=%s",
            i,
            row.syllable,
            row.initial_index,
            row.vowel_index,
            row.final_index,
            row.initial_strokes,
            row.vowel_strokes,
            row.final_strokes,
            row.total_strokes,
        )


@router.post("/names", response_model=schemas.CompatNamesResponse)
@limiter.limit(settings.compat_rate_limit)
async def compat_names(request: Request, payload: schemas.CompatNamesRequest):
    """Calculate the name compatibility score of two Hangul names.

    Returns the score together with every intermediate step so the client can
    draw the pyramid: both stroke sequences, the interleaved digits, the
    interleaved syllables for the top row, and every reduction row.
    """
    _log_decomposition(payload.name_1, "name_1")
    _log_decomposition(payload.name_2, "name_2")

    result = compute_compatibility(payload.name_1, payload.name_2)
    syllables = interleave(list(payload.name_1), list(payload.name_2), result.start_with_second)

    logger.info(
        "Compat names | len1=%d | len2=%d | rows=%d | score=%d",
        len(payload.name_1),
        len(payload.name_2),
        len(result.rows),
        result.score,
    )
    return schemas.CompatNamesResponse(
        name_1=payload.name_1,
        name_2=payload.name_2,
        interleaved_syllables=syllables,
        **result.to_dict(),
    )


@router.post("/decompose", response_model=schemas.DecomposeResponse)
@limiter.limit(settings.compat_rate_limit)
async def compat_decompose(request: Request, payload: schemas.DecomposeRequest):
    """Per-syllable component indices and stroke counts of one name."""
    rows = decompose_for_display(payload.name)
    logger.info("Compat decompose | len=%d", len(payload.name))
    return schemas.DecomposeResponse(
        name=payload.name,
        syllables=[schemas.SyllableBreakdownResponse(**row.to_dict()) for row in rows],
    )

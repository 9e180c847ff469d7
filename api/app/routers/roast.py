import logging

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.dependencies import RoastLLMDep
from app.middleware.metrics import DETECTED_LANGUAGE, ROASTS
from app.models.llm_cloud import RoastGenerationError
from app.schemas.roast import ErrorResponse, RoastRequest, RoastResponse
from app.services.prompt import RoastLevel, build_prompt

logger = logging.getLogger("roastme")
router = APIRouter()

MISSING_FIELDS = "Missing required fields: name, profession, and level are required"
INVALID_LEVEL = "Invalid roast level. Choose: soft, medium, or brutal"
GENERATION_FAILED = "Failed to generate roast. Please try again."


@router.post(
    "/roast",
    response_model=RoastResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Roast someone",
)
async def roast(llm: RoastLLMDep, req: RoastRequest | None = None):
    """Generates a 4-6 line roast of the submitted persona.

    The answer follows the language the user wrote in (English, Hindi or
    Marathi, Devanagari or Romanized).

    **Example:** `{"name": "Raj", "profession": "Student", "level": "soft"}`
    """
    # An empty body is treated like `{}`
    if req is None:
        req = RoastRequest()
    name = (req.name or "").strip()
    profession = (req.profession or "").strip()
    if not name or not profession or not req.level:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    try:
        level = RoastLevel.parse(req.level)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_LEVEL)

    about = (req.about or "").strip()[: settings.about_max_chars]

    logger.info("Generating %s roast for %s", level.value, name)
    prompt = build_prompt(name, profession, about, level)
    logger.info(
        "Detected language: %s (%s)",
        prompt.language.language.value,
        prompt.language.script.value,
    )
    DETECTED_LANGUAGE.labels(
        language=prompt.language.language.value,
        script=prompt.language.script.value,
    ).inc()

    try:
        text = await llm.generate(prompt)
    except RoastGenerationError as e:
        logger.error("Roast failed for %s: %s", name, e)
        ROASTS.labels(level=level.value, outcome="error").inc()
        raise HTTPException(status_code=500, detail=GENERATION_FAILED)

    logger.info("Roast generated successfully for %s", name)
    ROASTS.labels(level=level.value, outcome="success").inc()

    return RoastResponse(roast=text, level=level.value, name=name)

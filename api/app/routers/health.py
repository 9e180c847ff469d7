from fastapi import APIRouter

from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse, summary="Health check")
async def health():
    """Confirms the backend is up and lists the available endpoints."""
    return HealthResponse(
        status="ok",
        message="RoastMe AI Backend is running!",
        endpoints={"roast": "POST /api/roast"},
    )

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    endpoints: dict[str, str]

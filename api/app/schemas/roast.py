from pydantic import BaseModel, Field


class RoastRequest(BaseModel):
    name: str | None = Field(default=None, description="Who to roast")
    profession: str | None = Field(default=None, description="What they do")
    level: str | None = Field(default=None, description="soft, medium or brutal")
    about: str | None = Field(default=None, description="Optional bio, up to 300 chars")


class RoastResponse(BaseModel):
    success: bool = True
    roast: str
    level: str
    name: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

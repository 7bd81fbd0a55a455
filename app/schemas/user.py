from pydantic import BaseModel, ConfigDict, Field


class IndustryIn(BaseModel):
    """Выбор отрасли при онбординге."""
    model_config = ConfigDict(str_strip_whitespace=True)

    industry: str = Field(..., min_length=1, max_length=128)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    auth_id: str
    email: str | None = None
    industry: str | None = None

from pydantic import BaseModel, Field


class TokenRequest(BaseModel):
    """Запрос на выдачу токена по идентификатору из внешней авторизации."""
    auth_id: str = Field(..., min_length=1, description="ID пользователя")
    email: str | None = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserInfo(BaseModel):
    auth_id: str
    industry: str | None = None


class TokenWithUser(Token):
    """
    Access-token + информация о пользователе.
    """
    user: UserInfo

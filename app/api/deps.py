import logging

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from agent.insight_generator import InsightGenerator
from core.config import settings
from db.session import get_db
from crud.user import get_user_by_auth_id
from models.user import User

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/token", auto_error=False
)


def get_current_identity(token: str | None = Depends(oauth2_scheme)) -> str | None:
    """
    Достаёт ID пользователя из bearer-токена.
    Нет токена или токен невалиден → None, решение принимает вызывающий код.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except jwt.PyJWTError as exc:
        logger.info("Rejected token: %s", exc)
        return None
    return payload.get("sub")


def get_current_user(
    identity: str | None = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> User:
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    user = get_user_by_auth_id(db, identity)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def get_insight_generator(request: Request) -> InsightGenerator:
    return request.app.state.insight_generator

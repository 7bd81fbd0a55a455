from datetime import datetime, timedelta, timezone

import jwt
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config import settings
from db.session import get_db
from crud.user import create, get_user_by_auth_id
from schemas.auth import TokenRequest, TokenWithUser, UserInfo

router = APIRouter()


@router.post(
    "/auth/token",
    response_model=TokenWithUser,
    summary="Auth by external user ID",
)
def auth_token(
    payload: TokenRequest, db: Session = Depends(get_db)
) -> TokenWithUser:
    """
    Создаёт (или находит) пользователя по `auth_id`
    и возвращает access‑token вместе с информацией о нём.
    """
    user = get_user_by_auth_id(db, payload.auth_id) or create(
        db, payload.auth_id, payload.email
    )

    to_encode = {
        "sub": user.auth_id,
        "exp": datetime.now(timezone.utc)
        + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    token = jwt.encode(to_encode, settings.SECRET_KEY, settings.ALGORITHM)

    return TokenWithUser(
        access_token=token,
        user=UserInfo(auth_id=user.auth_id, industry=user.industry),
    )

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import get_current_user
from db.session import get_db
from crud.user import set_industry
from models.user import User
from schemas.user import IndustryIn, UserOut

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/me/industry", response_model=UserOut)
def update_industry(
    payload: IndustryIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserOut:
    """
    Сохраняет отрасль пользователя (онбординг).
    """
    user = set_industry(db, user, payload.industry)
    return UserOut.model_validate(user)

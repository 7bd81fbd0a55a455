from sqlalchemy.orm import Session, joinedload

from models.user import User


def get_user_by_auth_id(db: Session, auth_id: str) -> User | None:
    """
    Возвращает пользователя по внешнему ID вместе с инсайтами его отрасли.
    """
    return (
        db.query(User)
        .options(joinedload(User.industry_insight))
        .filter(User.auth_id == auth_id)
        .first()
    )


def create(db: Session, auth_id: str, email: str | None = None) -> User:
    """
    Создаёт нового пользователя по внешнему ID.
    """
    user = User(auth_id=auth_id, email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def set_industry(db: Session, user: User, industry: str) -> User:
    """
    Фиксирует отрасль пользователя.
    """
    user.industry = industry
    db.commit()
    db.refresh(user)
    return user

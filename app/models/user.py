from sqlalchemy import (
    Column,
    Integer,
    DateTime,
    String,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from db.base import Base
from models.industry_insight import IndustryInsight


class User(Base):
    """
    Модель пользователя.

    Attributes:
        id: Уникальный идентификатор пользователя.
        auth_id: Идентификатор во внешней системе авторизации (sub токена).
        email: Почта.
        industry: Отрасль пользователя.
        created_at: Дата и время создания профиля.
        industry_insight: Инсайты по отрасли пользователя, если уже есть.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    auth_id = Column(
        String,
        unique=True,
        nullable=False,
        index=True,
    )
    email = Column(String, nullable=True)
    industry = Column(String, nullable=True, index=True)
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    # ───── relationships ────────────────────────────────────────────
    # связь по значению отрасли, без FK: запись инсайтов появляется позже
    industry_insight = relationship(
        IndustryInsight,
        primaryjoin="foreign(User.industry) == IndustryInsight.industry",
        uselist=False,
        viewonly=True,
    )

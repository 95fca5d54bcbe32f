"""SQLAlchemy ORM models."""
from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.sql import func

from identity.modules.accounts.models import AccountAction

from .base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    action_type = Column(
        Enum(
            AccountAction,
            name="action_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=AccountAction.SIGNUP,
        server_default=AccountAction.SIGNUP.value,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

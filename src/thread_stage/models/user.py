"""SQLAlchemy model for public user profiles."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from thread_stage.db.session import Base


class User(Base):
    """Public profile of a forum member."""

    __tablename__ = "user_profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    nickname: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Relative avatar image path; empty means the default icon.
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="")

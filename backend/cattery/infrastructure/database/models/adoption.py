"""SQLAlchemy ORM model for adoption links."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cattery.infrastructure.database.base import Base


class AdoptionModel(Base):
    """ORM model: maps to the 'adoptions' table.

    Both foreign keys cascade, so removing a cat or a user removes its links.
    """

    __tablename__ = "adoptions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cat_id: Mapped[int] = mapped_column(
        ForeignKey("cats.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    adopted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "cat_id", name="uq_adoptions_user_cat"),
    )

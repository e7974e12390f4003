"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from user_store.domain.entities.user import User
from user_store.infrastructure.persistence.database import Base


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive CURRENT_TIMESTAMP values, which are UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserModel(Base):
    """
    SQLAlchemy ORM model for the users table.

    The email column is indexed for lookups but carries no unique
    constraint, so the store must tolerate several rows per email.
    Check constraints reject blank emails and blank (but non-null) names,
    matching what the User entity accepts on write.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("length(trim(email)) > 0", name="ck_users_email_not_blank"),
        CheckConstraint(
            "name IS NULL OR length(trim(name)) > 0", name="ck_users_name_not_blank"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def to_entity(self) -> User:
        """
        Convert ORM model to domain entity.

        Stored rows are mapped without the entity's write-time checks, and
        timestamps always come back timezone-aware in UTC.

        Returns:
            User domain entity
        """
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
            validate=False,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from a new domain entity.

        Identity and timestamps are left for the database to generate.

        Args:
            user: Domain entity

        Returns:
            ORM model ready for insertion
        """
        return UserModel(email=user.email, name=user.name)

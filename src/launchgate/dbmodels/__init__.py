"""
Database models for the user store (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    DateTime,
    ForeignKeyConstraint,
    Identity,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

LAUNCH_ID_MAX_LENGTH = 64

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False))
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )

    trips: Mapped[list["Trips"]] = relationship(
        "Trips", uselist=True, back_populates="user", order_by="Trips.id"
    )


class Trips(Base):
    __tablename__ = "trips"
    __table_args__ = (
        ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="trips_user_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="trips_pkey"),
        UniqueConstraint("user_id", "launch_id", name="trips_user_id_launch_id_key"),
        Index("idx_trips_user", "user_id"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False))
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    launch_id: Mapped[str] = mapped_column(String(LAUNCH_ID_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )

    user: Mapped["Users"] = relationship("Users", back_populates="trips")


target_metadata = Base.metadata

__all__ = ["Base", "Trips", "Users", "target_metadata"]

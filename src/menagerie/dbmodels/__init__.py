"""
Database models for Menagerie (authoritative ORM definitions).
"""

from sqlalchemy import Integer, MetaData, PrimaryKeyConstraint, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
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


# Records.id is a 32-bit integer column on every supported backend
MIN_RECORD_ID = -(2**31)
MAX_RECORD_ID = 2**31 - 1


class Records(Base):
    __tablename__ = "records"
    __table_args__ = (PrimaryKeyConstraint("id", name="records_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Stored under the original column name
    category: Mapped[str] = mapped_column("type", String(255), nullable=False)
    accessory: Mapped[str | None] = mapped_column(String(255), nullable=True)


__all__ = ["Base", "Records", "MIN_RECORD_ID", "MAX_RECORD_ID"]

"""
SQLAlchemy ORM models
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Integer, SmallInteger, Text, TIMESTAMP, Boolean, Numeric, func, Index
from sqlalchemy.orm import Mapped, mapped_column

from lifeos.infrastructure.db.session import Base


class CategoryModel(Base):
    """Categories of tracks and records, ordered by weight DESC"""
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    icon: Mapped[str] = mapped_column(String(64), nullable=False)
    color: Mapped[str] = mapped_column(String(16), nullable=False)  # #RRGGBB
    weight: Mapped[int] = mapped_column(Integer, nullable=False, server_default="5")
    status: Mapped[str] = mapped_column(String(20), nullable=False, server_default="active")

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=False
    )


class TrackModel(Base):
    """Recurring goals. Soft-deleted via deleted_at; never removed while logs exist."""
    __tablename__ = "tracks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)  # track_<millis>_<random>
    category_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)  # -> categories

    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # checkbox/minutes/count
    frequency: Mapped[str | None] = mapped_column(String(20), nullable=True)  # daily/weekly/monthly
    day_of_week: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)  # 0=Sunday..6
    day_of_month: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)  # 1..31

    # NULL for rows migrated from the id-only format: creation time comes from the id
    created_at: Mapped[datetime | None] = mapped_column(TIMESTAMP(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(TIMESTAMP(timezone=True), nullable=True)


class LogModel(Base):
    """Dated effort observations. (track_id, date) is intentionally not unique."""
    __tablename__ = "logs"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    track_id: Mapped[str] = mapped_column(String(64), nullable=False)  # -> tracks
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_logs_track_date", "track_id", "date"),
    )


class FinanceRecordModel(Base):
    """Monthly finance snapshot, one row per YYYY-MM"""
    __tablename__ = "finance_records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    month: Mapped[str] = mapped_column(String(7), nullable=False, unique=True)  # YYYY-MM
    income: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, server_default="0")
    expense: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, server_default="0")
    sip_started: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")
    learning_sessions: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class RecordModel(Base):
    """Memory vault entries (books, courses, ideas...)"""
    __tablename__ = "records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    category_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    tags: Mapped[str] = mapped_column(Text, nullable=False, server_default="")

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=False
    )

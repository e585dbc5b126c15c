"""SQLAlchemy ORM tables for the workforce schema.

All tables use UUID primary keys and timezone-aware UTC timestamps.
Relationships are declared ``lazy="raise"``: repositories must request every
relation they return through explicit loader options.

Reference columns are indexed but carry no foreign key constraint: deleting a
row leaves its dependents in place, as the memory provider does. Relations
are therefore view-only joins.

Nullability follows the ``Mapped`` annotations. Unique constraints back the
service-level uniqueness checks:
    roles.role_name
    workforce_users.employee_id, workforce_users.email
    equipment.serial_number (NULLs allowed)
"""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Shared declarative base for all ORM tables."""

    pass


class RoleRow(Base):
    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    role_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))


class PermissionRow(Base):
    __tablename__ = "permissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    module_name: Mapped[str] = mapped_column(String(50), nullable=False)
    can_create: Mapped[bool] = mapped_column(Boolean, default=False)
    can_read: Mapped[bool] = mapped_column(Boolean, default=False)
    can_update: Mapped[bool] = mapped_column(Boolean, default=False)
    can_delete: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    role: Mapped[RoleRow | None] = relationship(
        primaryjoin="foreign(PermissionRow.role_id) == RoleRow.id",
        viewonly=True,
        lazy="raise",
    )


class UserRow(Base):
    __tablename__ = "workforce_users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    employee_id: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(20), default="")
    status: Mapped[str] = mapped_column(String(20), default="Active")
    profile: Mapped[str] = mapped_column(String(50), default="Field Agent")
    role_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    role: Mapped[RoleRow | None] = relationship(
        primaryjoin="foreign(UserRow.role_id) == RoleRow.id",
        viewonly=True,
        lazy="raise",
    )


class CrewRow(Base):
    __tablename__ = "crews"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    crew_name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    members: Mapped[list[CrewMemberRow]] = relationship(
        primaryjoin="CrewRow.id == foreign(CrewMemberRow.crew_id)",
        order_by="CrewMemberRow.assigned_at",
        viewonly=True,
        lazy="raise",
    )


class CrewMemberRow(Base):
    __tablename__ = "crew_members"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    crew_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    assigned_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    user: Mapped[UserRow | None] = relationship(
        primaryjoin="foreign(CrewMemberRow.user_id) == UserRow.id",
        viewonly=True,
        lazy="raise",
    )


class EquipmentRow(Base):
    __tablename__ = "equipment"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    serial_number: Mapped[str | None] = mapped_column(
        String(50), unique=True, nullable=True
    )
    assigned_to_user: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    status: Mapped[str] = mapped_column(String(50), default="Active")
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    user: Mapped[UserRow | None] = relationship(
        primaryjoin="foreign(EquipmentRow.assigned_to_user) == UserRow.id",
        viewonly=True,
        lazy="raise",
    )


class AttendanceRow(Base):
    __tablename__ = "attendance"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    check_in: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    check_out: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    status: Mapped[str] = mapped_column(String(50), default="Present")
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    user: Mapped[UserRow | None] = relationship(
        primaryjoin="foreign(AttendanceRow.user_id) == UserRow.id",
        viewonly=True,
        lazy="raise",
    )


class TimeOffRow(Base):
    __tablename__ = "time_off"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    leave_type: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[str] = mapped_column(String(50), default="Pending")
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    user: Mapped[UserRow | None] = relationship(
        primaryjoin="foreign(TimeOffRow.user_id) == UserRow.id",
        viewonly=True,
        lazy="raise",
    )


class TripRow(Base):
    __tablename__ = "trips"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    start_location: Mapped[str] = mapped_column(String(255), nullable=False)
    end_location: Mapped[str] = mapped_column(String(255), nullable=False)
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), index=True, nullable=False
    )
    end_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    purpose: Mapped[str] = mapped_column(Text, default="")
    distance_km: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    user: Mapped[UserRow | None] = relationship(
        primaryjoin="foreign(TripRow.user_id) == UserRow.id",
        viewonly=True,
        lazy="raise",
    )

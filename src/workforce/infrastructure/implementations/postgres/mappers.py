"""
Conversion between ORM rows and domain entities.

``*_to_row`` builds a new row for inserts; ``apply_*`` copies mutable
columns onto a loaded row for updates; ``*_from_row`` rebuilds the entity,
attaching only the relations the caller loaded. Timestamps are normalised to
UTC on the way in and out, since some backends drop the offset.
"""

from datetime import UTC, datetime
from enum import Enum

from workforce.domain.entities import (
    Attendance,
    AttendanceStatus,
    Crew,
    CrewMember,
    Equipment,
    EquipmentStatus,
    LeaveType,
    Permission,
    Role,
    TimeOff,
    TimeOffStatus,
    Trip,
    User,
    UserProfile,
    UserStatus,
)
from workforce.infrastructure.implementations.postgres.tables import (
    AttendanceRow,
    CrewMemberRow,
    CrewRow,
    EquipmentRow,
    PermissionRow,
    RoleRow,
    TimeOffRow,
    TripRow,
    UserRow,
)


def utc(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware UTC datetime (naive values are taken as UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _apply(row, entity, fields: tuple[str, ...]) -> None:
    for name in fields:
        value = getattr(entity, name)
        if isinstance(value, datetime):
            value = utc(value)
        elif isinstance(value, Enum):
            value = value.value
        setattr(row, name, value)


# Role

ROLE_FIELDS = ("role_name", "description", "updated_at")


def role_to_row(role: Role) -> RoleRow:
    return RoleRow(
        id=role.id,
        role_name=role.role_name,
        description=role.description,
        created_at=utc(role.created_at),
        updated_at=utc(role.updated_at),
    )


def role_from_row(row: RoleRow) -> Role:
    return Role(
        id=row.id,
        role_name=row.role_name,
        description=row.description or "",
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
    )


def apply_role(row: RoleRow, role: Role) -> None:
    _apply(row, role, ROLE_FIELDS)


# Permission

PERMISSION_FIELDS = (
    "role_id",
    "module_name",
    "can_create",
    "can_read",
    "can_update",
    "can_delete",
    "updated_at",
)


def permission_to_row(permission: Permission) -> PermissionRow:
    row = PermissionRow(id=permission.id, created_at=utc(permission.created_at))
    _apply(row, permission, PERMISSION_FIELDS)
    return row


def permission_from_row(row: PermissionRow, with_role: bool = False) -> Permission:
    return Permission(
        id=row.id,
        role_id=row.role_id,
        module_name=row.module_name,
        can_create=bool(row.can_create),
        can_read=bool(row.can_read),
        can_update=bool(row.can_update),
        can_delete=bool(row.can_delete),
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        role=role_from_row(row.role) if with_role and row.role else None,
    )


def apply_permission(row: PermissionRow, permission: Permission) -> None:
    _apply(row, permission, PERMISSION_FIELDS)


# User

USER_FIELDS = (
    "first_name",
    "last_name",
    "employee_id",
    "email",
    "phone",
    "status",
    "profile",
    "role_id",
    "created_by",
    "updated_at",
)


def user_to_row(user: User) -> UserRow:
    row = UserRow(id=user.id, created_at=utc(user.created_at))
    _apply(row, user, USER_FIELDS)
    return row


def user_from_row(row: UserRow, with_role: bool = False) -> User:
    return User(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        employee_id=row.employee_id,
        email=row.email,
        phone=row.phone or "",
        status=UserStatus(row.status),
        profile=UserProfile(row.profile),
        role_id=row.role_id,
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        role=role_from_row(row.role) if with_role and row.role else None,
    )


def apply_user(row: UserRow, user: User) -> None:
    _apply(row, user, USER_FIELDS)


# Crew

CREW_FIELDS = ("crew_name", "created_by", "updated_at")


def crew_to_row(crew: Crew) -> CrewRow:
    row = CrewRow(id=crew.id, created_at=utc(crew.created_at))
    _apply(row, crew, CREW_FIELDS)
    return row


def crew_from_row(row: CrewRow, with_members: bool = False) -> Crew:
    return Crew(
        id=row.id,
        crew_name=row.crew_name,
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        members=(
            [crew_member_from_row(m, with_user=True) for m in row.members]
            if with_members
            else []
        ),
    )


def apply_crew(row: CrewRow, crew: Crew) -> None:
    _apply(row, crew, CREW_FIELDS)


def crew_member_to_row(member: CrewMember) -> CrewMemberRow:
    return CrewMemberRow(
        id=member.id,
        crew_id=member.crew_id,
        user_id=member.user_id,
        assigned_at=utc(member.assigned_at),
    )


def crew_member_from_row(row: CrewMemberRow, with_user: bool = False) -> CrewMember:
    return CrewMember(
        id=row.id,
        crew_id=row.crew_id,
        user_id=row.user_id,
        assigned_at=utc(row.assigned_at),
        user=user_from_row(row.user) if with_user and row.user else None,
    )


# Equipment

EQUIPMENT_FIELDS = (
    "name",
    "serial_number",
    "assigned_to_user",
    "status",
    "created_by",
    "updated_at",
)


def equipment_to_row(equipment: Equipment) -> EquipmentRow:
    row = EquipmentRow(id=equipment.id, created_at=utc(equipment.created_at))
    _apply(row, equipment, EQUIPMENT_FIELDS)
    return row


def equipment_from_row(row: EquipmentRow, with_user: bool = False) -> Equipment:
    return Equipment(
        id=row.id,
        name=row.name,
        serial_number=row.serial_number,
        assigned_to_user=row.assigned_to_user,
        status=EquipmentStatus(row.status),
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        user=user_from_row(row.user) if with_user and row.user else None,
    )


def apply_equipment(row: EquipmentRow, equipment: Equipment) -> None:
    _apply(row, equipment, EQUIPMENT_FIELDS)


# Attendance

ATTENDANCE_FIELDS = ("user_id", "check_in", "check_out", "status", "updated_at")


def attendance_to_row(attendance: Attendance) -> AttendanceRow:
    row = AttendanceRow(
        id=attendance.id,
        created_by=attendance.created_by,
        created_at=utc(attendance.created_at),
    )
    _apply(row, attendance, ATTENDANCE_FIELDS)
    return row


def attendance_from_row(row: AttendanceRow, with_user: bool = False) -> Attendance:
    return Attendance(
        id=row.id,
        user_id=row.user_id,
        check_in=utc(row.check_in),
        check_out=utc(row.check_out),
        status=AttendanceStatus(row.status),
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        user=user_from_row(row.user) if with_user and row.user else None,
    )


def apply_attendance(row: AttendanceRow, attendance: Attendance) -> None:
    _apply(row, attendance, ATTENDANCE_FIELDS)


# Time off

TIME_OFF_FIELDS = (
    "user_id",
    "leave_type",
    "start_date",
    "end_date",
    "reason",
    "status",
    "updated_at",
)


def time_off_to_row(time_off: TimeOff) -> TimeOffRow:
    row = TimeOffRow(
        id=time_off.id,
        created_by=time_off.created_by,
        created_at=utc(time_off.created_at),
    )
    _apply(row, time_off, TIME_OFF_FIELDS)
    return row


def time_off_from_row(row: TimeOffRow, with_user: bool = False) -> TimeOff:
    return TimeOff(
        id=row.id,
        user_id=row.user_id,
        leave_type=LeaveType(row.leave_type),
        start_date=row.start_date,
        end_date=row.end_date,
        reason=row.reason or "",
        status=TimeOffStatus(row.status),
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        user=user_from_row(row.user) if with_user and row.user else None,
    )


def apply_time_off(row: TimeOffRow, time_off: TimeOff) -> None:
    _apply(row, time_off, TIME_OFF_FIELDS)


# Trip

TRIP_FIELDS = (
    "user_id",
    "start_location",
    "end_location",
    "start_time",
    "end_time",
    "purpose",
    "distance_km",
    "updated_at",
)


def trip_to_row(trip: Trip) -> TripRow:
    row = TripRow(
        id=trip.id, created_by=trip.created_by, created_at=utc(trip.created_at)
    )
    _apply(row, trip, TRIP_FIELDS)
    return row


def trip_from_row(row: TripRow, with_user: bool = False) -> Trip:
    return Trip(
        id=row.id,
        user_id=row.user_id,
        start_location=row.start_location,
        end_location=row.end_location,
        start_time=utc(row.start_time),
        end_time=utc(row.end_time),
        purpose=row.purpose or "",
        distance_km=row.distance_km,
        created_by=row.created_by,
        created_at=utc(row.created_at),
        updated_at=utc(row.updated_at),
        user=user_from_row(row.user) if with_user and row.user else None,
    )


def apply_trip(row: TripRow, trip: Trip) -> None:
    _apply(row, trip, TRIP_FIELDS)

"""
Workforce domain entities.

Plain dataclasses shared by the domain services and every storage adapter.
Relation fields (``role``, ``user``, ``members``) are populated only by the
repository finders that advertise them; they are never persisted directly.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class UserStatus(str, Enum):
    """Employment status of a workforce user."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class UserProfile(str, Enum):
    """Functional profile of a workforce user."""

    FIELD_AGENT = "Field Agent"
    MANAGER = "Manager"
    ADMINISTRATOR = "Administrator"


class EquipmentStatus(str, Enum):
    """Operational status of a piece of equipment."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNDER_MAINTENANCE = "Under Maintenance"


class AttendanceStatus(str, Enum):
    """Attendance outcome for a user on a given day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"


class LeaveType(str, Enum):
    """Kind of leave requested in a time-off record."""

    SICK = "Sick Leave"
    CASUAL = "Casual Leave"
    PAID = "Paid Leave"
    UNPAID = "Unpaid Leave"


class TimeOffStatus(str, Enum):
    """Approval status of a time-off request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@dataclass
class Role:
    """
    Named role assigned to users and granted permissions.

    Attributes:
        id: Unique identifier
        role_name: Unique, non-empty role name
        description: Free-form description
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    id: uuid.UUID
    role_name: str
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass
class Permission:
    """
    CRUD capability flags granted to a role on one module.

    Attributes:
        id: Unique identifier
        role_id: Owning role
        module_name: Module the flags apply to
        can_create: Create capability
        can_read: Read capability
        can_update: Update capability
        can_delete: Delete capability
        role: Owning role, when loaded
    """

    id: uuid.UUID
    role_id: uuid.UUID
    module_name: str
    created_at: datetime
    updated_at: datetime
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False
    role: Role | None = None


@dataclass
class User:
    """
    Workforce user (employee).

    Attributes:
        id: Unique identifier
        first_name: Given name
        last_name: Family name
        employee_id: Unique employee number
        email: Unique e-mail address
        phone: Contact phone number
        status: Employment status
        profile: Functional profile
        role_id: Assigned role, if any
        created_by: User who created this record, if any
        role: Assigned role, when loaded
    """

    id: uuid.UUID
    first_name: str
    last_name: str
    employee_id: str
    email: str
    created_at: datetime
    updated_at: datetime
    phone: str = ""
    status: UserStatus = UserStatus.ACTIVE
    profile: UserProfile = UserProfile.FIELD_AGENT
    role_id: uuid.UUID | None = None
    created_by: uuid.UUID | None = None
    role: Role | None = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE


@dataclass
class CrewMember:
    """
    Membership of a user in a crew.

    Attributes:
        id: Unique identifier
        crew_id: Crew the user belongs to
        user_id: Member user
        assigned_at: When the user joined the crew
        user: Member user, when loaded
    """

    id: uuid.UUID
    crew_id: uuid.UUID
    user_id: uuid.UUID
    assigned_at: datetime
    user: User | None = None


@dataclass
class Crew:
    """
    Named group of users working together.

    Attributes:
        id: Unique identifier
        crew_name: Display name
        created_by: User who created the crew, if any
        members: Crew memberships, when loaded
    """

    id: uuid.UUID
    crew_name: str
    created_at: datetime
    updated_at: datetime
    created_by: uuid.UUID | None = None
    members: list[CrewMember] = field(default_factory=list)


@dataclass
class Equipment:
    """
    Tracked piece of equipment, optionally assigned to a user.

    Attributes:
        id: Unique identifier
        name: Display name
        serial_number: Unique serial number, when known
        assigned_to_user: User holding the equipment, if any
        status: Operational status
        created_by: User who registered the equipment, if any
        user: Assigned user, when loaded
    """

    id: uuid.UUID
    name: str
    created_at: datetime
    updated_at: datetime
    serial_number: str | None = None
    assigned_to_user: uuid.UUID | None = None
    status: EquipmentStatus = EquipmentStatus.ACTIVE
    created_by: uuid.UUID | None = None
    user: User | None = None

    @property
    def is_active(self) -> bool:
        return self.status == EquipmentStatus.ACTIVE


@dataclass
class Attendance:
    """
    Daily attendance record for a user.

    Attributes:
        id: Unique identifier
        user_id: Attending user
        check_in: Check-in time, if recorded
        check_out: Check-out time, if recorded
        status: Attendance outcome
        created_by: User who recorded the attendance, if any
        user: Attending user, when loaded
    """

    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    check_in: datetime | None = None
    check_out: datetime | None = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    created_by: uuid.UUID | None = None
    user: User | None = None


@dataclass
class TimeOff:
    """
    Leave request covering an inclusive date range.

    Attributes:
        id: Unique identifier
        user_id: Requesting user
        leave_type: Kind of leave
        start_date: First day of leave
        end_date: Last day of leave
        reason: Free-form justification
        status: Approval status
        created_by: User who filed the request, if any
        user: Requesting user, when loaded
    """

    id: uuid.UUID
    user_id: uuid.UUID
    leave_type: LeaveType
    start_date: date
    end_date: date
    created_at: datetime
    updated_at: datetime
    reason: str = ""
    status: TimeOffStatus = TimeOffStatus.PENDING
    created_by: uuid.UUID | None = None
    user: User | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == TimeOffStatus.PENDING


@dataclass
class Trip:
    """
    Business trip travelled by a user.

    Attributes:
        id: Unique identifier
        user_id: Travelling user
        start_location: Origin
        end_location: Destination
        start_time: Departure time
        end_time: Arrival time, if finished
        purpose: Free-form purpose
        distance_km: Travelled distance, never negative
        created_by: User who recorded the trip, if any
        user: Travelling user, when loaded
    """

    id: uuid.UUID
    user_id: uuid.UUID
    start_location: str
    end_location: str
    start_time: datetime
    created_at: datetime
    updated_at: datetime
    end_time: datetime | None = None
    purpose: str = ""
    distance_km: float | None = None
    created_by: uuid.UUID | None = None
    user: User | None = None

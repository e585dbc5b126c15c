"""
Tests for the relational repositories.

Runs against in-memory SQLite through aiosqlite; the schema and queries are
the ones used with PostgreSQL/asyncpg in production.
"""

import uuid
from datetime import UTC, date, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from workforce.domain.entities import (
    Attendance,
    Crew,
    CrewMember,
    LeaveType,
    Permission,
    Role,
    TimeOff,
    TimeOffStatus,
    Trip,
    User,
    UserProfile,
)
from workforce.domain.exceptions import ConstraintViolationError, StoreError
from workforce.infrastructure import InfrastructureFactory
from workforce.infrastructure.implementations.postgres import Database
from workforce.models import CreateRoleRequest, CreateUserRequest, UpdateUserRequest
from workforce.services import RoleService, UserService

T0 = datetime(2026, 3, 2, 8, 0, tzinfo=UTC)


@pytest.fixture
async def database():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine=engine)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.dispose()


@pytest.fixture
def sql_factory(database) -> InfrastructureFactory:
    return InfrastructureFactory(provider="postgres", database=database)


def make_role(name: str = "Supervisor") -> Role:
    return Role(
        id=uuid.uuid4(),
        role_name=name,
        description="Leads a crew",
        created_at=T0,
        updated_at=T0,
    )


def make_user(employee_id: str = "E-1", email: str = "a@acme.io", **kw) -> User:
    return User(
        id=uuid.uuid4(),
        first_name="Ana",
        last_name="Lopez",
        employee_id=employee_id,
        email=email,
        created_at=T0,
        updated_at=T0,
        **kw,
    )


# ===========================
# Roles and permissions
# ===========================


@pytest.mark.asyncio
async def test_role_round_trip(sql_factory):
    roles = sql_factory.get_role_repository()
    role = make_role()
    await roles.create(role)

    loaded = await roles.find_by_id(role.id)

    assert loaded == role
    assert loaded.created_at.tzinfo is not None
    assert (await roles.find_by_name("Supervisor")).id == role.id
    assert await roles.find_by_name("Driver") is None


@pytest.mark.asyncio
async def test_role_name_unique_constraint(sql_factory):
    roles = sql_factory.get_role_repository()
    await roles.create(make_role())

    with pytest.raises(ConstraintViolationError):
        await roles.create(make_role())


@pytest.mark.asyncio
async def test_update_missing_row(sql_factory):
    with pytest.raises(StoreError):
        await sql_factory.get_role_repository().update(make_role())


@pytest.mark.asyncio
async def test_permissions_by_role(sql_factory):
    roles = sql_factory.get_role_repository()
    permissions = sql_factory.get_permission_repository()
    role = make_role()
    await roles.create(role)
    for module in ("crews", "trips"):
        await permissions.create(
            Permission(
                id=uuid.uuid4(),
                role_id=role.id,
                module_name=module,
                can_read=True,
                created_at=T0,
                updated_at=T0,
            )
        )

    found = await permissions.find_by_role_and_module(role.id, "trips")
    listed = await permissions.find_by_role_id(role.id)
    removed = await permissions.delete_by_role_id(role.id)

    assert found.can_read is True
    assert found.role.role_name == "Supervisor"
    assert len(listed) == 2
    assert removed == 2
    assert await permissions.find_all() == []


# ===========================
# Users
# ===========================


@pytest.mark.asyncio
async def test_user_with_role_and_enums(sql_factory):
    roles = sql_factory.get_role_repository()
    users = sql_factory.get_user_repository()
    role = make_role()
    await roles.create(role)
    user = make_user(role_id=role.id, profile=UserProfile.MANAGER)
    await users.create(user)

    loaded = await users.find_by_employee_id("E-1")

    assert loaded.profile is UserProfile.MANAGER
    assert loaded.role.id == role.id
    assert [u.id for u in await users.find_by_role_id(role.id)] == [user.id]


@pytest.mark.asyncio
async def test_user_unique_email(sql_factory):
    users = sql_factory.get_user_repository()
    await users.create(make_user())

    with pytest.raises(ConstraintViolationError):
        await users.create(make_user(employee_id="E-2"))


@pytest.mark.asyncio
async def test_user_service_over_relational_store(sql_factory):
    """The domain services behave the same on the relational provider."""
    roles = RoleService(sql_factory.get_role_repository())
    users = UserService(
        sql_factory.get_user_repository(), sql_factory.get_role_repository()
    )
    role = await roles.create(CreateRoleRequest(role_name="Supervisor"))
    user = await users.create(
        CreateUserRequest(
            first_name="Ana",
            last_name="Lopez",
            employee_id="E-100",
            email="ana.lopez@acme.io",
            role_id=str(role.id),
        )
    )

    unassigned = await users.update(user.id, UpdateUserRequest(role_id=None))
    await roles.delete(role.id)

    assert unassigned.role is None
    assert (await users.get(user.id)).role_id is None


# ===========================
# Crews
# ===========================


@pytest.mark.asyncio
async def test_crew_members_with_users(sql_factory):
    users = sql_factory.get_user_repository()
    crews = sql_factory.get_crew_repository()
    members = sql_factory.get_crew_member_repository()
    user = make_user()
    await users.create(user)
    crew = Crew(id=uuid.uuid4(), crew_name="North", created_at=T0, updated_at=T0)
    await crews.create(crew)
    await members.create(
        CrewMember(id=uuid.uuid4(), crew_id=crew.id, user_id=user.id, assigned_at=T0)
    )

    loaded = await crews.find_by_id(crew.id)

    assert [m.user.email for m in loaded.members] == ["a@acme.io"]
    assert len(await members.find_by_user_id(user.id)) == 1
    assert await members.delete_by_crew_and_user(crew.id, user.id) == 1
    assert await members.delete_by_crew_and_user(crew.id, user.id) == 0


# ===========================
# Time-ordered finders
# ===========================


@pytest.mark.asyncio
async def test_attendance_day_lookup_and_order(sql_factory):
    attendance = sql_factory.get_attendance_repository()
    user_id = uuid.uuid4()
    ids = []
    for hours in (0, 1, 26):
        created = T0 + timedelta(hours=hours)
        record = Attendance(
            id=uuid.uuid4(), user_id=user_id, created_at=created, updated_at=created
        )
        await attendance.create(record)
        ids.append(record.id)

    listed = await attendance.find_by_user_id(user_id)
    first_day = await attendance.find_by_user_and_date(user_id, date(2026, 3, 2))

    assert [r.id for r in listed] == [ids[2], ids[1], ids[0]]
    assert first_day.id == ids[0]
    assert listed[0].user is None


@pytest.mark.asyncio
async def test_time_off_overlap_and_status(sql_factory):
    time_off = sql_factory.get_time_off_repository()
    record = TimeOff(
        id=uuid.uuid4(),
        user_id=uuid.uuid4(),
        leave_type=LeaveType.PAID,
        start_date=date(2026, 7, 1),
        end_date=date(2026, 7, 3),
        status=TimeOffStatus.APPROVED,
        created_at=T0,
        updated_at=T0,
    )
    await time_off.create(record)

    overlapping = await time_off.find_by_date_range(date(2026, 7, 3), date(2026, 7, 9))
    disjoint = await time_off.find_by_date_range(date(2026, 7, 4), date(2026, 7, 9))
    approved = await time_off.find_by_status(TimeOffStatus.APPROVED)

    assert [r.id for r in overlapping] == [record.id]
    assert disjoint == []
    assert approved[0].leave_type is LeaveType.PAID


@pytest.mark.asyncio
async def test_trip_range_and_nullable_columns(sql_factory):
    trips = sql_factory.get_trip_repository()
    user_id = uuid.uuid4()
    for day in (3, 9, 6):
        await trips.create(
            Trip(
                id=uuid.uuid4(),
                user_id=user_id,
                start_location="Depot",
                end_location="Site",
                start_time=datetime(2026, 5, day, tzinfo=UTC),
                created_at=T0,
                updated_at=T0,
            )
        )

    window = await trips.find_by_date_range(
        user_id, datetime(2026, 5, 5, tzinfo=UTC), datetime(2026, 5, 9, tzinfo=UTC)
    )

    assert [t.start_time.day for t in window] == [9, 6]
    assert all(t.distance_km is None and t.end_time is None for t in window)

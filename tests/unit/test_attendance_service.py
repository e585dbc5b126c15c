"""
Unit tests for AttendanceService.

One record per user per day is a convention the service does not enforce;
the tests pin down what callers can rely on instead.
"""

import uuid
from datetime import UTC, datetime, timedelta, timezone

import pytest

from workforce.domain.entities import AttendanceStatus
from workforce.domain.exceptions import InvalidArgumentError, NotFoundError
from workforce.models import CreateAttendanceRequest, UpdateAttendanceRequest


@pytest.mark.asyncio
async def test_create_attendance(attendance_service, worker, publisher):
    check_in = datetime(2026, 3, 2, 8, 0, tzinfo=UTC)

    record = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id), check_in=check_in)
    )

    assert record.user_id == worker.id
    assert record.check_in == check_in
    assert record.check_out is None
    assert record.status == AttendanceStatus.PRESENT
    assert record.user.id == worker.id
    assert publisher.of_type("AttendanceCreated")[0].payload == {
        "attendance_id": str(record.id),
        "user_id": str(worker.id),
        "status": "Present",
    }


@pytest.mark.asyncio
async def test_check_times_are_stored_in_utc(attendance_service, worker):
    """Offset-aware times are converted; naive times are taken as UTC."""
    madrid = timezone(timedelta(hours=1))

    record = await attendance_service.create(
        CreateAttendanceRequest(
            user_id=str(worker.id),
            check_in=datetime(2026, 3, 2, 9, 0, tzinfo=madrid),
            check_out=datetime(2026, 3, 2, 17, 0),
        )
    )

    assert record.check_in == datetime(2026, 3, 2, 8, 0, tzinfo=UTC)
    assert record.check_in.utcoffset() == timedelta(0)
    assert record.check_out == datetime(2026, 3, 2, 17, 0, tzinfo=UTC)


@pytest.mark.asyncio
async def test_create_attendance_unknown_user(attendance_service, publisher):
    with pytest.raises(NotFoundError):
        await attendance_service.create(
            CreateAttendanceRequest(user_id=str(uuid.uuid4()))
        )
    with pytest.raises(InvalidArgumentError):
        await attendance_service.create(CreateAttendanceRequest(user_id="E-100"))

    assert publisher.of_type("AttendanceCreated") == []


@pytest.mark.asyncio
async def test_second_record_same_day_is_visible_to_callers(
    attendance_service, worker
):
    """
    A second record on the same day is accepted; find_for_day returns the
    first one so a caller can decide whether to reject or merge.
    """
    first = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id))
    )
    day = first.created_at.astimezone(UTC).date()

    existing = await attendance_service.find_for_day(worker.id, day)
    second = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id))
    )

    assert existing.id == first.id
    assert second.id != first.id
    assert len(await attendance_service.list_for_user(worker.id)) == 2
    assert (await attendance_service.find_for_day(worker.id, day)).id == first.id


@pytest.mark.asyncio
async def test_find_for_day_without_record(attendance_service, worker):
    with pytest.raises(NotFoundError):
        await attendance_service.find_for_day(worker.id, datetime(2020, 1, 1).date())


@pytest.mark.asyncio
async def test_list_for_user_between(attendance_service, worker):
    record = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id))
    )
    around = record.created_at

    inside = await attendance_service.list_for_user_between(
        worker.id, around - timedelta(minutes=1), around + timedelta(minutes=1)
    )
    before = await attendance_service.list_for_user_between(
        worker.id, around - timedelta(days=2), around - timedelta(days=1)
    )

    assert [r.id for r in inside] == [record.id]
    assert before == []


@pytest.mark.asyncio
async def test_list_between_rejects_inverted_window(attendance_service, worker):
    now = datetime.now(UTC)

    with pytest.raises(InvalidArgumentError):
        await attendance_service.list_for_user_between(
            worker.id, now, now - timedelta(hours=1)
        )


@pytest.mark.asyncio
async def test_update_attendance_check_out_and_clear(attendance_service, worker):
    record = await attendance_service.create(
        CreateAttendanceRequest(
            user_id=str(worker.id), check_in=datetime(2026, 3, 2, 8, 0, tzinfo=UTC)
        )
    )

    checked_out = await attendance_service.update(
        record.id,
        UpdateAttendanceRequest(check_out=datetime(2026, 3, 2, 16, 30, tzinfo=UTC)),
    )
    cleared = await attendance_service.update(
        record.id, UpdateAttendanceRequest(check_in=None)
    )

    assert checked_out.check_out == datetime(2026, 3, 2, 16, 30, tzinfo=UTC)
    assert checked_out.check_in == record.check_in
    assert cleared.check_in is None
    assert cleared.check_out == checked_out.check_out


@pytest.mark.asyncio
async def test_update_attendance_status_null_is_ignored(attendance_service, worker):
    record = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id), status=AttendanceStatus.ON_LEAVE)
    )

    updated = await attendance_service.update(
        record.id, UpdateAttendanceRequest(status=None)
    )

    assert updated.status == AttendanceStatus.ON_LEAVE


@pytest.mark.asyncio
async def test_delete_attendance(attendance_service, worker, publisher):
    record = await attendance_service.create(
        CreateAttendanceRequest(user_id=str(worker.id))
    )

    await attendance_service.delete(record.id)

    with pytest.raises(NotFoundError):
        await attendance_service.get(record.id)
    assert publisher.of_type("AttendanceDeleted")[0].payload == {
        "attendance_id": str(record.id),
        "user_id": str(worker.id),
    }

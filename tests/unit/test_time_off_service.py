"""Unit tests for TimeOffService."""

from datetime import date

import pytest

from workforce.domain.entities import LeaveType, TimeOffStatus
from workforce.domain.exceptions import InvalidArgumentError, NotFoundError
from workforce.models import CreateTimeOffRequest, UpdateTimeOffRequest


def leave(user_id, start: date, end: date, **overrides) -> CreateTimeOffRequest:
    return CreateTimeOffRequest(
        user_id=str(user_id),
        leave_type=overrides.pop("leave_type", LeaveType.CASUAL),
        start_date=start,
        end_date=end,
        **overrides,
    )


@pytest.mark.asyncio
async def test_create_time_off(time_off_service, worker, publisher):
    record = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 10), reason="Holiday")
    )

    assert record.status == TimeOffStatus.PENDING
    assert record.leave_type == LeaveType.CASUAL
    assert record.user.id == worker.id
    assert publisher.of_type("TimeOffCreated")[0].payload == {
        "time_off_id": str(record.id),
        "user_id": str(worker.id),
        "status": "Pending",
    }


@pytest.mark.asyncio
async def test_single_day_leave_is_allowed(time_off_service, worker):
    record = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 1))
    )

    assert record.start_date == record.end_date


@pytest.mark.asyncio
async def test_inverted_period_is_rejected(time_off_service, worker, publisher):
    with pytest.raises(InvalidArgumentError):
        await time_off_service.create(
            leave(worker.id, date(2026, 7, 10), date(2026, 7, 1))
        )

    assert await time_off_service.list_all() == []
    assert publisher.of_type("TimeOffCreated") == []


@pytest.mark.asyncio
async def test_update_cannot_invert_period(time_off_service, worker):
    record = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 10))
    )

    with pytest.raises(InvalidArgumentError):
        await time_off_service.update(
            record.id, UpdateTimeOffRequest(start_date=date(2026, 7, 11))
        )

    assert (await time_off_service.get(record.id)).start_date == date(2026, 7, 1)


@pytest.mark.asyncio
async def test_status_is_open_to_any_transition(time_off_service, worker, publisher):
    record = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 2))
    )

    approved = await time_off_service.update(
        record.id, UpdateTimeOffRequest(status=TimeOffStatus.APPROVED)
    )
    reopened = await time_off_service.update(
        record.id, UpdateTimeOffRequest(status=TimeOffStatus.PENDING)
    )

    assert approved.status == TimeOffStatus.APPROVED
    assert reopened.status == TimeOffStatus.PENDING
    assert [e.payload["status"] for e in publisher.of_type("TimeOffUpdated")] == [
        "Approved",
        "Pending",
    ]


@pytest.mark.asyncio
async def test_lists_are_newest_first_by_start_date(time_off_service, worker):
    for start in (date(2026, 1, 5), date(2026, 9, 1), date(2026, 4, 20)):
        await time_off_service.create(leave(worker.id, start, start))

    records = await time_off_service.list_for_user(worker.id)

    assert [r.start_date for r in records] == [
        date(2026, 9, 1),
        date(2026, 4, 20),
        date(2026, 1, 5),
    ]


@pytest.mark.asyncio
async def test_list_by_status(time_off_service, worker):
    pending = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 2))
    )
    approved = await time_off_service.create(
        leave(
            worker.id,
            date(2026, 8, 1),
            date(2026, 8, 2),
            status=TimeOffStatus.APPROVED,
        )
    )

    assert [r.id for r in await time_off_service.list_by_status("Pending")] == [
        pending.id
    ]
    assert [
        r.id for r in await time_off_service.list_by_status(TimeOffStatus.APPROVED)
    ] == [approved.id]

    with pytest.raises(InvalidArgumentError):
        await time_off_service.list_by_status("Cancelled")


@pytest.mark.asyncio
async def test_list_between_returns_overlapping_leave(time_off_service, worker):
    july = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 10))
    )
    await time_off_service.create(leave(worker.id, date(2026, 9, 1), date(2026, 9, 3)))

    edge = await time_off_service.list_between(date(2026, 7, 10), date(2026, 7, 20))
    inside = await time_off_service.list_between(date(2026, 7, 3), date(2026, 7, 4))
    gap = await time_off_service.list_between(date(2026, 8, 1), date(2026, 8, 31))

    assert [r.id for r in edge] == [july.id]
    assert [r.id for r in inside] == [july.id]
    assert gap == []

    with pytest.raises(InvalidArgumentError):
        await time_off_service.list_between(date(2026, 8, 31), date(2026, 8, 1))


@pytest.mark.asyncio
async def test_delete_time_off(time_off_service, worker, publisher):
    record = await time_off_service.create(
        leave(worker.id, date(2026, 7, 1), date(2026, 7, 2))
    )

    await time_off_service.delete(record.id)

    with pytest.raises(NotFoundError):
        await time_off_service.get(record.id)
    assert len(publisher.of_type("TimeOffDeleted")) == 1

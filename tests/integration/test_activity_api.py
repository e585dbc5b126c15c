"""HTTP tests for equipment, attendance, time-off and trip endpoints."""

from fastapi import status

EQUIPMENT = "/api/v1/equipment"
ATTENDANCE = "/api/v1/attendance"
TIME_OFF = "/api/v1/time-off"
TRIPS = "/api/v1/trips"


def test_equipment_endpoints(client, user_id):
    created = client.post(
        EQUIPMENT,
        json={"name": "Radio", "serial_number": "RAD-1", "assigned_to_user": user_id},
    )
    assert created.status_code == status.HTTP_201_CREATED
    equipment_id = created.json()["id"]

    duplicate = client.post(EQUIPMENT, json={"name": "Radio", "serial_number": "RAD-1"})
    assert duplicate.status_code == status.HTTP_409_CONFLICT

    assert client.get(f"{EQUIPMENT}/serial/RAD-1").json()["id"] == equipment_id
    assert [e["id"] for e in client.get(f"{EQUIPMENT}/user/{user_id}").json()] == [
        equipment_id
    ]

    returned = client.put(
        f"{EQUIPMENT}/{equipment_id}",
        json={"assigned_to_user": None, "status": "Under Maintenance"},
    )
    assert returned.json()["assigned_to_user"] is None
    assert returned.json()["status"] == "Under Maintenance"

    assert client.delete(f"{EQUIPMENT}/{equipment_id}").status_code == 204


def test_attendance_endpoints(client, user_id):
    created = client.post(
        ATTENDANCE,
        json={"user_id": user_id, "check_in": "2026-03-02T08:00:00Z"},
    )
    assert created.status_code == status.HTTP_201_CREATED
    record = created.json()
    day = record["created_at"][:10]

    today = client.get(f"{ATTENDANCE}/user/{user_id}/day/{day}")
    assert today.json()["id"] == record["id"]

    nothing = client.get(f"{ATTENDANCE}/user/{user_id}/day/2020-01-01")
    assert nothing.status_code == status.HTTP_404_NOT_FOUND

    listed = client.get(f"{ATTENDANCE}/user/{user_id}").json()
    assert [r["id"] for r in listed] == [record["id"]]

    half_window = client.get(
        f"{ATTENDANCE}/user/{user_id}", params={"start": "2026-03-01T00:00:00Z"}
    )
    assert half_window.status_code == status.HTTP_400_BAD_REQUEST

    checked_out = client.put(
        f"{ATTENDANCE}/{record['id']}", json={"check_out": "2026-03-02T17:00:00Z"}
    )
    assert checked_out.json()["check_in"] == record["check_in"]
    assert checked_out.json()["check_out"] is not None


def test_time_off_endpoints(client, user_id, events):
    created = client.post(
        TIME_OFF,
        json={
            "user_id": user_id,
            "leave_type": "Sick Leave",
            "start_date": "2026-07-01",
            "end_date": "2026-07-03",
        },
    )
    assert created.status_code == status.HTTP_201_CREATED
    time_off_id = created.json()["id"]

    inverted = client.post(
        TIME_OFF,
        json={
            "user_id": user_id,
            "leave_type": "Sick Leave",
            "start_date": "2026-07-05",
            "end_date": "2026-07-01",
        },
    )
    assert inverted.status_code == status.HTTP_400_BAD_REQUEST

    approved = client.put(f"{TIME_OFF}/{time_off_id}", json={"status": "Approved"})
    assert approved.json()["status"] == "Approved"

    by_status = client.get(f"{TIME_OFF}/status/Approved").json()
    bad_status = client.get(f"{TIME_OFF}/status/Cancelled")
    overlapping = client.get(
        TIME_OFF, params={"start": "2026-07-03", "end": "2026-07-10"}
    ).json()
    assert [r["id"] for r in by_status] == [time_off_id]
    assert bad_status.status_code == status.HTTP_400_BAD_REQUEST
    assert [r["id"] for r in overlapping] == [time_off_id]

    assert len(events.of_type("TimeOffCreated")) == 1
    assert len(events.of_type("TimeOffUpdated")) == 1


def test_trip_endpoints(client, user_id):
    for day in ("03", "09", "06"):
        response = client.post(
            TRIPS,
            json={
                "user_id": user_id,
                "start_location": "Depot",
                "end_location": "Site 4",
                "start_time": f"2026-05-{day}T07:00:00Z",
                "distance_km": 12.5,
            },
        )
        assert response.status_code == status.HTTP_201_CREATED

    window = client.get(
        f"{TRIPS}/user/{user_id}",
        params={"start": "2026-05-05T00:00:00Z", "end": "2026-05-31T00:00:00Z"},
    ).json()
    assert [t["start_time"][:10] for t in window] == ["2026-05-09", "2026-05-06"]

    negative = client.post(
        TRIPS,
        json={
            "user_id": user_id,
            "start_location": "Depot",
            "end_location": "Site 4",
            "start_time": "2026-05-10T07:00:00Z",
            "distance_km": -3,
        },
    )
    assert negative.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    trip_id = window[0]["id"]
    cleared = client.put(f"{TRIPS}/{trip_id}", json={"distance_km": None})
    assert cleared.json()["distance_km"] is None
    assert client.delete(f"{TRIPS}/{trip_id}").status_code == 204
    assert client.get(f"{TRIPS}/{trip_id}").status_code == 404

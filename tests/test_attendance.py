from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from attendance_portal.models.attendance import Attendance, utc_now


async def test_mark_attendance(client, make_student, make_class):
    student = await make_student()
    physics = await make_class("Physics")

    res = await client.post(
        "/attendance/mark",
        json={"student_id": student["id"], "class_id": physics["id"], "present": True},
    )

    assert res.status_code == 201
    body = res.json()
    assert ObjectId.is_valid(body["id"])
    assert body["student_id"] == student["id"]
    assert body["class_id"] == physics["id"]
    assert body["present"] is True


async def test_mark_attendance_without_class_defaults_to_present(client, make_student):
    student = await make_student()

    res = await client.post("/attendance/mark", json={"student_id": student["id"]})

    assert res.status_code == 201
    assert res.json()["class_id"] is None
    assert res.json()["present"] is True


async def test_time_is_server_assigned(client, make_student):
    student = await make_student()
    supplied_id = str(ObjectId())
    arrival = utc_now()

    res = await client.post(
        "/attendance/mark",
        json={
            "_id": supplied_id,
            "student_id": student["id"],
            "time": "2000-01-01T00:00:00",
            "present": False,
        },
    )

    assert res.status_code == 201
    body = res.json()
    assert body["id"] != supplied_id
    marked_at = datetime.fromisoformat(body["time"].replace("Z", "+00:00"))
    assert marked_at.utcoffset() == timedelta(0)
    assert marked_at >= arrival.replace(tzinfo=timezone.utc)


def test_utc_now_is_millisecond_aligned():
    assert utc_now().microsecond % 1000 == 0


@pytest.mark.parametrize("student_id", [str(ObjectId()), "bogus"])
async def test_mark_for_unknown_student_is_404(client, student_id):
    res = await client.post("/attendance/mark", json={"student_id": student_id})

    assert res.status_code == 404
    assert res.json() == {"error": "Student does not exist"}
    assert await Attendance.count() == 0


async def test_mark_for_unknown_class_is_404(client, make_student):
    student = await make_student()

    res = await client.post(
        "/attendance/mark",
        json={"student_id": student["id"], "class_id": str(ObjectId())},
    )

    assert res.status_code == 404
    assert res.json() == {"error": "Class does not exist"}
    assert await Attendance.count() == 0


async def test_list_by_student_returns_exactly_their_records(client, make_student):
    asha = await make_student(email="asha@example.com")
    ravi = await make_student(email="ravi@example.com", name="Ravi", roll_number="13")

    marked = []
    for student, present in [(asha, True), (ravi, True), (asha, False), (ravi, False), (asha, True)]:
        res = await client.post("/attendance/mark", json={"student_id": student["id"], "present": present})
        marked.append(res.json())

    res = await client.get(f"/attendance/students/{asha['id']}")

    assert res.status_code == 200
    expected = [m for m in marked if m["student_id"] == asha["id"]]
    assert sorted(res.json(), key=lambda r: r["id"]) == sorted(expected, key=lambda r: r["id"])


async def test_list_by_class(client, make_student, make_class):
    student = await make_student()
    maths = await make_class("Maths")
    physics = await make_class("Physics")
    await client.post("/attendance/mark", json={"student_id": student["id"], "class_id": maths["id"]})
    in_physics = (
        await client.post("/attendance/mark", json={"student_id": student["id"], "class_id": physics["id"]})
    ).json()

    res = await client.get(f"/attendance/classes/{physics['id']}")

    assert res.status_code == 200
    assert res.json() == [in_physics]


@pytest.mark.parametrize("path", ["/attendance/students/{}", "/attendance/classes/{}"])
@pytest.mark.parametrize("ref", [str(ObjectId()), "bogus"])
async def test_list_for_unknown_reference_is_empty(client, path, ref):
    res = await client.get(path.format(ref))

    assert res.status_code == 200
    assert res.json() == []

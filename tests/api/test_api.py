from __future__ import annotations

import pytest

from src.clinic_attendance.clinic_attendance.core.enums import StaffKind
from src.clinic_attendance.clinic_attendance.main import create_app


@pytest.fixture
def client(monkeypatch, container, staff_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    staff_repo.add(name="Dr. A", kind=StaffKind.DOCTOR, working_days=(1,), slots=(2,), cabin_number=1)
    staff_repo.add(name="Ms. B", kind=StaffKind.EMPLOYEE, working_days=(1, 2), slots=(1, 2, 3), standard_hours=6)
    app = create_app(container)
    return app.test_client()


def test_health(client):
    body = client.get("/api/health").get_json()
    assert body["status"] == "Server is running"
    assert body["database"] == "connected"


def test_save_and_read_day_sheet(client):
    resp = client.put(
        "/api/employees/attendance/2024-06-03",
        json={"Ms. B_Slot1": {"status": "present", "checkInTime": "08:00", "checkOutTime": "15:00"}},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Attendance saved successfully", "count": 1}

    sheet = client.get("/api/employees/attendance/2024-06-03").get_json()
    assert sheet["Ms. B_Slot1"]["overtimeHours"] == 1

    records = client.get("/api/employees/attendance?startDate=2024-06-01&endDate=2024-06-30").get_json()
    assert [r["entityName"] for r in records] == ["Ms. B"]


def test_patch_times(client):
    client.put("/api/doctors/attendance/2024-06-03", json={"Dr. A_Slot2": {"status": "present"}})
    resp = client.patch("/api/doctors/attendance/2024-06-03/Dr.%20A_Slot2", json={"checkInTime": "11:00", "checkOutTime": "14:00"})
    assert resp.status_code == 200
    assert resp.get_json()["record"]["checkOutTime"] == "14:00"

    missing = client.patch("/api/doctors/attendance/2024-06-03/Dr.%20Z_Slot2", json={})
    assert missing.status_code == 404


@pytest.mark.parametrize(
    "method, url, body, status",
    [
        ("get", "/api/nurses/attendance", None, 400),
        ("get", "/api/doctors/analytics", None, 400),
        ("get", "/api/doctors/analytics?startDate=2024-06-30&endDate=2024-06-01", None, 400),
        ("put", "/api/doctors/attendance/2024-06-03", {"Dr. A_Slot9": {"status": "present"}}, 400),
        ("put", "/api/doctors/attendance/not-a-date", {}, 400),
        ("delete", "/api/holidays/2024-01-01", None, 404),
        ("get", "/api/staff/99", None, 404),
        ("post", "/api/staff", {"kind": "doctor", "name": "Dr. A", "days": [1], "slots": [1]}, 409),
        ("get", "/api/doctors/export/payroll.csv", None, 400),
        ("get", "/api/doctors/cabins", None, 400),
    ],
)
def test_error_statuses(client, method, url, body, status):
    resp = getattr(client, method)(url, json=body) if body is not None else getattr(client, method)(url)
    assert resp.status_code == status
    assert resp.get_json()["success"] is False


def test_analytics_and_noshow(client):
    client.put(
        "/api/doctors/attendance/2024-06-03",
        json={"Dr. A_Slot2": {"status": "absent"}},
    )
    analytics = client.get("/api/doctors/analytics?startDate=2024-06-01&endDate=2024-06-30").get_json()
    assert analytics["totalWorkingDays"] == 25
    assert analytics["dateRange"] == {"start": "2024-06-01", "end": "2024-06-30"}
    assert analytics["entities"][0]["absentDays"] == 1

    noshow = client.get("/api/doctors/noshow-report?startDate=2024-06-01&endDate=2024-06-30").get_json()
    assert noshow["totalAbsences"] == 1
    assert noshow["records"][0]["absentSlot"] == "Slot 2 (11:00 AM - 2:00 PM)"


def test_csv_export_download(client):
    resp = client.get("/api/doctors/export/noshow.csv?startDate=2024-06-01&endDate=2024-06-30")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert 'filename="noshow-2024-06-01-to-2024-06-30.csv"' in resp.headers["Content-Disposition"]
    assert resp.data.decode("utf-8-sig") == '"Sr No","Day & Date","Name","Absent Slot","Remark"'


def test_staff_and_holiday_routes(client):
    created = client.post("/api/staff", json={"kind": "employee", "name": "Ms. C", "standardHours": 3})
    assert created.status_code == 201
    staff_id = created.get_json()["id"]

    assert client.post(f"/api/staff/{staff_id}/toggle-active").get_json()["active"] is False
    assert client.delete(f"/api/staff/{staff_id}").status_code == 200

    assert client.post("/api/holidays", json={"date": "2024-06-04", "name": "Closed"}).status_code == 201
    assert [h["date"] for h in client.get("/api/holidays").get_json()] == ["2024-06-04"]


def test_schedule_and_cabins(client):
    day = client.get("/api/doctors/schedule/2024-06-03").get_json()
    assert day["slots"]["2"] == ["Dr. A"]

    cabins = client.get("/api/doctors/cabins?day=1&slot=2").get_json()
    assert cabins["booked"] == 1

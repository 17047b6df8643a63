from datetime import datetime

from src.rental_admin.rental_admin.attendance import controller as attendance_controller


def test_payroll_report_json(client):
    resp = client.get("/api/payroll?month=2025-03")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["month"] == "2025-03"
    ravi = next(r for r in body["data"]["rows"] if r["name"] == "Ravi")
    assert ravi["absent_days"] == 1
    assert ravi["net_salary"] == 25000
    assert body["data"]["summary"]["employee_count"] == 2


def test_payroll_bad_month_is_400(client):
    resp = client.get("/api/payroll?month=2025-3")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_payroll_csv_download(client):
    resp = client.get("/api/payroll.csv?month=2025-03")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "payroll_2025-03.csv" in resp.headers["Content-Disposition"]
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0].startswith("Name,Department,Gross (₹)")


def test_payroll_refresh_then_latest(client):
    assert client.get("/api/payroll/latest").status_code == 404

    resp = client.post("/api/payroll/refresh", json={"month": "2025-03"})

    assert resp.status_code == 200
    assert client.get("/api/payroll/latest").get_json()["data"]["month"] == "2025-03"


def test_payroll_fetch_failure_is_503(client, fake_container):
    def broken():
        raise ConnectionError("db down")

    fake_container.payroll_service._employees.list_active = broken

    resp = client.get("/api/payroll?month=2025-03")

    assert resp.status_code == 503
    assert resp.get_json()["error"]["code"] == "DATA_UNAVAILABLE"


def test_clock_in_and_register(client, monkeypatch):
    monkeypatch.setattr(attendance_controller, "now_local", lambda: datetime(2025, 3, 4, 9, 40))

    resp = client.post("/api/attendance/clock-in", json={"employee_id": 1, "lat": 12.9, "lng": 77.6})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["status"] == "late"

    reg = client.get("/api/attendance?date=2025-03-04").get_json()["data"]
    assert reg["counts"] == {"total_staff": 2, "present": 1, "absent": 1, "late": 1}

    assert client.post("/api/attendance/clock-in", json={"employee_id": 1}).status_code == 400


def test_unknown_employee_is_404(client):
    resp = client.get("/api/employees/77")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_create_and_list_employees(client):
    resp = client.post("/api/employees", json={"name": "Kiran", "email": "kiran@example.com", "salary": 18000})

    assert resp.status_code == 201
    listing = client.get("/api/employees?search=kiran").get_json()
    assert [e["name"] for e in listing["data"]] == ["Kiran"]
    assert listing["meta"]["total"] == 3


def test_leave_flow(client):
    resp = client.post(
        "/api/leaves",
        json={"employee_id": 2, "leave_type": "sick", "from_date": "2025-03-10", "to_date": "2025-03-11"},
    )
    leave_id = resp.get_json()["data"]["leave_id"]

    approved = client.post(f"/api/leaves/{leave_id}/approve").get_json()["data"]

    assert approved["status"] == "approved"
    assert approved["days"] == 2
    row = next(r for r in client.get("/api/payroll?month=2025-03").get_json()["data"]["rows"] if r["name"] == "Ravi")
    assert row["leave_days"] == 2


def test_rental_quote_and_booking(client):
    payload = {"start_date": "2025-03-01", "end_date": "2025-03-03", "equipment_ids": [1]}

    quote = client.post("/api/rentals/quote", json=payload).get_json()["data"]
    assert quote["total"] == 10000

    resp = client.post("/api/rentals", json={**payload, "customer_name": "Build Co", "customer_phone": "080"})
    assert resp.status_code == 201
    assert client.get("/api/equipment?available=1").get_json()["data"] == []


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_numeric_month_is_rejected_not_crashing(client):
    resp = client.post("/api/payroll/refresh", json={"month": 202503})

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_numeric_status_is_rejected_not_crashing(client):
    resp = client.post("/api/attendance/1/mark", json={"date": "2025-03-04", "status": 1})

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_non_string_fields_are_rejected(client):
    assert client.post("/api/attendance/1/mark", json={"date": 20250304, "status": "absent"}).status_code == 400
    assert client.post("/api/employees", json={"name": ["Kiran"], "email": "k@example.com"}).status_code == 400
    leave = {"employee_id": 2, "leave_type": "sick", "from_date": "2025-03-10", "to_date": "2025-03-10", "reason": 5}
    assert client.post("/api/leaves", json=leave).status_code == 400


def test_csv_filename_is_quoted(client):
    resp = client.get("/api/attendance.csv?date=2025-03-03")

    assert resp.headers["Content-Disposition"] == 'attachment; filename="attendance_2025-03-03.csv"'


def test_dashboard(client):
    client.post(
        "/api/leaves",
        json={"employee_id": 2, "leave_type": "casual", "from_date": "2025-03-03", "to_date": "2025-03-03"},
    )

    body = client.get("/api/dashboard?date=2025-03-03").get_json()["data"]

    assert body["as_of"] == "2025-03-03"
    assert body["kpis"]["active_employees"] == 2
    assert body["kpis"]["present_today"] == 0
    assert body["kpis"]["pending_leaves"] == 1
    assert body["kpis"]["available_equipment"] == 1
    assert body["kpis"]["active_rentals"] == 0
    assert [lv["employee_id"] for lv in body["recent_leaves"]] == [2]

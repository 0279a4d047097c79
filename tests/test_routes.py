from __future__ import annotations

import pytest

from src.attendance_client.attendance_client.session.store import SESSION_KEY
from tests.fakes import FakeResponse, make_record

REPORT = {
    "on_time": [make_record("001", "on_time", 1), make_record("002", "on_time", 2)],
    "late": [],
    "outside_campus": [make_record("003", "outside_campus", 3)],
    "absent": [],
}


def _login_as(client, credential):
    with client.session_transaction() as sess:
        sess[SESSION_KEY] = credential.to_dict()


def test_teacher_login_lands_on_report_with_counts(client, http):
    http.route("POST", "/login", FakeResponse(200, {"user_type": "teacher"}, cookies={"session": "t"}))
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))

    res = client.post("/", data={"email": "prof@unmsm.edu.pe", "password": "123"}, follow_redirects=True)

    assert res.status_code == 200
    assert len(http.calls_to("GET", "/admin/attendance")) == 1
    assert http.calls_to("GET", "/admin/attendance")[0]["params"] is None
    assert http.calls_to("GET", "/admin/attendance")[0]["cookies"] == {"session": "t"}
    body = res.get_data(as_text=True)
    assert "Registro General" in body
    assert "Asistieron Puntual (on_time) (2)" in body
    assert "Llegaron Tarde (late) (0)" in body
    assert "Intentaron desde Afuera (outside_campus) (1)" in body
    assert "Faltaron (absent) (0)" in body


def test_failed_login_stays_on_login_page(client, http):
    http.route("POST", "/login", FakeResponse(401, {"error": "Credenciales inválidas"}))

    res = client.post("/", data={"email": "x@unmsm.edu.pe", "password": "bad"})

    assert res.status_code == 200
    assert "Credenciales inválidas" in res.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess


def test_home_requires_login(client):
    res = client.get("/home")

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/")


def test_student_home_shows_attendance_form(client, student_credential):
    _login_as(client, student_credential)

    res = client.get("/home")

    body = res.get_data(as_text=True)
    assert "Marcar Asistencia" in body
    assert "Inteligencia Artificial" in body


def test_mark_attendance_without_geolocation_makes_no_call(client, http, student_credential):
    _login_as(client, student_credential)

    res = client.post("/attendance", data={"course": "IA", "geo_supported": "0"}, follow_redirects=True)

    assert "Geolocalización no soportada." in res.get_data(as_text=True)
    assert http.calls == []


def test_mark_attendance_with_fix(client, http, student_credential):
    http.route("POST", "/attendance", FakeResponse(200, {"message": "Asistencia registrada"}))
    _login_as(client, student_credential)

    res = client.post(
        "/attendance",
        data={"course": "IA", "geo_supported": "1", "latitude": "-12.05", "longitude": "-77.08"},
        follow_redirects=True,
    )

    assert "Asistencia registrada" in res.get_data(as_text=True)
    assert http.calls_to("POST", "/attendance")[0]["json"] == {"course": "IA", "latitude": -12.05, "longitude": -77.08}


@pytest.mark.parametrize(
    "path, method",
    [("/admin/attendance", "get"), ("/admin/attendance.csv", "get")],
)
def test_student_cannot_open_reports(client, http, student_credential, path, method):
    _login_as(client, student_credential)

    res = getattr(client, method)(path)

    assert res.status_code == 403
    assert http.calls == []


def test_teacher_cannot_mark_attendance(client, http, teacher_credential):
    _login_as(client, teacher_credential)

    res = client.post("/attendance", data={"course": "IA", "geo_supported": "1"})

    assert res.status_code == 403


def test_filter_tab_waits_for_explicit_trigger(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    _login_as(client, teacher_credential)

    client.get("/admin/attendance?tab=filter&date=2025-02-14")
    assert http.calls_to("GET", "/admin/attendance") == []

    res = client.get("/admin/attendance?tab=filter&date=2025-02-14&apply=1")
    assert http.calls_to("GET", "/admin/attendance")[0]["params"] == {"date": "2025-02-14"}
    assert "Reporte del 2025-02-14" in res.get_data(as_text=True)


def test_edit_link_opens_modal_with_current_status(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    _login_as(client, teacher_credential)

    res = client.get("/admin/attendance?tab=all&edit=id:3")

    body = res.get_data(as_text=True)
    assert "Editar Estado" in body
    assert '<option value="outside_campus" selected>' in body


def test_update_status_refetches_active_scope(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    http.route("POST", "/admin/update_status", FakeResponse(200, {"message": "Estado actualizado"}))
    _login_as(client, teacher_credential)

    res = client.post(
        "/admin/update_status",
        data={"tab": "today", "attendance_id": "3", "student_code": "003", "status": "outside_campus", "new_status": "on_time"},
        follow_redirects=True,
    )

    assert http.calls_to("POST", "/admin/update_status")[0]["json"] == {"attendance_id": 3, "new_status": "on_time"}
    fetches = http.calls_to("GET", "/admin/attendance")
    assert len(fetches) == 1
    assert "date" in fetches[0]["params"]
    body = res.get_data(as_text=True)
    assert "Estado actualizado" in body
    assert "Editar Estado" not in body


def test_expired_session_returns_to_login(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(401, {"error": "No autenticado"}))
    _login_as(client, teacher_credential)

    res = client.get("/admin/attendance")

    assert res.status_code == 302
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess


def test_logout_clears_session(client, http, teacher_credential):
    http.route("POST", "/logout", FakeResponse(200, {"message": "Sesión cerrada"}))
    _login_as(client, teacher_credential)

    res = client.post("/logout", follow_redirects=True)

    assert "Sesión cerrada" in res.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess


def test_report_csv_export(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    _login_as(client, teacher_credential)

    res = client.get("/admin/attendance.csv?tab=filter&date=2025-02-14")

    assert res.mimetype == "text/csv"
    assert "attendance_2025-02-14.csv" in res.headers["Content-Disposition"]
    lines = res.get_data().decode("utf-8-sig").strip().splitlines()
    assert lines[0].startswith("category,")
    assert len(lines) == 4


def test_update_status_redirects_back_to_report(client, http, teacher_credential):
    http.route("POST", "/admin/update_status", FakeResponse(200, {"message": "Estado actualizado"}))
    _login_as(client, teacher_credential)

    res = client.post(
        "/admin/update_status",
        data={"tab": "filter", "date": "2025-02-14", "attendance_id": "3", "new_status": "late"},
    )

    assert res.status_code == 302
    location = res.headers["Location"]
    assert "tab=filter" in location
    assert "date=2025-02-14" in location
    assert "apply=1" in location
    assert http.calls_to("GET", "/admin/attendance") == []


def test_failed_update_keeps_report_and_modal(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    http.route("POST", "/admin/update_status", FakeResponse(400, {"error": "Registro no encontrado"}))
    _login_as(client, teacher_credential)

    res = client.post(
        "/admin/update_status",
        data={"tab": "all", "attendance_id": "1", "student_code": "001", "status": "on_time", "new_status": "late"},
        follow_redirects=True,
    )

    body = res.get_data(as_text=True)
    assert "Registro no encontrado" in body
    assert "Asistieron Puntual (on_time) (2)" in body
    assert "Editar Estado" in body
    assert len(http.calls_to("GET", "/admin/attendance")) == 1


def test_invalid_new_status_is_not_sent(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", FakeResponse(200, REPORT))
    _login_as(client, teacher_credential)

    res = client.post(
        "/admin/update_status",
        data={"tab": "all", "attendance_id": "1", "status": "on_time", "new_status": "vacation"},
        follow_redirects=True,
    )

    body = res.get_data(as_text=True)
    assert "Estado no válido" in body
    assert "Asistieron Puntual (on_time) (2)" in body
    assert http.calls_to("POST", "/admin/update_status") == []


def test_logout_rejected_by_backend_clears_session(client, http, student_credential):
    http.route("POST", "/logout", FakeResponse(401, {"error": "No autenticado"}))
    _login_as(client, student_credential)

    res = client.post("/logout")

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/")
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess
    assert client.post("/logout").status_code == 302
    assert len(http.calls_to("POST", "/logout")) == 1


def test_unexpected_report_error_shows_system_message(client, http, teacher_credential):
    http.route("GET", "/admin/attendance", RuntimeError("boom"))
    _login_as(client, teacher_credential)

    res = client.get("/admin/attendance")

    assert res.status_code == 200
    assert "Error del sistema al obtener reporte" in res.get_data(as_text=True)


def test_unexpected_login_error_shows_system_message(client, http):
    http.route("POST", "/login", RuntimeError("boom"))

    res = client.post("/", data={"email": "prof@unmsm.edu.pe", "password": "123"})

    assert res.status_code == 200
    assert "Error del sistema al iniciar sesión" in res.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess

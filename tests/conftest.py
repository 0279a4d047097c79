from __future__ import annotations

import pytest

from src.attendance_client.attendance_client.container import build_container
from src.attendance_client.attendance_client.core.enums import Role
from src.attendance_client.attendance_client.session.model import Credential
from tests.fakes import BASE_URL, FakeHttp


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def container(http):
    return build_container(backend_base_url=BASE_URL, http=http)


@pytest.fixture
def teacher_credential() -> Credential:
    return Credential(role=Role.TEACHER, cookies={"session": "t-cookie"})


@pytest.fixture
def student_credential() -> Credential:
    return Credential(role=Role.STUDENT, cookies={"session": "s-cookie"})


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.attendance_client.attendance_client.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()

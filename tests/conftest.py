from __future__ import annotations

from datetime import datetime

import pytest
from werkzeug.security import generate_password_hash

from event_registration.container import assemble
from event_registration.main import create_app

from tests.fakes import (
    InMemoryAdmins,
    InMemoryCertificates,
    InMemoryEvaluations,
    InMemoryRegistrations,
    InMemorySettings,
    RecordingChannel,
)

ADMIN_EMAIL = "admin@semed.local"
ADMIN_PASSWORD = "admin2026"


@pytest.fixture
def fixed_now(monkeypatch):
    now = datetime(2026, 2, 10, 14, 30, 0)
    monkeypatch.setattr("event_registration.registrations.service.now_local", lambda: now)
    return now


@pytest.fixture
def registrations():
    return InMemoryRegistrations()


@pytest.fixture
def settings_repo():
    return InMemorySettings()


@pytest.fixture
def certificates(registrations):
    return InMemoryCertificates(registrations)


@pytest.fixture
def evaluations(registrations):
    return InMemoryEvaluations(registrations)


@pytest.fixture
def admins():
    repo = InMemoryAdmins()
    repo.create_admin(
        full_name="Administrador SEMED",
        email=ADMIN_EMAIL,
        password_hash=generate_password_hash(ADMIN_PASSWORD),
    )
    return repo


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def container(registrations, settings_repo, certificates, evaluations, admins, channel):
    return assemble(
        registrations_repo=registrations,
        settings_repo=settings_repo,
        certificates_repo=certificates,
        evaluations_repo=evaluations,
        admins_repo=admins,
        notifications=channel,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "senha": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client

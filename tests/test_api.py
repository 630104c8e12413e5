from __future__ import annotations

import pytest

from event_registration.core.enums import EnrollmentDay

from tests.conftest import ADMIN_EMAIL


def _form(**overrides):
    data = {
        "nome": "Maria da Silva",
        "cpf": "123.456.789-09",
        "email": "maria@example.com",
        "telefone": "(99) 98888-7777",
        "instituicao": "Escola Municipal Centro",
        "cargo": "Professora",
        "dia_participacao": "day1",
    }
    data.update(overrides)
    return data


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_register_returns_201_and_id(client, registrations, channel):
    resp = client.post("/api/inscricoes", json=_form())

    assert resp.status_code == 201
    body = resp.get_json()
    assert registrations.get_by_id(body["id"]).cpf == "12345678909"
    assert len(channel.events) == 1


def test_register_duplicate_returns_409(client):
    client.post("/api/inscricoes", json=_form())

    resp = client.post("/api/inscricoes", json=_form(cpf="12345678909"))

    assert resp.status_code == 409
    assert resp.get_json() == {"error": "CPF já inscrito neste evento"}


def test_register_validation_error_returns_400(client):
    resp = client.post("/api/inscricoes", json=_form(dia_participacao="sabado"))

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_register_capacity_exceeded_returns_409(client, settings_repo):
    settings_repo.values["vagas_dia1"] = "0"

    resp = client.post("/api/inscricoes", json=_form())

    assert resp.status_code == 409
    assert "1º dia" in resp.get_json()["error"]


@pytest.mark.parametrize(
    "url, body",
    [
        ("/api/inscricoes", ["nome", "cpf"]),
        ("/api/avaliacoes", [1, 2, 3]),
    ],
)
def test_public_post_rejects_non_object_body(client, url, body):
    resp = client.post(url, json=body)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Dados inválidos"}


def test_checkin_rejects_non_object_body(admin_client):
    resp = admin_client.post("/api/checkin", json=["12345678909", "day1"])

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Dados inválidos"}


def test_settings_update_rejects_superscript_capacity(admin_client, settings_repo):
    resp = admin_client.put("/api/settings", json={"vagas_dia1": "\u00b2"})

    assert resp.status_code == 400
    assert settings_repo.values == {}


def test_vacancy_is_public(client, registrations, settings_repo):
    settings_repo.values["vagas_dia1"] = "10"
    registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.BOTH)

    resp = client.get("/api/inscricoes/vagas")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "day1": {"total": 1, "max": 10, "available": 9},
        "day2": {"total": 1, "max": 500, "available": 499},
    }


def test_vacancy_store_failure_returns_500(client, settings_repo):
    settings_repo.fail_reads = True

    resp = client.get("/api/inscricoes/vagas")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Erro interno ao processar a requisição"}


@pytest.mark.parametrize(
    "method, url",
    [
        ("get", "/api/inscricoes"),
        ("get", "/api/inscricoes/stats"),
        ("get", "/api/inscricoes/export"),
        ("patch", "/api/inscricoes/1/presenca"),
        ("delete", "/api/inscricoes/1"),
        ("post", "/api/checkin"),
        ("put", "/api/settings"),
        ("get", "/api/certificados/stats"),
        ("get", "/api/avaliacoes/stats"),
        ("get", "/api/admins"),
    ],
)
def test_admin_endpoints_require_login(client, method, url):
    resp = getattr(client, method)(url)

    assert resp.status_code == 401


def test_login_with_wrong_password(client):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "senha": "nope"})

    assert resp.status_code == 401


def test_logout_ends_session(admin_client):
    assert admin_client.get("/api/admins").status_code == 200

    admin_client.post("/api/auth/logout")

    assert admin_client.get("/api/admins").status_code == 401


def test_checkin_flow(admin_client, registrations):
    registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.DAY1, full_name="Maria da Silva")

    first = admin_client.post("/api/checkin", json={"cpf": "123.456.789-09", "dia": "day1"})
    second = admin_client.post("/api/checkin", json={"cpf": "12345678909", "dia": "day1"})
    wrong_day = admin_client.post("/api/checkin", json={"cpf": "12345678909", "dia": "day2"})
    unknown = admin_client.post("/api/checkin", json={"cpf": "98765432100", "dia": "day1"})

    assert first.status_code == 200
    assert first.get_json()["jaRegistrado"] is False
    assert first.get_json()["nome"] == "Maria da Silva"
    assert second.get_json()["jaRegistrado"] is True
    assert wrong_day.status_code == 400
    assert unknown.status_code == 404


def test_checkin_qr_image(client, registrations):
    registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.DAY1)

    resp = client.get("/api/checkin/qr/12345678909")

    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
    assert resp.data.startswith(b"\x89PNG")


def test_list_toggle_and_delete_registration(admin_client, registrations):
    reg = registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.DAY2)

    listed = admin_client.get("/api/inscricoes").get_json()
    assert [r["cpf"] for r in listed] == ["12345678909"]

    toggled = admin_client.patch(f"/api/inscricoes/{reg.registration_id}/presenca")
    assert toggled.get_json() == {"id": reg.registration_id, "presente": True}

    assert admin_client.delete(f"/api/inscricoes/{reg.registration_id}").status_code == 200
    assert admin_client.delete(f"/api/inscricoes/{reg.registration_id}").status_code == 404


def test_export_registrations_csv(admin_client, registrations):
    registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.DAY2)

    resp = admin_client.get("/api/inscricoes/export")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "participantes.csv" in resp.headers["Content-Disposition"]
    assert resp.data.startswith(b"\xef\xbb\xbf")


def test_settings_update_changes_capacity(admin_client, client):
    resp = admin_client.put("/api/settings", json={"vagas_dia2": "5"})
    assert resp.status_code == 200

    assert client.get("/api/settings").get_json()["vagas_dia2"] == "5"
    assert client.get("/api/inscricoes/vagas").get_json()["day2"]["max"] == 5


def test_settings_update_rejects_bad_capacity(admin_client):
    resp = admin_client.put("/api/settings", json={"vagas_dia1": "muitas"})

    assert resp.status_code == 400


def test_evaluation_submit_and_stats(client, admin_client, registrations):
    registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.BOTH)
    payload = {"cpf": "12345678909", "nota_geral": 5, "nota_conteudo": 5, "nota_organizacao": 4, "nota_palestrantes": 4}

    assert client.post("/api/avaliacoes", json=payload).status_code == 201
    assert client.post("/api/avaliacoes", json=payload).status_code == 409
    assert admin_client.get("/api/avaliacoes/stats").get_json()["totalAvaliacoes"] == 1


def test_certificate_stats(admin_client, registrations, certificates):
    reg = registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.BOTH, present=True)
    certificates.add(reg.registration_id, generated=True, sent=False)

    assert admin_client.get("/api/certificados/stats").get_json() == {
        "totalPresentes": 1,
        "certificadosGerados": 1,
        "certificadosEnviados": 0,
        "pendentes": 1,
    }


def test_admin_crud(admin_client):
    created = admin_client.post("/api/admins", json={"nome": "Ana", "email": "ana@semed.local", "senha": "segredo"})
    assert created.status_code == 201
    new_id = created.get_json()["id"]

    assert admin_client.put(f"/api/admins/{new_id}", json={"nome": "Ana Lima", "email": "ana@semed.local"}).status_code == 200
    assert admin_client.delete("/api/admins/1").status_code == 400
    assert admin_client.delete(f"/api/admins/{new_id}").status_code == 200

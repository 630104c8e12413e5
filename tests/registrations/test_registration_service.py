from __future__ import annotations

import pytest

from event_registration.core.enums import EnrollmentDay, EventDay
from event_registration.core.exceptions import (
    CapacityExceeded,
    DuplicateRegistration,
    InfrastructureError,
    InvalidEnrollmentDay,
    InvalidIdentifier,
    NotFoundError,
    ValidationError,
)
from event_registration.evaluations.model import NewEvaluation

from tests.fakes import BrokenRegistrations, FailingChannel, InMemorySettings


def _form(**overrides):
    data = {
        "nome": "  Maria da Silva ",
        "cpf": "123.456.789-09",
        "email": " Maria.Silva@Example.COM ",
        "telefone": " (99) 98888-7777 ",
        "instituicao": "Escola Municipal Centro",
        "cargo": "Professora",
        "dia_participacao": "both",
    }
    data.update(overrides)
    return data


def test_register_stores_normalized_fields(container, registrations, fixed_now):
    result = container.registration_service.register(_form())

    reg = registrations.get_by_id(result.registration_id)
    assert reg is not None
    assert reg.cpf == "12345678909"
    assert reg.full_name == "Maria da Silva"
    assert reg.email == "maria.silva@example.com"
    assert reg.phone == "(99) 98888-7777"
    assert reg.enrollment_day is EnrollmentDay.BOTH
    assert reg.created_at == fixed_now
    assert reg.display_date == "10/02/2026 14:30"
    assert (reg.present_day1, reg.present_day2, reg.present) == (False, False, False)


@pytest.mark.parametrize("field", ["nome", "cpf", "email", "telefone", "instituicao", "cargo", "dia_participacao"])
def test_register_requires_every_field(container, field):
    with pytest.raises(ValidationError):
        container.registration_service.register(_form(**{field: "   "}))


def test_missing_field_is_reported_before_bad_enrollment_day(container):
    with pytest.raises(ValidationError) as exc:
        container.registration_service.register(_form(nome="", dia_participacao="weekend"))
    assert not isinstance(exc.value, InvalidEnrollmentDay)
    assert "Nome" in str(exc.value)


def test_register_rejects_unknown_enrollment_day(container):
    with pytest.raises(InvalidEnrollmentDay):
        container.registration_service.register(_form(dia_participacao="day3"))


def test_bad_enrollment_day_is_reported_before_bad_cpf(container):
    with pytest.raises(InvalidEnrollmentDay):
        container.registration_service.register(_form(dia_participacao="day3", cpf="123"))


@pytest.mark.parametrize("cpf", ["123.456.789-0", "123.456.789-091", "abc", "0000000000"])
def test_register_rejects_cpf_without_11_digits(container, cpf):
    with pytest.raises(InvalidIdentifier):
        container.registration_service.register(_form(cpf=cpf))


def test_same_cpf_with_different_formatting_is_duplicate(container, registrations):
    container.registration_service.register(_form(cpf="12345678909"))

    with pytest.raises(DuplicateRegistration):
        container.registration_service.register(_form(cpf="123.456.789-09", email="other@example.com"))

    assert len(registrations.list_all()) == 1


def test_non_ascii_digits_are_not_a_valid_cpf(container, registrations):
    container.registration_service.register(_form(cpf="12345678909"))

    with pytest.raises(InvalidIdentifier):
        container.registration_service.register(_form(cpf="\uff11\uff12\uff13\uff14\uff15\uff16\uff17\uff18\uff19\uff10\uff19"))
    with pytest.raises(InvalidIdentifier):
        container.registration_service.register(_form(cpf="\u0661\u0662\u0663.\u0664\u0665\u0666.\u0667\u0668\u0669-\u0660\u0669"))

    assert [r.cpf for r in registrations.list_all()] == ["12345678909"]


def test_capacity_scenario_day1_full_day2_open(container, registrations, settings_repo):
    settings_repo.values["vagas_dia1"] = "1"
    registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1)

    with pytest.raises(CapacityExceeded) as exc:
        container.registration_service.register(_form(dia_participacao="day1"))
    assert exc.value.day is EventDay.DAY1

    result = container.registration_service.register(_form(dia_participacao="day2"))
    assert registrations.get_by_id(result.registration_id).enrollment_day is EnrollmentDay.DAY2


def test_both_days_rejected_when_either_day_is_full(container, registrations, settings_repo):
    settings_repo.values["vagas_dia2"] = "1"
    registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.BOTH)

    with pytest.raises(CapacityExceeded) as exc:
        container.registration_service.register(_form(dia_participacao="both"))
    assert exc.value.day is EventDay.DAY2


def test_duplicate_is_reported_before_capacity(container, registrations, settings_repo):
    settings_repo.values["vagas_dia1"] = "0"
    registrations.add(cpf="12345678909", enrollment_day=EnrollmentDay.DAY2)

    with pytest.raises(DuplicateRegistration):
        container.registration_service.register(_form(dia_participacao="day1"))


def test_capacity_read_failure_does_not_block_registration(container, registrations, settings_repo, channel):
    settings_repo.fail_reads = True

    result = container.registration_service.register(_form())

    assert registrations.get_by_id(result.registration_id) is not None
    assert len(channel.events) == 1


def test_broken_occupancy_count_does_not_block_registration(settings_repo, certificates, evaluations, admins, channel):
    from event_registration.container import assemble

    broken = BrokenRegistrations()
    container = assemble(
        registrations_repo=broken,
        settings_repo=InMemorySettings({"vagas_dia1": "0"}),
        certificates_repo=certificates,
        evaluations_repo=evaluations,
        admins_repo=admins,
        notifications=channel,
    )

    result = container.registration_service.register(_form(dia_participacao="day1"))
    assert broken.get_by_id(result.registration_id) is not None


def test_register_publishes_confirmation(container, channel):
    result = container.registration_service.register(_form())

    assert len(channel.events) == 1
    event = channel.events[0]
    assert event.registration_id == result.registration_id
    assert event.email == "maria.silva@example.com"
    assert event.first_name == "Maria"


def test_notification_failure_does_not_fail_registration(
    registrations, settings_repo, certificates, evaluations, admins
):
    from event_registration.container import assemble

    container = assemble(
        registrations_repo=registrations,
        settings_repo=settings_repo,
        certificates_repo=certificates,
        evaluations_repo=evaluations,
        admins_repo=admins,
        notifications=FailingChannel(),
    )

    result = container.registration_service.register(_form())
    assert registrations.get_by_id(result.registration_id) is not None


def test_rejected_registration_writes_nothing(container, registrations, channel):
    with pytest.raises(InvalidIdentifier):
        container.registration_service.register(_form(cpf="12"))

    assert registrations.writes == 0
    assert channel.events == []


def test_toggle_attendance_flips_only_legacy_flag(container, registrations):
    reg = registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1)

    assert container.registration_service.toggle_attendance(reg.registration_id) == {
        "id": reg.registration_id,
        "presente": True,
    }
    updated = registrations.get_by_id(reg.registration_id)
    assert updated.present is True
    assert updated.present_day1 is False

    assert container.registration_service.toggle_attendance(reg.registration_id)["presente"] is False


def test_toggle_attendance_unknown_id(container):
    with pytest.raises(NotFoundError):
        container.registration_service.toggle_attendance(999)


def _evaluation(registration_id):
    return NewEvaluation(
        registration_id=registration_id,
        score_overall=5,
        score_content=5,
        score_organization=4,
        score_speakers=4,
        comment=None,
        suggestions=None,
    )


def test_delete_cascades_to_certificate_and_evaluation(container, registrations, certificates, evaluations):
    reg = registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1, present=True)
    certificates.add(reg.registration_id)
    evaluations.create(_evaluation(reg.registration_id))

    container.registration_service.delete(reg.registration_id)

    assert certificates.get_for_registration(reg.registration_id) is None
    assert evaluations.exists_for_registration(reg.registration_id) is False
    with pytest.raises(NotFoundError):
        container.registration_service.get(reg.registration_id)


def test_failed_delete_keeps_certificate_and_evaluation(container, registrations, certificates, evaluations):
    reg = registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1, present=True)
    certificates.add(reg.registration_id)
    evaluations.create(_evaluation(reg.registration_id))
    registrations.fail_deletes = True

    with pytest.raises(InfrastructureError):
        container.registration_service.delete(reg.registration_id)

    assert registrations.get_by_id(reg.registration_id) is not None
    assert certificates.get_for_registration(reg.registration_id) is not None
    assert evaluations.exists_for_registration(reg.registration_id) is True


def test_register_rejects_non_mapping_payload(container, registrations):
    with pytest.raises(ValidationError):
        container.registration_service.register(["nome", "cpf"])

    assert registrations.writes == 0


def test_delete_unknown_registration(container):
    with pytest.raises(NotFoundError):
        container.registration_service.delete(42)


def test_stats_counts_presence_and_organizations(container, registrations, certificates):
    a = registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1, present_day1=True, present=True)
    registrations.add(cpf="22222222222", enrollment_day=EnrollmentDay.BOTH, organization="Escola B")
    registrations.add(cpf="33333333333", enrollment_day=EnrollmentDay.DAY2, organization="Escola B")
    certificates.add(a.registration_id, generated=True, sent=True)

    stats = container.registration_service.stats()

    assert stats["totalInscritos"] == 3
    assert stats["presentes"] == 1
    assert stats["ausentes"] == 2
    assert stats["presentesDia1"] == 1
    assert stats["presentesDia2"] == 0
    assert stats["certificadosGerados"] == 1
    assert stats["certificadosEnviados"] == 1
    assert stats["porInstituicao"][0] == {"name": "Escola B", "count": 2}
    assert len(stats["recentes"]) == 3


def test_export_csv_has_bom_and_rows_sorted_by_name(container, registrations):
    registrations.add(cpf="11111111111", enrollment_day=EnrollmentDay.DAY1, full_name="Zélia Souza", present=True)
    registrations.add(cpf="22222222222", enrollment_day=EnrollmentDay.BOTH, full_name="Ana Lima")

    payload = container.registration_service.export_csv()

    assert payload.startswith(b"\xef\xbb\xbf")
    lines = payload.decode("utf-8-sig").splitlines()
    assert lines[0].startswith('"Nome","CPF"')
    assert lines[1].startswith('"Ana Lima","22222222222"')
    assert '"Zélia Souza","11111111111"' in lines[2]
    assert '"Sim"' in lines[2]

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminService, AuthService
from .capacity.service import CapacityService
from .certificates.mysql_certificate_repository import MySQLCertificateRepository
from .certificates.repository import CertificateRepository
from .certificates.service import CertificateService
from .checkin.service import CheckInService
from .database.connection import DatabaseConnection, DBConfig
from .evaluations.mysql_evaluation_repository import MySQLEvaluationRepository
from .evaluations.repository import EvaluationRepository
from .evaluations.service import EvaluationService
from .notifications.channel import NotificationChannel, ThreadedNotificationChannel
from .notifications.mailer import ConfirmationMailer, MailConfig
from .registrations.mysql_registration_repository import MySQLRegistrationRepository
from .registrations.repository import RegistrationRepository
from .registrations.service import RegistrationService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.provider import RepositorySettingsProvider, SettingsProvider
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    registrations_repo: RegistrationRepository
    settings_repo: SettingsRepository
    certificates_repo: CertificateRepository
    evaluations_repo: EvaluationRepository
    admins_repo: AdminRepository

    settings_provider: SettingsProvider
    notifications: NotificationChannel

    capacity_service: CapacityService
    registration_service: RegistrationService
    checkin_service: CheckInService
    settings_service: SettingsService
    certificate_service: CertificateService
    evaluation_service: EvaluationService
    auth_service: AuthService
    admin_service: AdminService


def assemble(
    *,
    registrations_repo: RegistrationRepository,
    settings_repo: SettingsRepository,
    certificates_repo: CertificateRepository,
    evaluations_repo: EvaluationRepository,
    admins_repo: AdminRepository,
    notifications: Optional[NotificationChannel] = None,
    mail_config: Optional[MailConfig] = None,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    settings_provider = RepositorySettingsProvider(settings_repo)
    if notifications is None:
        mailer = ConfirmationMailer(settings_provider, mail_config or MailConfig())
        notifications = ThreadedNotificationChannel(mailer)

    capacity_service = CapacityService(registrations_repo, settings_provider)
    registration_service = RegistrationService(
        registrations_repo,
        capacity_service,
        certificates_repo,
        notifications,
    )

    return Container(
        registrations_repo=registrations_repo,
        settings_repo=settings_repo,
        certificates_repo=certificates_repo,
        evaluations_repo=evaluations_repo,
        admins_repo=admins_repo,
        settings_provider=settings_provider,
        notifications=notifications,
        capacity_service=capacity_service,
        registration_service=registration_service,
        checkin_service=CheckInService(registrations_repo),
        settings_service=SettingsService(settings_repo),
        certificate_service=CertificateService(certificates_repo),
        evaluation_service=EvaluationService(evaluations_repo, registrations_repo),
        auth_service=AuthService(admins_repo),
        admin_service=AdminService(admins_repo),
    )


def build_container(*, db_config: dict, mail_config: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        registrations_repo=MySQLRegistrationRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        certificates_repo=MySQLCertificateRepository(conn),
        evaluations_repo=MySQLEvaluationRepository(conn),
        admins_repo=MySQLAdminRepository(conn),
        mail_config=MailConfig.from_dict(mail_config),
    )

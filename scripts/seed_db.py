from __future__ import annotations

import importlib

from config import get_settings_module

from event_registration.database.bootstrap import ensure_default_admin, seed_default_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    seed_default_settings(db_config)

    admin = getattr(settings, "DEFAULT_ADMIN", None)
    if admin:
        created = ensure_default_admin(db_config, **admin)
        print(f"OK: Admin {admin['email']} {'created' if created else 'already exists'}")

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()

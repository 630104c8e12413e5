"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from event_registration.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.capacity_service.get_vacancy())


if __name__ == "__main__":
    main()

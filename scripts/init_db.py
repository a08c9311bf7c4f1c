"""Apply the claims schema to the database selected by APP_ENV."""

from __future__ import annotations

import importlib

from config import get_settings_module

from claim_system.database.bootstrap import apply_schema, list_tables
from claim_system.database.connection import DBConfig
from claim_system.logging_config import configure_logging


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(f"OK: Applied schema.sql -> {DBConfig.from_dict(db_config).describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()

"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite database and a seeded manager
account.  In a production deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Museum Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "museum.db")

    # Credentials used to seed the singleton manager record the first
    # time the database is initialised.  Changing them afterwards has no
    # effect; use ``PUT /manager`` to change the password.
    manager_username: str = os.getenv("MANAGER_USERNAME", "manager")
    manager_password: str = os.getenv("MANAGER_PASSWORD", "manager123")

    # Loan rules.  A visitor may hold at most ``max_active_loans`` loans
    # and an approved loan is due on the first open day on or after
    # ``loan_period_days`` days from approval.
    max_active_loans: int = int(os.getenv("MAX_ACTIVE_LOANS", "5"))
    loan_period_days: int = int(os.getenv("LOAN_PERIOD_DAYS", "7"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()

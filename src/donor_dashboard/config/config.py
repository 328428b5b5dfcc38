# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, LEDGER__LEDGER_API_HOST.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MalformedAmountPolicy = Literal["fail", "skip"]


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "donor-dashboard"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"
    # Committed-view events kept in the bus history
    event_history_size: int = Field(default=100, ge=1)


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/donor_dashboard.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class LedgerSettings(BaseSettings):
    """Configuration for the ledger query service (funding backend API or Sui JSON-RPC)."""

    model_config = SettingsConfigDict(extra="ignore")

    backend: Literal["api", "rpc"] = Field(
        default="api",
        description="Which ledger query service to use: funding backend REST API or Sui fullnode RPC.",
    )
    ledger_api_host: str = Field(
        default="http://localhost:8080",
        description="Funding platform backend base URL (serves /api/donors/{address}).",
    )
    sui_rpc_url: str = Field(
        default="https://fullnode.testnet.sui.io:443",
        description="Sui fullnode JSON-RPC URL.",
    )
    receipt_type: str = Field(
        default="0x0::bluelink::DonationReceipt",
        description="Move struct type of donation receipt objects.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=1,
        ge=1,
        le=20,
        description="HTTP attempts per request. 1 means a single attempt; retry policy belongs to the caller.",
    )
    page_size: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Objects per suix_getOwnedObjects page.",
    )
    max_pages: int = Field(
        default=20,
        ge=1,
        le=200,
        description="Maximum suix_getOwnedObjects pages followed per fetch.",
    )


class DashboardSettings(BaseSettings):
    """Presentation and aggregation options for the donor dashboard."""

    model_config = SettingsConfigDict(extra="ignore")

    id_prefix_length: int = Field(default=12, ge=1, le=128)
    amount_decimals: int = Field(default=4, ge=0, le=9)
    total_decimals: int = Field(default=2, ge=0, le=9)
    unit_symbol: str = "SUI"
    malformed_amount_policy: MalformedAmountPolicy = Field(
        default="fail",
        description="fail: a malformed amount fails the whole cycle. skip: drop and count the record.",
    )
    failure_message: str = Field(
        default="Unable to load donation records",
        description="Stable user-facing message for the Failed view.",
    )
    project_path_template: str = "/project/{project_id}"


class WalletSettings(BaseSettings):
    """Env-backed wallet identity (from env WALLET__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    address: str = Field(
        default="",
        description="Connected wallet address. Empty means disconnected.",
    )
    poll_seconds: float = Field(
        default=2.0,
        ge=0.1,
        le=60.0,
        description="How often the identity watcher reads the wallet provider.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, LEDGER__BACKEND.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    wallet: WalletSettings = Field(default_factory=WalletSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as flat keys or nested dicts, e.g.:
        - from_env(ledger__timeout_seconds=30)
        - from_env(dashboard={"malformed_amount_policy": "skip"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from donor_dashboard.config import get_settings

        settings = get_settings()
        timeout = settings.ledger.timeout_seconds
        decimals = settings.dashboard.amount_decimals
    """
    return Settings()

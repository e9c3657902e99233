"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ImportSettings(BaseSettings):
    """Spreadsheet import configuration."""

    model_config = {"env_prefix": "CAMPUSLEDGER_IMPORT_"}

    shared_strings_entry: str = "xl/sharedStrings.xml"
    worksheet_entry: str = "xl/worksheets/sheet1.xml"
    csv_encoding: str = "utf-8-sig"
    max_reported_rejections: int = 10
    xml_chunk_size: int = 64 * 1024


class S3Settings(BaseSettings):
    """S3 staging bucket for uploaded import files."""

    model_config = {"env_prefix": "CAMPUSLEDGER_S3_"}

    bucket: str = "campusledger-imports"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CAMPUSLEDGER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    imports: ImportSettings = ImportSettings()
    s3: S3Settings = S3Settings()

"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class CalculatorConfig(BaseSettings):
    """Summation rules."""

    model_config = {"env_prefix": "STRINGCALC_CALC_"}

    default_separator: str = Field(default=",", min_length=1)
    upper_bound: int = Field(default=1000, ge=0)  # values above this are coerced to zero
    numeric: str = "u32"  # kind name passed to create_numeric()
    header_marker: str = Field(default="//", min_length=1)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = {"env_prefix": "STRINGCALC_LOG_"}

    level: str = "WARNING"
    json_format: bool = False
    log_file: str | None = None


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STRINGCALC_"}

    environment: Literal["dev", "test", "prod"] = "dev"

    calculator: CalculatorConfig = CalculatorConfig()
    logging: LoggingConfig = LoggingConfig()

"""Runtime settings: environment (and .env) with CLI overrides on top."""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_LOGGING_URL = "FAULTLOG_LOGGING_URL"
ENV_REQUEST_TIMEOUT = "FAULTLOG_REQUEST_TIMEOUT"
ENV_LOG_LEVEL = "FAULTLOG_LOG_LEVEL"


class FaultLogSettings(BaseModel):
    logging_url: Optional[str] = Field(default=None, description="Base URL of the log store REST facade")
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    log_level: str = Field(default="INFO", description="Diagnostic log level")


def load_settings(**overrides) -> FaultLogSettings:
    """Build settings from the environment; non-None *overrides* win."""
    load_dotenv()
    values: dict = {}
    if os.environ.get(ENV_LOGGING_URL):
        values["logging_url"] = os.environ[ENV_LOGGING_URL]
    if os.environ.get(ENV_REQUEST_TIMEOUT):
        values["request_timeout"] = os.environ[ENV_REQUEST_TIMEOUT]
    if os.environ.get(ENV_LOG_LEVEL):
        values["log_level"] = os.environ[ENV_LOG_LEVEL].upper()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return FaultLogSettings(**values)

"""Environment-backed configuration for the query client."""

import logging
import os
from typing import MutableMapping, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Environment-backed configuration for the query client.

    Config usage map:
    - api_base_url/query_path: transport/client.py (endpoint URL)
    - request_timeout_seconds: transport/client.py (urlopen timeout)
    - strict_answer_strings: core/lifecycle.py -> normalizer/service.py
    - log_level: runtime.py (logging.basicConfig)
    - langsmith_*: exported by export_tracing_env (runtime.py) for tracing on
      lifecycle.submit and client.post_query
    """
    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False, populate_by_name=True)

    # An unset base URL is not rejected here; requests then fail at the transport level.
    api_base_url: str = Field(default="", alias="SECOND_BRAIN_API_BASE_URL")
    query_path: str = Field(default="/query", alias="SECOND_BRAIN_QUERY_PATH")
    request_timeout_seconds: float = Field(default=60.0, alias="SECOND_BRAIN_REQUEST_TIMEOUT_SECONDS")
    strict_answer_strings: bool = Field(default=False, alias="SECOND_BRAIN_STRICT_ANSWER_STRINGS")
    log_level: str = Field(default="WARNING", alias="SECOND_BRAIN_LOG_LEVEL")
    langsmith_tracing: bool = Field(default=False, alias="LANGCHAIN_TRACING_V2")
    langsmith_project: str = Field(default="second-brain-client", alias="LANGCHAIN_PROJECT")

    @field_validator("request_timeout_seconds")
    @classmethod
    def _strictly_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be > 0")
        return value

    @field_validator("query_path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized.startswith("/"):
            raise ValueError("must start with '/'")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @property
    def query_endpoint(self) -> str:
        return f"{self.api_base_url.strip().rstrip('/')}{self.query_path}"

    def export_tracing_env(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        """Publish the LangSmith settings where ``traceable`` reads them.

        Must run before the first traced call; langsmith caches these lookups.
        """
        target = os.environ if environ is None else environ
        target["LANGCHAIN_TRACING_V2"] = "true" if self.langsmith_tracing else "false"
        target["LANGCHAIN_PROJECT"] = self.langsmith_project

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls()

"""Pydantic configuration models with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_path(value: Any) -> Path:
    """
    Normalize a path-like value without causing filesystem side-effects.

    This function MUST NOT create directories or files.
    """
    if isinstance(value, Path):
        return value.expanduser()
    if isinstance(value, str):
        return Path(value).expanduser()
    raise TypeError(f"Expected path-like value, got: {type(value)!r}")


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (providers/http/website/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="vegagate", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Providers (YAML section: providers.*)
    providers_dir: Path = Field(
        default=Path("./dist"),
        validation_alias=AliasChoices(
            "providers_dir",
            AliasPath("providers", "providers_dir"),
        ),
        description="Directory holding one sub-directory per provider.",
    )
    extractors_dir: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices(
            "extractors_dir",
            AliasPath("providers", "extractors_dir"),
        ),
        description="Directory holding extractor modules. Defaults to providers_dir.",
    )
    manifest_path: Path = Field(
        default=Path("./manifest.json"),
        validation_alias=AliasChoices(
            "manifest_path",
            AliasPath("providers", "manifest_path"),
        ),
        description="JSON manifest listing all known providers.",
    )
    base_url_registry: str = Field(
        default=(
            "https://raw.githubusercontent.com/himanshu8443/providers/main/modflix.json"
        ),
        validation_alias=AliasChoices(
            "base_url_registry",
            AliasPath("providers", "base_url_registry"),
        ),
        description="Remote JSON map of provider key -> base URL.",
    )
    call_timeout_seconds: float = Field(
        default=60.0,
        validation_alias=AliasChoices(
            "call_timeout_seconds",
            AliasPath("providers", "call_timeout_seconds"),
        ),
        description="Per provider call timeout in seconds. 0 = unbounded.",
    )

    # HTTP client handed to providers (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for provider requests.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="Default User-Agent for provider HTTP requests.",
    )

    # Static website (YAML section: website.*)
    website_dir: Path = Field(
        default=Path("./website"),
        validation_alias=AliasChoices(
            "website_dir",
            AliasPath("website", "dir"),
        ),
        description="Directory with the static website bundle.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("providers_dir", "manifest_path", "website_dir", mode="before")
    @classmethod
    def _validate_paths(cls, v: Any) -> Path:
        return _normalize_path(v)

    @field_validator("extractors_dir", mode="before")
    @classmethod
    def _validate_optional_path(cls, v: Any) -> Path | None:
        if v is None:
            return None
        return _normalize_path(v)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("call_timeout_seconds")
    @classmethod
    def _validate_call_timeout(cls, v: float) -> float:
        if v < 0:
            raise ValueError("call_timeout_seconds must be >= 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        if self.extractors_dir is None:
            self.extractors_dir = self.providers_dir
        return self

    @property
    def common_headers(self) -> dict[str, str]:
        """Default header map for the provider HTTP client."""
        return {"User-Agent": self.http_user_agent}

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "providers": {
                "providers_dir": str(self.providers_dir),
                "extractors_dir": str(self.extractors_dir),
                "manifest_path": str(self.manifest_path),
                "base_url_registry": self.base_url_registry,
                "call_timeout_seconds": self.call_timeout_seconds,
            },
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "website": {"dir": str(self.website_dir)},
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    load.py creates EnvOverrides() to read VEGAGATE_* variables, converts the
    set values to a dict, merges them over YAML/defaults, then validates
    AppConfig.

    Supported env var examples (flat, explicit):
    - VEGAGATE_PROVIDERS_DIR
    - VEGAGATE_MANIFEST_PATH
    - VEGAGATE_CALL_TIMEOUT_SECONDS
    - VEGAGATE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="VEGAGATE_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    providers_dir: Optional[Path] = None
    extractors_dir: Optional[Path] = None
    manifest_path: Optional[Path] = None
    base_url_registry: Optional[str] = None
    call_timeout_seconds: Optional[float] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    website_dir: Optional[Path] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    @field_validator(
        "providers_dir", "extractors_dir", "manifest_path", "website_dir", mode="before"
    )
    @classmethod
    def _validate_paths(cls, v: Any) -> Any:
        if v is None:
            return None
        return _normalize_path(v)

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)

"""Top-level SV configuration, read from the environment."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ConfigError

DEFAULT_HOST = "http://localhost:9001/RPC2"

# Environment variable -> config field
_ENV_FIELDS: dict[str, str] = {
    "SUPERVISOR_HOST": "host",
    "SUPERVISOR_USER": "username",
    "SUPERVISOR_PASSWORD": "password",
    "SV_SUPERVISORCTL": "ctl_command",
    "SV_RPC_TIMEOUT": "timeout_secs",
    "SV_LOG_LEVEL": "log_level",
    "SV_LOG_FILE": "log_file",
}


class SvConfig(BaseModel):
    """Connection and runtime settings for SV."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(DEFAULT_HOST, description="supervisord XML-RPC endpoint URL")
    username: str = Field("", description="HTTP basic auth user, empty to disable")
    password: str = Field("", description="HTTP basic auth password, empty to disable")
    ctl_command: str = Field("supervisorctl", description="Companion command-line tool")
    timeout_secs: float = Field(10.0, gt=0, description="XML-RPC request timeout")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Logging level")
    log_file: Path | None = Field(None, description="Rotating log file, stderr when unset")

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"must be an http(s) URL, got {value!r}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "SvConfig":
        """Build config from environment variables.

        Unset or empty variables keep their defaults.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        raw: dict[str, Any] = {}
        for var, field_name in _ENV_FIELDS.items():
            value = env.get(var)
            if value:
                raw[field_name] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the config, without the password."""
        data = self.model_dump(mode="json", exclude={"password"})
        data["password_set"] = bool(self.password)
        return data

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

PLUGIN_PREFIX = "PLUGIN_"
DEFAULT_AWS_REGION = "eu-west-1"
DEFAULT_ENCODING = "UTF-8"


class ConfigurationError(RuntimeError):
    """A required plugin option is missing."""


def load_environment() -> None:
    """Load plugin settings from a .env file when running outside Drone."""
    env_path = Path(os.getenv("ENV_FILE", ".env"))
    if not env_path.is_file():
        # ENV_FILE points nowhere; try the working directory instead.
        env_path = Path(".env")
    if env_path.is_file():
        load_dotenv(env_path)


def plugin_variable(name: str) -> str:
    return PLUGIN_PREFIX + name.upper()


def read_option(
    environ: Mapping[str, str], name: str, required: bool = False
) -> Optional[str]:
    variable = plugin_variable(name)
    value = environ.get(variable)
    if required and not value:
        raise ConfigurationError(f"Must set {variable}")
    return value


@dataclass(frozen=True)
class PluginSettings:
    sender: str
    recipient: Optional[str] = None
    always_send: Optional[str] = None
    subject: Optional[str] = None
    aws_region: str = DEFAULT_AWS_REGION
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PluginSettings":
        env = os.environ if environ is None else environ

        sender = read_option(env, "sender", required=True)

        return cls(
            sender=sender,
            recipient=read_option(env, "recipient"),
            always_send=read_option(env, "always_send"),
            subject=read_option(env, "subject"),
            aws_region=read_option(env, "aws_region") or DEFAULT_AWS_REGION,
            encoding=read_option(env, "encoding") or DEFAULT_ENCODING,
        )

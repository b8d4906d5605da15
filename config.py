"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of stack settings. All settings are read from
Pulumi config (e.g. Pulumi.<stack>.yaml or pulumi config set). Keys without a
default are required. Used by __main__.main() to pick the Azure region, the
container images and ports, and the environment suffix fed to the naming
policy.
"""

import os
from dataclasses import dataclass
from typing import Any, Callable

import pulumi

from components.naming import environment_suffix

# Environment variable consulted when the stack sets no environment_suffix.
ENV_SUFFIX_VAR: str = "AZURE_ENV_SUFFIX"


def _require_str(config: pulumi.Config, key: str) -> str:
    return config.require(key)


def _optional_int(default: int) -> Callable[[pulumi.Config, str], int]:
    def parse(config: pulumi.Config, key: str) -> int:
        raw = config.get(key)
        return default if raw is None else int(raw)

    return parse


def _environment_suffix(config: pulumi.Config, key: str) -> str:
    raw = config.get(key)
    if raw is None or not str(raw).strip():
        raw = os.environ.get(ENV_SUFFIX_VAR)
    return environment_suffix(raw)


# (key, parser); parser receives (config, key) and returns value.
_CONFIG_SPEC: list[tuple[str, Callable[[pulumi.Config, str], Any]]] = [
    ("project_name", _require_str),
    ("location", _require_str),
    ("api_service_image", _require_str),
    ("web_frontend_image", _require_str),
    ("api_service_port", _optional_int(8080)),
    ("web_frontend_port", _optional_int(8080)),
    ("log_retention_days", _optional_int(30)),
    ("environment_suffix", _environment_suffix),
]


@dataclass(frozen=True)
class StackConfig:
    """
    Stack configuration from Pulumi config.

    Attributes:
        project_name: Prefix for Pulumi resource names (required).
        location: Azure region for all resources (required).
        api_service_image: Container image of the API service (required).
        web_frontend_image: Container image of the web frontend (required).
        api_service_port: Port the API service listens on (default 8080).
        web_frontend_port: Port the web frontend listens on (default 8080).
        log_retention_days: Log Analytics retention in days (default 30).
        environment_suffix: Suffix for fixed resource names; falls back to the
            AZURE_ENV_SUFFIX environment variable, then to "D".
    """

    project_name: str
    location: str
    api_service_image: str
    web_frontend_image: str
    api_service_port: int
    web_frontend_port: int
    log_retention_days: int
    environment_suffix: str

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config) -> "StackConfig":
        """
        Build StackConfig from pulumi.Config(). Keys parsed with _require_str
        raise pulumi.ConfigMissingError when absent.
        """
        kwargs = {key: parser(config, key) for key, parser in _CONFIG_SPEC}
        return cls(**kwargs)

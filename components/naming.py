"""
Fixed physical names for Azure resources.

Pulumi auto-naming appends a random suffix to every physical name, so each
fresh stack gets a different storage account, registry, and so on. This module
replaces that with a deterministic policy: the physical name is a pure function
of the resource kind, a short base identifier, and an environment suffix
supplied once per stack.

Rules (prefix ``sv``):

- Storage account: ``sv<id><suffix>``, lowercase, alphanumeric only.
- Cache: ``sv-<id>-<suffix>``, id lowercased.
- Container app: ``sv-<id>-<suffix>``, id lowercased.
- Container registry: ``svacr<suffix>``, lowercase, alphanumeric only.
- Log Analytics workspace: ``sv-law-<suffix>``.
- Container Apps managed environment: ``sv-cae-<suffix>``.

Resources of any other type are left alone.
"""

import enum
from typing import Callable

from components._helpers import alphanumeric

UNIQUE_NAME_PREFIX: str = "sv"

# Used when the stack does not configure a suffix ("D" for development).
DEFAULT_ENVIRONMENT_SUFFIX: str = "D"


class ResourceKind(enum.Enum):
    """Resource kinds with a fixed naming rule, keyed by azure-native type token."""

    STORAGE_ACCOUNT = "azure-native:storage:StorageAccount"
    CACHE = "azure-native:cache:Redis"
    CONTAINER_APP = "azure-native:app:ContainerApp"
    CONTAINER_REGISTRY = "azure-native:containerregistry:Registry"
    LOG_WORKSPACE = "azure-native:operationalinsights:Workspace"
    MANAGED_ENVIRONMENT = "azure-native:app:ManagedEnvironment"


def _storage_account(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}{alphanumeric(identifier)}{alphanumeric(suffix)}"


def _cache(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}-{identifier.lower()}-{suffix}"


def _container_app(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}-{identifier.lower()}-{suffix}"


def _container_registry(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}acr{alphanumeric(suffix)}"


def _log_workspace(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}-law-{suffix}"


def _managed_environment(identifier: str, suffix: str) -> str:
    return f"{UNIQUE_NAME_PREFIX}-cae-{suffix}"


_RULES: dict[ResourceKind, Callable[[str, str], str]] = {
    ResourceKind.STORAGE_ACCOUNT: _storage_account,
    ResourceKind.CACHE: _cache,
    ResourceKind.CONTAINER_APP: _container_app,
    ResourceKind.CONTAINER_REGISTRY: _container_registry,
    ResourceKind.LOG_WORKSPACE: _log_workspace,
    ResourceKind.MANAGED_ENVIRONMENT: _managed_environment,
}

# Every kind needs a rule; adding a member without one breaks the import.
_unhandled = [kind.name for kind in ResourceKind if kind not in _RULES]
if _unhandled:
    raise RuntimeError(f"No naming rule for resource kinds: {', '.join(_unhandled)}")


def environment_suffix(value: str | None) -> str:
    """
    Return the configured suffix, or DEFAULT_ENVIRONMENT_SUFFIX when unset.

    Surrounding whitespace is dropped; a blank value counts as unset.
    """
    if value is None or not value.strip():
        return DEFAULT_ENVIRONMENT_SUFFIX
    return value.strip()


def kind_for_type(type_token: str) -> ResourceKind | None:
    """Return the ResourceKind for a Pulumi type token, or None if it has no rule."""
    try:
        return ResourceKind(type_token)
    except ValueError:
        return None


def resolve_name(
    kind: ResourceKind,
    base_identifier: str,
    suffix: str | None,
) -> str:
    """
    Compute the fixed physical name of a resource.

    Args:
        kind: Which naming rule to apply.
        base_identifier: Short logical name of the resource (e.g. "cache");
            case-insensitive.
        suffix: Environment suffix; falls back to DEFAULT_ENVIRONMENT_SUFFIX
            when None or blank.

    Returns:
        The physical name, always starting with UNIQUE_NAME_PREFIX.
    """
    return _RULES[kind](base_identifier, environment_suffix(suffix))


def resolve(
    type_token: str,
    base_identifier: str,
    suffix: str | None,
    current_name: str | None = None,
) -> str | None:
    """
    Resolve the physical name for a resource of any type.

    Recognized types get their fixed name; for anything else ``current_name``
    is returned unchanged. Never raises.
    """
    kind = kind_for_type(type_token)
    if kind is None:
        return current_name
    return resolve_name(kind, base_identifier, suffix)


class FixedNameResolver:
    """
    Naming policy bound to one stack's environment suffix.

    The fixed_names transformation asks it for the physical name of every
    resource before registration.
    """

    def __init__(self, suffix: str | None = None):
        self.suffix: str = environment_suffix(suffix)

    def resolve(
        self,
        type_token: str,
        base_identifier: str,
        current_name: str | None = None,
    ) -> str | None:
        return resolve(type_token, base_identifier, self.suffix, current_name)

    def __repr__(self) -> str:
        return f"FixedNameResolver(suffix={self.suffix!r})"

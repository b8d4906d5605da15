"""
Pure helpers for naming, ARM ids, and connection strings. Testable without
Pulumi runtime.

Used by the naming policy (alphanumeric), the platform component
(subscription_scope, role_definition_id), and the cache and service components
(redis_connection_string, https_url, service_env_name). No Pulumi types; all
functions accept and return plain Python types so they can be unit-tested
without a Pulumi stack.
"""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def alphanumeric(
    value: str,
) -> str:
    """
    Lowercase value and drop every character outside [a-z0-9].

    Storage account and container registry names allow no separators.
    """
    return _NON_ALPHANUMERIC.sub("", value.lower())


def subscription_scope(
    resource_id: str,
) -> str:
    """
    Return the "/subscriptions/<id>" prefix of an ARM resource id.

    Args:
        resource_id: Any ARM id, e.g.
            "/subscriptions/123/resourceGroups/rg/providers/...".

    Returns:
        Subscription scope (e.g. "/subscriptions/123"), or "" when resource_id
        is not subscription-scoped.
    """
    parts = resource_id.strip("/").split("/")
    if len(parts) < 2 or parts[0].lower() != "subscriptions":
        return ""
    return f"/subscriptions/{parts[1]}"


def role_definition_id(
    resource_id: str,
    role_guid: str,
) -> str:
    """
    Build the id of a built-in role definition in resource_id's subscription.

    RoleAssignment.role_definition_id expects the subscription-scoped form.
    """
    scope = subscription_scope(resource_id)
    return f"{scope}/providers/Microsoft.Authorization/roleDefinitions/{role_guid}"


def https_url(
    fqdn: str,
) -> str:
    """Return https://<fqdn>. Idempotent if the scheme is already present."""
    return fqdn if fqdn.startswith("https://") else f"https://{fqdn}"


def redis_connection_string(
    host: str,
    port: int,
    key: str,
) -> str:
    """
    Return a StackExchange.Redis connection string for a TLS-only cache.

    Args:
        host: Cache host name (e.g. "sv-cache-D.redis.cache.windows.net").
        port: TLS port (6380 on Azure Cache for Redis).
        key: Access key.
    """
    return f"{host}:{port},password={key},ssl=True,abortConnect=False"


def service_env_name(
    service: str,
    scheme: str = "https",
) -> str:
    """
    Environment variable name under which a service's URL is published.

    Follows the .NET service discovery layout, e.g.
    "services__api-service__https__0".
    """
    return f"services__{service}__{scheme}__0"

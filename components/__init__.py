"""
Azure app host components.

Each concern is encapsulated in its own ComponentResource for clear ownership,
testability, and reuse. Use from the Pulumi entrypoint (e.g. __main__.py) with
config and output chaining:

- **ContainerPlatform**: resource group, Log Analytics, managed environment,
  registry, storage, pull identity; exposes environment_id and
  registry_login_server for container apps.
- **RedisCache**: Azure Cache for Redis; exposes a secret connection_string.
- **ContainerService**: Container App on the platform; accepts cache and
  service references and exposes url.

Physical names of recognized resource kinds come from the
``components.transforms.fixed_names`` transformation, which applies
``components.naming.FixedNameResolver``.
"""

from components.cache import RedisCache
from components.naming import FixedNameResolver, ResourceKind
from components.platform import ContainerPlatform
from components.service import ContainerService
from components.transforms import fixed_names

__all__ = [
    "ContainerPlatform",
    "ContainerService",
    "FixedNameResolver",
    "RedisCache",
    "ResourceKind",
    "fixed_names",
]

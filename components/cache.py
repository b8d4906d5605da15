"""
Azure Cache for Redis.

TLS-only cache (non-TLS port disabled, minimum TLS 1.2). The cache is declared
under the component name, which the fixed-name transformation uses as its base
identifier. The ``connection_string`` output is a secret ``Output[str]``
ready to be injected into container apps that reference the cache.
"""

import pulumi
import pulumi_azure_native as azure_native

from components._helpers import redis_connection_string

ID: str = "svapp:azure:RedisCache"


class RedisCache(pulumi.ComponentResource):
    """Azure Cache for Redis with a secret connection string output."""

    def __init__(
        self,
        name: str,
        resource_group_name: pulumi.Input[str],
        location: str,
        sku_name: str = "Basic",
        sku_family: str = "C",
        capacity: int = 0,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the cache.

        Args:
            name: Pulumi resource name and base identifier of the cache, so
                "cache" becomes "sv-cache-<suffix>".
            resource_group_name: Resource group to create the cache in.
            location: Azure region.
            sku_name: Basic, Standard, or Premium.
            sku_family: C (Basic/Standard) or P (Premium).
            capacity: Cache size within the family.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            host_name: Cache host name.
            ssl_port: TLS port.
            connection_string: Secret connection string with the primary key.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.cache_name = name

        self.redis = azure_native.cache.Redis(
            resource_name=name,
            resource_group_name=resource_group_name,
            location=location,
            sku=azure_native.cache.SkuArgs(
                name=sku_name,
                family=sku_family,
                capacity=capacity,
            ),
            enable_non_ssl_port=False,
            minimum_tls_version="1.2",
            opts=child_opts,
        )

        # Listed rather than read from access_keys, which only create/update
        # responses populate.
        keys = azure_native.cache.list_redis_keys_output(
            name=self.redis.name,
            resource_group_name=resource_group_name,
        )

        self.host_name: pulumi.Output[str] = self.redis.host_name
        self.ssl_port: pulumi.Output[int] = self.redis.ssl_port
        self.connection_string: pulumi.Output[str] = pulumi.Output.secret(
            pulumi.Output.all(
                self.redis.host_name, self.redis.ssl_port, keys.primary_key
            )
        ).apply(lambda args: redis_connection_string(*args))
        self.register_outputs(
            {
                "host_name": self.host_name,
                "ssl_port": self.ssl_port,
                "connection_string": self.connection_string,
            }
        )

"""
Sample app host - Azure Container Apps IaC entrypoint.

Wires four ComponentResources using Pulumi config and output chaining:

- **Platform**: resource group, Log Analytics workspace, Container Apps
  managed environment, container registry, storage account, and the identity
  container apps use to pull images.
- **Cache**: Azure Cache for Redis named "cache".
- **API service**: internal container app "api-service".
- **Web frontend**: container app "web-frontend" with the only external HTTP
  endpoint. References the cache and the API service and waits for both.

Workspace, environment, registry, storage account, cache, and container apps
get fixed physical names (e.g. "sv-cache-D", "svacrd") instead of Pulumi
auto-names: every component carries the fixed_names transformation as the
first entry of its transformations, so it sees each child resource before
registration. Other resource types pass through unchanged.

Stack exports: web_frontend_url, api_service_fqdn, cache_host_name,
registry_login_server, environment_suffix.
"""

import pulumi

from components import ContainerPlatform, ContainerService, RedisCache, fixed_names
from components.naming import FixedNameResolver
from config import StackConfig


def main():
    """
    Build the platform, cache, and both services and export stack outputs.

    Reads config, builds the naming resolver from the environment suffix,
    creates the cache and API service, then the web frontend referencing and
    waiting for both.
    """
    config = StackConfig.from_pulumi_config(pulumi.Config())
    resolver = FixedNameResolver(config.environment_suffix)
    pulumi.log.info(f"Fixed resource names use suffix '{resolver.suffix}'")
    transform = fixed_names(resolver)

    def naming_opts() -> pulumi.ResourceOptions:
        return pulumi.ResourceOptions(transformations=[transform])

    platform = ContainerPlatform(
        name=f"{config.project_name}-platform",
        location=config.location,
        log_retention_days=config.log_retention_days,
        opts=naming_opts(),
    )

    cache = RedisCache(
        name="cache",
        resource_group_name=platform.resource_group_name,
        location=config.location,
        opts=naming_opts(),
    )

    api_service = ContainerService(
        name="api-service",
        platform=platform,
        location=config.location,
        image=config.api_service_image,
        target_port=config.api_service_port,
        opts=naming_opts(),
    )

    web_frontend = ContainerService(
        name="web-frontend",
        platform=platform,
        location=config.location,
        image=config.web_frontend_image,
        target_port=config.web_frontend_port,
        external=True,
        references=[cache, api_service],
        wait_for=[cache, api_service],
        opts=naming_opts(),
    )

    for output_name, value in [
        ("web_frontend_url", web_frontend.url),
        ("api_service_fqdn", api_service.fqdn),
        ("cache_host_name", cache.host_name),
        ("registry_login_server", platform.registry_login_server),
        ("environment_suffix", resolver.suffix),
    ]:
        pulumi.export(output_name, value)


if __name__ == "__main__":
    main()

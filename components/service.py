"""
Container service: one Azure Container App on the shared platform.

The app pulls its image from the platform registry using the platform's
user-assigned identity, exposes a single HTTP ingress (external or internal
to the managed environment), and can reference other resources:

- a ``RedisCache`` reference injects the cache connection string as a secret
  and exposes it as ``ConnectionStrings__<name>``;
- a ``ContainerService`` reference publishes the other service's URL as
  ``services__<name>__https__0``.

Everything listed in ``wait_for`` becomes an explicit dependency, so the app
is only created once those resources are ready.
"""

from typing import Sequence, Union

import pulumi
import pulumi_azure_native as azure_native

from components._helpers import https_url, service_env_name
from components.cache import RedisCache
from components.platform import ContainerPlatform

ID: str = "svapp:azure:ContainerService"

Reference = Union[RedisCache, "ContainerService"]


class ContainerService(pulumi.ComponentResource):
    """
    Container App with registry pull identity, ingress, and references.

    The app is declared under the component name, so with the fixed-name
    transformation "api-service" becomes "sv-api-service-<suffix>".
    """

    def __init__(
        self,
        name: str,
        platform: ContainerPlatform,
        location: str,
        image: pulumi.Input[str],
        target_port: int = 8080,
        external: bool = False,
        references: Sequence[Reference] = (),
        wait_for: Sequence[pulumi.Resource] = (),
        env: dict[str, pulumi.Input[str]] | None = None,
        min_replicas: int = 1,
        max_replicas: int = 3,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the container app.

        Args:
            name: Pulumi resource name and base identifier of the app.
            platform: Managed environment, registry, and pull identity.
            location: Azure region.
            image: Image reference, e.g. "<registry>/api-service:1.0".
            target_port: Port the container listens on.
            external: If True, ingress is reachable from the internet;
                otherwise only from inside the managed environment.
            references: Caches and services whose connection details are
                injected as environment variables.
            wait_for: Resources that must exist before the app is created.
            env: Extra plain environment variables.
            min_replicas: Minimum replica count.
            max_replicas: Maximum replica count.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            fqdn: FQDN of the latest revision.
            url: HTTPS URL of the app.
        """
        for reference in references:
            if not isinstance(reference, (RedisCache, ContainerService)):
                raise TypeError(
                    f"Unsupported reference for {name}: {type(reference).__name__}"
                )

        super().__init__(ID, name, None, opts)

        self.service_name = name

        secrets: list[azure_native.app.SecretArgs] = []
        env_vars: list[azure_native.app.EnvironmentVarArgs] = [
            azure_native.app.EnvironmentVarArgs(name=key, value=value)
            for key, value in (env or {}).items()
        ]

        for reference in references:
            if isinstance(reference, RedisCache):
                # Secret names allow lowercase alphanumerics and '-' only.
                secret_name = f"connectionstrings--{reference.cache_name}".lower()
                secrets.append(
                    azure_native.app.SecretArgs(
                        name=secret_name,
                        value=reference.connection_string,
                    )
                )
                env_vars.append(
                    azure_native.app.EnvironmentVarArgs(
                        name=f"ConnectionStrings__{reference.cache_name}",
                        secret_ref=secret_name,
                    )
                )
            else:
                env_vars.append(
                    azure_native.app.EnvironmentVarArgs(
                        name=service_env_name(reference.service_name),
                        value=reference.url,
                    )
                )

        configuration = azure_native.app.ConfigurationArgs(
            ingress=azure_native.app.IngressArgs(
                external=external,
                target_port=target_port,
            ),
            registries=[
                azure_native.app.RegistryCredentialsArgs(
                    server=platform.registry_login_server,
                    identity=platform.identity_id,
                )
            ],
            secrets=secrets,
        )
        template = azure_native.app.TemplateArgs(
            containers=[
                azure_native.app.ContainerArgs(
                    name=name,
                    image=image,
                    env=env_vars,
                )
            ],
            scale=azure_native.app.ScaleArgs(
                min_replicas=min_replicas,
                max_replicas=max_replicas,
            ),
        )
        identity = azure_native.app.ManagedServiceIdentityArgs(
            type="UserAssigned",
            user_assigned_identities=[platform.identity_id],
        )

        # Readiness ordering: the app waits for everything in wait_for.
        app_opts = pulumi.ResourceOptions(
            parent=self,
            depends_on=list(wait_for),
        )
        self.app = azure_native.app.ContainerApp(
            resource_name=name,
            resource_group_name=platform.resource_group_name,
            managed_environment_id=platform.environment_id,
            location=location,
            configuration=configuration,
            template=template,
            identity=identity,
            opts=app_opts,
        )

        self.fqdn: pulumi.Output[str] = self.app.latest_revision_fqdn
        self.url: pulumi.Output[str] = self.fqdn.apply(https_url)
        self.register_outputs({"fqdn": self.fqdn, "url": self.url})

"""
Azure Container Apps hosting platform.

This component creates everything the container services run on: a resource
group, a Log Analytics workspace, a Container Apps managed environment that
ships logs to the workspace, a container registry, a storage account, and a
user-assigned identity that is granted AcrPull on the registry so container
apps can pull images without registry admin credentials.

Physical names of the workspace, environment, registry, and storage account
are left to the fixed-name transformation in ``opts`` (see
``components.transforms``); without it Pulumi auto-names them. The storage
account is declared under its base identifier so the policy can use it.
"""

import pulumi
import pulumi_azure_native as azure_native

from components._helpers import role_definition_id

ID: str = "svapp:azure:ContainerPlatform"

# Built-in "AcrPull" role.
ACR_PULL_ROLE: str = "7f951dda-4ed3-4680-a7ca-43fe172d538d"


class ContainerPlatform(pulumi.ComponentResource):
    """
    Resource group, logging, managed environment, registry, storage, identity.

    Resources: ResourceGroup, Workspace, ManagedEnvironment, Registry,
    StorageAccount, UserAssignedIdentity, RoleAssignment (AcrPull).
    """

    def __init__(
        self,
        name: str,
        location: str,
        log_retention_days: int = 30,
        storage_identifier: str = "storage",
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the platform resources.

        Args:
            name: Pulumi resource name; prefix for child resource names.
            location: Azure region for every resource.
            log_retention_days: Log Analytics retention in days.
            storage_identifier: Base identifier for the storage account name.
            opts: Options for the component itself; carries the naming
                transformation down to every child.

        Outputs (set on self, registered for the component):
            resource_group_name: Name of the resource group.
            environment_id: Managed environment id for container apps.
            registry_login_server: Login server of the container registry.
            identity_id: Id of the identity allowed to pull from the registry.
            storage_account_name: Physical storage account name.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        rg = azure_native.resources.ResourceGroup(
            resource_name=f"{name}-rg",
            resource_group_name=f"{name}-rg",
            location=location,
            opts=child_opts,
        )

        # Log Analytics workspace; the managed environment ships app logs here.
        self.workspace = azure_native.operationalinsights.Workspace(
            resource_name=f"{name}-law",
            resource_group_name=rg.name,
            location=location,
            sku=azure_native.operationalinsights.WorkspaceSkuArgs(
                name="PerGB2018",
            ),
            retention_in_days=log_retention_days,
            opts=child_opts,
        )

        shared_keys = azure_native.operationalinsights.get_shared_keys_output(
            resource_group_name=rg.name,
            workspace_name=self.workspace.name,
        )
        app_logs = azure_native.app.AppLogsConfigurationArgs(
            destination="log-analytics",
            log_analytics_configuration=azure_native.app.LogAnalyticsConfigurationArgs(
                customer_id=self.workspace.customer_id,
                shared_key=shared_keys.primary_shared_key,
            ),
        )
        self.environment = azure_native.app.ManagedEnvironment(
            resource_name=f"{name}-cae",
            resource_group_name=rg.name,
            location=location,
            app_logs_configuration=app_logs,
            opts=child_opts,
        )

        # Admin user stays disabled; pulls go through the identity below.
        self.registry = azure_native.containerregistry.Registry(
            resource_name=f"{name}-acr",
            resource_group_name=rg.name,
            location=location,
            sku=azure_native.containerregistry.SkuArgs(
                name="Basic",
            ),
            admin_user_enabled=False,
            opts=child_opts,
        )

        self.storage_account = azure_native.storage.StorageAccount(
            resource_name=storage_identifier,
            resource_group_name=rg.name,
            location=location,
            sku=azure_native.storage.SkuArgs(
                name=azure_native.storage.SkuName.STANDARD_LRS,
            ),
            kind=azure_native.storage.Kind.STORAGE_V2,
            enable_https_traffic_only=True,
            minimum_tls_version=azure_native.storage.MinimumTlsVersion.TLS1_2,
            allow_blob_public_access=False,
            opts=child_opts,
        )

        self.identity = azure_native.managedidentity.UserAssignedIdentity(
            resource_name=f"{name}-identity",
            resource_group_name=rg.name,
            location=location,
            opts=child_opts,
        )

        azure_native.authorization.RoleAssignment(
            resource_name=f"{name}-acrpull",
            principal_id=self.identity.principal_id,
            principal_type="ServicePrincipal",
            role_definition_id=self.registry.id.apply(
                lambda registry_id: role_definition_id(registry_id, ACR_PULL_ROLE)
            ),
            scope=self.registry.id,
            opts=child_opts,
        )

        self.resource_group_name: pulumi.Output[str] = rg.name
        self.environment_id: pulumi.Output[str] = self.environment.id
        self.registry_login_server: pulumi.Output[str] = self.registry.login_server
        self.identity_id: pulumi.Output[str] = self.identity.id
        self.storage_account_name: pulumi.Output[str] = self.storage_account.name
        self.register_outputs(
            {
                "resource_group_name": self.resource_group_name,
                "environment_id": self.environment_id,
                "registry_login_server": self.registry_login_server,
                "identity_id": self.identity_id,
                "storage_account_name": self.storage_account_name,
            }
        )

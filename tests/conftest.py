import pulumi
import pytest
from pulumi.runtime import rpc

SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"

# Input carrying the physical name, per azure-native type token.
PHYSICAL_NAME_INPUTS = {
    "azure-native:storage:StorageAccount": "accountName",
    "azure-native:cache:Redis": "name",
    "azure-native:app:ContainerApp": "containerAppName",
    "azure-native:containerregistry:Registry": "registryName",
    "azure-native:operationalinsights:Workspace": "workspaceName",
    "azure-native:app:ManagedEnvironment": "environmentName",
    "azure-native:resources:ResourceGroup": "resourceGroupName",
}


def _unwrap_secrets(value):
    """Strip the RPC secret envelope newer pulumi versions send to mocks."""
    if isinstance(value, dict):
        if value.get(rpc._special_sig_key) == rpc._special_secret_sig:
            return _unwrap_secrets(value.get("value"))
        return {key: _unwrap_secrets(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_unwrap_secrets(item) for item in value]
    return value


class PulumiMock(pulumi.runtime.Mocks):
    """Echo inputs back as state and remember every registered resource."""

    def __init__(self):
        self.resources: dict[tuple[str, str], dict] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        args.inputs = _unwrap_secrets(args.inputs)
        self.resources[(args.typ, args.name)] = args.inputs

        physical = args.inputs.get(PHYSICAL_NAME_INPUTS.get(args.typ, ""), args.name)
        resource_id = (
            f"/subscriptions/{SUBSCRIPTION}/resourceGroups/mock-rg/providers/"
            f"{args.typ}/{physical}"
        )
        state = {**args.inputs, "name": physical}
        if args.typ == "azure-native:operationalinsights:Workspace":
            state["customerId"] = f"{physical}-customer"
        elif args.typ == "azure-native:containerregistry:Registry":
            state["loginServer"] = f"{physical}.azurecr.io"
        elif args.typ == "azure-native:managedidentity:UserAssignedIdentity":
            state["principalId"] = f"{args.name}-principal"
        elif args.typ == "azure-native:cache:Redis":
            state["hostName"] = f"{physical}.redis.cache.windows.net"
            state["sslPort"] = 6380
        elif args.typ == "azure-native:app:ContainerApp":
            state["latestRevisionFqdn"] = f"{physical}.mock.azurecontainerapps.io"
            # Sent as a list of ids, returned by Azure as a map keyed by id.
            identity = dict(args.inputs.get("identity") or {})
            identity_ids = identity.get("userAssignedIdentities") or []
            identity["userAssignedIdentities"] = {
                identity_id: {} for identity_id in identity_ids
            }
            state["identity"] = identity
        return resource_id, state

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "azure-native:operationalinsights:getSharedKeys":
            return {"primarySharedKey": "mock-shared-key"}, []
        if args.token == "azure-native:cache:listRedisKeys":
            return {"primaryKey": "mock-primary-key", "secondaryKey": "mock-key-2"}, []
        return {}, []


MOCKS = PulumiMock()


@pytest.fixture(scope="session", autouse=True)
def pulumi_mocks():
    pulumi.runtime.set_mocks(MOCKS)
    yield MOCKS


@pytest.fixture(scope="module")
def mock_resolver():
    from components.naming import FixedNameResolver

    return FixedNameResolver("T")


@pytest.fixture(scope="module")
def mock_naming(mock_resolver):
    """Factory for options carrying the fixed-name transformation."""
    from components.transforms import fixed_names

    transform = fixed_names(mock_resolver)

    def naming_opts(*extra):
        return pulumi.ResourceOptions(transformations=[transform, *extra])

    return naming_opts


@pytest.fixture(scope="module")
def mock_platform(mock_naming):
    from components.platform import ContainerPlatform

    return ContainerPlatform(
        "mock-platform",
        location="westeurope",
        opts=mock_naming(),
    )

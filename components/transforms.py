"""
Pulumi resource transformation applying the fixed naming policy.

Attach the transformation to a component (or any resource) through
``pulumi.ResourceOptions(transformations=[...])``; Pulumi hands it every
resource declared under that parent before registration. Recognized resource
kinds get their physical-name input overwritten with the fixed name, using
the Pulumi resource name as the base identifier. Every other resource is
passed through untouched. Put it first in the transformations list so later
transformations see the fixed name.
"""

from typing import Callable

import pulumi

from components.naming import FixedNameResolver, ResourceKind

# Input carrying the physical name of each recognized kind.
PHYSICAL_NAME_INPUTS: dict[ResourceKind, str] = {
    ResourceKind.STORAGE_ACCOUNT: "account_name",
    ResourceKind.CACHE: "name",
    ResourceKind.CONTAINER_APP: "container_app_name",
    ResourceKind.CONTAINER_REGISTRY: "registry_name",
    ResourceKind.LOG_WORKSPACE: "workspace_name",
    ResourceKind.MANAGED_ENVIRONMENT: "environment_name",
}


def _input_fields(props) -> dict:
    # Generated azure-native resources pass an *Args instance whose inputs
    # live in __dict__; hand-built resources may pass a plain dict.
    return props if isinstance(props, dict) else vars(props)


def fixed_names(
    resolver: FixedNameResolver,
) -> Callable[
    [pulumi.ResourceTransformationArgs], pulumi.ResourceTransformationResult | None
]:
    """
    Build a transformation that names resources with ``resolver``.

    Args:
        resolver: Naming policy bound to the stack's environment suffix.

    Returns:
        A callable for ``ResourceOptions.transformations``.
    """

    def transform(
        args: pulumi.ResourceTransformationArgs,
    ) -> pulumi.ResourceTransformationResult | None:
        physical = resolver.resolve(args.type_, args.name)
        if physical is None:
            return None

        fields = _input_fields(args.props)
        fields[PHYSICAL_NAME_INPUTS[ResourceKind(args.type_)]] = physical
        pulumi.log.debug(f"{args.type_} '{args.name}' named {physical}")
        return pulumi.ResourceTransformationResult(args.props, args.opts)

    return transform

"""Tests for pure helpers"""

from components import _helpers


class TestAlphanumeric:
    def test_lowercases(self):
        assert _helpers.alphanumeric("Cache") == "cache"

    def test_strips_separators(self):
        assert _helpers.alphanumeric("api-service_01.x") == "apiservice01x"

    def test_empty(self):
        assert _helpers.alphanumeric("--") == ""


class TestSubscriptionScope:
    def test_extracts_subscription(self):
        resource_id = (
            "/subscriptions/0000-1111/resourceGroups/rg/providers/"
            "Microsoft.ContainerRegistry/registries/svacrd"
        )
        assert _helpers.subscription_scope(resource_id) == "/subscriptions/0000-1111"

    def test_not_subscription_scoped(self):
        assert _helpers.subscription_scope("/providers/Microsoft.Foo/bar") == ""

    def test_too_short(self):
        assert _helpers.subscription_scope("registry_id") == ""


class TestRoleDefinitionId:
    def test_builds_subscription_scoped_id(self):
        resource_id = "/subscriptions/abc/resourceGroups/rg"
        assert _helpers.role_definition_id(resource_id, "guid") == (
            "/subscriptions/abc/providers/Microsoft.Authorization/roleDefinitions/guid"
        )


class TestHttpsUrl:
    def test_adds_scheme(self):
        assert _helpers.https_url("app.example.com") == "https://app.example.com"

    def test_leaves_scheme_unchanged(self):
        assert _helpers.https_url("https://app.example.com") == "https://app.example.com"


class TestRedisConnectionString:
    def test_format(self):
        assert _helpers.redis_connection_string("host", 6380, "key") == (
            "host:6380,password=key,ssl=True,abortConnect=False"
        )


class TestServiceEnvName:
    def test_default_scheme(self):
        assert _helpers.service_env_name("api-service") == (
            "services__api-service__https__0"
        )

    def test_http_scheme(self):
        assert _helpers.service_env_name("api", "http") == "services__api__http__0"

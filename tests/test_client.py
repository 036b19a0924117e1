"""Tests for the root client: construction, capabilities and settings."""

from __future__ import annotations

import pytest

from bigcommerce_management import (
    CAPABILITIES,
    ClientOptions,
    ConfigurationError,
    ManagementAPI,
)
from bigcommerce_management.config import Settings
from bigcommerce_management.resources import Customers, Endpoint, Inventories, Subscribers

from helpers import RecordingTransport, data_response


class TestConstruction:
    @pytest.mark.parametrize("store_hash, token", [("", "token"), ("abc123", ""), ("", "")])
    def test_empty_credentials_fail_before_io(self, store_hash, token):
        transport = RecordingTransport(lambda req: data_response([]))
        with pytest.raises(ConfigurationError):
            ManagementAPI(store_hash, token, _transport=transport)
        assert transport.requests == []

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError, match="store hash required"):
            ManagementAPI("", "token")

    def test_unknown_api_version(self):
        with pytest.raises(ConfigurationError, match="unsupported API version"):
            ManagementAPI("abc123", "token", api_version=9)

    def test_resources(self):
        api = ManagementAPI("abc123", "token")
        assert isinstance(api.customers, Customers)
        assert isinstance(api.inventories, Inventories)
        assert isinstance(api.segments, Endpoint)
        assert isinstance(api.subscribers, Subscribers)
        assert api.customers.addresses.descriptor.path == "customers/addresses"

    def test_resources_share_one_pipeline(self):
        api = ManagementAPI("abc123", "token")
        assert api.segments._pipeline is api.pipeline
        assert api.customers.metafields._pipeline is api.pipeline

    def test_options(self):
        api = ManagementAPI("abc123", "token", {"timeout": 10.0})
        assert api.pipeline.options == ClientOptions(timeout=10.0)


class TestCapabilities:
    def test_v3_lists_all_resources(self):
        assert CAPABILITIES[3] == {"customers", "inventories", "segments", "subscribers"}

    def test_supports(self):
        api = ManagementAPI("abc123", "token")
        assert api.supports("segments")
        assert not api.supports("orders")

    def test_missing_capability_not_exposed(self, monkeypatch):
        monkeypatch.setitem(CAPABILITIES, 2, frozenset({"customers"}))
        api = ManagementAPI("abc123", "token", api_version=2)

        assert isinstance(api.customers, Customers)
        assert not hasattr(api, "segments")
        assert not hasattr(api, "subscribers")
        assert api.customers.addresses._pipeline.endpoint("x") == "/stores/abc123/v2/x"


class TestFromSettings:
    def test_builds_client(self):
        settings = Settings(store_hash="abc123", access_token="token", debug=True, timeout=3.0)
        transport = RecordingTransport(lambda req: data_response([]))
        api = ManagementAPI.from_settings(settings, _transport=transport)

        api.customers.get()

        assert api.pipeline.options == ClientOptions(debug=True, timeout=3.0)
        assert transport.requests[0].headers["x-auth-token"] == "token"

    def test_empty_settings(self):
        with pytest.raises(ConfigurationError):
            ManagementAPI.from_settings(Settings(store_hash="", access_token=""))

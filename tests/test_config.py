"""Tests for settings, route table and address helpers."""

import pytest

from ultraswap.config import Settings, UltraEndpoints, get_settings
from ultraswap.utils.addresses import is_valid_solana_address, shorten_address

from samples import SOL_MINT, TAKER


class TestSettings:
    """Tests for environment-driven settings."""

    def test_loaded_from_environment(self):
        settings = get_settings()

        assert settings.environment == "test"
        assert settings.api_base_url == "https://ultra.test"
        assert settings.debug is True
        assert settings.http_timeout is None

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ULTRA_API_KEY", "secret")
        monkeypatch.setenv("ULTRA_HTTP_TIMEOUT", "2.5")
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.api_key == "secret"
        assert settings.http_timeout == 2.5
        assert settings.get_safe_dict()["api_key"] == "***"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(http_timeout=0)

    def test_endpoints_strip_trailing_slash(self):
        endpoints = Settings(api_base_url="https://ultra-api.jup.ag/").endpoints()
        assert endpoints.order == "https://ultra-api.jup.ag/order"


class TestUltraEndpoints:
    """Tests for the route table."""

    def test_routes(self):
        endpoints = UltraEndpoints()

        assert endpoints.execute == "https://ultra-api.jup.ag/execute"
        assert endpoints.order == "https://ultra-api.jup.ag/order"
        assert endpoints.routers == "https://ultra-api.jup.ag/order/routers"
        assert endpoints.shield == "https://ultra-api.jup.ag/shield"
        assert endpoints.balances_for("addr") == "https://ultra-api.jup.ag/balances/addr"

    def test_balance_address_is_one_path_segment(self):
        endpoints = UltraEndpoints(base_url="https://ultra.test")
        assert endpoints.balances_for("abc?mints=x") == "https://ultra.test/balances/abc%3Fmints%3Dx"

    def test_immutable(self):
        endpoints = UltraEndpoints()
        with pytest.raises(AttributeError):
            endpoints.base_url = "https://other"


class TestAddresses:
    """Tests for Solana address helpers."""

    @pytest.mark.parametrize("address", [SOL_MINT, TAKER])
    def test_valid(self, address):
        assert is_valid_solana_address(address)

    @pytest.mark.parametrize(
        "address",
        ["", "short", "0" * 44, "So1111111111111111111111111111111111111111l"],
    )
    def test_invalid(self, address):
        assert not is_valid_solana_address(address)

    def test_shorten(self):
        assert shorten_address(SOL_MINT) == "So11...1112"
        assert shorten_address("abc") == "abc"

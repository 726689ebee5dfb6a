"""Tests for client configuration and option merging."""

import dataclasses

import pytest
import httpx

from engine_client.config import ClientConfig, milliseconds_to_timeout

DEFAULTS = {"json": True, "timeout": 10000, "follow_redirects": False}


class TestClientConfig:
    """Test suite for ClientConfig."""

    def test_requires_base_url(self):
        """Test that an empty base_url raises ValueError."""
        with pytest.raises(ValueError):
            ClientConfig(base_url="")

    def test_strips_exactly_one_trailing_slash(self):
        """Test that only a single trailing slash is removed."""
        assert ClientConfig(base_url="https://api.example.com/").base_url == "https://api.example.com"
        assert ClientConfig(base_url="https://api.example.com//").base_url == "https://api.example.com/"

    def test_is_immutable(self):
        """Test that neither the URL nor the defaults can be changed."""
        config = ClientConfig(base_url="https://api.example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_url = "https://other.example.com"
        with pytest.raises(TypeError):
            config.default_options["timeout"] = 1

    def test_caller_defaults_are_copied(self):
        """Test that later changes to the caller's mapping are not seen."""
        defaults = {"timeout": 500}
        config = ClientConfig(base_url="https://api.example.com", default_options=defaults)
        defaults["timeout"] = 1
        assert config.default_options["timeout"] == 500

    def test_redirects_can_be_enabled_by_default(self):
        """Test that follow_redirects is overridable at the client level."""
        config = ClientConfig(
            base_url="https://api.example.com",
            default_options={"follow_redirects": True},
        )
        assert config.merge_options(None)["follow_redirects"] is True


class TestMergeOptions:
    """Test suite for per-call option merging."""

    def test_no_call_options(self):
        """Test that the seeded defaults apply when no options are given."""
        config = ClientConfig(base_url="https://api.example.com")
        assert config.merge_options(None) == DEFAULTS

    def test_call_options_override_overlapping_keys(self):
        """Test that overriding json keeps the default timeout."""
        config = ClientConfig(base_url="https://api.example.com")
        merged = config.merge_options({"json": False})
        assert merged == {**DEFAULTS, "json": False}
        assert merged["timeout"] == 10000

    def test_merge_is_shallow(self):
        """Test that a per-call headers mapping replaces the default one."""
        config = ClientConfig(
            base_url="https://api.example.com",
            default_options={"headers": {"X-A": "1", "X-B": "2"}},
        )
        merged = config.merge_options({"headers": {"X-A": "3"}})
        assert merged["headers"] == {"X-A": "3"}

    def test_unrecognized_keys_are_carried(self):
        """Test that unknown keys pass through the merge."""
        config = ClientConfig(base_url="https://api.example.com")
        assert config.merge_options({"compressed": True})["compressed"] is True

    def test_merge_does_not_touch_defaults(self):
        """Test that merging leaves the stored defaults unchanged."""
        config = ClientConfig(base_url="https://api.example.com")
        config.merge_options({"timeout": 1})
        assert config.default_options["timeout"] == 10000


class TestTimeoutConversion:
    """Test suite for millisecond timeout conversion."""

    def test_milliseconds_to_seconds(self):
        """Test that milliseconds are converted to seconds."""
        timeout = milliseconds_to_timeout(10000)
        assert timeout == httpx.Timeout(10.0)

    def test_none_disables_timeout(self):
        """Test that None disables every timeout phase."""
        assert milliseconds_to_timeout(None) == httpx.Timeout(None)

# ABOUTME: Unit tests for endpoint selection and the default gateway factory.
# ABOUTME: Host selection is injected, so no test depends on the machine's address.

from pathlib import Path

import pytest

from bookshelf.bootstrap import address_matcher, open_default_gateway, select_endpoint
from bookshelf.config import ENV_CONFIG_PATH, DatabaseConfig
from bookshelf.db.mapping import BookRecord


def _config(tmp_path: Path, local_address: str | None = None) -> DatabaseConfig:
    return DatabaseConfig(
        local_url=str(tmp_path / "local.db"),
        remote_url=str(tmp_path / "remote.db"),
        user="reader",
        local_address=local_address,
    )


class TestSelectEndpoint:
    """Tests for select_endpoint."""

    def test_local_when_predicate_true(self, tmp_path: Path) -> None:
        config = _config(tmp_path)
        assert select_endpoint(config, lambda: True) == config.local_url

    def test_remote_when_predicate_false(self, tmp_path: Path) -> None:
        config = _config(tmp_path)
        assert select_endpoint(config, lambda: False) == config.remote_url


class TestAddressMatcher:
    """Tests for address_matcher."""

    def test_matches_resolved_address(self) -> None:
        assert address_matcher("10.0.0.5", resolver=lambda: "10.0.0.5")()

    def test_other_address(self) -> None:
        assert not address_matcher("10.0.0.5", resolver=lambda: "10.0.0.6")()

    def test_no_address_configured(self) -> None:
        assert not address_matcher(None, resolver=lambda: "10.0.0.5")()

    def test_resolution_failure_means_remote(self) -> None:
        def broken() -> str:
            raise OSError("no network")

        assert not address_matcher("10.0.0.5", resolver=broken)()


class TestOpenDefaultGateway:
    """Tests for open_default_gateway."""

    def test_injected_policy_picks_database(self, tmp_path: Path) -> None:
        """Local and remote gateways are independent databases."""
        config = _config(tmp_path)

        with open_default_gateway(config, is_local=lambda: True) as local:
            local.insert(BookRecord(title="Local only"))

        with open_default_gateway(config, is_local=lambda: False) as remote:
            assert remote.list_all_ordered_by_publisher() == []

        assert (tmp_path / "local.db").exists()

    def test_loads_config_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = tmp_path / "config.ini"
        config_path.write_text(
            f"[db]\nurl.local = {tmp_path / 'l.db'}\nurl.remote = {tmp_path / 'r.db'}\nuser = me\n"
        )
        monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))

        with open_default_gateway() as gateway:
            gateway.insert(BookRecord(title="Remote"))

        assert (tmp_path / "r.db").exists()
        assert not (tmp_path / "l.db").exists()

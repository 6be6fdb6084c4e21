from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from pathlib import Path

import pytest
from pydantic import ValidationError

from eventcal.infrastructure.config import CONFIG_FILE_ENV, Settings


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Run every test from an empty directory with no EVENTCAL_* variables set.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("ADDRESS", "PORT", "LOG_LEVEL", "LEGACY_STATUS_CODES", "CONFIG_FILE"):
        monkeypatch.delenv(f"EVENTCAL_{name}", raising=False)


def test_defaults_without_config_file() -> None:
    settings = Settings()

    assert settings.address == IPv4Address("127.0.0.1")
    assert settings.port == 8080
    assert settings.legacy_status_codes is True
    assert settings.openapi_path.name == "openapi.yaml"
    assert settings.openapi_path.is_file()


def test_config_yaml_in_working_directory(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("address: '::1'\nport: 9000\n", encoding="utf-8")

    settings = Settings()

    assert settings.address == IPv6Address("::1")
    assert settings.port == 9000


def test_config_file_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    custom = tmp_path / "conf" / "eventcal.yaml"
    custom.parent.mkdir()
    custom.write_text("port: 7000\nlegacy_status_codes: false\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(custom))

    settings = Settings()

    assert settings.port == 7000
    assert settings.legacy_status_codes is False


def test_environment_overrides_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.yaml").write_text("port: 9000\n", encoding="utf-8")
    monkeypatch.setenv("EVENTCAL_PORT", "9100")

    assert Settings().port == 9100


@pytest.mark.parametrize("content", ["address: 'localhost-ish'\n", "port: 70000\n"])
def test_invalid_values_are_rejected(tmp_path: Path, content: str) -> None:
    (tmp_path / "config.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ValidationError):
        Settings()

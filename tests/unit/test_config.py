from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import dotenv_values

from core.config import (
    DEFAULT_ENDPOINT,
    AppSettings,
    get_user_env_file,
    load_settings,
    write_user_env_vars,
)


@pytest.fixture(autouse=True)
def user_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("ORBCTL_ENDPOINT", "ORBCTL_TOKEN", "ORBCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "xdg"


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)

    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.token is None
    assert settings.verbose is False


def test_env_prefix_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("orbctl_endpoint", "https://other.test/graphql")

    assert AppSettings(_env_file=None).endpoint == "https://other.test/graphql"


def test_user_env_file_lives_under_xdg(user_config_home: Path) -> None:
    assert get_user_env_file() == user_config_home / "orbctl" / ".env"


def test_write_user_env_vars_merges_and_skips_none() -> None:
    write_user_env_vars({"ORBCTL_ENDPOINT": "https://a.test", "ORBCTL_TOKEN": "t1"})
    path = write_user_env_vars({"ORBCTL_ENDPOINT": "https://b.test", "ORBCTL_TOKEN": None})

    assert path.read_text(encoding="utf-8").startswith("#")
    assert dotenv_values(path) == {"ORBCTL_ENDPOINT": "https://b.test", "ORBCTL_TOKEN": "t1"}


def test_settings_read_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("ORBCTL_TOKEN=from-file\nORBCTL_HTTP_TIMEOUT_SECONDS=5\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.token == "from-file"
    assert settings.http_timeout_seconds == 5.0


def test_written_values_round_trip_with_special_characters() -> None:
    token = 'tok #frag "quoted"'
    path = write_user_env_vars({"ORBCTL_TOKEN": token})

    assert AppSettings(_env_file=path).token == token


def test_load_settings_resolves_user_env_file_per_call(user_config_home: Path) -> None:
    write_user_env_vars({"ORBCTL_ENDPOINT": "https://user.test/graphql"})

    assert load_settings().endpoint == "https://user.test/graphql"
    assert load_settings(endpoint="https://flag.test").endpoint == "https://flag.test"

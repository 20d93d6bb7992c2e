"""Tests for SnippetSettings, unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from snippetkit.config.settings import CONFIG_ENV_VAR, SnippetSettings, find_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        CONFIG_ENV_VAR,
        "SNIPPETKIT_TEXT__SHORTEN_LENGTH",
        "SNIPPETKIT_RANDOM__SEED",
        "SNIPPETKIT_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / "snippetkit.toml"
        toml.write_text("")
        assert find_config(tmp_path) == toml

    def test_walks_up(self, tmp_path: Path) -> None:
        toml = tmp_path / "snippetkit.toml"
        toml.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == toml

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "snippetkit.toml").write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "snippetkit.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestSnippetSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = SnippetSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.text.shorten_length == 10
        assert settings.random.upper == 10
        assert settings.timing.label == "default"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = SnippetSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "snippetkit.toml").write_text(
            '[text]\nshorten_length = 4\n[timing]\nlabel = "bench"\n'
        )
        settings = SnippetSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / "snippetkit.toml"
        assert settings.text.shorten_length == 4
        assert settings.text.ellipsis_count == 3
        assert settings.timing.label == "bench"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("[random]\nseed = 99\n")
        settings = SnippetSettings.from_cli(config_path=str(custom))
        assert settings.random.seed == 99

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "snippetkit.toml").write_text("[text\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            SnippetSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "snippetkit.toml").write_text("[text]\nshorten_length = 4\n")
        monkeypatch.setenv("SNIPPETKIT_TEXT__SHORTEN_LENGTH", "7")
        settings = SnippetSettings.from_cli(start=tmp_path)
        assert settings.text.shorten_length == 7

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNIPPETKIT_VERBOSE", "false")
        settings = SnippetSettings.from_cli(start=tmp_path, verbose=True)
        assert settings.verbose is True

"""Tests for configuration loading."""

import pytest

from fork_publish.api.exceptions import ConfigError
from fork_publish.constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from fork_publish.models.config import Config, PublishSettings, RunOptions
from fork_publish.services.config_service import ConfigService


class TestConfigService:
    """Tests for ConfigService."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
        config = ConfigService(tmp_path).load_config()

        assert config.publish.packages == ["playwright-core", "playwright"]
        assert config.publish.reserved_names == ["playwright-core-kali", "playwright-kali"]
        assert config.checklist.license_file == "LICENSE"
        assert len(config.checklist.marker_rules) == 3

    def test_yaml_overrides(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
        monkeypatch.setenv("FORK_SUFFIX", "-parrot")
        (tmp_path / PROJECT_CONFIG_FILE).write_text(
            "publish:\n"
            "  packages: [core, cli]\n"
            "  name_suffix: ${FORK_SUFFIX}\n"
            "  version_suffix: -parrot.1\n"
            "  unknown_key: ignored\n"
            "checklist:\n"
            "  marker_rules:\n"
            "    - name: Docs\n"
            "      path: README.md\n"
            "      markers: [Parrot]\n"
            "  required_paths: [README.md]\n"
        )

        config = ConfigService(tmp_path).config

        assert config.publish.packages == ["core", "cli"]
        assert config.publish.renamed("core") == "core-parrot"
        assert config.publish.fork_marker == "-parrot"
        assert [r.name for r in config.checklist.marker_rules] == ["Docs"]
        assert config.checklist.required_paths == ["README.md"]
        assert config.checklist.build_outputs == Config().checklist.build_outputs

    def test_env_config_path(self, tmp_path, monkeypatch):
        custom = tmp_path / "custom.yaml"
        custom.write_text("publish:\n  packages: [only]\n")
        monkeypatch.setenv(ENV_CONFIG_PATH, str(custom))

        assert ConfigService(tmp_path).load_config().publish.packages == ["only"]

    def test_invalid_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
        (tmp_path / PROJECT_CONFIG_FILE).write_text("publish: [unclosed\n")

        with pytest.raises(ConfigError):
            ConfigService(tmp_path).load_config()

    def test_non_mapping_root(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
        (tmp_path / PROJECT_CONFIG_FILE).write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            ConfigService(tmp_path).load_config()

    def test_empty_suffix_rejected(self, tmp_path, monkeypatch):
        monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
        (tmp_path / PROJECT_CONFIG_FILE).write_text("publish:\n  name_suffix: ''\n")

        with pytest.raises(ConfigError):
            ConfigService(tmp_path).load_config()


class TestRunOptions:
    """Tests for environment switches."""

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
    def test_truthy_values(self, value):
        options = RunOptions.from_env({"DRY_RUN": value, "FORCE": value})
        assert options.dry_run and options.force

    @pytest.mark.parametrize("value", ["", "false", "0", "no"])
    def test_falsy_values(self, value):
        options = RunOptions.from_env({"DRY_RUN": value})
        assert not options.dry_run

    def test_unset(self):
        assert RunOptions.from_env({}) == RunOptions(dry_run=False, force=False)


def test_explicit_fork_marker_kept():
    settings = PublishSettings(fork_marker="-kali.")
    assert settings.fork_marker == "-kali."

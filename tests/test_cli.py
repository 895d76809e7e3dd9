"""Tests for the click commands."""

import logging

import click
import pytest
from click.testing import CliRunner

from fork_publish.cli.commands import check as check_command
from fork_publish.cli.commands import publish as publish_command
from fork_publish.cli import main as main_module
from fork_publish.cli.main import cli
from fork_publish.core import checks as checks_module


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def env(monorepo):
    return {
        "PROJECT_ROOT": str(monorepo),
        "DRY_RUN": "",
        "FORCE": "",
        "FORK_PUBLISH_CONFIG": "",
    }


@pytest.fixture
def use_registry(monkeypatch):
    """Route the commands to a given fake registry."""
    def install(registry):
        factory = lambda *args, **kwargs: registry
        monkeypatch.setattr(check_command, "NpmRegistry", factory)
        monkeypatch.setattr(publish_command, "NpmRegistry", factory)
        return registry
    return install


class TestCheckCommand:
    """Tests for 'fork-publish check'."""

    def test_all_checks_pass(self, runner, env, use_registry, fake_registry, monkeypatch):
        use_registry(fake_registry)
        monkeypatch.setattr(checks_module, "is_git_repository", lambda root: True)
        monkeypatch.setattr(checks_module, "get_changed_files", lambda root: [])

        result = runner.invoke(cli, ["check"], env=env)

        assert result.exit_code == 0, result.output
        assert "Passed: 9/9" in result.output
        assert "Next steps" in result.output

    def test_missing_license_exits_1(self, runner, env, use_registry, fake_registry,
                                     monorepo, monkeypatch):
        use_registry(fake_registry)
        monkeypatch.setattr(checks_module, "is_git_repository", lambda root: True)
        monkeypatch.setattr(checks_module, "get_changed_files", lambda root: [])
        (monorepo / "LICENSE").unlink()

        result = runner.invoke(cli, ["check"], env=env)

        assert result.exit_code == 1
        assert "Fix the failed checks" in result.output

    def test_invalid_config_exits_1(self, runner, env, use_registry, fake_registry, monorepo):
        use_registry(fake_registry)
        (monorepo / ".fork-publish.yaml").write_text("publish: [unclosed\n")

        result = runner.invoke(cli, ["check"], env=env)

        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestPublishCommand:
    """Tests for 'fork-publish publish'."""

    def test_dry_run_never_publishes(self, runner, env, use_registry, fake_registry,
                                     monorepo, manifest_bytes):
        use_registry(fake_registry)
        env["DRY_RUN"] = "true"

        result = runner.invoke(cli, ["publish"], env=env)

        assert result.exit_code == 0, result.output
        assert "publish" not in fake_registry.call_names()
        assert "Post-Publish Instructions" not in result.output
        for name, content in manifest_bytes.items():
            assert (monorepo / "packages" / name / "package.json").read_bytes() == content

    def test_forced_publish(self, runner, env, use_registry, fake_registry):
        use_registry(fake_registry)
        env["FORCE"] = "true"

        result = runner.invoke(cli, ["publish"], env=env)

        assert result.exit_code == 0, result.output
        assert [c[1] for c in fake_registry.calls if c[0] == "publish"] == ["playwright-core", "playwright"]
        assert "Post-Publish Instructions" in result.output

    def test_declining_top_level_confirmation_exits_0(self, runner, env, use_registry, fake_registry):
        use_registry(fake_registry)

        result = runner.invoke(cli, ["publish"], env=env, input="n\n")

        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert "view" not in fake_registry.call_names()

    def test_not_logged_in_aborts_before_mutation(self, runner, env, use_registry, make_registry,
                                                  monorepo, manifest_bytes):
        registry = use_registry(make_registry(user=None))
        env["FORCE"] = "true"

        result = runner.invoke(cli, ["publish"], env=env)

        assert result.exit_code == 1
        assert "view" not in registry.call_names()

    def test_failed_package_exits_1(self, runner, env, use_registry, make_registry):
        use_registry(make_registry(publish_failures={"playwright"}))
        env["FORCE"] = "true"

        result = runner.invoke(cli, ["publish"], env=env)

        assert result.exit_code == 1
        assert "Failed packages" in result.output


class TestQuietFlag:
    """Tests for the global logging switches."""

    def test_quiet_keeps_errors(self, runner, env, use_registry, fake_registry):
        use_registry(fake_registry)

        runner.invoke(cli, ["-q", "check"], env=env)

        logger = logging.getLogger("fork_publish.test")
        assert logger.isEnabledFor(logging.ERROR)
        assert not logger.isEnabledFor(logging.WARNING)


class TestEntryPoints:
    """Tests for the process entry points and their exit statuses."""

    @pytest.fixture(autouse=True)
    def process_env(self, env, monkeypatch):
        for name, value in env.items():
            monkeypatch.setenv(name, value)

    @pytest.fixture
    def clean_git(self, monkeypatch):
        monkeypatch.setattr(checks_module, "is_git_repository", lambda root: True)
        monkeypatch.setattr(checks_module, "get_changed_files", lambda root: [])

    @pytest.fixture
    def failing_checklist(self, monkeypatch):
        def install(error):
            def build(*args, **kwargs):
                raise error
            monkeypatch.setattr(check_command, "build_checklist", build)
        return install

    def test_interrupt_exits_130(self, failing_checklist):
        failing_checklist(KeyboardInterrupt())

        with pytest.raises(SystemExit) as excinfo:
            main_module._run(["check"])

        assert excinfo.value.code == 130

    def test_abort_exits_130(self, failing_checklist):
        failing_checklist(click.exceptions.Abort())

        with pytest.raises(SystemExit) as excinfo:
            main_module._run(["check"])

        assert excinfo.value.code == 130

    def test_unexpected_error_exits_1(self, failing_checklist, capsys):
        failing_checklist(RuntimeError("boom"))

        with pytest.raises(SystemExit) as excinfo:
            main_module._run(["check"])

        assert excinfo.value.code == 1
        assert "boom" in capsys.readouterr().out

    def test_usage_error_exits_2(self):
        with pytest.raises(SystemExit) as excinfo:
            main_module._run(["no-such-command"])

        assert excinfo.value.code == 2

    def test_check_main_passes_status_through(self, monkeypatch, use_registry, fake_registry,
                                              clean_git):
        use_registry(fake_registry)
        monkeypatch.setattr("sys.argv", ["fork-publish-check"])

        with pytest.raises(SystemExit) as excinfo:
            main_module.check_main()

        assert excinfo.value.code == 0

    def test_check_main_interrupted(self, monkeypatch, failing_checklist):
        failing_checklist(KeyboardInterrupt())
        monkeypatch.setattr("sys.argv", ["fork-publish-check"])

        with pytest.raises(SystemExit) as excinfo:
            main_module.check_main()

        assert excinfo.value.code == 130

    def test_publish_main_passes_failure_through(self, monkeypatch, use_registry, make_registry):
        use_registry(make_registry(user=None))
        monkeypatch.setattr("sys.argv", ["fork-publish-npm"])

        with pytest.raises(SystemExit) as excinfo:
            main_module.publish_main()

        assert excinfo.value.code == 1

    def test_publish_main_interrupted(self, monkeypatch, use_registry, make_registry):
        registry = use_registry(make_registry())

        def interrupted():
            raise KeyboardInterrupt()

        monkeypatch.setattr(registry, "is_installed", interrupted)
        monkeypatch.setattr("sys.argv", ["fork-publish-npm"])

        with pytest.raises(SystemExit) as excinfo:
            main_module.publish_main()

        assert excinfo.value.code == 130

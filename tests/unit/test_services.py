"""Unit tests for the external tool clients."""

import pytest

from deployer.core.exceptions import ExternalCommandFailure
from deployer.services import GitClient, HerokuClient, LocaleappClient, SecurityScanner


class TestGitClient:
    """Tests for GitClient."""

    @pytest.fixture
    def git(self, runner) -> GitClient:
        return GitClient(runner)

    def test_remotes(self, git: GitClient):
        """Test remote names are parsed one per line."""
        assert git.remotes() == ["origin", "prod", "staging"]

    def test_has_remote_is_exact(self, git: GitClient):
        """Test a prefix of a remote name is not a match."""
        assert git.has_remote("prod") is True
        assert git.has_remote("pro") is False
        assert git.has_remote("staging2") is False

    def test_log_range_parses_commits(self, git: GitClient, runner, log_line):
        """Test log output becomes Commit models, keeping git's order."""
        runner.respond(
            ["git", "log"],
            stdout="\n".join(
                [
                    log_line("aaa1111", "3 days ago", "Add invoices | billing", "Ola"),
                    log_line("bbb2222", "5 minutes ago", "Fix (typo)", "Kari"),
                ]
            ),
        )

        commits = git.log_range("prod/master..master")

        assert [c.short_hash for c in commits] == ["aaa1111", "bbb2222"]
        assert commits[0].subject == "Add invoices | billing"
        assert commits[1].author == "Kari"
        assert runner.calls[-1][1:3] == ["log", "--reverse"]
        assert runner.calls[-1][-1] == "prod/master..master"

    def test_log_range_empty(self, git: GitClient):
        """Test no output means no commits."""
        assert git.log_range("prod/master..master") == []

    def test_pull_reports_failure(self, git: GitClient, runner):
        """Test a failed pull returns False instead of raising."""
        runner.respond(["git", "pull"], returncode=1)

        assert git.pull("origin", "master") is False
        assert runner.calls[-1] == ["git", "pull", "origin", "master"]

    def test_push(self, git: GitClient, runner):
        """Test normal and forced pushes."""
        git.push("prod", "master:master")
        git.push("staging", "master:master", force=True)

        assert runner.calls[-2] == ["git", "push", "prod", "master:master"]
        assert runner.calls[-1] == ["git", "push", "-f", "staging", "master:master"]

    def test_push_failure_propagates(self, git: GitClient, runner):
        """Test a rejected push raises with git's status."""
        runner.respond(["git", "push"], returncode=128)

        with pytest.raises(ExternalCommandFailure) as exc_info:
            git.push("prod", "master:master")

        assert exc_info.value.exit_code == 128

    def test_diff(self, git: GitClient, runner):
        """Test a single path is diffed against a ref."""
        runner.respond(["git", "diff"], stdout="+  hello: Hei\n")

        assert git.diff("prod/master", "config/locales/nb.yml") == "+  hello: Hei\n"
        assert runner.calls[-1] == ["git", "diff", "prod/master", "--", "config/locales/nb.yml"]

    def test_dirty_paths(self, git: GitClient, runner):
        """Test porcelain status lines become paths."""
        runner.respond(["git", "status"], stdout=" M app/models/user.rb\n?? notes.txt\n")

        assert git.dirty_paths() == ["app/models/user.rb", "notes.txt"]


class TestHerokuClient:
    """Tests for HerokuClient."""

    @pytest.fixture
    def heroku(self, runner) -> HerokuClient:
        return HerokuClient(runner)

    def test_commands_target_remote(self, heroku: HerokuClient, runner):
        """Test every platform command names the remote explicitly."""
        heroku.maintenance_on("prod")
        heroku.run_command("rake db:migrate", "prod")
        heroku.maintenance_off("prod")
        heroku.restart("prod")

        assert runner.calls == [
            ["heroku", "maintenance:on", "--remote", "prod"],
            ["heroku", "run", "--exit-code", "rake", "db:migrate", "--remote", "prod"],
            ["heroku", "maintenance:off", "--remote", "prod"],
            ["heroku", "restart", "--remote", "prod"],
        ]

    def test_custom_executable(self, runner):
        """Test the CLI name is configurable."""
        HerokuClient(runner, executable="/opt/heroku/bin/heroku").restart("staging")

        assert runner.calls[-1][0] == "/opt/heroku/bin/heroku"


class TestLocaleappClient:
    """Tests for LocaleappClient."""

    def test_push(self, runner):
        """Test a single file is pushed."""
        LocaleappClient(runner).push("config/locales/en.yml")

        assert runner.calls == [["localeapp", "push", "config/locales/en.yml"]]


class TestSecurityScanner:
    """Tests for SecurityScanner."""

    def test_not_installed(self, runner):
        """Test the scanner is unavailable when not on PATH."""
        assert SecurityScanner(runner).available() is False

    def test_scan_does_not_raise(self, runner):
        """Test findings (non-zero exit) are returned, not raised."""
        runner.installed.add("brakeman")
        runner.respond(["brakeman"], returncode=3)
        scanner = SecurityScanner(runner)

        assert scanner.available() is True
        result = scanner.scan()

        assert result.returncode == 3
        assert runner.calls == [["brakeman"]]

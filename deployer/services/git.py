"""Git client for the deploy pipeline."""

from deployer.core.runner import CommandRunner
from deployer.models.deployment import Commit

# Unit separator keeps subjects containing " | " or parentheses parseable
_FIELD_SEP = "\x1f"
LOG_FORMAT = _FIELD_SEP.join(["%h", "%cr", "%s", "%an"])


class GitClient:
    """Thin wrapper over the ``git`` executable."""

    def __init__(self, runner: CommandRunner, executable: str = "git"):
        self.runner = runner
        self.executable = executable

    def _git(self, *args: str) -> list[str]:
        return [self.executable, *args]

    def remotes(self) -> list[str]:
        """List configured remote names."""
        result = self.runner.run(self._git("remote"), capture=True)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def has_remote(self, name: str) -> bool:
        return name in self.remotes()

    def dirty_paths(self) -> list[str]:
        """Paths with uncommitted changes, as reported by ``status --porcelain``."""
        result = self.runner.run(self._git("status", "--porcelain"), capture=True)
        return [line[3:] for line in result.stdout.splitlines() if line.strip()]

    def pull(self, remote: str, branch: str) -> bool:
        """Merge ``remote/branch`` into the current branch.

        Returns False instead of raising; a failed pull means the operator
        has conflicts to resolve.
        """
        result = self.runner.run(self._git("pull", remote, branch), check=False)
        return result.ok

    def fetch(self, remote: str) -> None:
        self.runner.run(self._git("fetch", remote))

    def log_range(self, revision_range: str) -> list[Commit]:
        """Commits in ``revision_range``, oldest first."""
        result = self.runner.run(
            self._git("log", "--reverse", f"--pretty=format:{LOG_FORMAT}", revision_range),
            capture=True,
        )
        commits = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            short_hash, relative_time, subject, author = line.split(_FIELD_SEP, 3)
            commits.append(
                Commit(
                    short_hash=short_hash,
                    relative_time=relative_time,
                    subject=subject,
                    author=author,
                )
            )
        return commits

    def diff(self, ref: str, path: str) -> str:
        """Diff of a single path between the working tree and ``ref``."""
        result = self.runner.run(self._git("diff", ref, "--", path), capture=True)
        return result.stdout

    def push(self, remote: str, refspec: str, force: bool = False) -> None:
        args = ["push"]
        if force:
            args.append("-f")
        args.extend([remote, refspec])
        self.runner.run(self._git(*args))

"""Clone the upstream repository and resolve its commit."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..logging import get_logger


class SyncError(RuntimeError):
    """Raised when a git command against the upstream checkout fails."""


class RepositorySync:
    """Maintains a shallow single-branch checkout of the upstream repository."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("sync")

    def clone(self, url: str, branch: str, repo_path: Path) -> None:
        """Replace ``repo_path`` with a shallow clone of ``branch``."""
        if repo_path.exists():
            shutil.rmtree(repo_path)
        self.logger.info("Cloning %s (branch %s) into %s", url, branch, repo_path)
        self._run(
            ["git", "clone", "--depth=1", "-b", branch, url, str(repo_path)],
            cwd=repo_path.parent,
        )

    def commit_hash(self, repo_path: Path) -> str:
        if not repo_path.is_dir():
            raise FileNotFoundError(f"Upstream checkout not found: {repo_path}")
        output = self._run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=repo_path,
            capture_output=True,
        )
        commit = output.strip()
        if not commit:
            raise SyncError(f"git rev-parse returned no commit for {repo_path}")
        return commit

    # ------------------------------------------------------------------
    # Helpers

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        command = list(args)
        if not cwd.is_dir():
            raise SyncError(f"Working directory not found: {cwd}")
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                check=True,
                text=True,
                capture_output=capture_output,
            )
        except FileNotFoundError as exc:  # pragma: no cover - environment dependent
            raise SyncError("Unable to locate the git executable") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or str(exc.returncode)
            raise SyncError(f"{' '.join(command[:2])} failed: {detail}") from exc
        return completed.stdout if capture_output else ""


__all__ = ["RepositorySync", "SyncError"]

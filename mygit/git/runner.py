"""Git command runner with timeout handling."""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

# Parsers match git's untranslated messages
GIT_ENV_OVERRIDES = {"LC_ALL": "C"}


@dataclass
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def message(self) -> str:
        """First non-blank line of git's diagnostics (stderr, else stdout)."""
        lines = self._diagnostic_lines()
        return lines[0] if lines else f"git exited with code {self.returncode}"

    @property
    def detail(self) -> str:
        """Diagnostic text following the first line, if any."""
        return "\n".join(self._diagnostic_lines()[1:])

    def _diagnostic_lines(self) -> list[str]:
        text = self.stderr if self.stderr.strip() else self.stdout
        return [line.rstrip() for line in text.splitlines() if line.strip()]


def run_git(
    args: list[str],
    cwd: Path,
    timeout: int | None = DEFAULT_TIMEOUT,
) -> GitResult:
    """
    Run a git command with timeout handling.

    Args:
        args: Git command arguments (e.g., ["status", "--porcelain"])
        cwd: Working directory for the command
        timeout: Timeout in seconds, or None to wait for completion

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag
    """
    cmd = ["git", "-C", str(cwd)] + args
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env={**os.environ, **GIT_ENV_OVERRIDES},
        )
    except subprocess.TimeoutExpired:
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except FileNotFoundError:
        return GitResult(
            returncode=127,
            stdout="",
            stderr="git executable not found on PATH",
        )

    if result.returncode != 0:
        logger.debug("git %s exited with %d", args[0] if args else "", result.returncode)
    return GitResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )

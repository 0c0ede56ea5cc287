"""Running git commands.

query_git runs git and hands back the completed process whatever its exit code,
for queries whose exit code carries the answer. run_git is for commands that
must succeed: a non-zero exit becomes a GitCommandError naming the operation,
the command line and git's own output.
"""

import shlex
import subprocess
from pathlib import Path

from revsubmit.core.errors import GitCommandError


def query_git(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run git in cwd without checking the exit code.

    Raises:
        GitCommandError: If the git executable cannot be found
    """
    cmd = ["git", *args]
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as e:
        raise GitCommandError(
            f"git is not installed or not on PATH\nCommand: {shlex.join(cmd)}",
            command=cmd,
        ) from e


def check_git(
    result: subprocess.CompletedProcess[str],
    operation_context: str,
) -> subprocess.CompletedProcess[str]:
    """Return result unchanged if git exited 0, otherwise raise GitCommandError."""
    if result.returncode == 0:
        return result

    cmd = [str(arg) for arg in result.args]
    lines = [
        f"Failed to {operation_context}",
        f"Command: {shlex.join(cmd)}",
        f"Exit code: {result.returncode}",
    ]
    for label, output in (("stdout", result.stdout), ("stderr", result.stderr)):
        if output and output.strip():
            lines.append(f"{label}: {output.strip()}")
    raise GitCommandError("\n".join(lines), command=cmd, exit_code=result.returncode)


def run_git(cwd: Path, *args: str, operation_context: str) -> str:
    """Run a git command that must succeed and return its stdout.

    Args:
        cwd: Repository directory
        *args: Arguments after `git`
        operation_context: What the command does, phrased to follow "Failed to"

    Raises:
        GitCommandError: If git exits non-zero or cannot be run
    """
    return check_git(query_git(cwd, *args), operation_context).stdout

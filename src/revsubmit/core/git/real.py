"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import os
from pathlib import Path

from revsubmit.core.git.abc import Git
from revsubmit.core.git.command import check_git, query_git, run_git

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_config(self, cwd: Path, key: str) -> str | None:
        """Read a git config value."""
        result = query_git(cwd, "config", "--get", key)
        # Exit code 1 means the key is unset
        if result.returncode == 1:
            return None
        check_git(result, f"read git config '{key}'")

        value = result.stdout.strip()
        if not value:
            return None
        return value

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = query_git(cwd, "symbolic-ref", "--quiet", "--short", "HEAD")
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if not branch:
            return None
        return branch

    def get_hook_path(self, cwd: Path, hook_name: str) -> Path:
        """Get the path git would execute for the named hook."""
        stdout = run_git(
            cwd,
            "rev-parse",
            "--git-path",
            f"hooks/{hook_name}",
            operation_context=f"locate {hook_name} hook",
        )
        hook_path = Path(stdout.strip())
        if not hook_path.is_absolute():
            hook_path = cwd / hook_path
        return hook_path

    def is_executable(self, path: Path) -> bool:
        """Check if a path exists and is executable."""
        return path.is_file() and os.access(path, os.X_OK)

    def list_remotes(self, cwd: Path) -> list[str]:
        """List configured remote names."""
        stdout = run_git(cwd, "remote", operation_context="list remotes")
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def get_remote_branch_head(self, cwd: Path, remote: str, branch: str) -> str | None:
        """Ask the remote for the commit SHA of one of its branches."""
        stdout = run_git(
            cwd,
            "ls-remote",
            "--heads",
            remote,
            f"refs/heads/{branch}",
            operation_context=f"query branch '{branch}' on remote '{remote}'",
        )
        for line in stdout.splitlines():
            parts = line.split()
            if len(parts) == 2 and parts[1] == f"refs/heads/{branch}":
                return parts[0]
        return None

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check for staged, modified, or untracked files."""
        stdout = run_git(
            cwd, "status", "--porcelain", operation_context="check working tree status"
        )
        return bool(stdout.strip())

    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        """Check whether ancestor is reachable from descendant."""
        result = query_git(cwd, "merge-base", "--is-ancestor", ancestor, descendant)
        # Exit code 1 means not an ancestor; anything other than 0 is an error
        if result.returncode == 1:
            return False
        check_git(result, f"check whether '{ancestor}' is an ancestor of '{descendant}'")
        return True

    def get_branch_head(self, cwd: Path, ref: str) -> str | None:
        """Get the commit SHA a ref points to."""
        result = query_git(cwd, "rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}")
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches."""
        stdout = run_git(
            cwd,
            "branch",
            "-r",
            "--format=%(refname:short)",
            operation_context="list remote branches",
        )
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def diff_stat(self, cwd: Path, base: str, head: str) -> str:
        """Summarize what head changes relative to its merge base with base."""
        stdout = run_git(
            cwd,
            "diff",
            "--stat",
            f"{base}...{head}",
            operation_context=f"compare '{base}' with '{head}'",
        )
        return stdout.rstrip()

    def get_commit_message(self, cwd: Path, ref: str) -> str:
        """Get the full commit message of the commit at ref."""
        stdout = run_git(
            cwd,
            "log",
            "-1",
            "--format=%B",
            ref,
            operation_context=f"read commit message of '{ref}'",
        )
        return stdout.strip()

    def fetch_prune(self, cwd: Path, remote: str) -> None:
        """Fetch from remote and prune deleted remote-tracking branches."""
        run_git(cwd, "fetch", "--prune", remote, operation_context=f"fetch from remote '{remote}'")

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        run_git(cwd, "checkout", branch, operation_context=f"checkout branch '{branch}'")

    def create_branch(self, cwd: Path, branch_name: str) -> None:
        """Create a new branch at HEAD without checking it out."""
        run_git(cwd, "branch", branch_name, operation_context=f"create branch '{branch_name}'")

    def squash_merge(self, cwd: Path, branch: str) -> None:
        """Squash-merge branch into the working tree without committing."""
        run_git(
            cwd, "merge", "--squash", branch, operation_context=f"squash-merge branch '{branch}'"
        )

    def add_all(self, cwd: Path) -> None:
        """Stage all changes."""
        run_git(cwd, "add", "--all", operation_context="stage all changes")

    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit with the given message, running commit hooks."""
        run_git(cwd, "commit", "-m", message, operation_context="commit squashed changes")

    def push_to_ref(self, cwd: Path, remote: str, refspec: str) -> None:
        """Push an explicit refspec."""
        run_git(
            cwd,
            "push",
            remote,
            refspec,
            operation_context=f"push '{refspec}' to remote '{remote}'",
        )

    def push_branch_tracking(self, cwd: Path, remote: str, branch: str) -> None:
        """Push a branch and set it to track the remote branch."""
        run_git(
            cwd,
            "push",
            "--set-upstream",
            remote,
            branch,
            operation_context=f"push branch '{branch}' to remote '{remote}'",
        )

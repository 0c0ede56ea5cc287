"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
submission workflow testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # Read-only queries

    @abstractmethod
    def get_config(self, cwd: Path, key: str) -> str | None:
        """Read a git config value.

        Args:
            cwd: Working directory inside the repository
            key: Fully qualified key (e.g., "review.remote")

        Returns:
            The configured value, or None if the key is not set
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch (None on detached HEAD)."""
        ...

    @abstractmethod
    def get_hook_path(self, cwd: Path, hook_name: str) -> Path:
        """Get the path git would execute for the named hook.

        Honors core.hooksPath and linked worktrees.
        """
        ...

    @abstractmethod
    def is_executable(self, path: Path) -> bool:
        """Check if a path exists and is executable."""
        ...

    @abstractmethod
    def list_remotes(self, cwd: Path) -> list[str]:
        """List configured remote names."""
        ...

    @abstractmethod
    def get_remote_branch_head(self, cwd: Path, remote: str, branch: str) -> str | None:
        """Ask the remote for the commit SHA of one of its branches.

        Contacts the remote, so this also proves it is reachable.

        Args:
            cwd: Working directory inside the repository
            remote: Remote name
            branch: Branch name on the remote (without refs/heads/)

        Returns:
            Commit SHA, or None if the remote has no such branch

        Raises:
            GitCommandError: If the remote cannot be contacted
        """
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check for staged, modified, or untracked files."""
        ...

    @abstractmethod
    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        """Check whether ancestor is reachable from descendant."""
        ...

    @abstractmethod
    def get_branch_head(self, cwd: Path, ref: str) -> str | None:
        """Get the commit SHA a ref points to, or None if it doesn't exist."""
        ...

    @abstractmethod
    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches.

        Returns:
            Names with remote prefix (e.g., 'gerrit/login-fix_rev_1')
        """
        ...

    @abstractmethod
    def diff_stat(self, cwd: Path, base: str, head: str) -> str:
        """Summarize what head changes relative to its merge base with base."""
        ...

    @abstractmethod
    def get_commit_message(self, cwd: Path, ref: str) -> str:
        """Get the full commit message (subject and body) of the commit at ref.

        Raises:
            GitCommandError: If ref does not resolve to a commit
        """
        ...

    # Mutating operations

    @abstractmethod
    def fetch_prune(self, cwd: Path, remote: str) -> None:
        """Fetch from remote and prune deleted remote-tracking branches."""
        ...

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        ...

    @abstractmethod
    def create_branch(self, cwd: Path, branch_name: str) -> None:
        """Create a new branch at HEAD without checking it out."""
        ...

    @abstractmethod
    def squash_merge(self, cwd: Path, branch: str) -> None:
        """Squash-merge branch into the working tree without committing."""
        ...

    @abstractmethod
    def add_all(self, cwd: Path) -> None:
        """Stage all changes, including deletions and untracked files."""
        ...

    @abstractmethod
    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit with the given message, running commit hooks."""
        ...

    @abstractmethod
    def push_to_ref(self, cwd: Path, remote: str, refspec: str) -> None:
        """Push an explicit refspec (e.g., 'HEAD:refs/for/master')."""
        ...

    @abstractmethod
    def push_branch_tracking(self, cwd: Path, remote: str, branch: str) -> None:
        """Push a branch and set it to track the remote branch."""
        ...

"""In-memory fake Git implementation for testing.

FakeGit answers queries from constructor-provided state and records every
mutating call so tests can assert on what would have been run, without
subprocess mocking.
"""

from collections.abc import Callable
from pathlib import Path

from revsubmit.core.change_id import CHANGE_ID_TRAILER, extract_change_id
from revsubmit.core.errors import GitCommandError
from revsubmit.core.git.abc import Git

CommitHook = Callable[[str], str]


def gerrit_commit_hook(change_id: str) -> CommitHook:
    """Build a hook that behaves like Gerrit's commit-msg hook.

    Appends a Change-Id trailer unless the message already carries one.
    """

    def hook(message: str) -> str:
        if extract_change_id(message) is not None:
            return message
        return f"{message.rstrip()}\n\n{CHANGE_ID_TRAILER}: {change_id}"

    return hook


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    State Management:
    -----------------
    This fake maintains mutable state to simulate git's stateful behavior.
    Operations like checkout_branch and commit modify internal state.
    State changes are visible to subsequent method calls within the same test.

    Mutation Tracking:
    -----------------
    Mutating operations are appended to read-only list properties
    (fetched_remotes, created_branches, commits, pushed_refs, ...).
    diff_stat calls are recorded in comparisons.
    """

    def __init__(
        self,
        *,
        config: dict[str, str] | None = None,
        current_branch: str | None = "main",
        hooks_dir: Path = Path("/fake/repo/.git/hooks"),
        installed_hooks: set[str] | None = None,
        remotes: list[str] | None = None,
        remote_heads: dict[tuple[str, str], str] | None = None,
        branch_heads: dict[str, str] | None = None,
        uncommitted_changes: bool = False,
        merged: set[tuple[str, str]] | None = None,
        remote_branches: list[str] | None = None,
        commit_messages: dict[str, str] | None = None,
        diff_stats: dict[tuple[str, str], str] | None = None,
        commit_hook: CommitHook | None = None,
        failing_operations: set[str] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            config: git config key -> value
            current_branch: Checked-out branch (None simulates detached HEAD)
            hooks_dir: Directory hooks resolve to
            installed_hooks: Names of executable hooks (default: {"commit-msg"})
            remotes: Configured remote names
            remote_heads: (remote, branch) -> SHA as reported by ls-remote
            branch_heads: ref -> SHA for local and remote-tracking refs
            uncommitted_changes: Whether the working tree is dirty
            merged: (ancestor, descendant) pairs considered merged
            remote_branches: Remote-tracking branch names ('remote/branch')
            commit_messages: ref -> full commit message
            diff_stats: (base, head) -> diff --stat output
            commit_hook: Transforms the message at commit time
            failing_operations: Method names that raise GitCommandError when called
        """
        self._config = config or {}
        self._current_branch = current_branch
        self._hooks_dir = hooks_dir
        self._installed_hooks = installed_hooks if installed_hooks is not None else {"commit-msg"}
        self._remotes = remotes or []
        self._remote_heads = remote_heads or {}
        self._branch_heads = branch_heads or {}
        self._uncommitted_changes = uncommitted_changes
        self._merged = merged or set()
        self._remote_branches = remote_branches or []
        self._commit_messages = commit_messages or {}
        self._diff_stats = diff_stats or {}
        self._commit_hook = commit_hook
        self._failing_operations = failing_operations or set()

        self._fetched_remotes: list[str] = []
        self._checked_out_branches: list[str] = []
        self._created_branches: list[str] = []
        self._squash_merged: list[str] = []
        self._add_all_count = 0
        self._commits: list[str] = []
        self._pushed_refs: list[tuple[str, str]] = []
        self._pushed_branches: list[tuple[str, str]] = []
        self._comparisons: list[tuple[str, str]] = []

    def _maybe_fail(self, operation: str) -> None:
        if operation in self._failing_operations:
            raise GitCommandError(f"Failed to {operation} (simulated)")

    # Read-only queries

    def get_config(self, cwd: Path, key: str) -> str | None:
        return self._config.get(key)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branch

    def get_hook_path(self, cwd: Path, hook_name: str) -> Path:
        return self._hooks_dir / hook_name

    def is_executable(self, path: Path) -> bool:
        return path.parent == self._hooks_dir and path.name in self._installed_hooks

    def list_remotes(self, cwd: Path) -> list[str]:
        return list(self._remotes)

    def get_remote_branch_head(self, cwd: Path, remote: str, branch: str) -> str | None:
        self._maybe_fail("get_remote_branch_head")
        if remote not in self._remotes:
            raise GitCommandError(f"Failed to query branch '{branch}' on remote '{remote}'")
        return self._remote_heads.get((remote, branch))

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return self._uncommitted_changes

    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        return (ancestor, descendant) in self._merged

    def get_branch_head(self, cwd: Path, ref: str) -> str | None:
        return self._branch_heads.get(ref)

    def list_remote_branches(self, cwd: Path) -> list[str]:
        return list(self._remote_branches)

    def diff_stat(self, cwd: Path, base: str, head: str) -> str:
        self._comparisons.append((base, head))
        return self._diff_stats.get((base, head), "")

    def get_commit_message(self, cwd: Path, ref: str) -> str:
        if ref not in self._commit_messages:
            raise GitCommandError(f"Failed to read commit message of '{ref}'")
        return self._commit_messages[ref]

    # Mutating operations

    def fetch_prune(self, cwd: Path, remote: str) -> None:
        self._maybe_fail("fetch_prune")
        self._fetched_remotes.append(remote)

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        self._maybe_fail("checkout_branch")
        self._checked_out_branches.append(branch)
        self._current_branch = branch

    def create_branch(self, cwd: Path, branch_name: str) -> None:
        self._maybe_fail("create_branch")
        if branch_name in self._branch_heads:
            raise GitCommandError(f"Failed to create branch '{branch_name}': already exists")
        self._created_branches.append(branch_name)
        if self._current_branch is not None and self._current_branch in self._branch_heads:
            self._branch_heads[branch_name] = self._branch_heads[self._current_branch]

    def squash_merge(self, cwd: Path, branch: str) -> None:
        self._maybe_fail("squash_merge")
        self._squash_merged.append(branch)

    def add_all(self, cwd: Path) -> None:
        self._maybe_fail("add_all")
        self._add_all_count += 1

    def commit(self, cwd: Path, message: str) -> None:
        self._maybe_fail("commit")
        if self._commit_hook is not None:
            message = self._commit_hook(message)
        self._commits.append(message)
        self._commit_messages["HEAD"] = message
        if self._current_branch is not None:
            self._commit_messages[self._current_branch] = message

    def push_to_ref(self, cwd: Path, remote: str, refspec: str) -> None:
        self._maybe_fail("push_to_ref")
        self._pushed_refs.append((remote, refspec))

    def push_branch_tracking(self, cwd: Path, remote: str, branch: str) -> None:
        self._maybe_fail("push_branch_tracking")
        self._pushed_branches.append((remote, branch))

    # Read-only mutation tracking for test assertions

    @property
    def current_branch(self) -> str | None:
        return self._current_branch

    @property
    def fetched_remotes(self) -> list[str]:
        return list(self._fetched_remotes)

    @property
    def checked_out_branches(self) -> list[str]:
        return list(self._checked_out_branches)

    @property
    def created_branches(self) -> list[str]:
        return list(self._created_branches)

    @property
    def squash_merged(self) -> list[str]:
        return list(self._squash_merged)

    @property
    def add_all_count(self) -> int:
        return self._add_all_count

    @property
    def commits(self) -> list[str]:
        return list(self._commits)

    @property
    def pushed_refs(self) -> list[tuple[str, str]]:
        return list(self._pushed_refs)

    @property
    def pushed_branches(self) -> list[tuple[str, str]]:
        return list(self._pushed_branches)

    @property
    def comparisons(self) -> list[tuple[str, str]]:
        """(base, head) pairs passed to diff_stat, in call order."""
        return list(self._comparisons)

    @property
    def has_mutated_repository(self) -> bool:
        """True once anything beyond fetch has touched branches, index, or remote."""
        return bool(
            self._checked_out_branches
            or self._created_branches
            or self._squash_merged
            or self._add_all_count
            or self._commits
            or self._pushed_refs
            or self._pushed_branches
        )

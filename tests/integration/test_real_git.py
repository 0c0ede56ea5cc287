"""Integration tests running RealGit against temporary repositories.

Each test builds a bare repository standing in for the review server and a
working clone with a commit-msg hook that stamps a fixed Change-Id.
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest
from click.testing import CliRunner

from revsubmit.cli.cli import cli
from revsubmit.core.context import RevSubmitContext
from revsubmit.core.errors import GitCommandError
from revsubmit.core.git.real import RealGit

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed"),
]

CHANGE_ID = "I0123456789abcdef0123456789abcdef01234567"

COMMIT_MSG_HOOK = f"""#!/bin/sh
grep -q '^Change-Id:' "$1" || printf '\\nChange-Id: {CHANGE_ID}\\n' >> "$1"
"""


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout.strip()


@dataclass(frozen=True)
class ReviewRepo:
    work: Path
    server: Path


@pytest.fixture
def review_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ReviewRepo:
    """Working clone on branch login-fix, one commit ahead of master."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    server = tmp_path / "server.git"
    subprocess.run(["git", "init", "--bare", "-b", "master", str(server)], check=True)

    work = tmp_path / "work"
    work.mkdir()
    _git(work, "init", "-b", "master")
    _git(work, "config", "user.email", "test@example.com")
    _git(work, "config", "user.name", "Test User")
    _git(work, "config", "review.remote", "gerrit")
    _git(work, "config", "review.branch", "master")
    _git(work, "config", "review.url", "https://review.example.com")
    _git(work, "remote", "add", "gerrit", str(server))

    (work / "README.md").write_text("hello\n", encoding="utf-8")
    _git(work, "add", ".")
    _git(work, "commit", "-m", "Initial commit")
    _git(work, "push", "gerrit", "master")

    _git(work, "checkout", "-b", "login-fix")
    (work / "login.py").write_text("def login():\n    return True\n", encoding="utf-8")
    _git(work, "add", ".")
    _git(work, "commit", "-m", "WIP login")

    hook = work / ".git" / "hooks" / "commit-msg"
    hook.parent.mkdir(parents=True, exist_ok=True)
    hook.write_text(COMMIT_MSG_HOOK, encoding="utf-8")
    hook.chmod(0o755)

    return ReviewRepo(work=work, server=server)


def _submit(repo: ReviewRepo, *args: str):
    runner = CliRunner()
    ctx = RevSubmitContext(git=RealGit(), cwd=repo.work)
    return runner.invoke(cli, ["submit", *args], obj=ctx)


def test_first_and_second_revision(review_repo: ReviewRepo) -> None:
    result = _submit(review_repo, "Fix", "login")

    assert result.exit_code == 0, result.output
    assert f"View review: https://review.example.com/#/q/{CHANGE_ID}" in result.output
    server_refs = _git(review_repo.server, "for-each-ref", "--format=%(refname)")
    assert "refs/heads/login-fix_rev_1" in server_refs
    assert "refs/for/master" in server_refs
    assert _git(review_repo.work, "symbolic-ref", "--short", "HEAD") == "login-fix"
    assert _git(review_repo.work, "log", "-1", "--format=%B", "login-fix_rev_1") == (
        f"Fix login\n\nChange-Id: {CHANGE_ID}"
    )

    login_py = review_repo.work / "login.py"
    login_py.write_text("def login():\n    return False\n", encoding="utf-8")
    _git(review_repo.work, "commit", "-am", "Address review")
    # A real review server does not keep refs/for/* around
    _git(review_repo.server, "update-ref", "-d", "refs/for/master")

    result = _submit(review_repo)

    assert result.exit_code == 0, result.output
    assert _git(review_repo.work, "log", "-1", "--format=%B", "login-fix_rev_2") == (
        f"Fix login\n\nChange-Id: {CHANGE_ID}"
    )
    assert _git(review_repo.work, "show", "login-fix_rev_2:login.py") == (
        "def login():\n    return False"
    )


def test_missing_hook_is_reported(review_repo: ReviewRepo) -> None:
    (review_repo.work / ".git" / "hooks" / "commit-msg").unlink()

    result = _submit(review_repo, "Fix login")

    assert result.exit_code == 1
    assert "commit-msg hook is not installed" in result.output
    assert "https://review.example.com/tools/hooks/commit-msg" in result.output


def test_dirty_worktree_is_reported(review_repo: ReviewRepo) -> None:
    (review_repo.work / "scratch.txt").write_text("notes\n", encoding="utf-8")

    result = _submit(review_repo, "Fix login")

    assert result.exit_code == 1
    assert "uncommitted changes" in result.output


class TestRealGitQueries:
    """Read-only RealGit operations against the fixture repository."""

    def test_get_config(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        assert git.get_config(review_repo.work, "review.remote") == "gerrit"
        assert git.get_config(review_repo.work, "review.suffix") is None

    def test_current_branch_and_detached_head(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        assert git.get_current_branch(review_repo.work) == "login-fix"

        _git(review_repo.work, "checkout", "--detach")
        assert git.get_current_branch(review_repo.work) is None

    def test_hook_path(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        hook_path = git.get_hook_path(review_repo.work, "commit-msg")

        expected = review_repo.work / ".git" / "hooks" / "commit-msg"
        assert hook_path.resolve() == expected.resolve()
        assert git.is_executable(hook_path)

    def test_remote_queries(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        work = review_repo.work

        assert git.list_remotes(work) == ["gerrit"]
        assert git.get_remote_branch_head(work, "gerrit", "master") == git.get_branch_head(
            work, "master"
        )
        assert git.get_remote_branch_head(work, "gerrit", "missing") is None

        git.fetch_prune(work, "gerrit")
        assert "gerrit/master" in git.list_remote_branches(work)

    def test_ancestry_and_diff(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        work = review_repo.work

        assert git.is_ancestor(work, "master", "login-fix") is True
        assert git.is_ancestor(work, "login-fix", "master") is False
        assert "login.py" in git.diff_stat(work, "master", "login-fix")
        assert git.diff_stat(work, "master", "master") == ""
        with pytest.raises(GitCommandError, match="is an ancestor of 'login-fix'"):
            git.is_ancestor(work, "no-such-branch", "login-fix")

    def test_missing_ref(self, review_repo: ReviewRepo) -> None:
        git = RealGit()
        assert git.get_branch_head(review_repo.work, "does-not-exist") is None
        with pytest.raises(GitCommandError, match="read commit message of 'does-not-exist'"):
            git.get_commit_message(review_repo.work, "does-not-exist")

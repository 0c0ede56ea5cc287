"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from revsubmit.cli.ensure import Ensure
from revsubmit.core.config import DEFAULT_CONFIG_SECTION, ReviewConfig, resolve_config
from revsubmit.core.errors import PreconditionError
from revsubmit.core.git.abc import Git
from revsubmit.core.git.real import RealGit


@dataclass(frozen=True)
class RevSubmitContext:
    """Immutable context holding all dependencies for revsubmit operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(git: Git | None = None, cwd: Path | None = None) -> "RevSubmitContext":
        """Create test context, defaulting to an empty FakeGit.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            cwd: Optional working directory. If None, uses Path("/fake/repo")
                 to prevent accidental use of the real Path.cwd() in tests.
        """
        from revsubmit.core.git.fake import FakeGit

        if git is None:
            git = FakeGit()
        if cwd is None:
            cwd = Path("/fake/repo")
        return RevSubmitContext(git=git, cwd=cwd)


@dataclass(frozen=True)
class ReviewSession:
    """Everything one submission needs, resolved once up front.

    Every precondition and submission step takes the session instead of
    re-reading repository state on its own.
    """

    ctx: RevSubmitContext
    config: ReviewConfig
    feature_branch: str

    @property
    def git(self) -> Git:
        return self.ctx.git

    @property
    def cwd(self) -> Path:
        return self.ctx.cwd


def create_context() -> RevSubmitContext:
    """Create production context with the real git implementation."""
    return RevSubmitContext(git=RealGit(), cwd=Path.cwd())


def create_session(
    ctx: RevSubmitContext,
    section: str = DEFAULT_CONFIG_SECTION,
) -> ReviewSession:
    """Resolve configuration and the feature branch for a submission.

    Raises:
        ConfigurationError: If a required setting is missing
        PreconditionError: If HEAD is detached or already on the base branch
    """
    config = resolve_config(ctx.git, ctx.cwd, section)

    feature_branch = Ensure.not_none(
        ctx.git.get_current_branch(ctx.cwd),
        "HEAD is detached (not on a branch)\n\n"
        "To fix:\n"
        "  git checkout <feature-branch>",
        PreconditionError,
    )
    Ensure.invariant(
        feature_branch != config.base_branch,
        f"Currently on base branch '{config.base_branch}'\n\n"
        "Submit from the feature branch that holds your changes.",
    )
    return ReviewSession(ctx=ctx, config=config, feature_branch=feature_branch)

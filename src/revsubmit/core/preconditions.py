"""Pre-flight validation for revision submission.

The checks run in a fixed order and the first failure stops the run, so a
missing remote is reported before anything that needs the remote.
"""

import logging

from revsubmit.cli.ensure import Ensure
from revsubmit.cli.output import success_mark, user_output
from revsubmit.core.context import ReviewSession

logger = logging.getLogger(__name__)

COMMIT_MSG_HOOK = "commit-msg"


def verify_preconditions(session: ReviewSession) -> None:
    """Validate all preconditions for submitting a revision.

    Raises:
        PreconditionError: If any precondition fails
    """
    logger.debug("Validation: Checking submission preconditions")
    _check_commit_msg_hook(session)
    _check_remote_exists(session)
    _check_base_on_remote(session)
    _check_clean_worktree(session)
    _check_base_merged(session)
    _check_base_up_to_date(session)
    user_output(success_mark() + " Repository is ready for submission")


def _check_commit_msg_hook(session: ReviewSession) -> None:
    hook_path = session.git.get_hook_path(session.cwd, COMMIT_MSG_HOOK)
    installed = session.git.is_executable(hook_path)
    logger.debug("  - %s hook at %s installed: %s", COMMIT_MSG_HOOK, hook_path, installed)
    hook_url = f"{session.config.server_url}/tools/hooks/{COMMIT_MSG_HOOK}"
    Ensure.invariant(
        installed,
        f"The {COMMIT_MSG_HOOK} hook is not installed at {hook_path}\n"
        "It stamps the Change-Id that ties revisions of one review together.\n\n"
        "To fix:\n"
        f"  curl -Lo {hook_path} {hook_url}\n"
        f"  chmod +x {hook_path}",
    )


def _check_remote_exists(session: ReviewSession) -> None:
    remote = session.config.remote
    remotes = session.git.list_remotes(session.cwd)
    logger.debug("  - Remotes: %s", remotes)
    Ensure.invariant(
        remote in remotes,
        f"Remote '{remote}' does not exist\n\n"
        "To fix:\n"
        f"  git remote add {remote} <review-server-git-url>",
    )


def _check_base_on_remote(session: ReviewSession) -> None:
    remote = session.config.remote
    base = session.config.base_branch
    remote_head = session.git.get_remote_branch_head(session.cwd, remote, base)
    logger.debug("  - %s/%s on remote: %s", remote, base, remote_head)
    Ensure.invariant(
        remote_head is not None,
        f"Base branch '{base}' does not exist on remote '{remote}'\n\n"
        "To fix:\n"
        f"  git config {session.config.section}.branch <branch-on-{remote}>",
    )


def _check_clean_worktree(session: ReviewSession) -> None:
    dirty = session.git.has_uncommitted_changes(session.cwd)
    logger.debug("  - Uncommitted changes: %s", dirty)
    Ensure.invariant(
        not dirty,
        f"Branch '{session.feature_branch}' has uncommitted changes\n\n"
        "Submission requires a clean working directory.\n\n"
        "To fix:\n"
        "  git add . && git commit -m 'message'\n"
        "  or: git stash",
    )


def _check_base_merged(session: ReviewSession) -> None:
    base = session.config.base_branch
    feature = session.feature_branch
    merged = session.git.is_ancestor(session.cwd, base, feature)
    logger.debug("  - %s merged into %s: %s", base, feature, merged)
    Ensure.invariant(
        merged,
        f"Base branch '{base}' is not merged into '{feature}'\n"
        "Squashing now would drop upstream history from the review.\n\n"
        "To fix:\n"
        f"  git merge {base}",
    )


def _check_base_up_to_date(session: ReviewSession) -> None:
    remote = session.config.remote
    base = session.config.base_branch
    local_head = session.git.get_branch_head(session.cwd, base)
    remote_head = session.git.get_remote_branch_head(session.cwd, remote, base)
    logger.debug("  - %s local=%s remote=%s", base, local_head, remote_head)
    Ensure.invariant(
        local_head is not None and local_head == remote_head,
        f"Local '{base}' is not the latest '{remote}/{base}'\n\n"
        "To fix:\n"
        f"  git checkout {base} && git pull {remote} {base}\n"
        f"  git checkout {session.feature_branch} && git merge {base}",
    )

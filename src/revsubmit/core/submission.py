"""Submit the current feature branch as the next numbered revision.

The steps run strictly in order and every git failure aborts the run. Nothing is
rolled back: branches created or pushed before a failure stay in place for the
operator to inspect, re-run, or delete.
"""

import logging
from dataclasses import dataclass

import click

from revsubmit.cli.ensure import Ensure
from revsubmit.cli.output import success_mark, user_output
from revsubmit.core.change_id import CHANGE_ID_TRAILER, extract_change_id, review_url
from revsubmit.core.context import ReviewSession
from revsubmit.core.errors import ConsistencyError, InputError
from revsubmit.core.revision import (
    find_last_revision_branch,
    next_revision_branch,
    revision_prefix,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """What was pushed, for the summary."""

    feature_branch: str
    remote: str
    review_ref: str
    revision_branch: str
    previous_revision_branch: str | None
    change_id: str
    review_url: str
    message_carried_forward: bool


def review_ref_for(base_branch: str) -> str:
    """Gerrit's magic ref that turns a push into a review on base_branch."""
    return f"refs/for/{base_branch}"


def submit_revision(session: ReviewSession, message: str | None) -> SubmissionResult:
    """Create, commit, and push the next revision branch of the feature.

    Args:
        session: Resolved configuration and feature branch
        message: Commit message for a first revision; ignored when a previous
            revision exists, whose message is reused to keep its Change-Id

    Raises:
        InputError: If this is the first revision and message is empty
        ConsistencyError: If the new commit has no Change-Id or a different one
        GitCommandError: If any git command fails
    """
    git = session.git
    cwd = session.cwd
    config = session.config
    feature = session.feature_branch
    prefix = revision_prefix(feature, config.suffix)

    logger.debug("Step 1: fetch --prune %s", config.remote)
    user_output(f"Fetching from {click.style(config.remote, fg='cyan')}...")
    git.fetch_prune(cwd, config.remote)

    logger.debug("Step 2: discover last revision of %s", prefix)
    last_revision = find_last_revision_branch(
        git.list_remote_branches(cwd), config.remote, feature, config.suffix
    )
    logger.debug("  - last revision: %s", last_revision)

    logger.debug("Step 3: require commit message for first revision")
    if last_revision is None:
        Ensure.truthy(
            message,
            f"No previous revision of '{feature}' exists on '{config.remote}', "
            "so a commit message is required\n\n"
            "Usage:\n"
            "  revsubmit submit <commit message>",
            InputError,
        )

    logger.debug("Step 4: compare %s with %s", config.base_branch, feature)
    _show_comparison(session, feature)

    logger.debug("Step 5: create revision branch from %s", config.base_branch)
    git.checkout_branch(cwd, config.base_branch)
    revision_branch = next_revision_branch(prefix, last_revision)
    user_output(f"Creating revision branch {click.style(revision_branch, fg='cyan')}...")
    git.create_branch(cwd, revision_branch)
    git.checkout_branch(cwd, revision_branch)

    logger.debug("Step 6: squash %s into %s", feature, revision_branch)
    git.squash_merge(cwd, feature)
    git.add_all(cwd)

    logger.debug("Step 7: choose commit message")
    previous_change_id: str | None = None
    if last_revision is not None:
        commit_message = git.get_commit_message(cwd, f"{config.remote}/{last_revision}")
        previous_change_id = extract_change_id(commit_message)
        if message:
            logger.debug("  - ignoring caller message, reusing message of %s", last_revision)
    else:
        commit_message = Ensure.not_none(message, "Commit message is required", InputError)

    logger.debug("Step 8: commit")
    git.commit(cwd, commit_message)

    logger.debug("Step 9: compare %s with %s", config.base_branch, revision_branch)
    _show_comparison(session, revision_branch)

    logger.debug("Step 10: extract %s", CHANGE_ID_TRAILER)
    change_id = extract_change_id(git.get_commit_message(cwd, "HEAD"))
    if change_id is None:
        raise ConsistencyError(
            f"The new commit on '{revision_branch}' has no {CHANGE_ID_TRAILER} trailer\n"
            "The commit-msg hook did not run. Nothing was pushed."
        )

    logger.debug("Step 11: compare %s with previous revision", CHANGE_ID_TRAILER)
    if previous_change_id is not None and previous_change_id != change_id:
        raise ConsistencyError(
            f"{CHANGE_ID_TRAILER} of '{revision_branch}' does not match '{last_revision}'\n"
            f"  expected: {previous_change_id}\n"
            f"  actual:   {change_id}\n"
            "The two revisions would not update the same review. Nothing was pushed.",
            expected=previous_change_id,
            actual=change_id,
        )

    review_ref = review_ref_for(config.base_branch)
    logger.debug("Step 12: push HEAD:%s", review_ref)
    user_output(f"Pushing to {click.style(f'{config.remote} {review_ref}', fg='cyan')}...")
    git.push_to_ref(cwd, config.remote, f"HEAD:{review_ref}")

    logger.debug("Step 13: push %s with upstream", revision_branch)
    git.push_branch_tracking(cwd, config.remote, revision_branch)
    user_output(success_mark() + f" Pushed {revision_branch}")

    logger.debug("Step 14: return to %s", feature)
    git.checkout_branch(cwd, feature)

    return SubmissionResult(
        feature_branch=feature,
        remote=config.remote,
        review_ref=review_ref,
        revision_branch=revision_branch,
        previous_revision_branch=last_revision,
        change_id=change_id,
        review_url=review_url(config.server_url, change_id),
        message_carried_forward=last_revision is not None,
    )


def _show_comparison(session: ReviewSession, head: str) -> None:
    base = session.config.base_branch
    stat = session.git.diff_stat(session.cwd, base, head)
    user_output(f"Changes in {click.style(head, fg='cyan')} relative to {base}:")
    if stat:
        user_output(stat)
    else:
        user_output("  (no changes)")

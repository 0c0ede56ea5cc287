"""Submit the current branch for review as the next revision branch."""

import click

from revsubmit.cli.error_boundary import cli_error_boundary
from revsubmit.cli.output import user_output
from revsubmit.cli.rendering import print_submission_summary
from revsubmit.core.config import DEFAULT_CONFIG_SECTION
from revsubmit.core.context import RevSubmitContext, create_session
from revsubmit.core.preconditions import verify_preconditions
from revsubmit.core.submission import submit_revision


def _run_submission(ctx: RevSubmitContext, section: str, message_words: tuple[str, ...]) -> None:
    message = " ".join(message_words).strip() or None

    session = create_session(ctx, section)
    user_output(
        f"Submitting {click.style(session.feature_branch, fg='cyan')} "
        f"for review on {click.style(session.config.base_branch, fg='yellow')}"
    )
    verify_preconditions(session)

    result = submit_revision(session, message)

    user_output("")
    print_submission_summary(result)
    user_output(f"View review: {result.review_url}")


@click.command("submit")
@click.argument("message", nargs=-1)
@click.pass_obj
@cli_error_boundary
def submit_cmd(ctx: RevSubmitContext, message: tuple[str, ...]) -> None:
    """Squash the current branch into a new revision branch and push it for review.

    MESSAGE is the commit message of the first revision. Later revisions reuse
    the previous revision's message so that its Change-Id stays the same.

    Requires:
        - review.remote, review.branch and review.url set in git config
        - the commit-msg hook installed
        - a clean working tree with the up-to-date base branch merged in
    """
    _run_submission(ctx, DEFAULT_CONFIG_SECTION, message)


@click.command("alias-submit")
@click.argument("alias")
@click.argument("message", nargs=-1)
@click.pass_obj
@cli_error_boundary
def alias_submit_cmd(ctx: RevSubmitContext, alias: str, message: tuple[str, ...]) -> None:
    """Submit using settings from the git config section named ALIAS.

    Entry point for git aliases, e.g.:

        git config alias.review '!revsubmit alias-submit review'

    makes `git review "Fix tests"` read review.remote, review.branch, review.url
    and review.suffix.
    """
    _run_submission(ctx, alias, message)

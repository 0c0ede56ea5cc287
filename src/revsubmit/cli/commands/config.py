"""Show the review settings a submission would use."""

import click

from revsubmit.cli.error_boundary import cli_error_boundary
from revsubmit.core.config import DEFAULT_CONFIG_SECTION, resolve_config
from revsubmit.core.context import RevSubmitContext
from revsubmit.core.revision import revision_prefix


@click.command("config")
@click.option(
    "--section",
    default=DEFAULT_CONFIG_SECTION,
    show_default=True,
    help="git config section to read settings from.",
)
@click.pass_obj
@cli_error_boundary
def config_cmd(ctx: RevSubmitContext, section: str) -> None:
    """Print the resolved review settings."""
    config = resolve_config(ctx.git, ctx.cwd, section)

    click.echo(f"{section}.remote={config.remote}")
    click.echo(f"{section}.branch={config.base_branch}")
    click.echo(f"{section}.url={config.server_url}")
    click.echo(f"{section}.suffix={config.suffix}")

    current_branch = ctx.git.get_current_branch(ctx.cwd)
    if current_branch is not None:
        click.echo(f"revision branches: {revision_prefix(current_branch, config.suffix)}_<N>")

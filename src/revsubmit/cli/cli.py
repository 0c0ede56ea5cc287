import logging
import os

import click

from revsubmit.cli.commands.config import config_cmd
from revsubmit.cli.commands.submit import alias_submit_cmd, submit_cmd
from revsubmit.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "REVSUBMIT_DEBUG"


def configure_logging(verbose: bool) -> None:
    """Enable debug logging for --verbose or when REVSUBMIT_DEBUG is set."""
    if verbose or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="revsubmit")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output for every step.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Submit numbered revision branches to a Gerrit-style review server."""
    configure_logging(verbose)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(submit_cmd)
cli.add_command(alias_submit_cmd)
cli.add_command(config_cmd)


def main() -> None:
    """CLI entry point used by the `revsubmit` console script."""
    cli()

"""Error boundary handling for CLI commands.

This module provides the decorator that catches well-known exceptions at CLI entry
points and displays clean error messages without stack traces. It is the only
place where a failure becomes an exit status.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from revsubmit.cli.output import user_output
from revsubmit.core.errors import RevSubmitError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - RevSubmitError: configuration, precondition, input and consistency errors,
          and failed git commands (GitCommandError, with command, exit code and output)

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RevSubmitError as e:
            logger.debug("Aborting on %s", type(e).__name__)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]

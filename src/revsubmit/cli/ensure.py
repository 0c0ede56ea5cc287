"""Invariant assertions with typed errors.

This module provides the Ensure class for asserting invariants with consistent,
user-facing error messages. Ensure never exits the process itself: it raises the
RevSubmitError subclass it is given, and the CLI error boundary prints the message
with a red "Error:" prefix and exits with status 1.
"""

from typing import TypeVar

from revsubmit.core.errors import PreconditionError, RevSubmitError

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(
        condition: bool,
        error_message: str,
        error_type: type[RevSubmitError] = PreconditionError,
    ) -> None:
        """Ensure condition is true, otherwise raise error_type.

        Args:
            condition: Boolean condition to check
            error_message: Message for the raised error
            error_type: RevSubmitError subclass to raise

        Raises:
            RevSubmitError: If condition is false
        """
        if not condition:
            raise error_type(error_message)

    @staticmethod
    def truthy(
        value: T,
        error_message: str,
        error_type: type[RevSubmitError] = PreconditionError,
    ) -> T:
        """Ensure value is truthy, otherwise raise error_type.

        Returns:
            The value unchanged if truthy
        """
        if not value:
            raise error_type(error_message)
        return value

    @staticmethod
    def not_none(
        value: T | None,
        error_message: str,
        error_type: type[RevSubmitError] = PreconditionError,
    ) -> T:
        """Ensure value is not None, otherwise raise error_type.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Example:
            >>> branch = Ensure.not_none(git.get_current_branch(cwd), "Detached HEAD")
        """
        if value is None:
            raise error_type(error_message)
        return value

"""Exception types raised by revsubmit operations.

Core code raises these instead of exiting; the CLI error boundary turns them into
an "Error:" line and exit status 1.
"""


class RevSubmitError(Exception):
    """Base class for every failure revsubmit reports to the user."""


class ConfigurationError(RevSubmitError):
    """A required git config setting is missing."""


class PreconditionError(RevSubmitError):
    """The repository is not in a state that can be submitted."""


class InputError(RevSubmitError):
    """The command-line input is insufficient for this submission."""


class GitCommandError(RevSubmitError):
    """A git command failed or git could not be run at all."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        exit_code: int | None = None,
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(message)


class RevisionSuffixError(RevSubmitError):
    """A revision branch name does not end in a numeric suffix."""

    def __init__(self, branch: str, prefix: str, remote: str | None = None) -> None:
        self.branch = branch
        self.prefix = prefix
        self.remote = remote
        name = f"{remote}/{branch}" if remote is not None else branch
        message = (
            f"Branch '{name}' looks like a revision branch of '{prefix}' "
            f"but does not end in '_<number>'"
        )
        if remote is not None:
            message += (
                "\n\nTo fix, either delete it from the remote:\n"
                f"  git push {remote} --delete {branch}\n"
                "or submit with a different revision suffix:\n"
                "  git config <section>.suffix <suffix>"
            )
        super().__init__(message)


class ConsistencyError(RevSubmitError):
    """The Change-Id of the new revision is missing or differs from the previous one."""

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)

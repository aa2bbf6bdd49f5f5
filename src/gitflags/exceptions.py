"""
Exception types raised while turning flags into git commands.

Everything except CommandFailedError is a parse-time failure: it is raised
before any git process has been started.
"""


class GitFlagsError(Exception):
    """Base exception for gitflags errors."""

    def __init__(self, message: str, usage: str | None = None):
        self.message = message
        self.usage = usage
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnrecognizedFlagError(GitFlagsError):
    """One or more flags are not in the flag table."""

    def __init__(self, flags: list[str]):
        self.flags = list(flags)
        message = ", ".join(f"{flag} is not recognised as internal command" for flag in self.flags)
        super().__init__(message)


class MissingArgumentError(GitFlagsError):
    """A flag that needs a value was given without one."""

    def __init__(self, usage: str):
        super().__init__(f"Argument is required: {usage}", usage)


class ArgumentCountError(GitFlagsError):
    """A flag value did not split into the expected number of arguments."""

    def __init__(self, usage: str):
        super().__init__(f"Invalid number of arguments: {usage}", usage)


class IncompletePairError(GitFlagsError):
    """Only one half of an optional argument pair was given."""

    def __init__(self, usage: str, missing: str):
        self.missing = missing
        super().__init__(f"{usage} : {missing} is missing", usage)


class EmptyCommandSetError(GitFlagsError):
    """No flag produced a command."""

    def __init__(self):
        super().__init__("No command to execute")


class CommandFailedError(GitFlagsError):
    """git returned a non-zero status for a command."""

    def __init__(self, command: str, returncode: int, details: str | None = None):
        self.command = command
        self.returncode = returncode
        self.details = details
        super().__init__(f"Failed to run '{command}' (exit status {returncode})")

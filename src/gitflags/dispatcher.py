""" Turn flag tokens into git commands and run them.

Everything is parsed and built before the first command runs, so a bad
token anywhere on the command line means nothing is executed.
"""

import subprocess

import pydantic
from pydantic import BaseModel

from .exceptions import (
    CommandFailedError,
    EmptyCommandSetError,
    GitFlagsError,
    MissingArgumentError,
    ArgumentCountError,
    UnrecognizedFlagError,
)
from .flags import FLAGS, FlagDefinition
from .utils.loggerutils import (debug, note, warn)
from .wrappers import GitWrapper

__all__ = (
    "CommandResult",
    "CommandTable",
    "execute",
    "parse_and_dispatch",
    "validate_flags",
)

CommandTable = dict[str, list[GitWrapper]]


class CommandResult(BaseModel, extra="forbid"):
    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""
    skipped: bool = False

    @property
    def failed(self) -> bool:
        return self.returncode != 0

    def check(self) -> "CommandResult":
        if self.failed:
            raise CommandFailedError(self.command, self.returncode, self.stderr or self.stdout)
        return self


def flag_name(key: str) -> str:
    return key.strip().lower()


def split_token(token: str) -> tuple[str, str | None]:
    """Split ``--flag=value`` on the first ``=``; the value is None without one."""
    key, sep, value = token.partition('=')
    return flag_name(key), value if sep else None


def validate_flags(tokens) -> list[tuple[str, bool]]:
    return [(flag, flag in FLAGS) for flag, _ in map(split_token, tokens)]


def check_flags(tokens) -> None:
    invalid = [flag for flag, valid in validate_flags(tokens) if not valid]
    if invalid:
        raise UnrecognizedFlagError(invalid)


def build_command(definition: FlagDefinition, value: str | None) -> GitWrapper:
    try:
        if definition.requires_argument:
            if not value or not value.strip():
                raise MissingArgumentError(definition.usage)
            if len(definition.arguments) > 1:
                values = value.split()
                if len(values) != len(definition.arguments):
                    raise ArgumentCountError(definition.usage)
                return definition.build(*values)
            return definition.build(value)
        return definition.build(*(value or '').split())
    except pydantic.ValidationError as err:
        raise GitFlagsError(f"Invalid argument for {definition.name}\n{err}", definition.usage) from err


def parse_and_dispatch(tokens) -> CommandTable:
    """Validate and build every token, grouping the commands by flag.

    Flags keep the order of their first occurrence; repeated flags add
    further commands to the same group.
    """
    check_flags(tokens)

    table: CommandTable = {}
    for token in tokens:
        key, value = split_token(token)
        definition = FLAGS.get(key)
        if definition is None:
            raise UnrecognizedFlagError([key])
        table.setdefault(key, []).append(build_command(definition, value))

    if not table:
        raise EmptyCommandSetError()

    for key, commands in table.items():
        for command in commands:
            debug(f"{key}: {command.cmdline()}")
    return table


def run_command(command: GitWrapper, cwd=None) -> CommandResult:
    cmdline = command.cmdline()
    try:
        proc = command.run_cmd(check=False, stdout=subprocess.PIPE, stderr=subprocess.PIPE, cwd=cwd)
    except OSError as err:
        return CommandResult(command=cmdline, returncode=127, stderr=str(err))
    return CommandResult(command=cmdline, returncode=proc.returncode, stdout=proc.stdout or "", stderr=proc.stderr or "")


def execute(table: CommandTable, cwd=None, dry_run=False) -> list[CommandResult]:
    """Run all commands in table order, one after the other.

    A failing command is reported and the remaining ones still run.
    """
    results = []
    for commands in table.values():
        for command in commands:
            cmdline = command.cmdline()
            note(f"\n{cmdline}")
            if dry_run:
                results.append(CommandResult(command=cmdline, returncode=0, skipped=True))
                continue
            result = run_command(command, cwd=cwd)
            if result.failed:
                warn(f"Failed to run {cmdline} (exit status {result.returncode})", details=result.stderr or result.stdout)
            elif result.stdout:
                note(result.stdout.rstrip("\n"))
            results.append(result)
    return results

__all__ = (
    "GitWrapper",
    "Field",
)


import shlex
import subprocess
from abc import abstractmethod

from pydantic import BaseModel
from pydantic import Field

from .. import config
from ..exceptions import ArgumentCountError


class GitWrapper(BaseModel, validate_assignment=True, extra="forbid"):
    """One git invocation; fields are the arguments a flag supplies."""

    @classmethod
    def build(cls, *values: str, usage: str | None = None) -> "GitWrapper":
        # positional values fill the fields in declaration order
        names = list(cls.model_fields)
        if len(values) > len(names):
            raise ArgumentCountError(usage or cls.__name__)
        return cls(**dict(zip(names, values)))

    @abstractmethod
    def get_args(self) -> list[str]:
        pass

    def get_cmd(self) -> list[str]:
        return [config.GIT, *self.get_args()]

    def cmdline(self) -> str:
        return shlex.join(self.get_cmd())

    def run_cmd(self, check=True, stdout=None, stderr=None, cwd=None) -> subprocess.CompletedProcess:
        # git output is not guaranteed to be utf-8
        return subprocess.run(
            self.get_cmd(),
            check=check,
            stdout=stdout,
            stderr=stderr,
            cwd=cwd,
            encoding="utf-8",
            errors="backslashreplace",
        )

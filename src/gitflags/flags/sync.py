"""
--pull and --push take either no value or a remote and a branch together.
"""

from typing import ClassVar

from ..exceptions import ArgumentCountError
from ..validators import validate_pair
from ..wrappers.common import *
from . import register


class RemoteSyncWrapper(GitWrapper):
    subcommand: ClassVar[str]

    remote: str | None = Field(default=None)
    branch: str | None = Field(default=None)

    @classmethod
    def build(cls, *values, usage=None):
        if len(values) > 2:
            raise ArgumentCountError(usage or cls.subcommand)
        remote, branch = (list(values) + [None, None])[:2]
        remote, branch = validate_pair(remote, branch, usage or cls.subcommand)
        return cls(remote=remote, branch=branch)

    def get_args(self):
        cmd = [self.subcommand]
        if self.remote and self.branch:
            cmd.append(self.remote)
            cmd.append(self.branch)
        return cmd


@register('--pull', arguments=['remote name', 'branch name'], example='--pull="origin main"', requires_argument=False)
class PullWrapper(RemoteSyncWrapper):
    subcommand = "pull"


@register('--push', arguments=['remote name', 'branch name'], example='--push="origin main"', requires_argument=False)
class PushWrapper(RemoteSyncWrapper):
    subcommand = "push"

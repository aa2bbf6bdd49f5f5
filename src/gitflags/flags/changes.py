from ..wrappers.common import *
from . import register


@register('--add', arguments=['file path'], example='--add=.')
class AddWrapper(GitWrapper):
    path: str = Field(min_length=1)

    def get_args(self):
        return ["add", self.path]


@register('--commit', arguments=['commit message'], example='--commit="commit message"')
class CommitWrapper(GitWrapper):
    message: str = Field(min_length=1)

    def get_args(self):
        return ["commit", "-m", self.message]

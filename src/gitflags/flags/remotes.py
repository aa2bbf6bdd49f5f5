from ..wrappers.common import *
from . import register


@register(
    '--add-remote',
    arguments=['remote name', 'remote url'],
    example='--add-remote="pws https://github.com/Possible-bj/darsh.com.ng-repo.git"',
)
class AddRemoteWrapper(GitWrapper):
    name: str = Field(min_length=1)
    url: str = Field(min_length=1)

    def get_args(self):
        return ["remote", "add", self.name, self.url]


@register('--rm-remote', arguments=['remote name'], example='--rm-remote=pws')
class RemoveRemoteWrapper(GitWrapper):
    name: str = Field(min_length=1)

    def get_args(self):
        return ["remote", "remove", self.name]

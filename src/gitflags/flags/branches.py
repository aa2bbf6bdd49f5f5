from ..wrappers.common import *
from . import register


@register('--branch', arguments=['branch name'], example='--branch=pws')
class BranchWrapper(GitWrapper):
    branch: str = Field(min_length=1)

    def get_args(self):
        return ["branch", self.branch]


@register('--checkout', arguments=['branch name'], example='--checkout=pws')
class CheckoutWrapper(GitWrapper):
    branch: str = Field(min_length=1)

    def get_args(self):
        return ["checkout", self.branch]

from ..wrappers.common import *
from . import register


@register('--init', requires_argument=False)
class InitWrapper(GitWrapper):
    def get_args(self):
        return ["init"]

import os

from . import defaults

# git executable used for every command, overridable from the environment
GIT: str = os.environ.get(defaults.ENV_GIT_EXECUTABLE) or defaults.GIT_EXECUTABLE

# raised by -v on the command line
verbose_level: int = 0

"""
gitflags runs git with whatever defaults git itself has.
The few values we choose ourselves are pinned here
so they can be found and changed in one place.
"""


GIT_EXECUTABLE: str = "git"
ENV_GIT_EXECUTABLE: str = "GITFLAGS_GIT"

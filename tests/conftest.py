import pytest

from gitflags import config


@pytest.fixture(autouse=True)
def plain_git(monkeypatch):
    monkeypatch.setattr(config, "GIT", "git")
    monkeypatch.setattr(config, "verbose_level", 0)

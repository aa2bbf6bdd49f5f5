import os
import subprocess
from unittest.mock import patch

import pytest

from gitflags import config
from gitflags.dispatcher import execute, parse_and_dispatch
from gitflags.flags.branches import BranchWrapper


def test_get_cmd_uses_configured_git(monkeypatch):
    monkeypatch.setattr(config, 'GIT', '/opt/git/bin/git')
    assert BranchWrapper(branch='pws').get_cmd() == ['/opt/git/bin/git', 'branch', 'pws']


def test_run_cmd_arguments():
    with patch('gitflags.wrappers.common.subprocess.run') as mock_run:
        BranchWrapper(branch='pws').run_cmd(check=False, stdout=subprocess.PIPE, cwd='/tmp/repo')
        args, kwargs = mock_run.call_args
        assert args[0] == ['git', 'branch', 'pws']
        assert kwargs['check'] is False
        assert kwargs['cwd'] == '/tmp/repo'
        assert kwargs['encoding'] == 'utf-8'
        assert kwargs['errors'] == 'backslashreplace'


@pytest.fixture
def latin1_git(tmp_path, monkeypatch):
    script = tmp_path / 'git'
    script.write_text('#!/bin/sh\nprintf \'caf\\351\\n\'\nprintf "%s\\n" "$*" >> "$(dirname "$0")/calls"\n')
    script.chmod(0o755)
    monkeypatch.setattr(config, 'GIT', str(script))
    return tmp_path


@pytest.mark.skipif(os.name != 'posix', reason='needs a shell script as git')
def test_execute_non_utf8_output(latin1_git, capsys):
    results = execute(parse_and_dispatch(['--init', '--add=.']))

    assert [result.returncode for result in results] == [0, 0]
    assert results[0].stdout == 'caf\\xe9\n'
    assert (latin1_git / 'calls').read_text().splitlines() == ['init', 'add .']
    assert 'caf\\xe9' in capsys.readouterr().out

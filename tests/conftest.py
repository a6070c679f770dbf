#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Fixtures for fabinvoke tests"""

import io
import os
import sys
import json
import stat
import pytest


path_to_fabinvoke = os.path.abspath(os.path.join(
                   os.path.dirname(os.path.realpath(__file__)),
                   '..'))
sys.path.append(path_to_fabinvoke)


def write_script(path, body):
    with open(path, 'w') as f:
        f.write('#!/bin/sh\n' + body)
    os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture()
def fab(tmpdir):
    """Fake fab that prints its arguments, cwd and DEPLOY_TARGET."""
    return write_script(str(tmpdir.join('fab')),
"""echo "args: $*"
echo "cwd: $(pwd)"
echo "target: $DEPLOY_TARGET"
echo "warning from fab" >&2
exit 0
"""
    )


@pytest.fixture()
def failing_fab(tmpdir):
    return write_script(str(tmpdir.join('failing_fab')),
"""echo "Fatal error: task not found"
exit 3
"""
    )


@pytest.fixture()
def slow_fab(tmpdir):
    return write_script(str(tmpdir.join('slow_fab')),
"""echo "pid: $$"
exec sleep 30
"""
    )


@pytest.fixture()
def workspace(tmpdir):
    return str(tmpdir.mkdir('workspace'))


@pytest.fixture()
def sink():
    return io.BytesIO()


@pytest.fixture()
def json_settings(tmpdir):
    settings = tmpdir.join('fabinvoke.json')
    with open(str(settings), 'w') as f:
        f.write(json.dumps({'fabric_executable': '/opt/fabric/bin/fab'}))
    return str(settings)


@pytest.fixture()
def ini_settings(tmpdir):
    settings = tmpdir.join('fabinvoke.ini')
    with open(str(settings), 'w') as f:
        f.write('[fabinvoke]\nfabric_executable = /usr/local/bin/fab\n')
    return str(settings)


@pytest.fixture()
def yaml_settings(tmpdir):
    settings = tmpdir.join('fabinvoke.yaml')
    with open(str(settings), 'w') as f:
        f.write('fabric_executable: /usr/bin/fab\n')
    return str(settings)

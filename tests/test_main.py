#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Tests for the command line"""

import json
import pytest

from fabinvoke import main


@pytest.fixture(autouse=True)
def in_tmpdir(tmpdir, monkeypatch):
    monkeypatch.chdir(str(tmpdir))


@pytest.fixture()
def settings(tmpdir, fab):
    settings = tmpdir.join('fabinvoke.json')
    settings.write(json.dumps({'fabric_executable': fab}))
    return str(settings)


class TestArgParsing:
    def test_should_parse_fields(self):
        args = main.parse_cli(['--fabfile', 'f.py', '--user', 'deploy', '-H', 'web1', '-R', 'web', 'restart'])
        assert (args.fabfile, args.user, args.host, args.role, args.command) == \
            ('f.py', 'deploy', 'web1', 'web', 'restart')
        assert args.dry_run is False

    def test_should_allow_missing_command(self):
        assert main.parse_cli([]).command is None


class TestMain:
    def test_should_execute_fab(self, settings, workspace, capsys):
        assert main.main(['--config', settings, '--cwd', workspace, '-H', '10.0.0.1', 'deploy_app']) == 0
        out, err = capsys.readouterr()
        assert 'args: --host=10.0.0.1 deploy_app' in out

    def test_should_return_error_status(self, settings, failing_fab, capsys):
        assert main.main(['--config', settings, '--fabric-executable', failing_fab, 'missing']) == 1
        out, err = capsys.readouterr()
        assert 'Fatal error: task not found' in out

    def test_should_not_persist_executable_override(self, settings, failing_fab, fab):
        main.main(['--config', settings, '--fabric-executable', failing_fab, 'missing'])
        with open(settings) as f:
            assert json.load(f) == {'fabric_executable': fab}

    def test_should_report_missing_command(self, settings, capsys):
        assert main.main(['--config', settings]) == 1
        out, err = capsys.readouterr()
        assert 'No fabric command specified' in out

    def test_should_dry_run(self, tmpdir, capsys):
        settings = tmpdir.join('fabinvoke.json')
        settings.write(json.dumps({'fabric_executable': 'fab'}))
        assert main.main(['--config', str(settings), '--dry-run', '-R', 'web', 'restart']) == 0
        out, err = capsys.readouterr()
        assert 'dry-in: fab --roles=web restart' in out

    def test_should_save_fabric_executable(self, tmpdir):
        settings = tmpdir.join('fabinvoke.yaml')
        assert main.main(['--config', str(settings), '--set-fabric-executable', '/opt/fab']) == 0
        assert 'fabric_executable: /opt/fab' in settings.read()

    def test_should_save_to_config_path(self, tmpdir, settings, fab):
        assert main.main(['--config', 'new.yaml', '--set-fabric-executable', '/opt/fab']) == 0
        assert 'fabric_executable: /opt/fab' in tmpdir.join('new.yaml').read()
        with open(settings) as f:
            assert json.load(f) == {'fabric_executable': fab}

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Tests for the fabric build step"""

import json
import pytest

from fabinvoke.api import ExecutionContext, FabricDescriptor, FabricScriptBuilder, GlobalSettings


@pytest.fixture()
def descriptor(tmpdir, fab):
    settings = tmpdir.join('fabinvoke.json')
    settings.write(json.dumps({'fabric_executable': fab}))
    return FabricDescriptor(GlobalSettings(str(settings)))


class TestDescriptor:
    def test_should_load_settings_on_construction(self, descriptor, fab):
        assert descriptor.fabric_executable == fab

    def test_should_save_configuration(self, descriptor):
        assert descriptor.configure({'fabricExecutable': '/opt/fab'}) is True
        assert descriptor.fabric_executable == '/opt/fab'
        assert FabricDescriptor(GlobalSettings(descriptor.settings.path)).fabric_executable == '/opt/fab'

    def test_should_check_fields(self, descriptor):
        assert not descriptor.check_command('').is_ok
        assert not descriptor.check_fabfile('').is_ok
        assert descriptor.check_command(' ').is_ok
        assert descriptor.check_fabfile('fabfile.py').is_ok

    def test_should_be_applicable_to_any_job(self, descriptor):
        assert descriptor.is_applicable(object)
        assert descriptor.display_name == 'Invoke Fabric script (fabfile)'


class TestBuilder:
    def test_should_bind_form(self):
        step = FabricScriptBuilder.from_form({
            'name': 'deploy', 'fabfile': 'fabfile.py', 'command': 'deploy_app',
            'user': 'deploy', 'host': '10.0.0.1', 'role': 'web', 'unknown': 'x',
        })
        assert (step.name, step.fabfile, step.command) == ('deploy', 'fabfile.py', 'deploy_app')
        assert (step.user, step.host, step.role) == ('deploy', '10.0.0.1', 'web')

    def test_should_use_descriptor_executable(self):
        config = FabricScriptBuilder(command='uptime', role='db').to_config('/opt/fab')
        assert config.executable_path == '/opt/fab'
        assert config.role == 'db'

    def test_should_perform(self, descriptor, workspace, sink):
        step = FabricScriptBuilder(name='deploy', command='deploy_app', host='10.0.0.1')
        assert step.perform(ExecutionContext(workspace, None, sink), descriptor) is True
        assert b'args: --host=10.0.0.1 deploy_app' in sink.getvalue()

    def test_should_fail_when_not_configured(self, tmpdir, monkeypatch, workspace, sink):
        monkeypatch.chdir(str(tmpdir))
        step = FabricScriptBuilder(command='deploy_app')
        assert step.perform(ExecutionContext(workspace, None, sink), FabricDescriptor()) is False
        assert b'Please configure the fabric executable' in sink.getvalue()

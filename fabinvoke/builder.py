#!/usr/bin/env python
# coding=utf-8
"""Build step that invokes a fabric script.

FabricScriptBuilder keeps the fields of one configured job step,
FabricDescriptor keeps the global part shared by all steps:
the fabric executable and the validation of form fields.

Example:
  >>> descriptor = FabricDescriptor(GlobalSettings('fabinvoke.json'))  # doctest: +SKIP
  >>> step = FabricScriptBuilder.from_form({'command': 'deploy', 'host': 'web1'})
  >>> step.command, step.host, step.role
  ('deploy', 'web1', None)

"""

# This file is part of fabinvoke

import logging

from fabinvoke import messages
from fabinvoke.invocation import InvocationConfig, invoke
from fabinvoke.settings import GlobalSettings
from fabinvoke.validation import validate_command, validate_fabfile


class FabricScriptBuilder(object):
    """Fields of one fabric build step.

    Attributes:
      name (str): name of the step
      fabfile (str): path to fabfile
      command (str): fabric task for executing
      user (str): username for remote login
      host (str): remote host
      role (str): roles filter

    """
    fields = ('name', 'fabfile', 'command', 'user', 'host', 'role')

    def __init__(self, name=None, fabfile=None, command=None, user=None, host=None, role=None):
        self.name = name
        self.fabfile = fabfile
        self.command = command
        self.user = user
        self.host = host
        self.role = role

    @classmethod
    def from_form(cls, form_data):
        """Create build step from submitted form.

        Args:
          form_data (dict): form fields, unknown keys are ignored

        """
        return cls(**dict((k, form_data.get(k)) for k in cls.fields))

    def to_config(self, fabric_executable):
        """Freeze the step fields to InvocationConfig for one run."""
        return InvocationConfig(
            fabric_executable,
            self.command,
            fabfile=self.fabfile,
            user=self.user,
            host=self.host,
            role=self.role,
        )

    def perform(self, ctx, descriptor, dry_run=False):
        """Run the build step.

        Args:
          ctx (ExecutionContext class object): workspace, environment and output sink of the build
          descriptor (FabricDescriptor class object): source of the fabric executable
          dry_run (bool): write command line instead of executing, default is False

        Return:
          bool: True if build step succeeded, else False

        """
        logging.debug('executing perform function of %s', self.name)
        return invoke(self.to_config(descriptor.fabric_executable), ctx, dry_run=dry_run)


class FabricDescriptor(object):
    """Global part of fabric build steps.

    Settings are loaded once on construction.
    """
    display_name = messages.INVOKE_FABRIC_SCRIPT

    def __init__(self, settings=None):
        self.settings = settings if settings is not None else GlobalSettings()
        self.settings.load()

    @property
    def fabric_executable(self):
        return self.settings.fabric_executable

    def configure(self, form_data):
        """Save global configuration submitted by administrator.

        Args:
          form_data (dict): form with 'fabricExecutable' field

        Return:
          bool: always True, errors of saving are raised

        """
        logging.debug('executing configure function')
        self.settings.save(form_data.get('fabricExecutable'))
        return True

    def check_command(self, value):
        return validate_command(value)

    def check_fabfile(self, value):
        return validate_fabfile(value)

    def is_applicable(self, job_type):
        # any kind of job can use this step
        return True

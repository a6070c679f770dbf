#!/usr/bin/env python
# coding=utf-8
"""On-the-fly validation of build step form fields.

Unlike invocation.is_blank, these checks are strict zero length checks:
a value of whitespaces only passes them.

"""

# This file is part of fabinvoke

from collections import namedtuple

from fabinvoke import messages

OK = 'ok'
ERROR = 'error'


class FormValidation(namedtuple('FormValidation', 'kind message')):
    """Outcome of form field validation, sent back to the form."""
    __slots__ = ()

    @classmethod
    def ok(cls):
        return cls(OK, '')

    @classmethod
    def error(cls, message):
        return cls(ERROR, message)

    @property
    def is_ok(self):
        return self.kind == OK


def validate_command(value):
    """Check command field.

    Args:
      value (str): the value that the user has typed

    Return:
      FormValidation class object: error if value has zero length, else ok

    Examples:
      >>> validate_command('')
      FormValidation(kind='error', message='Command must not be empty')
      >>> validate_command(' ').is_ok
      True

    """
    if not value:
        return FormValidation.error(messages.PLEASE_SET_COMMAND)
    return FormValidation.ok()


def validate_fabfile(value):
    """Check fabfile field.

    Args:
      value (str): the value that the user has typed

    Return:
      FormValidation class object: error if value has zero length, else ok

    """
    if not value:
        return FormValidation.error(messages.PLEASE_SET_FABFILE)
    return FormValidation.ok()

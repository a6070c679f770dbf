#!/usr/bin/env python
# coding=utf-8
"""Context managers for use with the python 'with' statement."""

# This file is part of fabinvoke

import logging
from contextlib import contextmanager


@contextmanager
def override(settings, *args, **kwargs):
    """Context manager that set GlobalSettings values without saving them.

    Values will be reverted to previous state after 'with' statement.
    Nothing is written to the settings file.

    Args:
      settings (GlobalSettings class object): settings for updating
      *args (tuple):
        if argument is dict, settings will be updated by this dict
        else it will be used as key with value = True
      **kwargs (dict): settings will be updated by this dict

    Returns:
      settings.values object with all values

    Examples:
      >>> from fabinvoke.settings import GlobalSettings
      >>> s = GlobalSettings()
      >>> with override(s, fabric_executable='/opt/fab/bin/fab') as values:
      ...     values.fabric_executable
      '/opt/fab/bin/fab'
      >>> s.fabric_executable is None
      True

    """
    logging.debug('initializing of override')
    logging.debug('arguments and another locals: %s', locals())
    new_values = {}
    for a in args:
        if isinstance(a, dict):
            new_values.update(a)
        else:
            new_values[a] = True
    new_values.update(kwargs)

    old = {}
    new = []
    for key in new_values:
        if key in settings.values:
            old[key] = settings.values[key]
        else:
            new.append(key)
    settings.values.update(new_values)
    try:
        yield settings.values
    finally:
        logging.debug('reverted global settings to previous state')
        settings.values.update(old)
        for k in new:
            del settings.values[k]

#!/usr/bin/env python
# coding=utf-8
"""Global config defaults.

Attributes:
  defaults (AttributedDict class object): defaults for every GlobalSettings instance
    fabric_executable (str): path or name of the fab binary, default is None
    settings_files (tuple): files checked by GlobalSettings.load() when no path is given,
      default is ('fabinvoke.ini', 'fabinvoke.json', 'fabinvoke.yaml')
    default_settings_file (str): file used by GlobalSettings.save() when nothing was loaded,
      default is 'fabinvoke.json'
    ini_section (str): section of ini settings files, default is 'fabinvoke'
    log_file (str): file for logging.basicConfig, default is 'fabinvoke.log'
    localhost (str): logger name for invocations without host, default is 'localhost'
    split_user (str): splitter between user and host in logger names, default is '@'

"""

# This file is part of fabinvoke


class AttributedDict(dict):
    def __init__(self, dict=None):
        self.__dict__ = dict if dict is not None else {}

    def __str__(self):
        return str(self.__dict__)

    def __getitem__(self, key):
        return self.__dict__[key]

    def __setitem__(self, key, value):
        self.__dict__[key] = value

    def __delitem__(self, item):
        del self.__dict__[item]

    def __contains__(self, key):
        return key in self.__dict__

    def update(self, dict):
        self.__dict__.update(dict)


defaults = AttributedDict(
    {
    'fabric_executable': None,
    'settings_files': (
        'fabinvoke.ini',
        'fabinvoke.json',
        'fabinvoke.yaml',
        ),
    'default_settings_file': 'fabinvoke.json',
    'ini_section': 'fabinvoke',
    'log_file': 'fabinvoke.log',
    'localhost': 'localhost',
    'split_user': '@',
    }
)

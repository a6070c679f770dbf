#!/usr/bin/env python
# coding=utf-8
"""Process-wide settings of fabinvoke.

The only persisted value is the default fabric executable.
It is loaded once at startup via GlobalSettings.load(),
read by every invocation and changed only via GlobalSettings.save().

Settings files:
  always load if exist: fabinvoke.ini or fabinvoke.json or fabinvoke.yaml
  and the explicit path given to GlobalSettings

  fabinvoke.ini:
    [fabinvoke]
    fabric_executable = /usr/local/bin/fab

  fabinvoke.json:
    {"fabric_executable": "/usr/local/bin/fab"}

  fabinvoke.yaml:
    fabric_executable: /usr/local/bin/fab

"""

# This file is part of fabinvoke

import io
import os
import json
import logging
import shutil
import tempfile
from configparser import ConfigParser, Error as ConfigParserError

import yaml

from fabinvoke.state import AttributedDict, defaults


class GlobalSettings(object):
    """Persisted global configuration.

    Attributes:
      path (str): explicit settings file, always used by save() when given
      loaded_from (str): settings file that was loaded or saved last, default is None
      values (AttributedDict class object): current settings values

    """

    def __init__(self, path=None):
        """Initializing of GlobalSettings class.

        Args:
          path (str): settings file checked before the default ones, default is None

        """
        logging.debug('initializing of GlobalSettings class')
        logging.debug('arguments for __init__ and another locals: %s', locals())
        self.path = path
        self.loaded_from = None
        self.values = AttributedDict({
            'fabric_executable': defaults.fabric_executable,
        })

    @property
    def fabric_executable(self):
        return self.values.fabric_executable

    def load(self):
        """Load settings from the first existing settings file.

        Errors of parsing are logged and the current values are kept.

        Return:
          str: fabric executable, None if it was never configured

        """
        logging.debug('executing load function')
        logging.debug('arguments and another locals: %s', locals())

        for filename in (self.path,) + tuple(defaults.settings_files):
            if filename and os.path.exists(filename):
                break
        else:
            logging.debug('no settings file, used defaults')
            return self.fabric_executable

        logging.debug('settings file: %s', filename)
        self.loaded_from = filename
        fmt = settings_format(filename)
        if fmt == 'ini':
            c = ConfigParser(interpolation=None)
            try:
                c.read(filename)
                if c.has_section(defaults.ini_section):
                    self.values.update(dict(c.items(defaults.ini_section)))
            except ConfigParserError:
                logging.error("can't load settings from %s", filename, exc_info=True)
        elif fmt == 'json':
            try:
                with open(filename, 'r') as f:
                    self._update(json.load(f))
            except (OSError, ValueError):
                logging.error("can't load settings from %s", filename, exc_info=True)
        elif fmt == 'yaml':
            try:
                with open(filename, 'r') as f:
                    self._update(yaml.safe_load(f))
            except (OSError, yaml.YAMLError):
                logging.error("can't load settings from %s", filename, exc_info=True)
        else:
            logging.error("can't determine file format for %s", filename)

        logging.debug('global settings: %s', self.values)
        return self.fabric_executable

    def save(self, value):
        """Set fabric executable and write all settings to the settings file.

        The file is the explicit path if given, else the one settings
        were loaded from, else fabinvoke.json in current directory.
        Settings are written to a temporary file that replaces the old one,
        values in memory are changed only after that.
        Errors are raised to the caller.

        Args:
          value (str): path or name of the fab binary

        """
        logging.debug('executing save function')
        logging.debug('arguments and another locals: %s', locals())
        path = self.path or self.loaded_from or defaults.default_settings_file
        data = dict(self.values.__dict__)
        data['fabric_executable'] = value
        content = dump_settings(data, settings_format(path))

        fd, tmp = tempfile.mkstemp(dir=os.path.dirname(os.path.abspath(path)),
                                   prefix='.fabinvoke-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w') as f:
                f.write(content)
            if os.path.exists(path):
                shutil.copymode(path, tmp)
            os.replace(tmp, path)
        except BaseException:
            os.unlink(tmp)
            raise

        self.values.fabric_executable = value
        self.loaded_from = path
        logging.info('fabric executable %s saved to %s', value, path)

    def _update(self, data):
        if isinstance(data, dict):
            self.values.update(data)
        elif data is not None:
            logging.error("settings in %s must be a mapping, got %s", self.loaded_from, type(data).__name__)


def dump_settings(data, fmt):
    """Serialize settings to text of settings file.

    Args:
      data (dict): settings values
      fmt (str): 'ini', 'yaml' or anything else for json

    Return:
      str: content of settings file

    Examples:
      >>> print(dump_settings({'fabric_executable': '/opt/100%/fab'}, 'ini').strip())
      [fabinvoke]
      fabric_executable = /opt/100%/fab

    """
    if fmt == 'ini':
        c = ConfigParser(interpolation=None)
        c[defaults.ini_section] = dict(
            (k, '' if v is None else str(v)) for k, v in data.items()
        )
        buf = io.StringIO()
        c.write(buf)
        return buf.getvalue()
    if fmt == 'yaml':
        return yaml.safe_dump(data, default_flow_style=False)
    return json.dumps(data, indent=2)


def settings_format(path):
    """Determine settings file format by extension.

    Examples:
      >>> settings_format('fabinvoke.yml'), settings_format('/etc/fabinvoke.ini')
      ('yaml', 'ini')

    """
    ext = os.path.splitext(path)[1].lower()
    if ext == '.ini':
        return 'ini'
    if ext == '.json':
        return 'json'
    if ext in ('.yaml', '.yml'):
        return 'yaml'
    return None

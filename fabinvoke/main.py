#!/usr/bin/env python
# coding=utf-8
"""Invoke fabric scripts from command line.

Builds the fab command line from options, executes it in the current
(or --cwd) directory with the current environment and streams its
output to stdout. Exit status is 0 if fab succeeded, else 1.

Example:
  $ fabinvoke --set-fabric-executable /usr/local/bin/fab
  $ fabinvoke --fabfile fabfile.py --user deploy -H 10.0.0.1 deploy_app
  $ fabinvoke --dry-run -R web restart

Config files:
  Fabinvoke uses standart python logging module,
    so you can set your own config via config file:
      logging.ini, logging.json or logging.yaml
    hardcode logging config:
      format=u'%(asctime)s  %(name)s\t%(levelname)-8s\t%(message)s',
      datefmt='%d %b %Y %H:%M:%S',
      filename='fabinvoke.log',
      filemode='a',
      level=logging.INFO,

  Global settings with fabric executable:
    always load if exist: fabinvoke.ini or fabinvoke.json or fabinvoke.yaml
    and --config PATH cli option

"""

# This file is part of fabinvoke

import os
import sys
import json
import logging
import logging.config
import argparse

import yaml

from fabinvoke.builder import FabricDescriptor, FabricScriptBuilder
from fabinvoke.context_managers import override
from fabinvoke.invocation import ExecutionContext
from fabinvoke.settings import GlobalSettings
from fabinvoke.state import defaults


def main(argv=None):
    """Parse cli, run fab and return exit status.

    Args:
      argv (list): cli arguments without program name, default is sys.argv[1:]

    Return:
      int: 0 if invocation succeeded, else 1

    """
    args = parse_cli(argv)
    configure_logging(args.show_errors)
    logging.debug('executing main function')
    logging.debug('arguments from cli and another locals: %s', locals())

    descriptor = FabricDescriptor(GlobalSettings(args.config_file))
    if args.set_fabric_executable is not None:
        descriptor.configure({'fabricExecutable': args.set_fabric_executable})
        return 0

    step = FabricScriptBuilder(
        name='cli',
        fabfile=args.fabfile,
        command=args.command,
        user=args.user,
        host=args.host,
        role=args.role,
    )
    ctx = ExecutionContext(
        working_directory=args.cwd or os.getcwd(),
        environment=dict(os.environ),
        output_sink=sys.stdout.buffer,
    )
    sys.stdout.flush()
    if args.fabric_executable:
        with override(descriptor.settings, fabric_executable=args.fabric_executable):
            ok = step.perform(ctx, descriptor, dry_run=args.dry_run)
    else:
        ok = step.perform(ctx, descriptor, dry_run=args.dry_run)
    logging.debug('invocation result: %s', ok)
    return 0 if ok else 1


def configure_logging(show_errors=False):
    """Configure logging by file or by hardcoded config.

    Check logging config path:
      logging.ini or logging.json or logging.yaml

    Args:
      show_errors (bool): add stderr handler for all not info messages, default is False

    """
    logging.basicConfig(
        format=u'%(asctime)s  %(name)s\t%(levelname)-8s\t%(message)s',
        datefmt='%d %b %Y %H:%M:%S',
        filename=defaults.log_file,
        filemode='a',
        level=logging.INFO,
    )

    try:
        if os.path.exists('logging.ini'):
            logging.config.fileConfig('logging.ini')
        elif os.path.exists('logging.json'):
            with open('logging.json', 'r') as f:
                config = json.load(f)
            logging.config.dictConfig(config)
        elif os.path.exists('logging.yaml'):
            with open('logging.yaml', 'r') as f:
                config = yaml.safe_load(f)
            logging.config.dictConfig(config)
    except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError):
        logging.error("can't load logging config, used standart configuration", exc_info=True)

    if show_errors:
        logging.debug('adding logging of errors to stderr')
        error = logging.StreamHandler(sys.stderr)
        error.addFilter(WithoutOneLevelLogs(logging.INFO))
        error.setFormatter(logging.Formatter('%(name)s %(levelname)s %(message)s'))
        logging.getLogger().addHandler(error)


def parse_cli(argv=None):
    """Parse command line arguments.

    Args:
      argv (list): cli arguments without program name, default is sys.argv[1:]

    Return:
      argparse.Namespace: parsed arguments

    """
    logging.debug('executing parse_cli function')
    parser = argparse.ArgumentParser(
        description='Invoke fabric scripts',
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        'command', nargs='?',
        help='''fabric task for executing,
  required unless --set-fabric-executable given'''
    )
    parser.add_argument(
        '--fabfile', dest='fabfile',
        help='path to fabfile, passed as --fabfile'
    )
    parser.add_argument(
        '--user', dest='user',
        help='username for remote login, passed as --user'
    )
    parser.add_argument(
        '-H', '--host', dest='host',
        help='remote host, passed as --host'
    )
    parser.add_argument(
        '-R', '--roles', dest='role',
        help='roles filter, passed as --roles'
    )
    parser.add_argument(
        '--cwd', dest='cwd',
        help='''working directory for fab,
  default is current directory'''
    )
    parser.add_argument(
        '--config', dest='config_file',
        help='''ini, json or yaml file
  with global settings'''
    )
    parser.add_argument(
        '--fabric-executable', dest='fabric_executable',
        help='''path to fab binary for this run only,
  default is taken from global settings'''
    )
    parser.add_argument(
        '--set-fabric-executable', dest='set_fabric_executable',
        metavar='PATH',
        help='save path to fab binary to global settings and exit'
    )
    parser.add_argument(
        '--dry-run', dest='dry_run',
        action='store_true', default=False,
        help='print fab command line without executing'
    )
    parser.add_argument(
        '--show-errors', dest='show_errors',
        action='store_true', default=False,
        help='''show fabinvoke warnings and errors,
  default is False'''
    )
    return parser.parse_args(argv)


class WithoutOneLevelLogs(object):
    """Logging handler filter"""
    def __init__(self, level):
        """Initializing of WithoutOneLevelLogs class.

        Args:
          level (logging level): only this level will not be caught

        """
        self.level = level

    def filter(self, record):
        """Filtering logging record

        Args:
          record (logging record): record that will be filtered

        """
        return record.levelno != self.level


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()

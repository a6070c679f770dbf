#!/usr/bin/env python
# coding=utf-8
"""Functions for executing fab like invoke(config, ctx)."""

# This file is part of fabinvoke

import logging
import subprocess
import threading
from collections import namedtuple
from shlex import quote

import gevent
from gevent.subprocess import Popen, PIPE, STDOUT, DEVNULL

from fabinvoke import messages
from fabinvoke.state import defaults


def is_blank(value):
    """Check that value is None, empty or contains only whitespaces.

    Args:
      value (str): checked value

    Return:
      bool: True if value is blank, else False

    Examples:
      >>> is_blank(None), is_blank(''), is_blank(' \\t'), is_blank('fab')
      (True, True, True, False)

    """
    return value is None or not value.strip()


class InvocationConfig(namedtuple('InvocationConfig',
        'executable_path command fabfile user host role')):
    """Immutable fields for one fab invocation.

    Attributes:
      executable_path (str): path or name of the fab binary
      command (str): fabric task for executing
      fabfile (str): path to fabfile, default is None
      user (str): username for remote login, default is None
      host (str): remote host, default is None
      role (str): roles filter, passed to fab as --roles, default is None

    """
    __slots__ = ()

    def __new__(cls, executable_path, command, fabfile=None, user=None, host=None, role=None):
        return super(InvocationConfig, cls).__new__(
            cls, executable_path, command, fabfile, user, host, role
        )

    @property
    def connect_string(self):
        """str: user@host, host or localhost, used as logger name."""
        if is_blank(self.host):
            return defaults.localhost
        if is_blank(self.user):
            return self.host
        return ''.join((self.user, defaults.split_user, self.host))


class ExecutionContext(namedtuple('ExecutionContext',
        'working_directory environment output_sink')):
    """Caller side of one fab invocation.

    Attributes:
      working_directory (str): cwd of child process, None means current directory
      environment (dict): environment of child process, None means inherit os.environ
      output_sink (binary file object): destination for child stdout and stderr,
        None means output is dropped

    """
    __slots__ = ()

    def __new__(cls, working_directory=None, environment=None, output_sink=None):
        return super(ExecutionContext, cls).__new__(
            cls, working_directory, environment, output_sink
        )


def build_arguments(config):
    """Convert config to argument list for fab.

    Optional flags are added only for non blank fields and always in the same order:
    executable, --fabfile, --user, --host, --roles, command.

    Args:
      config (InvocationConfig class object): fields for invocation

    Return:
      list: list of str arguments

    Examples:
      >>> build_arguments(InvocationConfig('fab', 'deploy_app', user='deploy', host='10.0.0.1'))
      ['fab', '--user=deploy', '--host=10.0.0.1', 'deploy_app']
      >>> build_arguments(InvocationConfig('fab', 'restart', fabfile='fabfile.py', role='web'))
      ['fab', '--fabfile=fabfile.py', '--roles=web', 'restart']

    """
    args = [config.executable_path]
    for flag, value in (('--fabfile=', config.fabfile),
                        ('--user=', config.user),
                        ('--host=', config.host),
                        ('--roles=', config.role)):
        if not is_blank(value):
            args.append(flag + value)
    args.append(config.command)
    return args


def invoke(config, ctx, dry_run=False):
    """Execute fab in child process and wait for it.

    Nothing is launched if executable_path or command is blank,
    a diagnostic line is written to ctx.output_sink instead.
    Child stdout and stderr are both streamed to ctx.output_sink.
    No exception is raised: launch errors and interruptions
    are logged and converted to False.

    Args:
      config (InvocationConfig class object): fields for invocation
      ctx (ExecutionContext class object): working directory, environment and output sink
      dry_run (bool): write command line to output sink instead of executing, default is False

    Return:
      bool: True if child process exited with status 0, else False

    """
    logger = logging.getLogger(config.connect_string)
    sink = ctx.output_sink if ctx.output_sink is not None else NullSink()
    logger.debug('executing invoke function')
    logger.debug('arguments for executing and another locals: %s', locals())

    if is_blank(config.executable_path):
        logger.error('fabric executable is not configured')
        println(sink, messages.PLEASE_CONFIGURE_FABRIC)
        return False
    if is_blank(config.command):
        logger.error('fabric command is not specified')
        println(sink, messages.NO_COMMAND_SPECIFIED)
        return False

    args = build_arguments(config)
    command_line = ' '.join(quote(a) for a in args)
    if dry_run:
        logger.info('dry-in: %s', command_line)
        println(sink, 'dry-in: ' + command_line)
        return True

    logger.info('in: %s', command_line)
    env = dict(ctx.environment) if ctx.environment is not None else None
    try:
        p = launch(args, ctx.working_directory, env)
    except (OSError, ValueError):
        logger.error("can't launch %s", command_line, exc_info=True)
        return False

    reader = start_out_loop(p, sink, logger)
    try:
        status = p.wait()
        reader.join()
    except (gevent.GreenletExit, KeyboardInterrupt):
        logger.warning('invocation was interrupted, terminating child process')
        if isinstance(reader, gevent.Greenlet):
            reader.kill(block=False)
        terminate(p, logger)
        return False
    logger.debug('child process has terminated with status %s', status)
    return status == 0


def on_main_thread():
    return threading.current_thread() is threading.main_thread()


def launch(args, cwd, env):
    """Start child process with merged stdout and stderr.

    gevent child watchers work only on the default loop of the main thread,
    so invocations from another thread use subprocess.Popen.

    Args:
      args (list): arguments of command
      cwd (str): working directory
      env (dict): environment, None means inherit os.environ

    Return:
      Popen object

    """
    popen = Popen if on_main_thread() else subprocess.Popen
    return popen(args, cwd=cwd, env=env,
                 stdin=DEVNULL, stdout=PIPE, stderr=STDOUT)


def start_out_loop(p, sink, logger):
    """Run out_loop in greenlet on the main thread, else in daemon thread."""
    if on_main_thread():
        return gevent.spawn(out_loop, p, sink, logger)
    reader = threading.Thread(target=out_loop, args=(p, sink, logger))
    reader.daemon = True
    reader.start()
    return reader


def out_loop(p, sink, logger, prefix='out: '):
    """Loop for merged stdout and stderr of child process.

    Copy every line to sink as is and put it to log.

    Args:
      p (Popen object): executing command
      sink (binary file object): destination for output
      logger (logging.logger object): logger of this invocation
      prefix (str): text will be displayed before each logged line

    """
    logger.debug('executing out_loop function')
    try:
        for line in iter(p.stdout.readline, b''):
            sink.write(line)
            flush(sink)
            write_message_to_log(logger, line, prefix)
    finally:
        p.stdout.close()


def write_message_to_log(logger, message=b'', prefix=''):
    """Write message to info log.

    Args:
      logger (logging.logger object): logger of this invocation
      message (bytes): raw line of child output
      prefix (str): text will be displayed before message without space

    """
    logger.info('%s%s', prefix, message.decode('utf-8', 'replace').rstrip('\r\n'))


def terminate(p, logger):
    """Stop child process that is still running."""
    if p.poll() is None:
        try:
            p.terminate()
            p.kill()
            p.wait()
        except OSError:
            # already gone
            logger.debug("can't terminate child process", exc_info=True)


def println(sink, message):
    """Write message with new line to sink as utf-8."""
    sink.write((message + '\n').encode('utf-8'))
    flush(sink)


def flush(sink):
    if hasattr(sink, 'flush'):
        sink.flush()


class NullSink(object):
    """Sink for invocations without output_sink, drops everything."""

    def write(self, data):
        return len(data)

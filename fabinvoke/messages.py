#!/usr/bin/env python
# coding=utf-8
"""Human readable messages written to output sinks and forms."""

# This file is part of fabinvoke

PLEASE_CONFIGURE_FABRIC = 'Please configure the fabric executable in the global settings'
NO_COMMAND_SPECIFIED = 'No fabric command specified'
PLEASE_SET_COMMAND = 'Command must not be empty'
PLEASE_SET_FABFILE = 'Fabfile must not be empty'
INVOKE_FABRIC_SCRIPT = 'Invoke Fabric script (fabfile)'

#!/usr/bin/env python
# coding=utf-8
"""Module for import only necessary from fabinvoke."""

# This file is part of fabinvoke

from fabinvoke.invocation import InvocationConfig, ExecutionContext, build_arguments, invoke, is_blank
from fabinvoke.validation import FormValidation, validate_command, validate_fabfile
from fabinvoke.settings import GlobalSettings
from fabinvoke.context_managers import override
from fabinvoke.builder import FabricScriptBuilder, FabricDescriptor

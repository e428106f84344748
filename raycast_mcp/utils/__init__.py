"""Shared helpers: command execution and response envelopes."""

from .command_runner import CommandError, CommandOutput, CommandRunner, SubprocessRunner
from .response import OperationResult, success_response

__all__ = [
    'CommandError',
    'CommandOutput',
    'CommandRunner',
    'SubprocessRunner',
    'OperationResult',
    'success_response',
]

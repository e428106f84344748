"""Shared fixtures for raycast-mcp tests."""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from raycast_mcp.registry.operations import create_registry
from raycast_mcp.tools.extension_tools import ExtensionTools
from raycast_mcp.utils.command_runner import CommandError, CommandOutput


class RecordingRunner:
    """Command runner double that records calls and can fail on demand."""

    def __init__(
        self,
        fail_on: Optional[Callable[[List[str]], bool]] = None,
        message: str = "npm ERR! code E404",
    ):
        self.calls: List[Tuple[List[str], Path]] = []
        self.fail_on = fail_on
        self.message = message

    def run(self, command: Sequence[str], cwd) -> CommandOutput:
        args = list(command)
        self.calls.append((args, Path(cwd)))
        if self.fail_on and self.fail_on(args):
            raise CommandError(args, self.message, returncode=1)
        return CommandOutput(args=args)

    @property
    def commands(self) -> List[List[str]]:
        return [args for args, _ in self.calls]


def make_tools(runner: RecordingRunner) -> ExtensionTools:
    return ExtensionTools(runner, npm_command="npm", ray_command="ray", author="raycast")


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def tools(runner):
    return make_tools(runner)


@pytest.fixture
def registry(tools):
    return create_registry(tools)


@pytest.fixture
def failing_tools():
    """Factory for (runner, tools) whose runner fails on matching commands."""
    def _make(fail_on, message="npm ERR! code E404"):
        failing_runner = RecordingRunner(fail_on=fail_on, message=message)
        return failing_runner, make_tools(failing_runner)
    return _make

"""External command execution for extension tooling (npm, ray)."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class CommandOutput:
    """Captured output of a completed command."""
    args: List[str]
    stdout: str = ""
    stderr: str = ""


class CommandError(Exception):
    """An external command could not be started or exited non-zero."""

    def __init__(self, args: Sequence[str], message: str, returncode: Optional[int] = None):
        self.args_list = list(args)
        self.returncode = returncode
        super().__init__(message)


class CommandRunner(Protocol):
    """Anything that can run a command inside a working directory."""

    def run(self, command: Sequence[str], cwd: PathLike) -> CommandOutput:
        ...


class SubprocessRunner:
    """Runs commands with :func:`subprocess.run`, blocking until they exit.

    No timeout is applied: a hung command blocks the caller.
    """

    def run(self, command: Sequence[str], cwd: PathLike) -> CommandOutput:
        args = [str(part) for part in command]
        display = " ".join(args)
        logger.info(f"Running '{display}' in {cwd}")

        try:
            result = subprocess.run(
                args, cwd=cwd, check=True, capture_output=True, text=True
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or "").strip()
            message = f"Command failed: {display} (exit code {e.returncode})"
            if detail:
                message = f"{message}\n{detail}"
            logger.error(message)
            raise CommandError(args, message, e.returncode) from e
        except (OSError, ValueError) as e:
            message = f"Command failed: {display}: {e}"
            logger.error(message)
            raise CommandError(args, message) from e

        return CommandOutput(args=args, stdout=result.stdout, stderr=result.stderr)

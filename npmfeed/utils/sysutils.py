from __future__ import annotations

import shlex
import subprocess
import sys
from typing import Sequence

from ..config import IS_WINDOWS
from ..core.errors import CommandSpawnError


def shell_command(command: str, args: Sequence[str]) -> str:
    # command may already be a shell fragment (e.g. "node npm-cli.js"), keep it verbatim
    if IS_WINDOWS:
        quoted = subprocess.list2cmdline(list(args))
    else:
        quoted = shlex.join(args)
    return f"{command} {quoted}" if quoted else command


def run_npm(command: str, args: Sequence[str]) -> int:
    """
    Run the package manager through the host shell and wait for it to exit.

    The child inherits stdout/stderr, so its output passes straight through.
    Returns the exit code; raises CommandSpawnError if the shell cannot be started.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        result = subprocess.run(shell_command(command, args), shell=True, check=False)
    except OSError as e:
        raise CommandSpawnError(command, str(e)) from e
    return result.returncode

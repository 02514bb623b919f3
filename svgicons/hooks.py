"""Run user configured shell hooks around icon operations."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, Union

from .errors import HookError

logger = logging.getLogger(__name__)


def run_hooks(commands: Iterable[str], cwd: Union[str, Path]) -> None:
    """Run each command through the shell in ``cwd``, in order.

    Output goes straight to the terminal.  The first failing command
    stops the sequence.

    Raises:
        HookError: If a command cannot be started or exits non-zero.
    """
    for command in commands:
        logger.info("Running: %s", command)
        try:
            result = subprocess.run(command, shell=True, cwd=str(cwd), check=False)
        except OSError as exc:
            raise HookError(f"Hook failed: {exc}") from exc
        if result.returncode != 0:
            raise HookError(f'Hook "{command}" exited with code {result.returncode}')

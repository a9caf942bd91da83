"""CLI entry point that runs the bundled RKN.ps1 script through PowerShell."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rkn_launcher import utils

log = logging.getLogger(__name__)

MISSING_SCRIPT_MSG = "Не найден RKN.ps1 рядом с exe: {path}"
SPAWN_FAILED_MSG = "Не удалось запустить {interpreter}: {error}"
UNEXPECTED_MSG = "Ошибка запуска: {error}"


class LaunchError(Exception):
    """Expected launch failure; its message goes to stderr as-is."""


@dataclass
class Invocation:
    script_path: Path
    command: List[str] = field(default_factory=list)
    exit_code: Optional[int] = None


def prepare(base: Path | None = None) -> Invocation:
    """Locate the companion script and build the interpreter command line.

    Raises LaunchError when the script is not a regular file, in which case
    nothing gets spawned.
    """
    script = utils.script_path(base)
    log.debug("Launcher directory: %s", script.parent)
    if not script.is_file():
        raise LaunchError(MISSING_SCRIPT_MSG.format(path=script))
    return Invocation(script_path=script, command=utils.build_command(script))


def spawn_and_wait(command: List[str]) -> int:
    """Start *command* with inherited std streams and block until it exits."""
    try:
        proc = subprocess.Popen(command)
    except OSError as e:
        log.debug("Popen failed for %s: %s", command[0], e)
        raise LaunchError(SPAWN_FAILED_MSG.format(interpreter=command[0], error=e)) from e

    with proc:
        while True:
            try:
                code = proc.wait()
                break
            except KeyboardInterrupt:
                # The child shares the console and got the same Ctrl+C.
                continue

    if code < 0:
        # Killed by signal -code (POSIX); report it the way a shell would.
        code = 128 - code
    return code


def run() -> int:
    """Run RKN.ps1 and return the exit code the launcher should report."""
    try:
        inv = prepare()
        log.debug("Running: %s", utils.format_command_line(inv.command))
        inv.exit_code = spawn_and_wait(inv.command)
        log.debug("Child exited with %d", inv.exit_code)
        return inv.exit_code
    except LaunchError as e:
        print(str(e), file=sys.stderr)
        return 1
    except Exception as e:
        print(UNEXPECTED_MSG.format(error=e), file=sys.stderr)
        return 1


def main():
    if utils.DEBUG:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    if len(sys.argv) > 1:
        log.debug("Ignoring %d command-line argument(s)", len(sys.argv) - 1)
    sys.exit(run())


if __name__ == "__main__":
    main()

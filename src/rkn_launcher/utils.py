"""Configuration and path helpers for the RKN launcher."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List

# Configuration Constants
SCRIPT_NAME = "RKN.ps1"

POWERSHELL = os.environ.get(
    "RKN_POWERSHELL", "powershell.exe" if sys.platform == "win32" else "pwsh"
)
LAUNCHER_DIR_OVERRIDE = os.environ.get("RKN_LAUNCHER_DIR")
DEBUG = bool(os.environ.get("RKN_LAUNCHER_DEBUG"))


def launcher_dir() -> Path:
    """Return the absolute directory the launcher runs from.

    A frozen build (PyInstaller) lives next to ``sys.executable``. Otherwise
    the script is looked up beside the package modules, and when it is not
    bundled there, beside the running command (``sys.argv[0]``, e.g. the
    ``rkn-launcher`` console script). ``RKN_LAUNCHER_DIR`` overrides all.
    """
    if LAUNCHER_DIR_OVERRIDE:
        base = Path(LAUNCHER_DIR_OVERRIDE)
    elif getattr(sys, "frozen", False):
        base = Path(sys.executable).parent
    else:
        base = Path(__file__).parent
        if not (base / SCRIPT_NAME).is_file() and sys.argv and sys.argv[0]:
            base = Path(sys.argv[0]).parent
    return base.resolve()


def script_path(base: Path | None = None) -> Path:
    """Path of the companion script inside *base* (defaults to the launcher dir)."""
    if base is None:
        base = launcher_dir()
    return base / SCRIPT_NAME


def build_command(script: Path | str, interpreter: str | None = None) -> List[str]:
    """Argument vector that runs *script* under PowerShell without a profile."""
    return [
        interpreter or POWERSHELL,
        "-NoProfile",
        "-ExecutionPolicy", "Bypass",
        "-File", str(script),
    ]


def format_command_line(command: List[str]) -> str:
    """Render *command* for display, always double-quoting the ``-File`` target."""
    parts = []
    quote_next = False
    for arg in command:
        parts.append(f'"{arg}"' if quote_next else arg)
        quote_next = arg == "-File"
    return " ".join(parts)

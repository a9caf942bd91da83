"""Launcher that runs the bundled RKN.ps1 script through PowerShell."""

__version__ = "0.1.0"

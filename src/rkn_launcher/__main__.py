"""
Entry script for ``python -m rkn_launcher`` and PyInstaller builds.

PyInstaller expects a top-level script without package-relative imports,
so this delegates to the console entry point in rkn_launcher.launch.
"""

from rkn_launcher.launch import main


if __name__ == "__main__":
    main()

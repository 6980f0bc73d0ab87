"""Utility functions for file and directory management in unirss."""

from pathlib import Path


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', '.unirss', 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers found (e.g., running in /tmp)
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .unirss."""
    root = get_project_root()
    return root / '.unirss' / 'logs'


def init_unirss() -> Path:
    """Initialize the .unirss directory and return its path."""
    root = get_project_root()
    unirss_dir = root / '.unirss'
    (unirss_dir / 'logs').mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = unirss_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by unirss\n*\n')

    return unirss_dir

"""Top-level package for the Swoosh Toolkit.

Provides subpackages:
- swoosh_toolkit.collage – collage engine (slots, layouts, compose, history)
- swoosh_toolkit.compress – JPEG image compressor
- swoosh_toolkit.services – platform service contracts and implementations
- swoosh_toolkit.screens – screen controllers and their UI state
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("swoosh-toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]

"""Top-level package for the worksheet pagination toolkit.

Provides subpackages:
- worksheet_toolkit.core – element/page models, role classifier, schema validation
- worksheet_toolkit.layout – capacity model, height estimator, pagination engine
- worksheet_toolkit.measurement – off-screen render surface and measurement pass
- worksheet_toolkit.controller – WorksheetPaginator orchestration
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text().splitlines():
                if line.strip().startswith("version"):
                    # version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("worksheet-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]

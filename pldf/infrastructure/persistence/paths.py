from pathlib import Path

INSTALLED_HINTS_DIR = Path(".pldf") / "hints"
SOURCE_HINTS_DIR = Path("hints")


def get_default_hints_dir(path: str | Path = ".") -> Path:
    """Return the hints directory for a project.

    Prefers the installed layout (<path>/.pldf/hints) produced by release
    packages, then the source layout (<path>/hints).
    """
    root = Path(path).resolve()
    for candidate in (root / INSTALLED_HINTS_DIR, root / SOURCE_HINTS_DIR):
        if candidate.is_dir():
            return candidate
    return root / SOURCE_HINTS_DIR

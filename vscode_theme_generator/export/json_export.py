import json
import os
import tempfile
from pathlib import Path

from ..errors import ThemeFileError
from ..logger import get_logger

logger = get_logger(__name__)


def theme_to_json(theme):
    """Serialize a ThemeDocument as indented JSON with a trailing newline."""
    return json.dumps(theme.to_dict(), indent=2) + "\n"


def export_theme(theme, filepath):
    """Write a theme JSON file.

    Parent directories are created as needed. The content goes to a
    temporary file in the target directory first and is then renamed over
    ``filepath``, so readers never see a partial file.

    Args:
        theme: The ThemeDocument
        filepath: Output file path

    Returns:
        The Path written.

    Raises:
        ThemeFileError: If the file cannot be written.
    """
    path = Path(filepath)
    content = theme_to_json(theme)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise ThemeFileError(f"Failed to write theme: {exc}", {"filePath": str(path)}) from exc

    logger.debug(f"Wrote {len(content)} bytes to {path}")
    return path

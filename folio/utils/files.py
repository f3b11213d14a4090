"""
File utilities.
"""
import os
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(path: Union[str, Path], content: Union[str, bytes]) -> Path:
    """Write a file through a temporary sibling, then move it into place.

    Readers see either the old file or the complete new one. On failure the
    temporary file is removed and the OSError propagates.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = content.encode("utf-8") if isinstance(content, str) else content
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return path

"""
Image reference encoding.

Uploaded images are stored as embedded ``data:`` URIs so that they survive
serialization and reloads. Session-scoped handles such as ``blob:`` URLs are
never accepted as a stored reference.
"""
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

from ..errors import ImageEncodingError

logger = logging.getLogger(__name__)

DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024

PERSISTENT_PREFIXES = ("http://", "https://", "data:image/")


def is_persistent_reference(ref: str) -> bool:
    """Check that an image reference survives serialization.

    Returns:
        True for an empty reference, an http(s) URL or an embedded image
        data URI; False for anything else (``blob:`` URLs included).
    """
    if not ref:
        return True
    return ref.startswith(PERSISTENT_PREFIXES)


def encode_image_bytes(
    content: bytes,
    mime_type: str,
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES
) -> str:
    """Encode raw image bytes as a data URI.

    Args:
        content: Image file content
        mime_type: MIME type of the content, must be ``image/*``
        max_bytes: Upper bound on the raw content size

    Returns:
        A ``data:<mime>;base64,...`` URI
    """
    if not mime_type or not mime_type.startswith("image/"):
        raise ImageEncodingError(f"Not an image type: {mime_type!r}")
    if not content:
        raise ImageEncodingError("Image file is empty")
    if len(content) > max_bytes:
        raise ImageEncodingError(
            f"Image is {len(content)} bytes, the limit is {max_bytes} bytes"
        )
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def encode_image_file(
    path: Union[str, Path],
    mime_type: Optional[str] = None,
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES
) -> str:
    """Read an image file and encode it as a data URI.

    The MIME type is guessed from the file name when not given.
    """
    path = Path(path)
    if mime_type is None:
        mime_type, _ = mimetypes.guess_type(path.name)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ImageEncodingError(f"Could not read image {path}: {e}") from e
    logger.debug(f"Encoding image {path} ({mime_type}, {len(content)} bytes)")
    return encode_image_bytes(content, mime_type or "", max_bytes=max_bytes)

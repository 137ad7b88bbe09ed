"""File utilities."""
from __future__ import annotations

import base64
import mimetypes
from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


IMAGE_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".bmp",
    ".webp",
}

# Leading bytes of the formats a browser FileReader would hand us
_SIGNATURES = (
    (b"\x89PNG", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF8", "image/gif"),
    (b"BM", "image/bmp"),
)


def _sniff_mime(path: Path, head: bytes) -> str:
    """Guess the image MIME type from magic bytes, then from the extension."""
    for signature, mime in _SIGNATURES:
        if head.startswith(signature):
            return mime
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def read_image_as_data_url(path: str) -> str:
    """Read an image file and return it as a base64 ``data:`` URL.

    - Raises FileNotFoundError when the path does not exist.
    - Raises ValueError for empty files and files that are not images.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    data = p.read_bytes()
    if not data:
        raise ValueError(f"Empty file: {p.name}")
    mime = _sniff_mime(p, data[:16])
    if not mime.startswith("image/") and p.suffix.lower() not in IMAGE_EXTENSIONS:
        raise ValueError(f"Not an image file: {p.name}")
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"

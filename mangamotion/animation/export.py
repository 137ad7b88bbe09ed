"""Wrap a frame descriptor list into a downloadable JSON document."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, List, Optional

from mangamotion.utils.config import settings

EXPORT_TYPE = "animation"
EXPORT_FORMAT = "json"


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return _utc(now).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_filename(now: Optional[datetime] = None) -> str:
    millis = int(_utc(now).timestamp() * 1000)
    return f"{settings.export_filename_prefix}-{millis}.json"


def build_export_document(frames: List[Any], now: Optional[datetime] = None) -> dict:
    """Add export metadata around ``frames``; descriptors are passed through untouched."""
    if not isinstance(frames, list):
        raise ValueError(f"frames must be a JSON array, got {type(frames).__name__}")
    return {
        "type": EXPORT_TYPE,
        "frameCount": len(frames),
        "frames": frames,
        "format": EXPORT_FORMAT,
        "timestamp": iso_timestamp(now),
    }


def render_export(document: dict) -> str:
    return json.dumps(document, indent=2)

"""Build the frame descriptor list for one generation request."""
from __future__ import annotations

import logging
from typing import List

from mangamotion.animation.effects import compute_transform
from mangamotion.schemas import AnimationSettings, FrameDescriptor

logger = logging.getLogger(__name__)


def frame_progress(index: int, frame_count: int) -> float:
    """Normalized position of frame ``index`` in a sequence of ``frame_count``.

    A single-frame sequence sits at progress 0.
    """
    if frame_count <= 1:
        return 0.0
    return index / (frame_count - 1)


def generate_frames(image: str, settings: AnimationSettings) -> List[FrameDescriptor]:
    """Create ``settings.frame_count`` descriptors at evenly spaced progress values."""
    frames: List[FrameDescriptor] = []
    for i in range(settings.frame_count):
        progress = frame_progress(i, settings.frame_count)
        transform = compute_transform(settings.effect, progress, settings.motion_intensity)
        frames.append(FrameDescriptor(source_image_reference=image, progress=progress, transform=transform))
    logger.debug(
        "Generated %d frames (effect=%s, intensity=%s)",
        len(frames),
        settings.effect,
        settings.motion_intensity,
    )
    return frames

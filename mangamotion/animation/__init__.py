"""Animation module.

Components:
- effects: per-effect transform formulas and CSS rendering
- frame_generator: frame descriptor list for a generation request
- export: downloadable JSON document around a descriptor list
- playback: fixed-interval frame cycling
"""

from mangamotion.animation.effects import (
    DEFAULT_EFFECT,
    EFFECT_CATALOG,
    Effect,
    EffectInfo,
    compute_transform,
    resolve_effect,
    to_css,
)

from mangamotion.animation.frame_generator import frame_progress, generate_frames

from mangamotion.animation.export import (
    build_export_document,
    export_filename,
    iso_timestamp,
    render_export,
)

from mangamotion.animation.playback import Playback

__all__ = [
    # Effects
    "DEFAULT_EFFECT",
    "EFFECT_CATALOG",
    "Effect",
    "EffectInfo",
    "compute_transform",
    "resolve_effect",
    "to_css",
    # Frames
    "frame_progress",
    "generate_frames",
    # Export
    "build_export_document",
    "export_filename",
    "iso_timestamp",
    "render_export",
    # Playback
    "Playback",
]

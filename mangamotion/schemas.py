"""Pydantic schemas for API."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

from mangamotion.utils.config import settings as app_settings


class AnimationSettings(BaseModel):
    frame_count: int = Field(default_factory=lambda: app_settings.default_frame_count, alias="frameCount")
    motion_intensity: float = Field(
        default_factory=lambda: app_settings.default_motion_intensity, alias="motionIntensity"
    )
    effect: str = Field(default_factory=lambda: app_settings.default_effect)

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "allow_inf_nan": False,
    }

    def clamped(self) -> "AnimationSettings":
        """Return a copy with numeric values pulled into the configured ranges."""
        frame_count = min(max(self.frame_count, app_settings.min_frame_count), app_settings.max_frame_count)
        intensity = min(
            max(self.motion_intensity, app_settings.min_motion_intensity),
            app_settings.max_motion_intensity,
        )
        return AnimationSettings(frame_count=frame_count, motion_intensity=intensity, effect=self.effect)


class GenerateRequest(BaseModel):
    image: Optional[str] = None
    settings: Optional[AnimationSettings] = None


class FrameDescriptor(BaseModel):
    source_image_reference: str = Field(..., alias="sourceImageReference")
    progress: float
    transform: Dict[str, float]

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }

    def fragment_reference(self) -> str:
        """Encode the frame as ``<image>#frame=<progress>&transform=<json>``."""
        payload = quote(json.dumps(self.transform, separators=(",", ":")), safe="")
        return f"{self.source_image_reference}#frame={self.progress}&transform={payload}"


class GenerateResponse(BaseModel):
    success: bool = True
    frames: List[FrameDescriptor]
    frame_count: int = Field(..., alias="frameCount")
    settings: AnimationSettings

    model_config = {
        "populate_by_name": True,
    }


class ExportRequest(BaseModel):
    frames: Optional[List[Any]] = None


class EffectResponse(BaseModel):
    id: str
    label: str
    fields: List[str]


class EffectCatalogResponse(BaseModel):
    effects: List[EffectResponse]
    defaults: AnimationSettings
    limits: Dict[str, Dict[str, float]]
    playback_interval_ms: int = Field(..., alias="playbackIntervalMs")

    model_config = {
        "populate_by_name": True,
    }


class ErrorResponse(BaseModel):
    error: str

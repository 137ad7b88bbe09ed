"""REST API server."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from mangamotion.animation.effects import EFFECT_CATALOG
from mangamotion.animation.export import build_export_document, export_filename, render_export
from mangamotion.animation.frame_generator import generate_frames
from mangamotion.schemas import (
    AnimationSettings,
    EffectCatalogResponse,
    EffectResponse,
    ExportRequest,
    GenerateRequest,
    GenerateResponse,
)
from mangamotion.utils.config import settings
from mangamotion.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="MangaMotion API")

ui_dir = Path(__file__).resolve().parent.parent / "ui" / "dist"
if ui_dir.exists():
    app.mount("/ui", StaticFiles(directory=str(ui_dir), html=True), name="ui")
    assets_dir = ui_dir / "assets"
    if assets_dir.exists():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # loc/msg only; the rejected input can be a whole base64 image
    problems = [(err.get("loc"), err.get("msg")) for err in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, problems)
    return JSONResponse(status_code=400, content={"error": "Invalid request payload"})


@app.get("/")
async def index():
    if ui_dir.exists():
        return FileResponse(ui_dir / "index.html")
    return {"status": "ok"}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/effects", response_model=EffectCatalogResponse)
def list_effects():
    """Effect choices plus slider defaults and limits for the upload form."""
    return EffectCatalogResponse(
        effects=[EffectResponse(**info.to_dict()) for info in EFFECT_CATALOG],
        defaults=AnimationSettings(),
        limits={
            "frameCount": {"min": settings.min_frame_count, "max": settings.max_frame_count},
            "motionIntensity": {"min": settings.min_motion_intensity, "max": settings.max_motion_intensity},
        },
        playback_interval_ms=settings.playback_interval_ms,
    )


@app.post("/api/generate-anime", response_model=GenerateResponse)
def generate_anime(payload: GenerateRequest):
    """Compute one transform descriptor per frame for the uploaded image."""
    if not payload.image:
        return JSONResponse(status_code=400, content={"error": "No image provided"})

    animation_settings = (payload.settings or AnimationSettings()).clamped()
    try:
        frames = generate_frames(payload.image, animation_settings)
    except Exception:
        logger.exception("Error generating animation")
        return JSONResponse(status_code=500, content={"error": "Failed to generate animation"})

    logger.info("Generated %d frames with effect %s", len(frames), animation_settings.effect)
    return GenerateResponse(frames=frames, frame_count=len(frames), settings=animation_settings)


def _download_response(frames: List[Any]) -> Response:
    document = build_export_document(frames)
    filename = export_filename()
    return Response(
        content=render_export(document),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/api/download")
def download_frames(frames: Optional[str] = Query(default=None)):
    """Return the frame list as a JSON attachment.

    ``frames`` is the URL-encoded JSON array produced by /api/generate-anime.
    """
    if not frames:
        return JSONResponse(status_code=400, content={"error": "No frames provided"})
    try:
        return _download_response(json.loads(frames))
    except Exception:
        logger.exception("Error creating download")
        return JSONResponse(status_code=500, content={"error": "Failed to create download"})


@app.post("/api/download")
def download_frames_body(payload: ExportRequest):
    """Same as the GET variant for frame lists too long for a query string."""
    if payload.frames is None:
        return JSONResponse(status_code=400, content={"error": "No frames provided"})
    try:
        return _download_response(payload.frames)
    except Exception:
        logger.exception("Error creating download")
        return JSONResponse(status_code=500, content={"error": "Failed to create download"})

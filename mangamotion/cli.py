"""CLI interface."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from mangamotion.animation.effects import EFFECT_CATALOG, to_css
from mangamotion.animation.export import build_export_document, render_export
from mangamotion.animation.frame_generator import generate_frames
from mangamotion.animation.playback import Playback
from mangamotion.schemas import AnimationSettings
from mangamotion.utils.config import settings
from mangamotion.utils.file_utils import ensure_dir, read_image_as_data_url
from mangamotion.utils.logging_config import configure_logging

app = typer.Typer(add_completion=False, help="Generate CSS animation frames for a still image.")


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level.")):
    configure_logging(log_level)


@app.command()
def generate(
    image: str = typer.Argument(..., help="Path to the image file."),
    effect: str = typer.Option(settings.default_effect, "--effect", "-e"),
    frames: int = typer.Option(settings.default_frame_count, "--frames", "-n"),
    intensity: float = typer.Option(settings.default_motion_intensity, "--intensity", "-i"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the export document here."),
    css: bool = typer.Option(False, "--css", help="Print the CSS transform and filter of each frame instead."),
):
    """Generate frame descriptors and print (or save) the export document."""
    try:
        data_url = read_image_as_data_url(image)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="IMAGE")
    try:
        requested = AnimationSettings(frame_count=frames, motion_intensity=intensity, effect=effect)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--intensity")
    animation_settings = requested.clamped()
    descriptors = generate_frames(data_url, animation_settings)
    if css:
        playback = Playback(frame_count=len(descriptors))
        for index, frame in enumerate(descriptors):
            rendered = to_css(frame.transform)
            typer.echo(
                f"{index}\t{playback.offset_ms(index)}ms\t{frame.progress:.3f}\t"
                f"transform: {rendered['transform']}; filter: {rendered['filter']};"
            )
        return
    document = build_export_document([frame.model_dump(by_alias=True) for frame in descriptors])
    text = render_export(document)
    if output:
        target = Path(output)
        ensure_dir(str(target.parent))
        target.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {document['frameCount']} frames to {target}")
    else:
        typer.echo(text)


@app.command()
def effects():
    """List the available effects."""
    typer.echo(json.dumps([info.to_dict() for info in EFFECT_CATALOG], indent=2))


@app.command()
def serve(
    host: str = typer.Option(settings.host, "--host"),
    port: int = typer.Option(settings.port, "--port"),
    reload: bool = typer.Option(False, "--reload"),
):
    """Run the API server."""
    import uvicorn

    uvicorn.run("mangamotion.server:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()

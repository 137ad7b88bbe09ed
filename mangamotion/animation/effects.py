"""Closed-form transform formulas for each animation effect."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple


class Effect(str, Enum):
    """Effects the client can pick from."""
    PAN_ZOOM = "pan-zoom"
    PARALLAX = "parallax"
    MOTION_BLUR = "motion-blur"
    CHARACTER_ANIMATE = "character-animate"


DEFAULT_EFFECT = Effect.PAN_ZOOM


def _pan_zoom(p: float, k: float) -> Dict[str, float]:
    return {
        "scale": 1 + (p * k / 100),
        "translateX": math.sin(p * math.pi) * (k / 2),
        "translateY": -p * (k / 4),
    }


def _parallax(p: float, k: float) -> Dict[str, float]:
    return {
        "scale": 1 + (math.sin(p * math.pi * 2) * k / 200),
        "translateX": math.cos(p * math.pi * 2) * (k / 3),
        "translateY": math.sin(p * math.pi * 4) * (k / 5),
    }


def _motion_blur(p: float, k: float) -> Dict[str, float]:
    return {
        "scale": 1 + (p * 0.1),
        "translateX": p * (k / 2),
        "blur": (1 - abs(p - 0.5) * 2) * (k / 50),
    }


def _character_animate(p: float, k: float) -> Dict[str, float]:
    return {
        "scale": 1 + math.sin(p * math.pi) * (k / 150),
        "translateX": math.sin(p * math.pi * 3) * (k / 4),
        "translateY": math.cos(p * math.pi * 2) * (k / 6),
        "rotate": math.sin(p * math.pi * 2) * (k / 50),
    }


_FORMULAS: Dict[Effect, Callable[[float, float], Dict[str, float]]] = {
    Effect.PAN_ZOOM: _pan_zoom,
    Effect.PARALLAX: _parallax,
    Effect.MOTION_BLUR: _motion_blur,
    Effect.CHARACTER_ANIMATE: _character_animate,
}


@dataclass(frozen=True)
class EffectInfo:
    effect: Effect
    label: str
    fields: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {"id": self.effect.value, "label": self.label, "fields": list(self.fields)}


EFFECT_CATALOG: List[EffectInfo] = [
    EffectInfo(Effect.PAN_ZOOM, "Pan & Zoom", ("scale", "translateX", "translateY")),
    EffectInfo(Effect.PARALLAX, "Parallax Layers", ("scale", "translateX", "translateY")),
    EffectInfo(Effect.MOTION_BLUR, "Motion Blur", ("scale", "translateX", "blur")),
    EffectInfo(Effect.CHARACTER_ANIMATE, "Character Animation", ("scale", "translateX", "translateY", "rotate")),
]


def resolve_effect(name: object) -> Effect:
    """Map an arbitrary effect name to a known effect, defaulting to pan-zoom."""
    if isinstance(name, Effect):
        return name
    try:
        return Effect(name)
    except ValueError:
        return DEFAULT_EFFECT


def compute_transform(effect: object, progress: float, intensity: float) -> Dict[str, float]:
    """Return the transform record for one frame.

    ``progress`` is the normalized frame position in [0, 1] and ``intensity``
    the motion intensity (10-100). Unknown effects use the pan-zoom formula.
    """
    formula = _FORMULAS[resolve_effect(effect)]
    return formula(float(progress), float(intensity))


def _num(value: float, digits: int = 3) -> str:
    # + 0.0 folds -0.0 into 0.0
    return f"{round(value, digits) + 0.0:.{digits}f}"


def to_css(transform: Dict[str, float]) -> Dict[str, str]:
    """Render a transform record as CSS ``transform`` and ``filter`` values."""
    parts = [
        f"translate({_num(transform.get('translateX', 0.0))}px, {_num(transform.get('translateY', 0.0))}px)",
        f"scale({_num(transform.get('scale', 1.0), 4)})",
    ]
    if "rotate" in transform:
        parts.append(f"rotate({_num(transform['rotate'])}deg)")
    blur = round(transform.get("blur", 0.0), 3)
    css_filter = f"blur({_num(blur)}px)" if blur else "none"
    return {"transform": " ".join(parts), "filter": css_filter}

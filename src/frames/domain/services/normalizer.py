"""Repair raw frame parameters into a geometrically consistent set."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any

from frames.domain.value_objects import (
    DEFAULT_PARAMETERS,
    NUMERIC_FIELDS,
    FrameParameters,
    FrameStyle,
)

logger = logging.getLogger(__name__)

# Smallest lip the repair rules will produce, in mm
MIN_LIP = 2.0
LIP_WIDTH_RATIO = 0.45
LIP_DEPTH_RATIO = 0.35


def _coerce(value: Any) -> float:
    """Parse a user value as float; anything unparseable becomes NaN."""
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _fit_lip(lip: float, envelope: float, ratio: float) -> float:
    if lip < envelope:
        return lip
    repaired = max(MIN_LIP, envelope * ratio)
    if repaired >= envelope:
        # Envelopes of MIN_LIP or less cannot hold the minimum lip
        repaired = envelope * ratio
    return repaired


def normalize(raw: FrameParameters) -> FrameParameters:
    """Return a valid parameter set derived from ``raw``. Never raises.

    Rules, in order:
      1. Numeric fields that are not finite positive numbers take their
         default value.
      2. A lip as wide as the face shrinks to ``max(2, face_width * 0.45)``.
      3. A lip as deep as the profile shrinks to
         ``max(2, profile_depth * 0.35)``.
      4. Unknown styles fall back to the default style.

    Args:
        raw: Parameters as entered; any field may hold junk.

    Returns:
        Normalized FrameParameters. Normalizing the result again is a no-op.
    """
    values: dict[str, Any] = {}
    for name in NUMERIC_FIELDS:
        value = _coerce(getattr(raw, name))
        if not math.isfinite(value) or value <= 0:
            fallback = getattr(DEFAULT_PARAMETERS, name)
            if getattr(raw, name) is None:
                logger.debug(f"No {name} given, using default {fallback}")
            else:
                logger.warning(
                    f"Invalid {name} {getattr(raw, name)!r}, using default {fallback}"
                )
            value = float(fallback)
        values[name] = value

    lip_width = _fit_lip(values["lip_width"], values["face_width"], LIP_WIDTH_RATIO)
    if lip_width != values["lip_width"]:
        logger.warning(
            f"lip_width {values['lip_width']} does not fit face_width "
            f"{values['face_width']}, reduced to {lip_width}"
        )
        values["lip_width"] = lip_width

    lip_depth = _fit_lip(values["lip_depth"], values["profile_depth"], LIP_DEPTH_RATIO)
    if lip_depth != values["lip_depth"]:
        logger.warning(
            f"lip_depth {values['lip_depth']} does not fit profile_depth "
            f"{values['profile_depth']}, reduced to {lip_depth}"
        )
        values["lip_depth"] = lip_depth

    style = FrameStyle.lookup(raw.style)
    if style is None:
        if raw.style is not None:
            logger.warning(
                f"Unknown style {raw.style!r}, using {DEFAULT_PARAMETERS.style.value}"
            )
        style = DEFAULT_PARAMETERS.style

    return replace(raw, style=style, **values)


def is_normalized(params: FrameParameters) -> bool:
    """True when ``params`` already satisfies every normalization rule."""
    for name in NUMERIC_FIELDS:
        value = getattr(params, name)
        if not isinstance(value, float) or not math.isfinite(value) or value <= 0:
            return False
    return (
        isinstance(params.style, FrameStyle)
        and params.lip_width < params.face_width
        and params.lip_depth < params.profile_depth
    )

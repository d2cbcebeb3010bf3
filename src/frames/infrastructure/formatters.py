"""Console formatters for frame summaries."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from frames.domain import STYLE_POLICIES, FrameParameters

if TYPE_CHECKING:
    from frames.application.dtos import FrameSummary


class FrameSummaryFormatter:
    """Formats a frame summary as a text report."""

    def format(self, summary: FrameSummary) -> str:
        lines = [
            "FRAME SUMMARY",
            "=" * 60,
            f"Style:              {summary.style.value}",
            f"Inner opening:      {summary.inner_width:.1f} x {summary.inner_height:.1f} mm",
            f"Outer size:         {summary.outer_width:.1f} x {summary.outer_height:.1f} mm",
            f"Top/bottom rails:   {summary.horizontal_length:.1f} mm",
            f"Left/right rails:   {summary.vertical_length:.1f} mm",
            f"Corner inserts:     {'yes' if summary.corner_inserts else 'no'}",
            "",
            f"{'Piece':<24}{'Kind':<16}{'Length':>10}{'Vertices':>10}",
            "-" * 60,
        ]
        for piece in summary.pieces:
            length = f"{piece.length:.1f}" if piece.length else "-"
            lines.append(
                f"{piece.name:<24}{piece.kind:<16}{length:>10}{piece.vertices:>10}"
            )
        lines.append("=" * 60)
        lines.append(summary.describe())
        return "\n".join(lines)


class JsonSummaryFormatter:
    """Formats a frame summary as JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format(self, summary: FrameSummary) -> str:
        return json.dumps(summary.to_dict(), indent=self.indent)


class StyleTableFormatter:
    """Lists the available styles and what each one changes."""

    def format(self) -> str:
        lines = [f"{'Style':<10}{'Bevel':<8}{'Surface':<11}{'Inserts':<9}{'Color':<9}Description"]
        lines.append("-" * 80)
        for style, policy in STYLE_POLICIES.items():
            lines.append(
                f"{style.value:<10}"
                f"{'yes' if policy.bevel else 'no':<8}"
                f"{policy.surface_name:<11}"
                f"{'yes' if policy.corner_inserts else 'no':<9}"
                f"{policy.material.hex_color:<9}"
                f"{policy.description}"
            )
        return "\n".join(lines)


class ParametersFormatter:
    """Lists parameter values, one per line."""

    def format(self, params: FrameParameters) -> str:
        return "\n".join(f"{name:<14}{value}" for name, value in params.to_dict().items())

"""Typer CLI for parametric frame generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from frames.application import FrameInput, ServiceFactory
from frames.application.config import (
    ConfigError,
    FrameConfiguration,
    load_config,
    merge_config_with_cli,
)
from frames.domain import DEFAULT_PARAMETERS, FrameGenerationError, MeshSettings, normalize
from frames.infrastructure import (
    FrameSummaryFormatter,
    JsonSummaryFormatter,
    ParametersFormatter,
    StyleTableFormatter,
)
from frames.infrastructure.exporters import ExporterRegistry, ExportManager

app = typer.Typer(
    name="frames",
    help="Generate printable picture frames from an opening size.",
)

# Numeric options are taken as text so that anything typed is accepted
# and repaired by the normalizer, the same as in the editor form.
WidthOption = Annotated[str | None, typer.Option("--width", "-w", help="Opening width in mm")]
HeightOption = Annotated[str | None, typer.Option("--height", "-h", help="Opening height in mm")]
FaceWidthOption = Annotated[str | None, typer.Option("--face-width", help="Rail face width in mm")]
ProfileDepthOption = Annotated[
    str | None, typer.Option("--profile-depth", help="Rail depth front to back in mm")
]
LipWidthOption = Annotated[str | None, typer.Option("--lip-width", help="Rebate lip width in mm")]
LipDepthOption = Annotated[str | None, typer.Option("--lip-depth", help="Rebate lip depth in mm")]
ClearanceOption = Annotated[
    str | None, typer.Option("--clearance", help="Extra room around the panel in mm")
]
StyleOption = Annotated[
    str | None, typer.Option("--style", "-s", help="Frame style: minimal, bold, wood")
]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Path to JSON configuration file")
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate printable picture frames from an opening size."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _resolve_config(config_file: Path | None, **overrides) -> FrameConfiguration:
    """Load the config file (or an empty one) and apply CLI overrides."""
    if config_file is None:
        config = FrameConfiguration(schema_version="1.0")
    else:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    try:
        return merge_config_with_cli(config, **overrides)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _factory_for(config: FrameConfiguration) -> ServiceFactory:
    return ServiceFactory(
        settings=config.mesh.to_settings(),
        stl_mode=config.output.stl_mode,
        corner_insert_files=config.output.corner_insert_files,
        archive_name=config.output.archive_name,
    )


@app.command()
def generate(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    face_width: FaceWidthOption = None,
    profile_depth: ProfileDepthOption = None,
    lip_width: LipWidthOption = None,
    lip_depth: LipDepthOption = None,
    clearance: ClearanceOption = None,
    style: StyleOption = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: summary, json")
    ] = "summary",
) -> None:
    """Build a frame and print its dimensions and pieces.

    Examples:
        frames generate --width 300 --height 200
        frames generate --config my-frame.json --style wood --format json
    """
    if output_format not in ("summary", "json"):
        typer.echo(f"Error: unknown format '{output_format}' (use summary or json)", err=True)
        raise typer.Exit(code=1)

    config = _resolve_config(
        config_file,
        width=width,
        height=height,
        face_width=face_width,
        profile_depth=profile_depth,
        lip_width=lip_width,
        lip_depth=lip_depth,
        clearance=clearance,
        style=style,
    )

    command = _factory_for(config).create_generate_command()
    try:
        result = command.execute(config.frame.to_input())
    except FrameGenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonSummaryFormatter().format(result.summary))
    else:
        typer.echo(FrameSummaryFormatter().format(result.summary))


@app.command()
def export(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    face_width: FaceWidthOption = None,
    profile_depth: ProfileDepthOption = None,
    lip_width: LipWidthOption = None,
    lip_depth: LipDepthOption = None,
    clearance: ClearanceOption = None,
    style: StyleOption = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Archive path (default: archive name from config)"),
    ] = None,
    stl_mode: Annotated[
        str | None, typer.Option("--mode", help="STL encoding: binary, ascii")
    ] = None,
    corner_insert_files: Annotated[
        int | None, typer.Option("--inserts", help="Corner insert copies to include (1-4)")
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats instead of the zip: stl-zip,stl,scene-json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for --output-formats"),
    ] = None,
) -> None:
    """Write the printable STL pieces as a zip archive.

    Examples:
        frames export --width 300 --height 200 -o frame.zip
        frames export --config my-frame.json --output-formats all --output-dir ./out
    """
    config = _resolve_config(
        config_file,
        width=width,
        height=height,
        face_width=face_width,
        profile_depth=profile_depth,
        lip_width=lip_width,
        lip_depth=lip_depth,
        clearance=clearance,
        style=style,
        stl_mode=stl_mode,
        corner_insert_files=corner_insert_files,
    )
    factory = _factory_for(config)
    frame_input = config.frame.to_input()

    if output_formats is not None:
        _export_formats(factory, frame_input, output_formats, output_dir or Path.cwd())
        return

    try:
        result = factory.create_export_command().execute(frame_input)
    except FrameGenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    path = output_file or Path(result.archive_name)
    try:
        path.write_bytes(result.archive)
    except OSError as e:
        typer.echo(f"Error writing {path}: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {path} ({result.size} bytes)")
    for name in result.file_names:
        typer.echo(f"  {name}")


def _export_formats(
    factory: ServiceFactory,
    frame_input: FrameInput,
    output_formats: str,
    output_dir: Path,
) -> None:
    if output_formats.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid or not formats:
        typer.echo(f"Unknown formats: {', '.join(invalid) or '(none)'}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    result = factory.create_generate_command().execute(frame_input)
    try:
        written = ExportManager(output_dir).export_all(formats, result)
    except OSError as e:
        typer.echo(f"Error exporting: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Exported {len(written)} file(s) to {output_dir}:")
    for format_name, path in written.items():
        typer.echo(f"  {format_name}: {path.name}")


@app.command()
def styles() -> None:
    """List the available frame styles."""
    typer.echo(StyleTableFormatter().format())


@app.command()
def defaults(
    width: WidthOption = None,
    height: HeightOption = None,
    face_width: FaceWidthOption = None,
    profile_depth: ProfileDepthOption = None,
    lip_width: LipWidthOption = None,
    lip_depth: LipDepthOption = None,
    clearance: ClearanceOption = None,
    style: StyleOption = None,
) -> None:
    """Print the default parameters, or how given values would be normalized.

    Example:
        frames defaults --face-width 3 --lip-width 10
    """
    given = FrameInput(
        width=width,
        height=height,
        face_width=face_width,
        profile_depth=profile_depth,
        lip_width=lip_width,
        lip_depth=lip_depth,
        clearance=clearance,
        style=style,
    )
    if all(value is None for value in vars(given).values()):
        params = DEFAULT_PARAMETERS
    else:
        params = normalize(given.to_parameters())
    typer.echo(ParametersFormatter().format(params))
    typer.echo(f"{'segment':<14}{MeshSettings().segment_length}")


if __name__ == "__main__":
    app()

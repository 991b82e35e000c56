"""Click CLI entry point for pillargen."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from pillargen import __version__
from pillargen.errors import PillarError
from pillargen.exporter import export_gltf
from pillargen.generation import generate_spec
from pillargen.grammar import build_rule_map, expand as expand_symbols
from pillargen.inspection import (
    DEFAULT_SYMBOL_LIMIT,
    inspect_spec,
    render_text as render_inspection_text,
    validate_selected_pillar_ids,
)
from pillargen.manifest import build_manifest
from pillargen.models import PillarSpec
from pillargen.parser import parse_yaml
from pillargen.validation import validate
from pillargen.warning_policy import WarningPolicy, parse_code_list

_SPEC_SUFFIXES = [".pillar.yaml", ".pillar.yml", ".yaml", ".yml"]


def _build_warning_policy(
    warn_as_error: str | None, suppress_warning: str | None
) -> WarningPolicy | None:
    """Parse CLI warning options into a WarningPolicy, or None if unset."""
    if warn_as_error is None and suppress_warning is None:
        return None
    try:
        wae = parse_code_list(warn_as_error) if warn_as_error else frozenset()
        sup = parse_code_list(suppress_warning) if suppress_warning else frozenset()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return WarningPolicy(warn_as_error=wae, suppress=sup)


def _load_spec(input_file: Path) -> PillarSpec:
    spec = parse_yaml(input_file)
    validate(spec)
    return spec


def _default_output(input_file: Path) -> Path:
    stem = input_file.name
    for suffix in _SPEC_SUFFIXES:
        if stem.endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    return input_file.parent / f"{stem}.glb"


_warn_as_error_option = click.option(
    "--warn-as-error",
    "warn_as_error",
    type=str,
    default=None,
    help="Comma-separated W-codes or names to treat as errors (e.g. W01,DuplicateRuleSymbol).",
)
_suppress_warning_option = click.option(
    "--suppress-warning",
    "suppress_warning",
    type=str,
    default=None,
    help="Comma-separated W-codes or names to suppress (e.g. OriginPoint).",
)


@click.group()
@click.version_option(version=__version__, prog_name="pillargen")
def main() -> None:
    """pillargen: L-system driven procedural pillar meshes."""


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Output GLB file path. Defaults to input name with .glb extension.",
)
@_warn_as_error_option
@_suppress_warning_option
@click.option(
    "--emit-manifest",
    "emit_manifest",
    type=click.Path(path_type=Path),
    default=None,
    help="Write a JSON build manifest to this path after a successful build.",
)
def build(
    input_file: Path,
    output: Path | None,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
    emit_manifest: Path | None = None,
) -> None:
    """Build a .pillar.yaml spec into a GLB."""
    warning_policy = _build_warning_policy(warn_as_error, suppress_warning)
    if output is None:
        output = _default_output(input_file)

    try:
        spec = _load_spec(input_file)
        generated = generate_spec(spec, warning_policy=warning_policy)
        export_gltf(generated, output)
        if emit_manifest is not None:
            manifest = build_manifest(
                input_path=input_file,
                output_path=output,
                generated=generated,
                command_args=sys.argv[1:],
            )
            emit_manifest.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        click.echo(f"Built: {output}")
    except PillarError as e:
        raise click.ClickException(str(e))


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Inspection output format.",
)
@click.option(
    "--pillar",
    "pillar_ids",
    multiple=True,
    help="Restrict output to selected pillar id(s). May be repeated.",
)
@click.option(
    "--max-symbols",
    "max_symbols",
    type=click.IntRange(min=0),
    default=DEFAULT_SYMBOL_LIMIT,
    show_default=True,
    help="Skip mesh statistics for L-systems whose expansion would exceed this length.",
)
@_warn_as_error_option
@_suppress_warning_option
def inspect(
    input_file: Path,
    output_format: str = "text",
    pillar_ids: tuple[str, ...] = (),
    max_symbols: int = DEFAULT_SYMBOL_LIMIT,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Report expansion growth and mesh statistics without writing a GLB."""
    warning_policy = _build_warning_policy(warn_as_error, suppress_warning)

    try:
        spec = _load_spec(input_file)
        selected = set(pillar_ids)
        unknown_ids = validate_selected_pillar_ids(spec, selected)
        if unknown_ids:
            raise click.UsageError(
                "Unknown pillar id(s): " + ", ".join(repr(pid) for pid in unknown_ids)
            )
        payload = inspect_spec(
            spec,
            selected_pillar_ids=selected or None,
            warning_policy=warning_policy,
            symbol_limit=max_symbols,
        )
    except PillarError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(render_inspection_text(payload), nl=False)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--pillar", "pillar_id", required=True, help="Id of the lsystem pillar to expand.")
@click.option(
    "--iterations",
    type=click.IntRange(min=0),
    default=None,
    help="Override the pillar's iteration count.",
)
def expand(input_file: Path, pillar_id: str, iterations: int | None = None) -> None:
    """Print the expanded L-system string of one pillar."""
    try:
        spec = _load_spec(input_file)
    except PillarError as e:
        raise click.ClickException(str(e))

    pillar = next((p for p in spec.pillars if p.id == pillar_id), None)
    if pillar is None:
        raise click.UsageError(f"Unknown pillar id: {pillar_id!r}")
    if pillar.type != "lsystem":
        raise click.UsageError(f"Pillar {pillar_id!r} is {pillar.type!r}, not 'lsystem'")

    rules = build_rule_map(pillar.rules)
    n = pillar.iterations if iterations is None else iterations
    click.echo(expand_symbols(pillar.axiom, rules, n))

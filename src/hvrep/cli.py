from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .config.models import SelectionConfig, validate_config_payload
from .generate.superellipse import superellipse_segments
from .geometry.scalar import SCALARS, get_scalar
from .scoring.pareto import hypervolume_2d
from .selection.model import Selector
from .utils.io import (
    EMISSION_HEADER,
    dump_json,
    emission_record,
    format_emission,
    format_segments,
    load_yaml_or_json,
    read_segments,
    write_text,
)
from .utils.run import log_event, new_run_id, snapshot_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hvrep",
        description=(
            "Hypervolume-based representative points from piecewise-linear Pareto fronts."
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hvrep {__version__}",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    select_parser = subparsers.add_parser(
        "select", help="Emit points in order of hypervolume contribution"
    )
    select_parser.add_argument(
        "-n", "--num", type=int, default=None, help="Number of points to return (>= 1)"
    )
    select_parser.add_argument(
        "-r",
        "--reference",
        type=float,
        nargs="+",
        default=None,
        help="Reference point coordinates (defaults to the chain's lower-left corner)",
    )
    select_parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="File with the piecewise approximation (stdin is used if not set)",
    )
    select_parser.add_argument(
        "--dtype", type=str, default=None, choices=sorted(SCALARS), help="Scalar type"
    )
    select_parser.add_argument(
        "--precision", type=int, default=None, help="Decimals in tab-separated output"
    )
    select_parser.add_argument(
        "--format", dest="output_format", default=None, choices=["tsv", "json"]
    )
    select_parser.add_argument(
        "--config", type=str, default=None, help="Optional YAML/JSON selection config"
    )
    select_parser.add_argument(
        "--log-run",
        action="store_true",
        help="Record the run under artifacts/<run_id>/logs/run.jsonl",
    )

    gen_parser = subparsers.add_parser(
        "generate", help="Write segments approximating a superellipse |x|^d + |y|^d = 1"
    )
    gen_parser.add_argument("-n", "--num", type=int, required=True, help="Number of segments")
    gen_parser.add_argument("-d", type=float, required=True, help="Shape exponent (> 0)")
    gen_parser.add_argument(
        "--out", type=str, required=False, help="Optional path to write the segments"
    )

    schema_parser = subparsers.add_parser("schema", help="Print the selection config JSON Schema")
    schema_parser.add_argument(
        "--out",
        type=str,
        required=False,
        help="Optional path to write the JSON schema",
    )

    return parser


def _select_config(args: argparse.Namespace) -> SelectionConfig:
    payload = load_yaml_or_json(args.config) if args.config else {}
    overrides = {
        "num": args.num,
        "reference": args.reference,
        "dtype": args.dtype,
        "precision": args.precision,
        "input": args.file,
        "output_format": args.output_format,
    }
    payload.update({k: v for k, v in overrides.items() if v is not None})
    return validate_config_payload(payload)


def _cmd_select(args: argparse.Namespace) -> int:
    config = _select_config(args)
    scalar = get_scalar(config.dtype)
    chain = read_segments(config.input, scalar)
    selector = Selector(chain, config.reference, scalar)
    emissions = selector.solve(config.num)

    run_id = None
    if args.log_run:
        run_id = new_run_id("select")
        snapshot_config(run_id, config.model_dump())
        log_event(run_id, "run_start", num=config.num, dtype=config.dtype)
        log_event(
            run_id,
            "selector_built",
            segments=len(selector.segments),
            max_hv=float(selector.maximum),
        )
        for i, e in enumerate(emissions, start=1):
            log_event(run_id, "emission", **emission_record(i, e))
        log_event(run_id, "run_end", emitted=len(emissions), exhausted=selector.exhausted)
        sys.stderr.write(json.dumps({"run_id": run_id}) + "\n")

    if config.output_format == "json":
        points = [[float(e.point[0]), float(e.point[1])] for e in emissions]
        ref = (float(selector.reference[0]), float(selector.reference[1]))
        doc = {
            "reference": list(ref),
            "max_hv": float(selector.maximum),
            "points_hv": hypervolume_2d(points, ref),
            "emissions": [emission_record(i, e) for i, e in enumerate(emissions, start=1)],
        }
        if run_id:
            doc["run_id"] = run_id
        sys.stdout.write(dump_json(doc) + "\n")
        return 0

    lines = [EMISSION_HEADER]
    lines.extend(
        format_emission(i, e, config.precision) for i, e in enumerate(emissions, start=1)
    )
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


def _cmd_generate(num: int, d: float, out: str | None) -> int:
    data = format_segments(superellipse_segments(num, d))
    if out:
        write_text(out, data)
        sys.stdout.write(f"Wrote {num} segments to {out}\n")
    else:
        sys.stdout.write(data)
    return 0


def _cmd_schema(out: str | None) -> int:
    schema = SelectionConfig.json_schema()
    data = dump_json(schema)
    if out:
        Path(out).write_text(data, encoding="utf-8")
        sys.stdout.write(f"Wrote schema to {out}\n")
    else:
        sys.stdout.write(data + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "select":
            return _cmd_select(args)
        if args.command == "generate":
            return _cmd_generate(args.num, args.d, args.out)
        if args.command == "schema":
            return _cmd_schema(args.out)
    except (ValueError, FileNotFoundError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    # Default: print help
    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

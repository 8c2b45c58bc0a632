from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from ..geometry.scalar import FLOAT64, Scalar
from ..geometry.segment import Point, Segment
from ..selection.model import Emission

EMISSION_HEADER = "index\thv_contribution\thv_current\thv_relative\tpoint"


def load_yaml_or_json(path: str | Path) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Top-level config must be a mapping/dict")
    return data


def dump_json(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def write_text(path: str | Path, content: str) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def parse_segments(text: str, scalar: Scalar = FLOAT64) -> list[tuple[Point, Point]]:
    """Parse whitespace-separated ``x1 y1 x2 y2`` groups into endpoint pairs.

    Pairs are returned unvalidated; ordering is checked when a selector is
    built from them.
    """
    values = []
    for tok in text.split():
        try:
            values.append(scalar.cast(tok))
        except (ValueError, ArithmeticError) as e:
            raise ValueError(f"failed to parse coordinate data: {tok!r}") from e
    if len(values) % 4:
        raise ValueError("missing coordinate data")
    return [
        ((values[i], values[i + 1]), (values[i + 2], values[i + 3]))
        for i in range(0, len(values), 4)
    ]


def read_segments(path: str | Path | None, scalar: Scalar = FLOAT64) -> list[tuple[Point, Point]]:
    """Read segments from a file, or from stdin when path is None."""
    if path is None:
        return parse_segments(sys.stdin.read(), scalar)
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"<file> `{p}` does not exist")
    if not p.is_file():
        raise ValueError(f"<file> `{p}` is not a file")
    return parse_segments(p.read_text(encoding="utf-8"), scalar)


def format_segments(chain: Iterable[Segment]) -> str:
    lines = []
    for s in chain:
        coords = (s.start[0], s.start[1], s.end[0], s.end[1])
        lines.append(" ".join(f"{float(v):.17g}" for v in coords))
    return "\n".join(lines) + "\n"


def _fixed(value: Any, precision: int) -> str:
    return f"{float(value):.{precision}f}"


def format_emission(index: int, emission: Emission, precision: int = 12) -> str:
    x, y = emission.point
    return "\t".join(
        [
            str(index),
            _fixed(emission.contribution, precision),
            _fixed(emission.cumulative, precision),
            _fixed(emission.relative, precision),
            f"{_fixed(x, precision)},{_fixed(y, precision)}",
        ]
    )


def emission_record(index: int, emission: Emission) -> dict[str, Any]:
    return {
        "index": index,
        "hv_contribution": float(emission.contribution),
        "hv_current": float(emission.cumulative),
        "hv_relative": float(emission.relative),
        "point": [float(emission.point[0]), float(emission.point[1])],
    }

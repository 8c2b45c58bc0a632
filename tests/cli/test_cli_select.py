from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path


def _hvrep(*args: str, stdin: str | None = None, cwd: Path | None = None):
    return subprocess.run(
        [sys.executable, "-m", "hvrep", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=cwd,
    )


def _write_line_front(tmp_path: Path) -> Path:
    p = tmp_path / "front.txt"
    p.write_text("0 1 1 0\n", encoding="utf-8")
    return p


def test_cli_select_from_file(tmp_path: Path) -> None:
    front = _write_line_front(tmp_path)
    res = _hvrep("select", "-n", "3", "-r", "0", "0", "-f", str(front))
    assert res.returncode == 0, res.stderr
    lines = res.stdout.strip().splitlines()
    assert lines[0] == "index\thv_contribution\thv_current\thv_relative\tpoint"
    assert len(lines) == 4
    assert lines[1] == (
        "1\t0.250000000000\t0.250000000000\t0.500000000000\t0.500000000000,0.500000000000"
    )
    cols = lines[2].split("\t")
    assert cols[0] == "2" and cols[1] == "0.062500000000" and cols[3] == "0.625000000000"


def test_cli_select_from_stdin_with_default_reference() -> None:
    res = _hvrep("select", "-n", "1", "--precision", "3", stdin="0 1 1 0")
    assert res.returncode == 0, res.stderr
    assert res.stdout.splitlines()[1] == "1\t0.250\t0.250\t0.500\t0.500,0.500"


def test_cli_select_json_output(tmp_path: Path) -> None:
    front = _write_line_front(tmp_path)
    res = _hvrep("select", "-n", "3", "-r", "0", "0", "-f", str(front), "--format", "json")
    assert res.returncode == 0, res.stderr
    doc = json.loads(res.stdout)
    assert doc["max_hv"] == 0.5
    assert len(doc["emissions"]) == 3
    assert abs(doc["points_hv"] - doc["emissions"][-1]["hv_current"]) < 1e-12


def test_cli_select_config_file(tmp_path: Path) -> None:
    front = _write_line_front(tmp_path)
    cfg = tmp_path / "select.yaml"
    cfg.write_text(
        f"num: 2\nreference: [0, 0]\ndtype: fraction\ninput: {front}\n", encoding="utf-8"
    )
    res = _hvrep("select", "--config", str(cfg))
    assert res.returncode == 0, res.stderr
    assert len(res.stdout.strip().splitlines()) == 3
    # command line wins over the config file
    res = _hvrep("select", "--config", str(cfg), "-n", "1")
    assert len(res.stdout.strip().splitlines()) == 2


def test_cli_select_logs_run(tmp_path: Path) -> None:
    front = _write_line_front(tmp_path)
    res = _hvrep("select", "-n", "2", "-f", str(front), "--log-run", cwd=tmp_path)
    assert res.returncode == 0, res.stderr
    run_id = json.loads(res.stderr.strip().splitlines()[-1])["run_id"]
    log = tmp_path / "artifacts" / run_id / "logs" / "run.jsonl"
    events = [json.loads(line)["event"] for line in log.read_text(encoding="utf-8").splitlines()]
    assert events == ["run_start", "selector_built", "emission", "emission", "run_end"]
    assert (tmp_path / "artifacts" / run_id / "config.json").exists()


def test_cli_select_errors(tmp_path: Path) -> None:
    front = _write_line_front(tmp_path)
    cases = [
        (("select", "-n", "0", "-f", str(front)), None, "num"),
        (("select", "-n", "2", "-f", str(tmp_path / "missing.txt")), None, "does not exist"),
        (("select", "-n", "2"), "0 1 x 0", "failed to parse"),
        (("select", "-n", "2"), "0 1 1", "missing coordinate data"),
        (("select", "-n", "2"), "", "EmptyApproximation"),
        (("select", "-n", "2"), "0 0 1 1", "NonMonotonicSegment"),
        (("select", "-n", "2"), "0 2 2 0 1 1.5 3 0.5", "UnsortedSegments"),
        (("select", "-n", "2", "-r", "0", "0", "0", "-f", str(front)), None, "WrongDimensions"),
        (("select", "-n", "2", "-r", "nan", "0"), "0 1 1 0", "InvalidReference"),
        (("select", "-n", "2", "-r", "0", "0"), "0 inf 1 0", "non-finite"),
    ]
    for args, stdin, msg in cases:
        res = _hvrep(*args, stdin=stdin)
        assert res.returncode == 1, args
        assert res.stdout == ""
        assert res.stderr.startswith("Error:")
        assert msg in res.stderr

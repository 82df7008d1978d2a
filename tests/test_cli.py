"""
Test the pointclust command line end to end
"""

import json
import tempfile
from pathlib import Path

import pytest

from pointclust.cli import main


def _write(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / "points.txt"
    path.write_text(text)
    return path


def test_cli_text_output(capsys):
    """Threshold 3.0 over (0,0), (1,0), (10,10)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n1 0\n10 10\n")
        assert main([str(path), "--quiet"]) == 0

    out = capsys.readouterr().out
    assert out == "[0.5, 0]: 2\n[10, 10]: 1\n"
    print("  ✓ Text output matches [x, y]: count lines")


def test_cli_verbose_reports_work_time(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n1 0\n10 10\n")
        assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "work time:" in out
    assert out.rstrip().endswith("[10, 10]: 1")


def test_cli_merge_and_json(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n3.2 0\n1 0\n10 10\n")
        assert main([str(path), "--merge", "--format", "json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [c["count"] for c in data] == [3, 1]
    assert data[0]["x"] == pytest.approx(1.4, rel=1e-6)


def test_cli_config_file_and_override(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n1 0\n10 10\n")
        config_path = Path(tmpdir) / "run.yaml"
        config_path.write_text("threshold: 0.5\n")

        assert main([str(path), "--config", str(config_path), "-q"]) == 0
        assert capsys.readouterr().out.count("\n") == 3

        assert main([str(path), "--config", str(config_path), "--threshold", "20", "-q"]) == 0
        assert capsys.readouterr().out == "[3.6666667, 3.3333333]: 3\n"


def test_cli_run_log(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n3.2 0\n1 0\n10 10\n")
        log_dir = Path(tmpdir) / "logs"

        assert main([str(path), "--merge", "--log-dir", str(log_dir), "-q"]) == 0

        lines = (log_dir / "run.jsonl").read_text().splitlines()
        types = [json.loads(line)["type"] for line in lines]
        assert types == ["run_start", "points_loaded", "classification_done", "merge_done", "run_end"]


def test_cli_malformed_input_aborts(capsys):
    """No partial output on a bad record."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n1\n10 10\n")
        log_dir = Path(tmpdir) / "logs"

        assert main([str(path), "--log-dir", str(log_dir)]) == 1

        events = [json.loads(line) for line in (log_dir / "run.jsonl").read_text().splitlines()]
        assert [e["type"] for e in events] == ["run_start", "error"]
        assert events[1]["error_type"] == "parse_error"

    captured = capsys.readouterr()
    assert captured.out == ""
    assert ":2:" in captured.err


def test_cli_missing_file(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        assert main([str(Path(tmpdir) / "nope.txt")]) == 1

    assert "not found" in capsys.readouterr().err


def test_cli_negative_threshold(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n")
        assert main([str(path), "--threshold", "-1"]) == 1

    assert "threshold" in capsys.readouterr().err


def test_cli_requires_input():
    with pytest.raises(SystemExit):
        main([])


def test_cli_invalid_config_file(capsys):
    """Broken config files exit with status 1 instead of a traceback."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "0 0\n")
        config_path = Path(tmpdir) / "run.yaml"

        for text in ("threshold:\n", "threshold: [1\n", 'merge: "no"\n'):
            config_path.write_text(text)
            assert main([str(path), "--config", str(config_path), "-q"]) == 1

            captured = capsys.readouterr()
            assert captured.out == ""
            assert "Invalid configuration" in captured.err

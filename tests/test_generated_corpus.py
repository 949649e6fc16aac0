from __future__ import annotations

from pathlib import Path

import pytest

from codeframe import render_code_frame, resolve
from codeframe.cli import main
from codeframe.testing import generate_corpus_files, generate_frame_cases


def test_corpus_is_deterministic() -> None:
    assert generate_frame_cases(seed=7, count=50) == generate_frame_cases(seed=7, count=50)
    assert generate_frame_cases(seed=7, count=50) != generate_frame_cases(seed=8, count=50)


def test_corpus_spans_are_valid_and_in_range() -> None:
    for case in generate_frame_cases(seed=1, count=500):
        display, markers = resolve(case.lines, case.span, case.window, strict=True)
        assert 0 <= display.start <= display.end <= len(case.lines)
        assert set(markers) == set(range(case.span.start.line, case.span.end.line + 1))


def test_generated_corpus_on_disk_matches_api(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    for rel, case in generate_corpus_files(seed=1, count=150):
        p = corpus_dir / rel
        p.write_text(case.source, encoding="utf-8")
        rc = main(
            [
                str(p),
                "--start",
                case.span.start.format(),
                "--end",
                case.span.end.format(),
                "-A",
                str(case.window.lines_above),
                "-B",
                str(case.window.lines_below),
            ]
        )
        assert rc == 0
        out = capsys.readouterr().out
        assert out == render_code_frame(case.lines, case.span, case.window) + "\n", rel

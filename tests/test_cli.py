from __future__ import annotations

import json
from pathlib import Path

import pytest

from snapdraft.cli import main

CROSS = {
    "elements": [
        {"type": "line", "start": [0, 0], "end": [100, 0]},
        {"type": "line", "start": [50, -50], "end": [50, 50]},
    ]
}


def _write(tmp_path: Path, name: str, data: object) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_catalog_counts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scene = _write(tmp_path, "scene.json", CROSS)
    assert main(["catalog", scene, "--width", "40", "--height", "20", "--grid", "20"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Snap targets: 13 (elements=2)"
    assert "  - grid: 6" in out
    assert "  - endpoint: 4" in out
    assert "  - midpoint: 2" in out
    assert "  - intersection: 1" in out
    assert "  - center: 0" in out


def test_snap_reports_target(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scene = _write(tmp_path, "scene.json", CROSS)
    main(["snap", scene, "52", "2", "--grid", "10", "--width", "100", "--height", "100"])
    out = capsys.readouterr().out.strip()
    assert out.startswith("intersection (50.000, 0.000)")
    assert out.endswith("source=-")

    main(["snap", scene, "500", "500", "--grid", "0"])
    assert capsys.readouterr().out.strip() == "no snap"


def test_angle_modes(capsys: pytest.CaptureFixture[str]) -> None:
    main(["angle", "43"])
    main(["angle", "8", "--ruler"])
    main(["angle", "47", "--protractor"])
    main(["angle", "100", "--protractor"])
    assert capsys.readouterr().out.splitlines() == ["45", "0", "45", "no snap"]


def test_replay_prints_committed_scene(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = _write(
        tmp_path,
        "script.json",
        {
            "settings": {"snap_enabled": False},
            "events": [
                {"action": "tool", "tool": "compass"},
                {"action": "down", "x": 100, "y": 100},
                {"action": "move", "x": 150, "y": 100},
                {"action": "up", "x": 150, "y": 100},
            ],
        },
    )
    main(["replay", script])
    data = json.loads(capsys.readouterr().out)
    (circle,) = data["elements"]
    assert circle["type"] == "circle"
    assert circle["center"] == [100.0, 100.0]
    assert circle["radius"] == pytest.approx(50.0)


def test_malformed_document_exits_with_usage_error(tmp_path: Path) -> None:
    scene = _write(tmp_path, "scene.json", {"elements": [{"type": "hexagon"}]})
    with pytest.raises(SystemExit) as excinfo:
        main(["catalog", scene])
    assert excinfo.value.code == 2

import json

import pytest

import parliamentarch.__main__ as cli


def _write(tmp_path, payload):
    path = tmp_path / "attribution.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_arc_summary_and_output(tmp_path, capsys):
    path = _write(
        tmp_path,
        {
            "groups": [
                {"color": "#ff0000", "seats": 6, "id": "reds"},
                {"color": "#0000ff", "seats": 3},
            ],
            "options": {"fillingStrategy": "empty_inner"},
        },
    )
    svg_path = tmp_path / "out" / "diagram.svg"

    cli.main([str(path), "--output", str(svg_path)])

    out = capsys.readouterr().out
    assert "Rows: 2" in out
    assert "reds: 6" in out
    assert "#0000ff (#1): 3" in out
    assert f"SVG document written to {svg_path}" in out
    document = svg_path.read_text(encoding="utf-8")
    assert document.startswith("<svg")
    assert document.count("<circle") == 9


def test_westminster_summary(tmp_path, capsys):
    path = _write(
        tmp_path,
        {
            "groups": [
                {"color": "#000000", "area": "speak", "id": "speaker"},
                {"color": "#0087dc", "seats": 10, "area": "opposition", "id": "opp"},
                {"color": "#e4003b", "seats": 12, "area": "government", "id": "gov"},
            ],
            "options": {"cozy": True},
        },
    )

    cli.main([str(path), "--kind", "westminster"])

    out = capsys.readouterr().out
    assert "opposition: 2 row(s) x 11 column(s)" in out
    assert "speaker: 1" in out
    assert "gov: 12" in out
    assert "SVG document written" not in out


@pytest.mark.parametrize(
    "payload",
    [
        {"groups": [{"seats": 3}]},
        {"groups": [{"color": "red", "seats": -3}]},
        {"groups": [{"color": "red"}], "options": {"spanAngle": 0}},
    ],
)
def test_errors_exit_with_status_one(tmp_path, caplog, payload):
    path = _write(tmp_path, payload)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path)])

    assert excinfo.value.code == 1
    assert any("Layout failed" in record.getMessage() for record in caplog.records)


def test_westminster_requires_an_area(tmp_path):
    path = _write(tmp_path, {"groups": [{"color": "red", "seats": 2}]})

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path), "--kind", "westminster"])

    assert excinfo.value.code == 1

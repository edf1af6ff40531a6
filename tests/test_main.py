import json

from genogram.main import main

DATA = {
    "people": [
        {"id": "A", "name": "Adam", "gender": "male"},
        {"id": "B", "name": "Beth", "gender": "female"},
        {"id": "C", "name": "Cain", "gender": "male"},
    ],
    "relationships": [
        {"id": "R1", "partner1Id": "A", "partner2Id": "B", "childrenIds": ["C", "ghost"]},
    ],
}


def write_json(tmp_path, data):
    path = tmp_path / "genogram.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_main_prints_layout(tmp_path, capsys):
    assert main([str(write_json(tmp_path, DATA))]) == 0
    out = capsys.readouterr().out
    assert "Found 3 people and 1 relationships" in out
    assert "unknown child 'ghost'" in out
    assert "A: (80, 80)" in out
    assert "C: (140, 200)" in out
    assert "Bounds: 280 x 280" in out


def test_main_plots(tmp_path):
    output = tmp_path / "preview.png"
    assert main([str(write_json(tmp_path, DATA)), "--plot", str(output)]) == 0
    assert output.exists()


def test_main_empty_input(tmp_path, capsys):
    assert main([str(write_json(tmp_path, {"people": [], "relationships": []}))]) == 1
    assert "no people" in capsys.readouterr().out


def test_main_bad_geometry(tmp_path, capsys):
    assert main([str(write_json(tmp_path, DATA)), "--person-width", "0"]) == 1
    assert "person_width must be positive" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_main_infinite_geometry(tmp_path, capsys):
    assert main([str(write_json(tmp_path, DATA)), "--vertical-spacing", "inf"]) == 1
    assert "vertical_spacing must be finite" in capsys.readouterr().out

import json

from espconfig.demo import main


def _run(tmp_path, capsys):
    path = tmp_path / "esp_cfg.json"
    code = main(["--path", str(path)])
    out = capsys.readouterr().out
    return code, path, out.splitlines()


def test_main_returns_zero_and_clears_file(tmp_path, capsys):
    code, path, lines = _run(tmp_path, capsys)
    assert code == 0
    assert not path.exists()
    assert lines[-1] == "Failed to open file for reading"


def test_default_values_are_printed_before_changes(tmp_path, capsys):
    _, _, lines = _run(tmp_path, capsys)
    start = lines.index("Default values:")
    assert lines[start + 2] == "Value ci_int: -1256"
    assert lines[start + 4] == "Value ci_string: Text string"
    assert lines[start + 5] == "Value ci_ip: 192.168.208.109"


def test_saved_contents_reflect_defaults_then_new_values(tmp_path, capsys):
    _, _, lines = _run(tmp_path, capsys)
    contents = [
        json.loads(lines[i + 1])
        for i, line in enumerate(lines)
        if line == "File Contents:"
    ]
    assert len(contents) == 2
    first, second = (doc["cfg"] for doc in contents)
    assert first["int"] == -1256
    assert first["string"] == "Text string"
    assert first["ip_address"] == [192, 168, 208, 109]
    assert second["int"] == 9564
    assert second["string"] == "New Text string"
    assert second["ip_address"] == [127, 0, 0, 1]
    assert list(first) == list(second)


def test_final_values_are_printed(tmp_path, capsys):
    _, _, lines = _run(tmp_path, capsys)
    start = lines.index("Setting new values again:")
    assert "Value ci_string: New Text string again!" in lines[start:]
    assert "Value ci_ip: 123.45.67.89" in lines[start:]
    assert "Value ci_int: 56335" in lines[start:]
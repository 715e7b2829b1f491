import json

import pytest
from click.testing import CliRunner

from recombine.cli import DocumentLoadError, main, read_document
from recombine.policy import RecombinePolicy

SCENARIO_A = {
    "keys": {"n": 3, "k": 3},
    "1": {"base": "10", "value": "8"},
    "2": {"base": "10", "value": "17"},
    "3": {"base": "10", "value": "30"},
}
SCENARIO_B = {
    "keys": {"n": 2, "k": 2},
    "1": {"base": "10", "value": "2"},
    "3": {"base": "10", "value": "5"},
}


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return str(path)


def test_cli_prints_results(tmp_path):
    first = _write(tmp_path, "test1.json", SCENARIO_A)
    second = _write(tmp_path, "test2.json", SCENARIO_B)

    result = CliRunner().invoke(main, [first, second])

    assert result.exit_code == 0
    assert f"Result from {first}: 3" in result.output
    assert f"Result from {second}: 1/2" in result.output


def test_cli_raw_output(tmp_path):
    path = _write(tmp_path, "shares.json", SCENARIO_B)
    result = CliRunner().invoke(main, ["--raw", path])
    assert result.exit_code == 0
    assert result.output.strip() == "1/2"


def test_cli_reports_rejected_document_as_result(tmp_path):
    path = _write(tmp_path, "broken.json", "{not json")
    result = CliRunner().invoke(main, [path])
    assert result.exit_code == 0
    assert f"Result from {path}: Error: Invalid JSON syntax." in result.output


def test_cli_missing_file_continues(tmp_path):
    missing = str(tmp_path / "missing.json")
    good = _write(tmp_path, "good.json", SCENARIO_A)

    result = CliRunner().invoke(main, [missing, good])

    assert result.exit_code == 1
    assert f"Failed to read file {missing}:" in result.output
    assert f"Result from {good}: 3" in result.output


def test_cli_requires_files():
    result = CliRunner().invoke(main, [])
    assert result.exit_code != 0


def test_read_document_size_limit(tmp_path):
    path = tmp_path / "large.json"
    path.write_bytes(b" " * (1024 * 1024 + 1))
    with pytest.raises(DocumentLoadError) as exc:
        read_document(str(path), settings=RecombinePolicy(max_document_mb=1))
    assert "1 MB" in str(exc.value)


def test_read_document_rejects_directory_and_bad_encoding(tmp_path):
    with pytest.raises(DocumentLoadError):
        read_document(str(tmp_path))

    path = tmp_path / "latin.json"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(DocumentLoadError):
        read_document(str(path), settings=RecombinePolicy(encoding="utf-8"))
    with pytest.raises(DocumentLoadError):
        read_document(str(path), settings=RecombinePolicy(encoding="no-such-codec"))

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "document_yaml.py"

VALUE_YAML = "foo:\n    bar: 42\n"
DESCRIPTION_YAML = "foo:\n    __description__: Description for foo\n    bar: Description for bar\n"
EXPECTED = "# Description for foo\nfoo (Mapping): \n    # Description for bar\n    bar (Number): 42\n"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("document_yaml", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def files(tmp_path):
    value = tmp_path / "value.yaml"
    value.write_text(VALUE_YAML)
    description = tmp_path / "description.yaml"
    description.write_text(DESCRIPTION_YAML)
    return value, description


def test_prints_documentation(script, files, capsys):
    value, description = files
    assert script.main([str(value), "-d", str(description)]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_writes_output_file(script, files, tmp_path):
    value, description = files
    output = tmp_path / "out.txt"
    assert script.main([str(value), "-d", str(description), "-o", str(output)]) == 0
    assert output.read_text() == EXPECTED


def test_missing_value_file(script, tmp_path, capsys):
    assert script.main([str(tmp_path / "missing.yaml")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_invalid_yaml(script, tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [1, 2\n")
    assert script.main([str(bad)]) == 1
    assert "bad.yaml" in capsys.readouterr().err


def test_unknown_description_key(script, files, capsys, monkeypatch, tmp_path):
    monkeypatch.setattr("yamldoc.descriptions.registry._registry", None)
    monkeypatch.setenv("YAMLDOC_DESCRIPTIONS_DIR", str(tmp_path))
    value, _ = files
    assert script.main([str(value), "-k", "nope"]) == 1
    assert "nope" in capsys.readouterr().err

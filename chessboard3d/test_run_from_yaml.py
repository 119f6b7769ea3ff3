"""Unit tests for the command line entry point"""

import sys

import pytest

from chessboard3d.run_from_yaml import main, script_args


def test_blender_arguments_are_skipped() -> None:
    argv = ["blender", "-b", "--python", "run_from_yaml.py", "--", "--mode", "still"]
    assert script_args(argv) == ["--mode", "still"]


def test_plain_python_arguments() -> None:
    assert script_args(["run_from_yaml.py", "--no-pieces"]) == ["--no-pieces"]


def test_invalid_configuration_returns_error_code() -> None:
    assert main(["--config-json", '{"board": {"cells_count": 0}}']) == 1


def test_malformed_json_returns_error_code() -> None:
    assert main(["--config-json", "{not json"]) == 1


def test_missing_config_file_returns_error_code(tmp_path) -> None:
    assert main(["--config-path", str(tmp_path / "missing.yml")]) == 1


def test_both_sources_are_rejected(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main(["--config-path", str(tmp_path / "scene.yml"), "--config-json", "{}"])


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(SystemExit):
        main(["--mode", "vr"])


def test_null_section_with_flag_overrides_is_handled(tmp_path) -> None:
    path = tmp_path / "scene.yml"
    path.write_text("pieces:\nboard:\n  cells_count: 0\n")
    assert main(["--config-path", str(path), "--no-pieces", "--mode", "still"]) == 1


@pytest.mark.parametrize("document", ["- board\n- pieces\n", "42\n"])
def test_non_mapping_yaml_returns_error_code(tmp_path, document: str) -> None:
    path = tmp_path / "scene.yml"
    path.write_text(document)
    assert main(["--config-path", str(path), "--no-pieces"]) == 1


def test_non_mapping_json_returns_error_code() -> None:
    assert main(["--config-json", "[1, 2]", "--mode", "still"]) == 1


def test_missing_blender_returns_error_code(monkeypatch, caplog) -> None:
    monkeypatch.setitem(sys.modules, "chessboard3d.game", None)
    assert main(["--mode", "still"]) == 1
    assert "inside Blender" in caplog.text

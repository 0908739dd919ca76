"""
Integration tests for the enumerant-gen command.
"""

import json
import pytest

from enumerant.cli import main, build_parser, EXIT_OK, EXIT_TYPE_FAILED, EXIT_BAD_INPUT


DOCUMENT = {
    "types": [
        {
            "name": "Test",
            "variants": [
                "A",
                "B",
                {"name": "C", "positional": ["u32", "u32"]},
                {"name": "D", "named": {"a": "String", "b": "bool"}},
            ],
        },
    ],
}


@pytest.fixture
def descriptor_file(tmp_path):
    path = tmp_path / "types.json"
    path.write_text(json.dumps(DOCUMENT))
    return path


@pytest.fixture
def no_env_target(monkeypatch, tmp_path):
    monkeypatch.delenv("ENUMERANT_TARGET", raising=False)
    monkeypatch.chdir(tmp_path)


class TestCommandLine:
    """Test argument handling and exit codes."""

    def test_parser_defaults(self):
        args = build_parser().parse_args(["types.json"])
        assert args.target is None
        assert args.fail_fast is False

    def test_rust_to_stdout(self, descriptor_file, no_env_target, capsys):
        assert main([str(descriptor_file), "--log-level", "ERROR"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "\nstruct _EnumIterator_Test {" in out

    def test_python_to_file(self, descriptor_file, no_env_target, tmp_path):
        out_path = tmp_path / "generated.py"
        code = main([str(descriptor_file), "--target", "python", "--out", str(out_path), "--log-level", "ERROR"])
        assert code == EXIT_OK
        assert "class _EnumIterator_Test:" in out_path.read_text()

    def test_config_file_sets_target(self, descriptor_file, no_env_target, tmp_path, capsys):
        config_path = tmp_path / "cfg.yaml"
        config_path.write_text("generation:\n  target_dialect: python\n")
        assert main([str(descriptor_file), "--config", str(config_path), "--log-level", "ERROR"]) == EXIT_OK
        assert "def __next__(self):" in capsys.readouterr().out

    def test_record_fails_but_others_are_emitted(self, tmp_path, no_env_target, capsys):
        document = {"types": DOCUMENT["types"] + [{"name": "Point", "kind": "record"}]}
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps(document))

        assert main([str(path), "--log-level", "ERROR"]) == EXIT_TYPE_FAILED
        captured = capsys.readouterr()
        assert "_EnumIterator_Test" in captured.out
        assert "EnumIterator is only defined for sum types, not records" in captured.err

    def test_fail_fast(self, tmp_path, no_env_target, capsys):
        path = tmp_path / "record.json"
        path.write_text(json.dumps({"name": "Point", "kind": "record"}))
        assert main([str(path), "--fail-fast", "--log-level", "ERROR"]) == EXIT_TYPE_FAILED
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, no_env_target):
        assert main([str(tmp_path / "missing.json"), "--log-level", "ERROR"]) == EXIT_BAD_INPUT

    def test_malformed_document(self, tmp_path, no_env_target, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "has space"}))
        assert main([str(path), "--log-level", "ERROR"]) == EXIT_BAD_INPUT
        assert "Invalid identifier" in capsys.readouterr().err

    @pytest.mark.parametrize("suffix", [".json", ".yaml"])
    def test_non_utf8_document(self, tmp_path, no_env_target, suffix, capsys):
        path = tmp_path / f"bad{suffix}"
        path.write_bytes(b'{"name": "T\xff\xfe", "variants": []}')
        assert main([str(path), "--log-level", "ERROR"]) == EXIT_BAD_INPUT
        assert "Failed to parse" in capsys.readouterr().err

    def test_non_utf8_config(self, descriptor_file, no_env_target, tmp_path):
        config_path = tmp_path / "cfg.json"
        config_path.write_bytes(b'{"generation": {"target_dialect": "\xff"}}')
        assert main([str(descriptor_file), "--config", str(config_path), "--log-level", "ERROR"]) == EXIT_BAD_INPUT

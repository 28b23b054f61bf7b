"""Tests for the json-manager command-line entry point."""

import json
from unittest.mock import patch

import pytest

from json_manager.cli.__main__ import main


def _run(argv, capsys):
    main(argv)
    return capsys.readouterr().out


class TestToolsCommand:
    def test_lists_names(self, tmp_path, capsys):
        out = _run(["--data-dir", str(tmp_path), "tools"], capsys)
        assert "add_json_object:" in out
        assert "list_json_files:" in out

    def test_json_output(self, tmp_path, capsys):
        out = _run(["--data-dir", str(tmp_path), "tools", "--json"], capsys)
        tools = json.loads(out)
        assert len(tools) == 6
        assert all({"name", "description", "inputSchema"} <= set(t) for t in tools)


class TestCallCommand:
    def test_add_and_get(self, tmp_path, capsys):
        args = json.dumps({"filename": "people", "object": {"name": "Ada"}})
        out = _run(["--data-dir", str(tmp_path), "call", "add_json_object", "--args", args], capsys)
        assert "Total objects: 1" in out
        assert (tmp_path / "people.json").exists()

        out = _run(
            ["--data-dir", str(tmp_path), "call", "get_json_objects", "--args", '{"filename": "people"}'],
            capsys,
        )
        assert '"name": "Ada"' in out

    def test_error_envelope_exits_non_zero(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--data-dir", str(tmp_path), "call", "get_json_objects"])
        assert exc_info.value.code == 1
        assert "Missing required arguments: filename" in capsys.readouterr().out

    def test_invalid_json_arguments(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--data-dir", str(tmp_path), "call", "get_json_objects", "--args", "{nope"])
        assert exc_info.value.code == 1

    def test_env_data_dir(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("MCP_JSON_DATA_DIR", str(tmp_path / "env"))
        _run(["call", "add_json_object", "--args", '{"filename": "x", "object": {}}'], capsys)
        assert (tmp_path / "env" / "x.json").exists()


class TestServeCommand:
    def test_serve_is_default(self, tmp_path):
        with patch("json_manager.mcp.server.main") as mcp_main:
            main(["--data-dir", str(tmp_path)])
        config = mcp_main.call_args.args[0]
        assert config.data_dir == tmp_path

    def test_bootstrap_failure_exits_non_zero(self, tmp_path):
        with patch(
            "json_manager.cli.__main__.setup_logging", side_effect=OSError("read-only")
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--data-dir", str(tmp_path), "serve"])
        assert exc_info.value.code == 1

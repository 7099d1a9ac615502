"""Tests for record sanitization and local path detection."""

from __future__ import annotations

import copy

import pytest

from mcpgen.sanitize.record import has_local_paths, sanitize_record


class TestSanitizeRecord:
    """sanitize_record redacts env and args without touching the input."""

    def test_env_values_sanitized(self) -> None:
        record = {
            "command": "npx",
            "args": ["-y", "some-package"],
            "env": {"API_KEY": "sk-realkey123456", "LOG_LEVEL": "debug"},
        }
        result = sanitize_record(record)
        assert result["command"] == "npx"
        assert result["args"] == ["-y", "some-package"]
        assert result["env"]["API_KEY"] == "<YOUR_API_KEY>"
        assert result["env"]["LOG_LEVEL"] == "debug"

    def test_env_key_context_used(self) -> None:
        record = {"env": {"API_TOKEN": "abcdefghij1234567890abcd"}}
        assert sanitize_record(record)["env"]["API_TOKEN"] == "<YOUR_SECRET>"

    def test_record_without_env(self) -> None:
        result = sanitize_record({"command": "npx", "args": ["package"]})
        assert result["command"] == "npx"
        assert result["args"] == ["package"]
        assert "env" not in result

    def test_args_key_value_sanitized(self) -> None:
        record = {"command": "npx", "args": ["--token=sk-secret123456", "--name=test"]}
        assert sanitize_record(record)["args"] == ["--token=<YOUR_API_KEY>", "--name=test"]

    def test_args_split_on_first_equals(self) -> None:
        record = {"args": ["--url=https://example.com/?a=b=c"]}
        assert sanitize_record(record)["args"] == ["--url=https://example.com/?a=b=c"]

    def test_args_classified_without_key_context(self) -> None:
        value = "abcdefghij1234567890abcd"
        record = {"args": [f"--api-token={value}"]}
        assert sanitize_record(record)["args"] == [f"--api-token={value}"]

    def test_args_empty_value(self) -> None:
        assert sanitize_record({"args": ["--token="]})["args"] == ["--token="]

    def test_non_string_args_pass_through(self) -> None:
        record = {"args": [8080, None, "--port", "sk-bare-not-split"]}
        result = sanitize_record(record)
        assert result["args"] == [8080, None, "--port", "sk-bare-not-split"]

    def test_input_not_mutated(self) -> None:
        record = {"command": "npx", "env": {"KEY": "sk-secret123"}, "args": ["--k=sk-abc"]}
        snapshot = copy.deepcopy(record)
        sanitize_record(record)
        assert record == snapshot
        assert record["env"]["KEY"] == "sk-secret123"

    def test_fresh_containers(self) -> None:
        record = {"env": {}, "args": []}
        result = sanitize_record(record)
        assert result is not record
        assert result["env"] is not record["env"]
        assert result["args"] is not record["args"]

    def test_unknown_fields_preserved(self) -> None:
        record = {
            "type": "http",
            "url": "https://mcp.example.com/mcp",
            "description": "Remote server",
            "headers": {"X-Custom": "1"},
            "disabled": False,
        }
        result = sanitize_record(record)
        assert result == record

    @pytest.mark.parametrize("value", ["not-a-dict", None, 7, ["a"]])
    def test_non_dict_returned_as_is(self, value: object) -> None:
        assert sanitize_record(value) is value


class TestHasLocalPaths:
    """has_local_paths flags machine-specific absolute references."""

    @pytest.mark.parametrize("arg", [
        "/Users/alice/data.db",
        "/home/bob/projects",
        "/tmp/cache",
        "--db=/Users/alice/x.db",
        "https://example.com/home/index",
    ])
    def test_args_flagged(self, arg: str) -> None:
        assert has_local_paths({"command": "node", "args": [arg]})

    @pytest.mark.parametrize("value", ["/Users/alice", "/home/bob/.config", "/var/run"])
    def test_env_flagged(self, value: str) -> None:
        assert has_local_paths({"command": "node", "env": {"DIR": value}})

    @pytest.mark.parametrize("arg", ["-y", "@scope/pkg", "./relative", "~/notes", "C:\\tools"])
    def test_relative_values_not_flagged(self, arg: str) -> None:
        assert not has_local_paths({"command": "npx", "args": [arg]})

    def test_command_not_checked(self) -> None:
        assert not has_local_paths({"command": "/usr/local/bin/server"})

    def test_non_string_values_ignored(self) -> None:
        assert not has_local_paths({"args": [1, None], "env": {"PORT": 8080}})

    def test_empty_record(self) -> None:
        assert not has_local_paths({})

    def test_non_dict(self) -> None:
        assert not has_local_paths("/Users/alice")

"""Tests for the python-dotenv-style SDK (load_dotenv, dotenv_values)."""

from __future__ import annotations

import importlib
import os
import sys

import pytest

from dotenvkit import DotenvError, dotenv_values, load_dotenv, must_load_dotenv, overload_dotenv
from dotenvkit.sdk import apply_to_environ


def test_load_dotenv_import():
    """from dotenvkit import load_dotenv works."""
    from dotenvkit import load_dotenv as ld

    assert callable(ld)


def test_load_dotenv_sets_values(sample_env, environ):
    assert load_dotenv(sample_env, environ=environ) is True
    assert environ["API_SID"] == "ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx"
    assert environ["AUTH_TOKEN"] == "my secret token"
    assert environ["EMPTY_VALUE"] == ""


def test_load_dotenv_does_not_override(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("HOME=/from/file\nEMPTY_IN_ENV=filled\nNEW=1\n")
    load_dotenv(p, environ=environ)
    assert environ["HOME"] == "/home/test"
    # Empty counts as unset.
    assert environ["EMPTY_IN_ENV"] == "filled"
    assert environ["NEW"] == "1"


def test_overload_dotenv_overrides(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("HOME=/from/file\n")
    assert overload_dotenv(p, environ=environ) is True
    assert environ["HOME"] == "/from/file"


def test_load_dotenv_override_flag(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("HOME=/from/file\n")
    load_dotenv(p, override=True, environ=environ)
    assert environ["HOME"] == "/from/file"


def test_load_dotenv_returns_false_when_nothing_set(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("HOME=/other\n")
    assert load_dotenv(p, environ=environ) is False


def test_expansion_uses_given_environ(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("CACHE=$HOME/.cache\n")
    assert dotenv_values(p, environ=environ) == {"CACHE": "/home/test/.cache"}


def test_dotenv_values_does_not_modify_environ(sample_env, environ):
    before = dict(environ)
    values = dotenv_values(sample_env, environ=environ)
    assert values["MESSAGING_PROVIDER"] == "twilio"
    assert environ == before


def test_dotenv_values_options(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("A=1\nB=$A\nC='$A'\n")
    assert dotenv_values(p, expand=False, environ=environ) == {"A": "1", "B": "$A", "C": "$A"}
    assert dotenv_values(p, literal_single_quotes=True, environ=environ) == {"A": "1", "B": "1", "C": "$A"}


def test_dotenv_values_multiple_files(tmp_path, environ):
    (tmp_path / "a.env").write_text("X=a\nY=a\n")
    (tmp_path / "b.env").write_text("Y=b\n")
    assert dotenv_values(tmp_path / "a.env", tmp_path / "b.env", environ=environ) == {"X": "a", "Y": "b"}


def test_default_file_is_dot_env_in_cwd(tmp_path, monkeypatch, environ):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("FROM_CWD=1\n")
    assert dotenv_values(environ=environ) == {"FROM_CWD": "1"}


def test_config_supplies_files_and_options(tmp_path, monkeypatch, environ):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".dotenvkit.toml").write_text("""\
[dotenvkit]
env_files = ["base.env", "local.env"]
override = true
expand = false
""")
    (tmp_path / "base.env").write_text("HOME=/base\nREF=$HOME\n")
    (tmp_path / "local.env").write_text("EXTRA=1\n")
    assert load_dotenv(environ=environ) is True
    assert environ["HOME"] == "/base"
    assert environ["REF"] == "$HOME"
    assert environ["EXTRA"] == "1"


def test_dotenvkit_files_env_var(tmp_path, monkeypatch, environ):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "custom.env").write_text("CUSTOM=1\n")
    monkeypatch.setenv("DOTENVKIT_FILES", "custom.env")
    assert dotenv_values(environ=environ) == {"CUSTOM": "1"}


def test_load_dotenv_malformed_sets_nothing(tmp_path, environ):
    p = tmp_path / ".env"
    p.write_text("GOOD=1\nBAD LINE\n")
    before = dict(environ)
    with pytest.raises(DotenvError):
        load_dotenv(p, environ=environ)
    assert environ == before


def test_must_load_dotenv_wraps_errors(tmp_path, environ):
    with pytest.raises(DotenvError, match="failed to load env files"):
        must_load_dotenv(tmp_path / "missing.env", environ=environ)


def test_load_dotenv_default_environ_is_os_environ(tmp_path, monkeypatch):
    p = tmp_path / ".env"
    p.write_text("DOTENVKIT_SDK_TEST=loaded\n")
    monkeypatch.delenv("DOTENVKIT_SDK_TEST", raising=False)
    try:
        assert load_dotenv(p) is True
        assert os.environ["DOTENVKIT_SDK_TEST"] == "loaded"
    finally:
        os.environ.pop("DOTENVKIT_SDK_TEST", None)


def test_apply_to_environ_counts():
    env = {"A": "keep", "B": ""}
    assert apply_to_environ({"A": "x", "B": "y", "C": "z"}, env, override=False) == 2
    assert env == {"A": "keep", "B": "y", "C": "z"}


def test_must_load_dotenv_wraps_invalid_config(tmp_path, monkeypatch, environ):
    (tmp_path / ".dotenvkit.toml").write_text("[dotenvkit\n")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(DotenvError, match="failed to load env files") as exc_info:
        must_load_dotenv(environ=environ)
    assert isinstance(exc_info.value.__cause__, ValueError)


def _import_autoload(monkeypatch):
    monkeypatch.delitem(sys.modules, "dotenvkit.autoload", raising=False)
    importlib.import_module("dotenvkit.autoload")


def test_autoload_loads_dot_env_on_import(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DOTENVKIT_AUTOLOAD_TEST=autoloaded\n")
    monkeypatch.chdir(tmp_path)
    # Empty counts as unset, and monkeypatch removes the variable afterwards.
    monkeypatch.setenv("DOTENVKIT_AUTOLOAD_TEST", "")
    _import_autoload(monkeypatch)
    assert os.environ["DOTENVKIT_AUTOLOAD_TEST"] == "autoloaded"


def test_autoload_ignores_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _import_autoload(monkeypatch)


def test_autoload_ignores_malformed_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DOTENVKIT_AUTOLOAD_BAD=1\nnot valid\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOTENVKIT_AUTOLOAD_BAD", "")
    _import_autoload(monkeypatch)
    assert os.environ["DOTENVKIT_AUTOLOAD_BAD"] == ""

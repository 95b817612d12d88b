# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvkit -- parse, expand and write .env files."""

from dotenvkit.accessors import get_bool, get_float, get_int, get_required, get_with_default
from dotenvkit.encoder import marshal
from dotenvkit.env_file import parse_env_file, read_env_files, write_env_file
from dotenvkit.errors import DotenvError, MalformedLineError, MissingVariableError, ReadError
from dotenvkit.parser import Parser, parse, unmarshal
from dotenvkit.sdk import dotenv_values, load_dotenv, must_load_dotenv, overload_dotenv

__all__ = [
    "__version__",
    "DotenvError",
    "MalformedLineError",
    "MissingVariableError",
    "Parser",
    "ReadError",
    "dotenv_values",
    "get_bool",
    "get_float",
    "get_int",
    "get_required",
    "get_with_default",
    "load_dotenv",
    "marshal",
    "must_load_dotenv",
    "overload_dotenv",
    "parse",
    "parse_env_file",
    "read_env_files",
    "unmarshal",
    "write_env_file",
]
__version__ = "0.1.0"

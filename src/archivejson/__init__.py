from __future__ import annotations

from archivejson.cli import ArchiveToJson, main, parse_archive_and_output_path
from archivejson.core.models import Archive
from archivejson.parsing.args_parser import (
    ArgsParseError,
    ArgsParser,
    UnexpectedFlagError,
    UsageError,
    open_params_file,
)
from archivejson.parsing.escaped import MalformedPairError, split_escaped, split_key_value

__version__ = '0.1.0'

__all__ = [
    'Archive',
    'ArchiveToJson',
    'ArgsParseError',
    'ArgsParser',
    'MalformedPairError',
    'UnexpectedFlagError',
    'UsageError',
    'main',
    'open_params_file',
    'parse_archive_and_output_path',
    'split_escaped',
    'split_key_value',
]

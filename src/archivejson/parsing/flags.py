"""
flags – Host flag table for archivejson.

Binds every recognized build-action flag to a callback that fills one field
of an `Archive` (or the output path of the run).

Exports
-------
ARCHIVE_FLAGS : FrozenSet[str]
    All flag names understood by the tool.
bind_archive_flags(parser, archive) -> ArchiveTarget
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from archivejson.constants import GO_SUFFIX
from archivejson.core.models import Archive
from archivejson.logging.helpers import get_logger
from archivejson.parsing.args_parser import ArgsParser
from archivejson.parsing.escaped import split_key_value

ID_FLAG = "--id"
PKG_PATH_FLAG = "--pkg-path"
EXPORT_FILE_FLAG = "--export-file"
ORIG_SRCS_FLAG = "--orig-srcs"
DATA_SRCS_FLAG = "--data-srcs"
IMPORTS_FLAG = "--imports"
OUTPUT_FILE_FLAG = "--output-file"

ARCHIVE_FLAGS: FrozenSet[str] = frozenset({
    ID_FLAG, PKG_PATH_FLAG, EXPORT_FILE_FLAG,
    ORIG_SRCS_FLAG, DATA_SRCS_FLAG, IMPORTS_FLAG,
    OUTPUT_FILE_FLAG,
})

logger = get_logger("flags")


@dataclass
class ArchiveTarget:
    """Everything one parse produces: the record and where to write it."""
    archive: Archive
    output_path: Optional[str] = None


def bind_archive_flags(parser: ArgsParser, archive: Archive) -> ArchiveTarget:
    """Register the archive flag table on *parser* and return the fill target."""
    target = ArchiveTarget(archive=archive)

    def _set_id(value: str) -> None:
        archive.id = value

    def _set_pkg_path(value: str) -> None:
        archive.pkg_path = value

    def _set_export_file(value: str) -> None:
        archive.export_file = value

    def _add_orig_src(value: str) -> None:
        if value.endswith(GO_SUFFIX):
            archive.go_files.append(value)
        else:
            archive.other_files.append(value)

    def _add_data_src(value: str) -> None:
        if value.endswith(GO_SUFFIX):
            archive.compiled_go_files.append(value)
        else:
            logger.debug("ignoring non-Go data source %s", value)

    def _add_import(value: str) -> None:
        importpath, archive_id = split_key_value(value)
        archive.imports[importpath] = archive_id

    def _set_output(value: str) -> None:
        target.output_path = value

    (
        parser
        .register(ID_FLAG, _set_id)
        .register(PKG_PATH_FLAG, _set_pkg_path)
        .register(EXPORT_FILE_FLAG, _set_export_file)
        .register(ORIG_SRCS_FLAG, _add_orig_src)
        .register(DATA_SRCS_FLAG, _add_data_src)
        .register(IMPORTS_FLAG, _add_import)
        .register(OUTPUT_FILE_FLAG, _set_output)
    )
    return target

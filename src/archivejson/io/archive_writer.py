from __future__ import annotations
"""Encode an Archive record to disk."""
import json
from pathlib import Path
from typing import Optional, Union

from archivejson.core.interfaces.logging import LoggerLikeProtocol
from archivejson.core.models import Archive
from archivejson.logging.helpers import get_logger, trace_io


def encode_archive(archive: Archive) -> str:
    """Return the JSON document for *archive*, newline-terminated."""
    return json.dumps(archive.to_json(), ensure_ascii=False, separators=(',', ':')) + '\n'


def write_archive(archive: Archive, path: Union[str, Path], *, logger: Optional[LoggerLikeProtocol] = None) -> Path:
    """Write *archive* to *path*, creating parent directories as needed."""
    log = logger or get_logger('io.writer')
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(encode_archive(archive), encoding='utf-8')
    trace_io(log, 'archive written', path=str(dest), id=archive.id)
    return dest

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from archivejson.config import Settings
from archivejson.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from archivejson.core.interfaces.tokens import StreamProviderProtocol
from archivejson.core.models import Archive
from archivejson.io.archive_writer import write_archive
from archivejson.logging.factory import DefaultLoggerFactory
from archivejson.logging.helpers import get_logger, set_trace_io
from archivejson.parsing.args_parser import ArgsParser, UsageError
from archivejson.parsing.flags import bind_archive_flags


logger: LoggerLikeProtocol = get_logger('cli')


def _configure_logging(settings: Settings) -> None:
    """Apply *settings* to process-wide logging; safe to call on every run."""
    set_trace_io(settings.trace_io)
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=settings.json_logs, level=settings.log_level)
    global logger
    logger = factory.get_logger('cli')


def parse_archive_and_output_path(
    arguments: Sequence[str],
    archive: Archive,
    *,
    stream_provider: Optional[StreamProviderProtocol] = None,
) -> str:
    """Fill *archive* from build-action *arguments* and return the output path.

    Arguments are read from the process args or, when the sole argument is
    '@path', from that params file.
    """
    parser = ArgsParser()
    if stream_provider is not None:
        parser.with_stream_provider(stream_provider)
    target = bind_archive_flags(parser, archive)
    parser.parse(arguments)
    if not target.output_path:
        raise UsageError('invalid usage: no output path')
    return target.output_path


class ArchiveToJson:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        settings: Optional[Settings] = None,
        stream_provider: Optional[StreamProviderProtocol] = None,
    ) -> Path:
        """Parse *argv*, write the archive record and return where it went."""
        _configure_logging(settings or Settings.from_env())
        archive = Archive()
        output_path = parse_archive_and_output_path(argv, archive, stream_provider=stream_provider)
        dest = write_archive(archive, output_path)
        logger.info('wrote archive %s to %s', archive.id or '<unnamed>', dest)
        return dest


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `archivejson` console script."""
    settings = Settings.from_env()
    try:
        ArchiveToJson.run(sys.argv[1:] if argv is None else argv, settings=settings)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except (ValueError, OSError) as exc:
        if settings.debug:
            raise
        logger.error('error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()

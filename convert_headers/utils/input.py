"""Reading header text from files and standard input."""

import sys
from collections.abc import Sequence
from pathlib import Path

from convert_headers.core.errors import InputReadError
from convert_headers.core.logging import get_logger


logger = get_logger(__name__)

STDIN_MARKER = "-"


def read_source(source: Path | str) -> str:
    """Read one input source; ``-`` means standard input.

    Bytes are decoded without newline translation so a lone ``\\r`` stays
    part of its line.
    """
    if str(source) == STDIN_MARKER:
        try:
            return sys.stdin.buffer.read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputReadError("<stdin>", f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise InputReadError("<stdin>", e.strerror or str(e)) from e

    path = Path(source)
    try:
        text = path.read_bytes().decode("utf-8")
    except FileNotFoundError as e:
        raise InputReadError(str(path), "file not found") from e
    except IsADirectoryError as e:
        raise InputReadError(str(path), "is a directory") from e
    except UnicodeDecodeError as e:
        raise InputReadError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise InputReadError(str(path), e.strerror or str(e)) from e

    logger.debug("input_read", source=str(path), chars=len(text))
    return text


def read_input(sources: Sequence[Path | str] | None = None) -> str:
    """Read and concatenate all sources in order, or stdin when none are given."""
    if not sources:
        sources = [STDIN_MARKER]
    # A newline between sources keeps the last line of one file from
    # merging into the first line of the next.
    return "\n".join(read_source(source) for source in sources)

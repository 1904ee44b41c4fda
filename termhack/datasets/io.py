from __future__ import annotations
from pathlib import Path
from typing import IO, List, Union

from termhack.engine import InputError, Record, ValidationError, parse_record


def decode_line(raw: bytes, line: int) -> str:
    """
    Decode one raw line as strict UTF-8.
    Raises InputError stamped with the 1-based line number on bad bytes.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputError(f"cannot decode input: {e.reason}", line=line) from e


def read_records(stream: Union[IO[bytes], IO[str]]) -> List[Record]:
    """
    Parse every line of a stream into Records, in order.

    Binary streams are split on b"\\n" and each line is decoded as strict
    UTF-8 on its own, so a decode failure names the exact line. Text streams
    are taken as already decoded.

    All-or-nothing: the first unreadable or malformed line raises and no
    partial list is returned.

    Raises:
      InputError      : the stream could not be decoded or read
      ValidationError : a line is not `<word> [<distance>]` (stamped with its line number)
    """
    records: List[Record] = []
    try:
        for idx, line in enumerate(stream, start=1):
            if isinstance(line, bytes):
                line = decode_line(line, idx)
            try:
                records.append(parse_record(line))
            except ValidationError as e:
                raise e.at_line(idx) from None
    except UnicodeDecodeError as e:
        # text stream decoding ahead of the line being parsed; no reliable line number
        raise InputError(f"cannot decode input: {e.reason}") from e
    except OSError as e:
        raise InputError(f"cannot read input: {e}") from e
    return records


def read_records_file(p: Path | str) -> List[Record]:
    """
    Read Records from a UTF-8 file. A missing file is an InputError, not a
    FileNotFoundError, so callers handle one failure kind for reading.
    """
    p = Path(p)
    try:
        f = p.open("rb")
    except OSError as e:
        raise InputError(f"cannot open {p}: {e.strerror or e}") from e
    with f:
        return read_records(f)

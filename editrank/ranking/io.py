"""Line input and ranked-record output."""

from __future__ import annotations

import sys
from typing import IO, Iterable, List, Optional

from editrank.ranking.models import RankedRecord, Ranking

DEFAULT_SEPARATOR = ","


def is_stdio(path_str: Optional[str]) -> bool:
    return (path_str is None) or (path_str == "-")


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_lines(path: Optional[str] = None) -> List[str]:
    """Read every line from path, or from stdin when path is None or '-'.

    Raises ValueError naming the source when the text is not valid UTF-8.
    """
    try:
        if is_stdio(path):
            return [_strip_newline(line) for line in sys.stdin]
        with open(path, "r", encoding="utf-8") as f:
            return [_strip_newline(line) for line in f]
    except UnicodeDecodeError as e:
        source = "<stdin>" if is_stdio(path) else path
        raise ValueError(f"{source}: not valid UTF-8: {e}") from e


def format_value(record: RankedRecord, precision: Optional[int] = None) -> str:
    value = record.display_value
    if isinstance(value, float) and precision is not None:
        return f"{value:.{precision}f}"
    return str(value)


def format_record(record: RankedRecord, separator: str = DEFAULT_SEPARATOR, precision: Optional[int] = None) -> str:
    return f"{format_value(record, precision)}{separator}{record.line}"


def _write_records(f: IO[str], records: Iterable[RankedRecord], separator: str, precision: Optional[int]) -> None:
    for r in records:
        f.write(format_record(r, separator, precision))
        f.write("\n")


def write_ranking(ranking: Ranking,
                  out: Optional[str] = None,
                  separator: str = DEFAULT_SEPARATOR,
                  precision: Optional[int] = None) -> None:
    if is_stdio(out):
        _write_records(sys.stdout, ranking, separator, precision)
        return

    with open(out, "w", encoding="utf-8") as f:
        _write_records(f, ranking, separator, precision)

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Parsers for the textual output of scheduler administration tools.

The functions in this module are shared by all scheduler dialects. They are
pure: they only read their arguments and return newly built lists and
dictionaries, so they may be used from any number of threads.

Malformed input is never guessed at. Every parser raises `ParseError`
naming the offending line or token instead of returning partial data.
"""

import re
from collections.abc import Sequence

from xq_lib.core.error import ParseError
from xq_lib.core.logger import get_logger

logger = get_logger(__name__)

WHITESPACE_REGEX = re.compile(r"\s+")

DOT_REGEX = re.compile(r"\.")

BAR_REGEX = re.compile(r"\s*\|\s*")

NEWLINE_REGEX = re.compile(r"\r?\n")

EQUALS_REGEX = re.compile(r"\s*=\s*")

# a line consisting only of runs of '=', '_' or '-' (at least three)
HORIZONTAL_LINE_REGEX = re.compile(r"^\s*([=_-]{3,}\s*)+$")

# an optionally signed run of ASCII digits
INTEGER_REGEX = re.compile(r"^[+-]?[0-9]+$")


def parse_list(text: str) -> list[str]:
    """
    Parse a list of items separated by whitespace (including newlines).

    Returns:
        list[str]: The items in the order they appear. Empty input yields an empty list.
    """
    items = [item for item in WHITESPACE_REGEX.split(text) if item]
    logger.debug(f"Parsed a list of {len(items)} items.")
    return items


def parse_key_value_pairs(
    text: str, ignored_lines: Sequence[str] = ()
) -> dict[str, str]:
    """
    Parse `key=value` pairs separated by whitespace, on one or more lines.

    There must be no whitespace between a key and its value.
    If a key occurs multiple times, the last value is used.

    Args:
        text (str): The text to parse.
        ignored_lines (Sequence[str]): Lines containing any of these strings are skipped.

    Returns:
        dict[str, str]: Dictionary mapping keys to values.

    Raises:
        ParseError: If any token is not a valid key/value pair.
    """
    result: dict[str, str] = {}

    for line in NEWLINE_REGEX.split(text):
        if not line.strip() or _contains_any(line, ignored_lines):
            continue

        for pair in WHITESPACE_REGEX.split(line.strip()):
            elements = EQUALS_REGEX.split(pair, maxsplit=1)

            if len(elements) != 2 or not elements[0].strip():
                raise ParseError(
                    f"Got invalid key/value pair in output: '{pair}'.",
                    line=pair,
                    expected="key=value",
                )

            result[elements[0].strip()] = elements[1].strip()

    logger.debug(f"Parsed {len(result)} key/value pairs.")
    return result


def parse_key_value_lines(
    text: str, separator: re.Pattern[str], ignored_lines: Sequence[str] = ()
) -> dict[str, str]:
    """
    Parse lines each containing a single key/value pair.

    Key and value are separated by the first match of `separator` and may be
    surrounded by whitespace. Empty lines are ignored.

    Args:
        text (str): The text to parse.
        separator (re.Pattern[str]): Pattern matching the separator between key and value.
        ignored_lines (Sequence[str]): Lines containing any of these strings are skipped.

    Returns:
        dict[str, str]: Dictionary mapping keys to values.

    Raises:
        ParseError: If a line does not contain a key/value pair.
    """
    result: dict[str, str] = {}

    for line in NEWLINE_REGEX.split(text):
        if not line.strip() or _contains_any(line, ignored_lines):
            continue

        key, value = _split_key_value(line, separator)
        result[key] = value

    logger.debug(f"Parsed {len(result)} key/value lines.")
    return result


def parse_table(
    text: str,
    key_field: str,
    field_separator: re.Pattern[str] = WHITESPACE_REGEX,
    value_suffixes: Sequence[str] = (),
) -> dict[str, dict[str, str]]:
    """
    Parse a table with a header line naming the fields.

    The first line that is not a horizontal rule is the header. Every other
    line must contain the same number of values as the header. Horizontal
    rules and blank lines are skipped anywhere in the table.

    Args:
        text (str): The text to parse.
        key_field (str): Field whose value identifies a record. Mandatory in every row.
        field_separator (re.Pattern[str]): Pattern matching the separator between fields.
        value_suffixes (Sequence[str]): Suffixes removed from the values, e.g. markers
            of default queues or disabled nodes. At most one suffix is removed per value.

    Returns:
        dict[str, dict[str, str]]: Records keyed by the value of `key_field`.
            If two rows share the key, the later one is kept.

    Raises:
        ParseError: If the header is missing or invalid, or a row does not match the header.
    """
    if not text.strip():
        raise ParseError(
            "Cannot parse table. Got no input, expected at least a header.",
            expected="header line",
        )

    lines = [
        line
        for line in NEWLINE_REGEX.split(text)
        if line.strip() and not HORIZONTAL_LINE_REGEX.match(line)
    ]
    if not lines:
        raise ParseError("No table header encountered.", expected="header line")

    header, rows = lines[0], lines[1:]
    fields = [field.strip() for field in field_separator.split(header.strip())]
    if any(not field for field in fields):
        raise ParseError(
            f"Output contains an empty field name in line '{header}'.",
            line=header,
            expected="non-empty field names",
        )

    result: dict[str, dict[str, str]] = {}
    for line in rows:
        values = field_separator.split(line.strip())

        if len(values) != len(fields):
            raise ParseError(
                f"Expected {len(fields)} fields in output, got line with {len(values)} values: '{line}'.",
                line=line,
                expected=f"{len(fields)} fields",
            )

        record = {
            field: _clean_value(value, value_suffixes)
            for field, value in zip(fields, values)
        }

        if key_field not in record:
            raise ParseError(
                f"Output does not contain required field '{key_field}'.",
                line=line,
                expected=f"field '{key_field}'",
            )

        _insert_record(result, record[key_field], record)

    logger.debug(f"Parsed a table with {len(result)} records.")
    return result


def parse_key_value_records(
    text: str,
    key_field: str,
    separator: re.Pattern[str] = WHITESPACE_REGEX,
    ignored_lines: Sequence[str] = (),
) -> dict[str, dict[str, str]]:
    """
    Parse multiple records made of lines with single key/value pairs.

    A new record begins on every line whose key is `key_field`. The value of
    this line identifies the record. Lines ending with a backslash continue on
    the next line.

    Args:
        text (str): The text to parse.
        key_field (str): Key starting a new record. Must be the key of the first line.
        separator (re.Pattern[str]): Pattern matching the separator between key and value.
        ignored_lines (Sequence[str]): Lines containing any of these strings are skipped.

    Returns:
        dict[str, dict[str, str]]: Records keyed by the value of `key_field`.
            Each record also contains `key_field` itself. If two records share
            the key, the later one is kept.

    Raises:
        ParseError: If a line is not a key/value pair or precedes the first `key_field`.
    """
    result: dict[str, dict[str, str]] = {}
    current: dict[str, str] | None = None

    for line in _join_continued_lines(NEWLINE_REGEX.split(text)):
        if not line.strip() or _contains_any(line, ignored_lines):
            continue

        key, value = _split_key_value(line, separator)

        if key == key_field:
            # listing of a new record starts
            current = {}
            _insert_record(result, value, current)
        elif current is None:
            raise ParseError(
                f"Expected '{key_field}' on the first line, got '{line}'.",
                line=line,
                expected=f"'{key_field}' line",
            )

        current[key] = value

    logger.debug(f"Parsed {len(result)} key/value records.")
    return result


def parse_job_id_from_line(line: str, prefixes: Sequence[str]) -> int:
    """
    Extract a numeric job ID from a line of output.

    The line must start with one of the prefixes. The ID is the first token
    after the prefix; both `12345.host` and `host.12345` forms are accepted.

    Args:
        line (str): The line containing the job ID.
        prefixes (Sequence[str]): Possible prefixes preceding the job ID.

    Returns:
        int: The job ID.

    Raises:
        ParseError: If no prefix matches or no numeric job ID follows it.
    """
    for prefix in prefixes:
        if not line.startswith(prefix):
            continue

        remainder = line[len(prefix) :].strip()
        if not remainder:
            raise ParseError(
                f"Failed to get job ID from line '{line}'. Line does not contain a job ID.",
                line=line,
                expected="job ID after prefix",
            )

        job_id = WHITESPACE_REGEX.split(remainder)[0]
        for part in DOT_REGEX.split(job_id):
            if INTEGER_REGEX.match(part):
                return int(part)

        raise ParseError(
            f"Failed to get job ID from line '{line}'. Job ID '{job_id}' is not a number.",
            line=line,
            expected="numeric job ID",
        )

    raise ParseError(
        f"Failed to get job ID from line '{line}'. Line does not match expected prefixes: {list(prefixes)}.",
        line=line,
        expected=f"one of prefixes {list(prefixes)}",
    )


def check_if_contains(text: str, candidates: Sequence[str]) -> int:
    """
    Determine which of the candidate strings the text contains.

    Returns:
        int: Index of the first candidate found in the text.

    Raises:
        ParseError: If the text contains none of the candidates.
    """
    for i, candidate in enumerate(candidates):
        if candidate in text:
            return i

    raise ParseError(
        f"Output does not contain any of the expected strings: {list(candidates)}.",
        line=text,
        expected=f"one of {list(candidates)}",
    )


def _contains_any(line: str, markers: Sequence[str]) -> bool:
    return any(marker in line for marker in markers)


def _clean_value(value: str, suffixes: Sequence[str]) -> str:
    """
    Trim the value and remove the first matching suffix, if any.
    """
    trimmed = value.strip()

    for suffix in suffixes:
        if suffix and trimmed.endswith(suffix):
            return trimmed[: -len(suffix)]

    return trimmed


def _split_key_value(line: str, separator: re.Pattern[str]) -> tuple[str, str]:
    """
    Split a line into a trimmed key and value at the first separator.

    Raises:
        ParseError: If the line does not contain the separator or the key is empty.
    """
    elements = separator.split(line, maxsplit=1)

    if len(elements) != 2:
        raise ParseError(
            f"Expected two columns in output, got '{line}'.",
            line=line,
            expected="key and value",
        )

    key, value = elements[0].strip(), elements[1].strip()
    if not key:
        raise ParseError(
            f"Got an empty key in output line '{line}'.",
            line=line,
            expected="non-empty key",
        )

    return key, value


def _join_continued_lines(lines: list[str]) -> list[str]:
    """
    Merge lines ending with a backslash with the lines that follow them.

    Wrapped comma-separated lists are joined without a space,
    wrapped space-separated lists keep a single space between their items.
    """
    joined: list[str] = []
    current: str | None = None

    for line in lines:
        stripped = line.rstrip()
        continued = stripped.endswith("\\")
        piece = stripped[:-1] if continued else line

        if current is None:
            current = piece
        else:
            current = _append_continuation(current, piece.lstrip())

        if not continued:
            joined.append(current)
            current = None

    # backslash on the last line
    if current is not None:
        joined.append(current.rstrip())

    return joined


def _append_continuation(head: str, tail: str) -> str:
    trimmed = head.rstrip()
    if trimmed == head or trimmed.endswith(","):
        return trimmed + tail

    return f"{trimmed} {tail}"


def _insert_record(
    table: dict[str, dict[str, str]], key: str, record: dict[str, str]
) -> None:
    if key in table:
        logger.warning(
            f"Duplicate record '{key}' in scheduler output. Keeping the later one."
        )
    table[key] = record

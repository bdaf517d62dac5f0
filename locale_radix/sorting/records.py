"""Reading, keying and writing the records the CLI sorts."""

from __future__ import annotations

import json
from typing import Any, Callable

from locale_radix.common.constants import INPUT_FORMATS
from locale_radix.common.errors import InputError


def parse_records(text: str, input_format: str) -> list[Any]:
    if input_format not in INPUT_FORMATS:
        raise InputError(f"Unsupported input format: {input_format}")

    if input_format == "lines":
        return text.splitlines()

    if input_format == "json":
        try:
            payload = json.loads(text) if text.strip() else []
        except ValueError as exc:
            raise InputError(f"Invalid JSON input: {exc}") from exc
        if not isinstance(payload, list):
            raise InputError("JSON input must be an array")
        return payload

    records = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except ValueError as exc:
            raise InputError(f"Invalid JSON on line {line_no}: {exc}") from exc
    return records


def dump_records(records: list[Any], input_format: str) -> str:
    if input_format == "lines":
        return "".join(f"{record}\n" for record in records)
    if input_format == "json":
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"
    return "".join(json.dumps(record, ensure_ascii=False) + "\n" for record in records)


def key_extractor(key_field: str | None) -> Callable[[Any], str]:
    """Build the ``to_key`` callable for a record shape.

    Without a field name every record must itself be a string. With one, every
    record must be an object whose field holds a string.
    """
    if key_field is None:

        def string_key(record: Any) -> str:
            if not isinstance(record, str):
                raise InputError(f"Record is not a string and no key field is set: {record!r}")
            return record

        return string_key

    def field_key(record: Any) -> str:
        if not isinstance(record, dict) or key_field not in record:
            raise InputError(f"Record is missing key field {key_field!r}: {record!r}")
        value = record[key_field]
        if not isinstance(value, str):
            raise InputError(f"Key field {key_field!r} is not a string: {value!r}")
        return value

    return field_key

#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""CSV and JSON interchange formats for message dictionaries."""

import csv
import gettext
import io
import json

from l10n_podict.errors import CSVFormatError, JSONFormatError

_ = gettext.gettext

CSV_HEADER = ("MessageID", "MessageString")
JSON_INDENT = 2


def _as_text(content, error_cls):
    if isinstance(content, (bytes, bytearray)):
        try:
            return bytes(content).decode("utf-8")
        except UnicodeDecodeError as e:
            raise error_cls(_("Input is not valid UTF-8: {}").format(e)) from e
    return content


def dump_csv(items, header=CSV_HEADER):
    """Render (msgid, msgstr) pairs as CSV text with a header row."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(list(header))
    for key, value in items:
        writer.writerow([key, value])
    return buf.getvalue()


def parse_csv(content):
    """Return the (msgid, msgstr) pairs of a CSV blob.

    The first row is assumed to be a header and is dropped without looking
    at it. Columns after the second are ignored.
    """
    text = _as_text(content, CSVFormatError)
    try:
        rows = [row for row in csv.reader(io.StringIO(text, newline=""),
                                          strict=True) if row]
    except csv.Error as e:
        raise CSVFormatError(_("Invalid CSV: {}").format(e)) from e

    if not rows:
        raise CSVFormatError(_("CSV input has no header row"))

    pairs = []
    for number, row in enumerate(rows[1:], start=2):
        if len(row) < 2:
            raise CSVFormatError(
                _("Row {}: expected 2 fields, got {}").format(number, len(row)))
        pairs.append((row[0], row[1]))
    return pairs


def dump_json(messages, indent=JSON_INDENT):
    """Render a mapping as a flat, key-sorted JSON object."""
    try:
        return json.dumps(messages, ensure_ascii=False, indent=indent,
                          sort_keys=True)
    except (TypeError, ValueError) as e:
        raise JSONFormatError(_("Cannot encode messages: {}").format(e)) from e


def parse_json(content):
    """Return the string mapping held in a flat JSON object."""
    text = _as_text(content, JSONFormatError)
    try:
        data = json.loads(text)
    except ValueError as e:
        raise JSONFormatError(_("Invalid JSON: {}").format(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise JSONFormatError(
            _("Expected a JSON object, got {}").format(type(data).__name__))
    for key, value in data.items():
        if not isinstance(value, str):
            raise JSONFormatError(
                _("Value for {!r} is not a string").format(key))
    return data

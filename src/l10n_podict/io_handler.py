#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""File import/export for message dictionaries.

Files are read as bytes; decoding is left to the dictionary, so bad UTF-8
ends up as a CSVFormatError or JSONFormatError, or as U+FFFD in PO text.
OSError from opening, reading or writing is passed to the caller unchanged.
"""

import logging

from l10n_podict.config import load_settings
from l10n_podict.dictionary import Dictionary

logger = logging.getLogger(__name__)


def _read(path):
    with open(path, "rb") as f:
        return f.read()


def _write(path, text):
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def parse_and_load_file(dictionary, path, settings=None):
    """Parse a PO file into dictionary. Returns skipped-line diagnostics."""
    settings = settings or load_settings()
    diagnostics = dictionary.parse_and_load(_read(path),
                                            strict=settings.strict)
    logger.debug("Loaded %s (%d messages)", path, len(dictionary))
    return diagnostics


def merge_file(dictionary, path, settings=None):
    """Parse a PO file on its own and merge it into dictionary."""
    scratch = Dictionary()
    diagnostics = parse_and_load_file(scratch, path, settings)
    added = dictionary.merge(scratch)
    logger.debug("Merged %s: %d new messages", path, added)
    return diagnostics


def load_csv_file(dictionary, path):
    dictionary.load_csv(_read(path))


def load_json_file(dictionary, path):
    dictionary.load_json(_read(path))


def write_csv_file(dictionary, path, settings=None):
    settings = settings or load_settings()
    _write(path, dictionary.to_csv(header=settings.csv_header))


def write_json_file(dictionary, path, settings=None):
    settings = settings or load_settings()
    _write(path, dictionary.to_json(indent=settings.json_indent))

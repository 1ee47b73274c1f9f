#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Parse gettext PO text into a msgid -> msgstr dictionary."""

from l10n_podict.dictionary import Dictionary, new_dictionary
from l10n_podict.errors import (
    CSVFormatError, JSONFormatError, MalformedLineError, PoDictError
)
from l10n_podict.parser import PoParser, parse_po

__version__ = "0.1.0"

__all__ = [
    "Dictionary", "new_dictionary", "PoParser", "parse_po",
    "PoDictError", "MalformedLineError", "CSVFormatError", "JSONFormatError",
]

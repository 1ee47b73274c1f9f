#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""PO scanner: turns classified lines into (msgid, msgstr) pairs.

The default mode reproduces the legacy scanner exactly, including two
known quirks:

* a new ``msgid`` that is not preceded by a blank line keeps appending to the
  pending key instead of starting a new entry;
* an entry that is not followed by a blank line (for example the last entry
  of a file without a trailing newline) is dropped.

``strict=True`` fixes both.
"""

import enum
import logging
from dataclasses import dataclass, field

from l10n_podict.errors import MalformedLineError
from l10n_podict.tokenizer import LineKind, tokenize

logger = logging.getLogger(__name__)


class ScanState(enum.Enum):
    COMPLETE = "complete"
    IN_COMMENT = "comment"
    IN_MSGID = "msgid"
    IN_MSGSTR = "msgstr"


@dataclass
class ParseResult:
    """Messages found in one parse call plus skipped-line diagnostics."""
    messages: list = field(default_factory=list)
    diagnostics: list = field(default_factory=list)


class PoParser:
    """Line-driven state machine over PO text."""

    def __init__(self, strict=False):
        self.strict = strict
        self._reset()

    def _reset(self):
        self.state = ScanState.COMPLETE
        self.key_parts = []
        self.value_parts = []

    def _flush(self, result):
        result.messages.append(
            ("".join(self.key_parts), "".join(self.value_parts)))
        self._reset()

    def _has_msgstr(self):
        return bool(self.value_parts)

    def parse(self, text):
        """Parse text and return a ParseResult. Never raises on bad input."""
        self._reset()
        result = ParseResult()

        for lineno, line, token in tokenize(text):
            kind = token.kind

            if kind is LineKind.BLANK:
                if self.state is ScanState.IN_MSGSTR or (
                        self.strict and self._has_msgstr()):
                    self._flush(result)
                elif self.strict:
                    # msgid with no msgstr
                    self._reset()
            elif kind is LineKind.COMMENT:
                self.state = ScanState.IN_COMMENT
            elif kind is LineKind.MSGID:
                if self.strict and self.state is not ScanState.IN_MSGID:
                    if self._has_msgstr():
                        self._flush(result)
                    else:
                        self._reset()
                self.state = ScanState.IN_MSGID
                self.key_parts.append(token.payload)
            elif kind is LineKind.MSGSTR:
                self.state = ScanState.IN_MSGSTR
                self.value_parts.append(token.payload)
            elif kind is LineKind.CONTINUATION:
                if self.state is ScanState.IN_MSGID:
                    self.key_parts.append(token.payload)
                elif self.state is ScanState.IN_MSGSTR:
                    self.value_parts.append(token.payload)
            elif kind is LineKind.MALFORMED:
                error = MalformedLineError(lineno, line)
                logger.warning("Skipping line: %s", error)
                result.diagnostics.append(error)

        if self.strict and self._has_msgstr():
            self._flush(result)
        elif self.key_parts or self.value_parts:
            logger.debug("Dropping unterminated entry %r",
                         "".join(self.key_parts))

        logger.debug("Parsed %d messages, %d skipped lines",
                     len(result.messages), len(result.diagnostics))
        self._reset()
        return result


def parse_po(text, strict=False):
    """Parse PO text into a ParseResult."""
    return PoParser(strict=strict).parse(text)

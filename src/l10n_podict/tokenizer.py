#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Line classifier for PO text."""

import enum
import re
from typing import NamedTuple

COMMENT_RE = re.compile(r'^\s*#', re.ASCII)
BLANK_RE = re.compile(r'^\s*$', re.ASCII)
MSGID_RE = re.compile(r'^msgid\s+"(.*)"', re.ASCII)
MSGSTR_RE = re.compile(r'^msgstr\s+"(.*)"', re.ASCII)
STRING_RE = re.compile(r'"(.*)"', re.ASCII)


class LineKind(enum.Enum):
    BLANK = "blank"
    COMMENT = "comment"
    MSGID = "msgid"
    MSGSTR = "msgstr"
    CONTINUATION = "continuation"
    OTHER = "other"
    # msgid/msgstr keyword without a quoted string
    MALFORMED = "malformed"


class Token(NamedTuple):
    kind: LineKind
    payload: str = ""


def _keyword(line, keyword, pattern):
    if not line.startswith(keyword):
        return None
    match = pattern.match(line)
    if match is None:
        return Token(LineKind.MALFORMED)
    return Token(LineKind.MSGID if keyword == "msgid" else LineKind.MSGSTR,
                 match.group(1))


def classify_line(line: str) -> Token:
    """Classify a single line (without its newline).

    Payloads are taken verbatim from between the first and the last double
    quote; escape sequences are left as they are.
    """
    if BLANK_RE.match(line):
        return Token(LineKind.BLANK)
    if COMMENT_RE.match(line):
        return Token(LineKind.COMMENT)

    for keyword, pattern in (("msgid", MSGID_RE), ("msgstr", MSGSTR_RE)):
        token = _keyword(line, keyword, pattern)
        if token is not None:
            return token

    match = STRING_RE.search(line)
    if match:
        return Token(LineKind.CONTINUATION, match.group(1))
    return Token(LineKind.OTHER)


def tokenize(text: str):
    """Yield (lineno, line, token) for every line of text."""
    for lineno, line in enumerate(text.split("\n"), start=1):
        yield lineno, line, classify_line(line)

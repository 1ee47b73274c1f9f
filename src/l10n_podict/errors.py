#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Exceptions raised by the PO dictionary."""

import gettext

_ = gettext.gettext


class PoDictError(Exception):
    """Base class for all dictionary errors."""


class MalformedLineError(PoDictError):
    """A msgid/msgstr line without a quoted string.

    The lenient parser never raises this; it is collected as a diagnostic.
    """

    def __init__(self, lineno, line):
        super().__init__(
            _("Line {}: missing quoted string: {!r}").format(lineno, line))
        self.lineno = lineno
        self.line = line


class CSVFormatError(PoDictError, ValueError):
    """CSV input that cannot be turned into messages."""


class JSONFormatError(PoDictError, ValueError):
    """JSON input or output that is not a flat string mapping."""

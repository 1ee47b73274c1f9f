#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Message dictionary data model."""

from dataclasses import dataclass, field

from l10n_podict import codec
from l10n_podict.parser import parse_po


@dataclass
class Dictionary:
    """A msgid -> msgstr mapping. Adding an existing msgid replaces it.

    Not thread safe; callers serialize access themselves.
    """
    messages: dict = field(default_factory=dict)

    def add_message(self, msgid, msgstr):
        self.messages[msgid] = msgstr

    def has_message(self, msgid):
        return msgid in self.messages

    def get_message(self, msgid, default=None):
        return self.messages.get(msgid, default)

    def remove_message(self, msgid):
        self.messages.pop(msgid, None)

    def merge(self, other):
        """Merge another dictionary or mapping into this one.

        Values from other win. Returns count of new msgids added.
        """
        source = other.messages if isinstance(other, Dictionary) else other
        added = 0
        for msgid, msgstr in source.items():
            if msgid not in self.messages:
                added += 1
            self.messages[msgid] = msgstr
        return added

    def parse_and_load(self, content, strict=False):
        """Parse PO text into this dictionary.

        Returns the list of MalformedLineError diagnostics for skipped lines.
        Bytes that are not valid UTF-8 become U+FFFD instead of failing.
        """
        if isinstance(content, (bytes, bytearray)):
            content = bytes(content).decode("utf-8", errors="replace")
        result = parse_po(content, strict=strict)
        for msgid, msgstr in result.messages:
            self.add_message(msgid, msgstr)
        return result.diagnostics

    def merge_from_text(self, content, strict=False):
        scratch = Dictionary()
        diagnostics = scratch.parse_and_load(content, strict=strict)
        self.merge(scratch)
        return diagnostics

    def to_csv(self, header=codec.CSV_HEADER):
        return codec.dump_csv(self.messages.items(), header=header)

    def to_json(self, indent=codec.JSON_INDENT):
        return codec.dump_json(self.messages, indent=indent)

    def load_csv(self, content):
        # parse_csv checks every row before anything is added
        for msgid, msgstr in codec.parse_csv(content):
            self.add_message(msgid, msgstr)

    def load_json(self, content):
        self.messages.update(codec.parse_json(content))

    def items(self):
        return self.messages.items()

    def __len__(self):
        return len(self.messages)

    def __contains__(self, msgid):
        return msgid in self.messages

    def __iter__(self):
        return iter(self.messages)

    def __getitem__(self, msgid):
        return self.messages[msgid]

    def __str__(self):
        return self.to_json()


def new_dictionary():
    return Dictionary()

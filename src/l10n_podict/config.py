#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""User settings stored as JSON under the XDG config directory."""

import json
import os
from dataclasses import asdict, dataclass, fields

from l10n_podict.codec import CSV_HEADER, JSON_INDENT

APP_NAME = "l10n-podict"


@dataclass
class Settings:
    """Parser and export options.

    The interchange format is JSON with a two-space indent; any other
    json_indent produces output outside that format. The same holds for a
    csv_header other than MessageID, MessageString.
    """
    strict: bool = False
    json_indent: int = JSON_INDENT
    csv_header: tuple = CSV_HEADER

    def __post_init__(self):
        self.csv_header = tuple(self.csv_header)


def settings_path():
    xdg = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg, APP_NAME, "settings.json")


def load_settings(path=None):
    """Load settings, falling back to defaults for anything missing."""
    p = path or settings_path()
    if not os.path.exists(p):
        return Settings()
    with open(p, encoding="utf-8") as f:
        data = json.load(f)
    known = {f.name for f in fields(Settings)}
    return Settings(**{k: v for k, v in data.items() if k in known})


def save_settings(settings, path=None):
    p = path or settings_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    data = asdict(settings)
    data["csv_header"] = list(settings.csv_header)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

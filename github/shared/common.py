#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Shared low-level utilities – logging control, Actions inputs and workflow
commands, timestamp helpers, path normalisation and slugs.
"""

from __future__ import annotations

import json
import os
import re
from datetime import datetime, timezone
from typing import Any

_verbose_enabled = False

SLUG_SEPARATOR = "-"
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def parse_runner_debug() -> bool:
    raw = os.getenv("RUNNER_DEBUG")
    if raw is None or raw == "":
        return False
    if raw not in {"0", "1"}:
        raise SystemExit("ERROR: RUNNER_DEBUG must be '0' or '1' when set")
    return raw == "1"


def set_verbose_enabled(value: bool) -> None:
    global _verbose_enabled
    _verbose_enabled = bool(value)


def vprint(msg: str) -> None:
    if _verbose_enabled:
        print(msg)


def get_input(name: str, *, required: bool = False, default: str = "") -> str:
    """Read an Actions input from the environment.

    The runner exports ``github-token`` as ``INPUT_GITHUB-TOKEN``; composite
    actions usually map it to ``INPUT_GITHUB_TOKEN``. Both forms are accepted.
    """
    upper = name.strip().upper()
    for key in (f"INPUT_{upper.replace('-', '_')}", f"INPUT_{upper}"):
        value = os.environ.get(key)
        if value is not None and value.strip():
            return value.strip()
    if required:
        raise SystemExit(f"ERROR: Input required and not supplied: {name}")
    return default


def set_failed(message: str) -> None:
    """Emit the ``::error::`` workflow command so the run shows *message*."""
    text = str(message or "").replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{text}")


def load_event(path: str) -> dict[str, Any]:
    if not path:
        raise SystemExit("ERROR: No event payload path given (GITHUB_EVENT_PATH is unset)")
    try:
        with open(path, encoding="utf-8") as fh:
            event = json.load(fh)
    except FileNotFoundError as exc:
        raise SystemExit(f"ERROR: Event payload not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SystemExit(f"ERROR: Event payload is not valid JSON: {exc}") from exc
    if not isinstance(event, dict):
        raise SystemExit("ERROR: Event payload must be a JSON object")
    return event


def iso_timestamp(value: datetime | str | None) -> str:
    """Format *value* the way the GitHub API does (``2024-05-01T10:00:00Z``)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def normalize_path(path: str | None) -> str:
    if not path:
        return ""
    p = path.replace("\\", "/").strip()
    while p.startswith("./"):
        p = p[2:]
    p = p.lstrip("/")
    p = re.sub(r"/+", "/", p)
    return p


def slugify(text: str | None) -> str:
    """Lower-case *text* and collapse every non-alphanumeric run into ``-``."""
    lowered = (text or "").lower()
    return _NON_ALNUM_RE.sub(SLUG_SEPARATOR, lowered).strip(SLUG_SEPARATOR)

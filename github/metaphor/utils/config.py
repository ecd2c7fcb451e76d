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

"""Run configuration – Actions inputs from the environment, overridden by
CLI flags, resolved into an :class:`ActionConfig`.
"""

from __future__ import annotations

import argparse
import os

from shared.common import get_input, normalize_path

from .constants import DEFAULT_BOT_EMAIL, DEFAULT_BOT_NAME, DEFAULT_REVIEWERS, DEFAULT_STORIES_ROOT
from .greeting import DEFAULT_ISSUE_MESSAGE, DEFAULT_PR_MESSAGE
from .models import ActionConfig, BotIdentity


def parse_handle_list(raw: str) -> tuple[str, ...]:
    """Parse a comma/whitespace separated list of GitHub handles.

    A leading ``@`` is dropped and duplicates are removed, keeping the first
    occurrence. Example input: ``"darkterminal, @mkubdev"``
    """
    handles: list[str] = []
    for part in (raw or "").replace(",", " ").split():
        handle = part.strip().lstrip("@")
        if handle and handle not in handles:
            handles.append(handle)
    return tuple(handles)


def load_config(args: argparse.Namespace) -> ActionConfig:
    token = get_input("github-token") or os.environ.get("GITHUB_TOKEN", "")
    if not token:
        raise SystemExit("ERROR: Input required and not supplied: github-token")

    repo = (getattr(args, "repo", None) or os.environ.get("GITHUB_REPOSITORY", "")).strip()
    if not repo or "/" not in repo:
        raise SystemExit("ERROR: Repository must be given as owner/repo (--repo or GITHUB_REPOSITORY)")

    event_path = getattr(args, "event_path", None) or os.environ.get("GITHUB_EVENT_PATH", "")

    reviewers = parse_handle_list(get_input("reviewers")) or DEFAULT_REVIEWERS
    stories_root = normalize_path(get_input("stories-root", default=DEFAULT_STORIES_ROOT)).rstrip("/")

    return ActionConfig(
        token=token,
        repo=repo,
        content_repo=get_input("content-repo", default=repo),
        event_path=event_path,
        stories_root=stories_root or DEFAULT_STORIES_ROOT,
        branch=get_input("branch") or None,
        reviewers=reviewers,
        bot=BotIdentity(
            name=get_input("bot-name", default=DEFAULT_BOT_NAME),
            email=get_input("bot-email", default=DEFAULT_BOT_EMAIL),
        ),
        issue_message=get_input("issue-message", default=DEFAULT_ISSUE_MESSAGE),
        pr_message=get_input("pr-message", default=DEFAULT_PR_MESSAGE),
        footer=get_input("footer"),
        dry_run=bool(getattr(args, "dry_run", False)),
    )

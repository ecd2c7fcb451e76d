#!/usr/bin/env python3
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

"""Metaphor action entry point – routes an issue / pull request event.

- ``opened``: greet the author with ``issue-message`` / ``pr-message``.
- ``closed``: when the issue carries exactly ``metaphore`` plus one category
  label and is assigned to an authorized reviewer, commit its body as a story
  under ``{stories-root}/{category}/{slug}.md`` and add the ``published``
  label.
- anything else: the run fails.

Environment variables
---------------------
INPUT_GITHUB_TOKEN   (required)  Token for all API calls (fallback: GITHUB_TOKEN).
GITHUB_REPOSITORY               owner/repo the event belongs to.
GITHUB_EVENT_PATH               Path to the webhook payload JSON.
RUNNER_DEBUG                    '1' enables verbose output.

Usage
-----
    metaphor-action
    metaphor-action --event-path event.json --repo owner/repo --dry-run --verbose
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from github import Auth, Github, GithubException

from shared.common import load_event, parse_runner_debug, set_failed, set_verbose_enabled, vprint
from shared.github_issues import gh_issue_get
from metaphor.utils.classifier import select_category
from metaphor.utils.config import load_config
from metaphor.utils.constants import ACTION_CLOSED, ACTION_OPENED
from metaphor.utils.events import event_action, event_subject
from metaphor.utils.greeting import greet_contributor
from metaphor.utils.models import ActionConfig
from metaphor.utils.publisher import publish_story
from metaphor.utils.story import build_story

NO_ACTION_MESSAGE = "No action, skipping!"


def generate_story(gh: Github, config: ActionConfig, event: dict[str, Any]) -> None:
    subject, is_pr = event_subject(event)
    number = int(subject["number"])
    if is_pr:
        vprint(f"#{number} is a pull request – no story to generate")
        return

    repo = gh.get_repo(config.repo)
    issue = gh_issue_get(repo, number)

    category = select_category(issue, config.reviewers)
    if category is None:
        print(f"Nothing to publish for #{number}")
        return

    story = build_story(issue, category, config.stories_root)
    vprint(f"Rendered story for #{number}:\n{story.document}")

    content_repo = repo if config.content_repo == config.repo else gh.get_repo(config.content_repo)
    publish_story(
        content_repo,
        repo,
        issue,
        story,
        bot=config.bot,
        branch=config.branch,
        dry_run=config.dry_run,
    )


def greet(gh: Github, config: ActionConfig, event: dict[str, Any]) -> None:
    greet_contributor(
        gh.get_repo(config.repo),
        event,
        issue_message=config.issue_message,
        pr_message=config.pr_message,
        footer=config.footer,
        dry_run=config.dry_run,
    )


def dispatch(gh: Github, config: ActionConfig, event: dict[str, Any]) -> bool:
    """Run the handler for the event's action. ``False`` means unknown action."""
    action = event_action(event)
    vprint(f"Event action: {action!r}")

    if action == ACTION_CLOSED:
        generate_story(gh, config, event)
        return True
    if action == ACTION_OPENED:
        greet(gh, config, event)
        return True

    print("No action, skipping")
    return False


def _error_message(exc: Exception) -> str:
    if isinstance(exc, GithubException):
        data = exc.data if isinstance(exc.data, dict) else {}
        detail = data.get("message") or str(exc)
        return f"GitHub API error ({exc.status}): {detail}"
    return str(exc) or exc.__class__.__name__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Greet new contributors and publish closed metaphor issues as stories.",
    )
    parser.add_argument(
        "--event-path",
        default=None,
        help="Webhook payload JSON (default: $GITHUB_EVENT_PATH).",
    )
    parser.add_argument(
        "--repo",
        default=None,
        help="Repository in owner/repo format (default: $GITHUB_REPOSITORY).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print intended comments, commits and label changes without writing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose output (also enabled by RUNNER_DEBUG=1).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    config = load_config(args)
    event = load_event(config.event_path)

    try:
        handled = dispatch(Github(auth=Auth.Token(config.token)), config, event)
    except Exception as exc:
        print(f"ERROR: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        set_failed(_error_message(exc))
        raise SystemExit(1) from exc

    if not handled:
        set_failed(NO_ACTION_MESSAGE)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

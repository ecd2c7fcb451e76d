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

"""Greeting comments for newly opened issues and pull requests."""

from __future__ import annotations

from typing import Any

from github.Repository import Repository

from shared.github_issues import gh_issue_comment
from shared.templates import render_placeholders

from .events import event_subject


DEFAULT_ISSUE_MESSAGE = (
    "Thanks for opening this issue! A maintainer will take a look soon. "
    "If this is a metaphor, please add the `metaphore` label and one category label."
)
DEFAULT_PR_MESSAGE = (
    "Thanks for the pull request! A maintainer will review it soon."
)

GREETING_HEADER = "Hi @{author}! 👋"


def build_greeting(author: str, message: str, footer: str = "") -> str:
    values = {"author": author}
    parts = [
        render_placeholders(GREETING_HEADER, values),
        render_placeholders(message, values),
    ]
    if footer:
        parts.append(render_placeholders(footer, values))
    return "\n\n".join(parts)


def greet_contributor(
    repo: Repository,
    event: dict[str, Any],
    *,
    issue_message: str,
    pr_message: str,
    footer: str = "",
    dry_run: bool = False,
) -> None:
    subject, is_pr = event_subject(event)
    number = int(subject["number"])
    author = str((subject.get("user") or {}).get("login") or "")

    body = build_greeting(author, pr_message if is_pr else issue_message, footer)

    if dry_run:
        print(f"DRY-RUN: would comment on #{number}:\n{body}")
        return
    gh_issue_comment(repo, number, body)

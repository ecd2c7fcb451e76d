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

"""Story publishing – commits the rendered story to the content repository
and then marks the source issue with the ``published`` label.
"""

from __future__ import annotations

from github.Repository import Repository

from shared.github_contents import gh_repo_create_file
from shared.github_issues import gh_issue_set_labels
from shared.models import Issue

from .constants import PUBLISHED_LABEL
from .models import BotIdentity, Story


def with_sentinel(labels: list[str], sentinel: str = PUBLISHED_LABEL) -> list[str]:
    """Return *labels* with *sentinel* appended unless already present."""
    if sentinel in labels:
        return list(labels)
    return [*labels, sentinel]


def publish_story(
    content_repo: Repository,
    issue_repo: Repository,
    issue: Issue,
    story: Story,
    *,
    bot: BotIdentity,
    branch: str | None = None,
    dry_run: bool = False,
) -> None:
    """Commit *story* and label *issue* as published.

    The label update only runs after the commit returned; a failed commit
    raises and leaves the issue labels untouched.
    """
    labels = with_sentinel(issue.labels)

    if dry_run:
        size = len(story.document.encode("utf-8"))
        print(f"DRY-RUN: would commit {story.path} ({size} bytes) as {bot.name} <{bot.email}>")
        print(f"DRY-RUN: would set labels on #{issue.number}: {', '.join(labels)}")
        return

    gh_repo_create_file(
        content_repo,
        story.path,
        story.message,
        story.document.encode("utf-8"),
        author_name=bot.name,
        author_email=bot.email,
        branch=branch,
    )

    if labels == issue.labels:
        print(f"#{issue.number} already labelled {PUBLISHED_LABEL!r}")
        return
    gh_issue_set_labels(issue_repo, issue.number, labels)

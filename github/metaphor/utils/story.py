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

"""Story rendering – front-matter template, file path and commit message
for a metaphor issue.
"""

from __future__ import annotations

from shared.common import normalize_path, slugify
from shared.models import Issue
from shared.templates import render_placeholders

from .models import Story


STORY_TEMPLATE = """---
layout: post
title: {title}
author: {author}
created_at: {created_at}
language: {language}
---

{content}"""

COMMIT_MESSAGE_TEMPLATE = "docs(generate): new metaphor from @{author}"


def render_story(title: str, author: str, created_at: str, language: str, content: str | None) -> str:
    return render_placeholders(
        STORY_TEMPLATE,
        {
            "title": title,
            "author": author,
            "created_at": created_at,
            "language": language,
            "content": content or "",
        },
    )


def story_path(root: str, category: str, title: str) -> str:
    slug = slugify(title)
    if not slug:
        raise ValueError(f"Cannot derive a file name from title {title!r}")
    return normalize_path(f"{root}/{category}/{slug}.md")


def build_story(issue: Issue, category: str, stories_root: str) -> Story:
    return Story(
        category=category,
        path=story_path(stories_root, category, issue.title),
        document=render_story(issue.title, issue.author, issue.created_at, category, issue.body),
        message=render_placeholders(COMMIT_MESSAGE_TEMPLATE, {"author": issue.author}),
        author=issue.author,
    )

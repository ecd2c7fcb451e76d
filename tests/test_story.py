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

"""Tests for metaphor.utils.story."""

import re

import pytest

from metaphor.utils.story import build_story, render_story, story_path
from shared.models import Issue

PLACEHOLDER_RE = re.compile(r"\{(title|author|created_at|language|content)\}")


def test_render_story_front_matter() -> None:
    doc = render_story("A Tale", "ferris", "2024-05-01T10:00:00Z", "rust", "Once upon a compile...")
    assert doc == (
        "---\n"
        "layout: post\n"
        "title: A Tale\n"
        "author: ferris\n"
        "created_at: 2024-05-01T10:00:00Z\n"
        "language: rust\n"
        "---\n"
        "\n"
        "Once upon a compile..."
    )
    assert PLACEHOLDER_RE.search(doc) is None


def test_render_story_keeps_placeholder_text_from_fields() -> None:
    doc = render_story("{content}", "ferris", "2024-05-01T10:00:00Z", "rust", "Body says {title} and {author}")
    assert "title: {content}\n" in doc
    assert doc.endswith("Body says {title} and {author}")
    assert doc.count("Body says") == 1


def test_render_story_none_body() -> None:
    doc = render_story("T", "a", "2024-05-01T10:00:00Z", "zig", None)
    assert doc.endswith("---\n\n")


def test_story_path() -> None:
    path = story_path("public/collections/stories", "rust", "A Tale of Borrow Checker")
    assert path == "public/collections/stories/rust/a-tale-of-borrow-checker.md"
    assert story_path("/stories/", "zig", "Hello, World!") == "stories/zig/hello-world.md"


def test_story_path_rejects_empty_slug() -> None:
    with pytest.raises(ValueError):
        story_path("stories", "rust", "!!!")


def test_build_story() -> None:
    issue = Issue(
        number=42,
        state="closed",
        title="A Tale of Borrow Checker",
        body="Once upon a compile...",
        labels=["metaphore", "rust"],
        author="ferris",
        created_at="2024-05-01T10:00:00Z",
        assignees=["darkterminal"],
    )
    story = build_story(issue, "rust", "public/collections/stories")

    assert story.category == "rust"
    assert story.path == "public/collections/stories/rust/a-tale-of-borrow-checker.md"
    assert story.message == "docs(generate): new metaphor from @ferris"
    assert "language: rust\n" in story.document
    assert story.document.endswith("Once upon a compile...")
    assert story.author == "ferris"

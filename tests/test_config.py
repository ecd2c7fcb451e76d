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

"""Tests for metaphor.utils.config."""

import argparse

import pytest

from metaphor.utils.config import load_config, parse_handle_list
from metaphor.utils.constants import DEFAULT_BOT_NAME, DEFAULT_REVIEWERS, DEFAULT_STORIES_ROOT
from metaphor.utils.greeting import DEFAULT_ISSUE_MESSAGE, DEFAULT_PR_MESSAGE


def _args(**overrides) -> argparse.Namespace:
    values = {"repo": None, "event_path": None, "dry_run": False}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_parse_handle_list() -> None:
    assert parse_handle_list("darkterminal, @mkubdev darkterminal") == ("darkterminal", "mkubdev")
    assert parse_handle_list("") == ()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "token-1")
    monkeypatch.setenv("GITHUB_REPOSITORY", "darkterminal/metaphore")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")

    config = load_config(_args())

    assert config.token == "token-1"
    assert config.repo == "darkterminal/metaphore"
    assert config.content_repo == "darkterminal/metaphore"
    assert config.event_path == "/tmp/event.json"
    assert config.stories_root == DEFAULT_STORIES_ROOT
    assert config.branch is None
    assert config.reviewers == DEFAULT_REVIEWERS
    assert config.bot.name == DEFAULT_BOT_NAME
    assert config.issue_message == DEFAULT_ISSUE_MESSAGE
    assert config.pr_message == DEFAULT_PR_MESSAGE
    assert config.footer == ""
    assert config.dry_run is False


def test_inputs_and_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "token-2")
    monkeypatch.setenv("GITHUB_REPOSITORY", "ignored/repo")
    monkeypatch.setenv("INPUT_REVIEWERS", "alice,bob")
    monkeypatch.setenv("INPUT_STORIES_ROOT", "./content/stories/")
    monkeypatch.setenv("INPUT_CONTENT_REPO", "darkterminal/site")
    monkeypatch.setenv("INPUT_BRANCH", "main")
    monkeypatch.setenv("INPUT_BOT_NAME", "metaphor-bot")
    monkeypatch.setenv("INPUT_BOT_EMAIL", "bot@example.com")
    monkeypatch.setenv("INPUT_FOOTER", "bye")

    config = load_config(_args(repo="darkterminal/metaphore", event_path="e.json", dry_run=True))

    assert config.token == "token-2"
    assert config.repo == "darkterminal/metaphore"
    assert config.content_repo == "darkterminal/site"
    assert config.event_path == "e.json"
    assert config.stories_root == "content/stories"
    assert config.branch == "main"
    assert config.reviewers == ("alice", "bob")
    assert config.bot.name == "metaphor-bot"
    assert config.bot.email == "bot@example.com"
    assert config.footer == "bye"
    assert config.dry_run is True


def test_token_falls_back_to_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "token-3")
    monkeypatch.setenv("GITHUB_REPOSITORY", "darkterminal/metaphore")
    assert load_config(_args()).token == "token-3"


def test_missing_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "darkterminal/metaphore")
    with pytest.raises(SystemExit, match="github-token"):
        load_config(_args())


def test_bad_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "token")
    with pytest.raises(SystemExit, match="owner/repo"):
        load_config(_args(repo="no-slash"))

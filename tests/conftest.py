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

"""Shared fixtures: a clean Actions environment and PyGithub look-alikes."""

import os
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from shared.common import set_verbose_enabled


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("INPUT_") or key in {
            "GITHUB_TOKEN",
            "GITHUB_REPOSITORY",
            "GITHUB_EVENT_PATH",
            "RUNNER_DEBUG",
        }:
            monkeypatch.delenv(key, raising=False)
    set_verbose_enabled(False)


def make_gh_issue(
    number: int = 42,
    *,
    state: str = "closed",
    title: str = "A Tale of Borrow Checker",
    body: str | None = "Once upon a compile...",
    labels: tuple[str, ...] = ("metaphore", "rust"),
    author: str = "ferris",
    assignees: tuple[str, ...] = ("darkterminal",),
    pull_request: object | None = None,
) -> SimpleNamespace:
    """Build an object shaped like ``github.Issue.Issue``."""
    return SimpleNamespace(
        number=number,
        state=state,
        title=title,
        body=body,
        labels=[SimpleNamespace(name=name) for name in labels],
        user=SimpleNamespace(login=author),
        created_at=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        assignees=[SimpleNamespace(login=login) for login in assignees],
        pull_request=pull_request,
        create_comment=Mock(),
        set_labels=Mock(),
    )


@pytest.fixture
def gh_issue() -> SimpleNamespace:
    return make_gh_issue()


@pytest.fixture
def repo(gh_issue: SimpleNamespace) -> Mock:
    """A ``github.Repository.Repository`` stand-in serving *gh_issue*."""
    r = Mock()
    r.full_name = "darkterminal/metaphore"
    r.get_issue.return_value = gh_issue
    r.create_file.return_value = {"content": Mock(), "commit": SimpleNamespace(sha="0123456789abcdef")}
    r.get_labels.return_value = []
    return r


@pytest.fixture
def gh(repo: Mock) -> Mock:
    client = Mock()
    client.get_repo.return_value = repo
    return client

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

"""Metaphor-specific data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BotIdentity:
    """Name / email used as both author and committer of generated commits."""
    name: str
    email: str


@dataclass
class Story:
    """A rendered story document and where it goes."""
    category: str
    path: str
    document: str
    message: str        # commit message
    author: str


@dataclass
class ActionConfig:
    token: str
    repo: str
    content_repo: str
    event_path: str
    stories_root: str
    branch: str | None
    reviewers: tuple[str, ...]
    bot: BotIdentity
    issue_message: str
    pr_message: str
    footer: str
    dry_run: bool = False

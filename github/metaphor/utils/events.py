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

"""Webhook event payload accessors."""

from __future__ import annotations

from typing import Any


def event_action(event: dict[str, Any]) -> str:
    return str(event.get("action") or "")


def event_subject(event: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Return the issue / pull request object of *event* and whether it is a PR."""
    pr = event.get("pull_request")
    if isinstance(pr, dict):
        return pr, True
    issue = event.get("issue")
    if isinstance(issue, dict):
        return issue, "pull_request" in issue
    raise ValueError("Event payload carries neither 'issue' nor 'pull_request'")

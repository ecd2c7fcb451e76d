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

"""Core data models shared by the workflow scripts."""

from dataclasses import dataclass, field


@dataclass
class Issue:
    """Read-only snapshot of a GitHub issue (or pull request)."""
    number: int
    state: str
    title: str
    body: str
    labels: list[str]
    author: str = ""
    created_at: str = ""        # ISO-8601, as returned by the API
    assignees: list[str] = field(default_factory=list)
    is_pull_request: bool = False

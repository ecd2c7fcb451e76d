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

"""Story classification – decides from an issue's labels and assignees
whether it is a metaphor ready to publish, and under which category.
"""

from __future__ import annotations

from collections.abc import Iterable

from shared.common import vprint
from shared.models import Issue

from .constants import CATEGORIES, METAPHOR_LABEL


def is_exact_match(labels: Iterable[str], category: str, *, tag: str = METAPHOR_LABEL) -> bool:
    """True when *labels* is exactly ``{tag, category}``, in any order."""
    names = list(labels)
    return len(names) == 2 and set(names) == {tag, category}


def classify_labels(
    labels: Iterable[str],
    categories: Iterable[str] = CATEGORIES,
    *,
    tag: str = METAPHOR_LABEL,
) -> str | None:
    """Return the single category *labels* routes to, or ``None``."""
    names = list(labels)
    for category in categories:
        if is_exact_match(names, category, tag=tag):
            return category
    return None


def has_authorized_reviewer(assignees: Iterable[str], reviewers: Iterable[str]) -> bool:
    allowed = {r.lower() for r in reviewers}
    return any(a.lower() in allowed for a in assignees)


def select_category(
    issue: Issue,
    reviewers: Iterable[str],
    categories: Iterable[str] = CATEGORIES,
) -> str | None:
    """Return the category to publish *issue* under, or ``None`` to skip it."""
    if issue.state != "closed":
        vprint(f"#{issue.number} is {issue.state!r}, not closed – skipping")
        return None
    if issue.is_pull_request:
        vprint(f"#{issue.number} is a pull request – skipping")
        return None
    if not has_authorized_reviewer(issue.assignees, reviewers):
        vprint(f"#{issue.number} has no authorized reviewer among {issue.assignees} – skipping")
        return None

    category = classify_labels(issue.labels, categories)
    if category is None:
        vprint(f"#{issue.number} labels {issue.labels} match no metaphor category – skipping")
        return None

    print(f"#{issue.number} is a {category} metaphor")
    return category

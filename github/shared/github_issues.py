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

"""GitHub Issues REST operations via PyGithub – fetch an issue snapshot,
comment, replace labels, and list repository labels.

API errors are not swallowed here: ``github.GithubException`` propagates to
the caller, which decides whether the run fails.
"""

from github.Issue import Issue as GhIssue
from github.Repository import Repository

from .common import iso_timestamp, vprint
from .models import Issue


def issue_from_github(gh_issue: GhIssue) -> Issue:
    """Convert a PyGithub issue object into an :class:`Issue` snapshot."""
    user = getattr(gh_issue, "user", None)
    return Issue(
        number=int(gh_issue.number),
        state=str(gh_issue.state or ""),
        title=str(gh_issue.title or ""),
        body=str(gh_issue.body or ""),
        labels=[str(lbl.name) for lbl in gh_issue.labels or []],
        author=str(getattr(user, "login", "") or ""),
        created_at=iso_timestamp(gh_issue.created_at),
        assignees=[str(a.login) for a in gh_issue.assignees or []],
        is_pull_request=getattr(gh_issue, "pull_request", None) is not None,
    )


def gh_issue_get(repo: Repository, number: int) -> Issue:
    gh_issue = repo.get_issue(number)
    issue = issue_from_github(gh_issue)
    vprint(f"Fetched #{number}: state={issue.state} labels={issue.labels} assignees={issue.assignees}")
    return issue


def gh_issue_comment(repo: Repository, number: int, body: str) -> None:
    repo.get_issue(number).create_comment(body)
    print(f"Commented on #{number}")


def gh_issue_set_labels(repo: Repository, number: int, labels: list[str]) -> None:
    """Replace the label list of issue *number* with *labels*."""
    repo.get_issue(number).set_labels(*labels)
    print(f"Labels on #{number}: {', '.join(labels)}")


def gh_repo_label_names(repo: Repository) -> set[str]:
    """Return the set of label names defined in *repo*."""
    return {str(lbl.name) for lbl in repo.get_labels()}

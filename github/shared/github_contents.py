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

"""GitHub Contents API operations – committing a new file on behalf of a
fixed author / committer identity.
"""

from __future__ import annotations

from typing import Any

from github import InputGitAuthor
from github.Repository import Repository

from .common import vprint


def gh_repo_create_file(
    repo: Repository,
    path: str,
    message: str,
    content: str | bytes,
    *,
    author_name: str,
    author_email: str,
    branch: str | None = None,
) -> dict[str, Any]:
    """Create *path* in *repo* in a single commit.

    PyGithub base64-encodes *content* for the Contents API; ``str`` content is
    encoded as UTF-8 first. The API answers 422 when *path* already exists,
    which surfaces as ``github.GithubException``.
    """
    identity = InputGitAuthor(author_name, author_email)
    kwargs: dict[str, Any] = {"committer": identity, "author": identity}
    if branch:
        kwargs["branch"] = branch

    result = repo.create_file(path, message, content, **kwargs)

    commit = result.get("commit") if isinstance(result, dict) else None
    sha = getattr(commit, "sha", "") or ""
    print(f"Committed {path} to {repo.full_name}" + (f" ({sha[:7]})" if sha else ""))
    vprint(f"Commit message: {message}")
    return result

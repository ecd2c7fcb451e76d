#!/usr/bin/env python3
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

"""Check that all labels used by the metaphor action exist in the repository.

Required labels:

  metaphore
  published
  one label per category (linux, cpp, css, golang, ...)

Usage:
  metaphor-check-labels --repo owner/repo
"""

from __future__ import annotations

import argparse
import os
import sys

from github import Auth, Github, GithubException

from shared.github_issues import gh_repo_label_names
from metaphor.utils.constants import CATEGORIES, METAPHOR_LABEL, PUBLISHED_LABEL


REQUIRED_LABELS: list[str] = [METAPHOR_LABEL, PUBLISHED_LABEL, *CATEGORIES]


def missing_labels(existing: set[str], required: list[str] = REQUIRED_LABELS) -> list[str]:
    return [label for label in required if label not in existing]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Verify that all labels required by the metaphor action exist in the repository",
    )
    parser.add_argument(
        "--repo",
        default=os.environ.get("GITHUB_REPOSITORY"),
        help="GitHub repository in owner/repo format (default: $GITHUB_REPOSITORY)",
    )
    args = parser.parse_args(argv)

    if not args.repo:
        raise SystemExit("ERROR: --repo is required when GITHUB_REPOSITORY is unset")
    token = os.environ.get("GITHUB_TOKEN")
    if not token:
        raise SystemExit("ERROR: GITHUB_TOKEN is required")

    try:
        existing = gh_repo_label_names(Github(auth=Auth.Token(token)).get_repo(args.repo))
    except GithubException as exc:
        print(f"ERROR: failed to list labels for {args.repo}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    missing = missing_labels(existing)

    if not missing:
        print(f"All {len(REQUIRED_LABELS)} required labels exist in {args.repo}")
        raise SystemExit(0)

    print(f"ERROR: {len(missing)} required label(s) missing in {args.repo}\n", file=sys.stderr)
    print("Missing labels:", file=sys.stderr)
    for label in missing:
        print(f"  - {label}", file=sys.stderr)
    print(f"\nAll required labels:\n  {', '.join(REQUIRED_LABELS)}", file=sys.stderr)
    raise SystemExit(1)


if __name__ == "__main__":
    main()

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

"""Domain constants (label names, categories, default paths and identities)."""

METAPHOR_LABEL = "metaphore"
PUBLISHED_LABEL = "published"

# Order is the routing order; each category is also a repository label.
CATEGORIES: tuple[str, ...] = (
    "linux",
    "cpp",
    "css",
    "golang",
    "javascript",
    "java",
    "maths",
    "python",
    "php",
    "physics",
    "ruby",
    "rust",
    "zig",
)

DEFAULT_REVIEWERS: tuple[str, ...] = ("darkterminal", "mkubdev")

DEFAULT_STORIES_ROOT = "public/collections/stories"

DEFAULT_BOT_NAME = "github-actions[bot]"
DEFAULT_BOT_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"

ACTION_OPENED = "opened"
ACTION_CLOSED = "closed"

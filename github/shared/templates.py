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

"""Generic ``{placeholder}`` template rendering engine."""

import re
from typing import Any


PLACEHOLDER_RE = re.compile(r"\{([a-zA-Z0-9_]+)\}")


def render_placeholders(template: str, values: dict[str, Any]) -> str:
    """Replace ``{key}`` tokens in *template* with values from *values*.

    The template is scanned once, so a value that itself contains ``{key}``
    is copied verbatim. Tokens without a matching key are left untouched.
    """
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        v = values[key]
        if v is None:
            return ""
        return str(v)

    return PLACEHOLDER_RE.sub(repl, template)

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

"""Metaphor action utilities.

Modules
-------
constants   Label names, categories, default paths and bot identity.
models      BotIdentity, Story and ActionConfig dataclasses.
config      Actions inputs / CLI flags resolved into ActionConfig.
events      Webhook payload accessors (action, issue / pull request object).
classifier  Label-set matching and reviewer allow-list gate.
story       Front-matter template rendering, slug paths, commit messages.
publisher   Story commit and ``published`` labelling.
greeting    Greeting comments for opened issues and pull requests.
"""

# Copyright 2025 Google LLC
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
# ==============================================================================

from shared.types import SCRIPT_CATEGORY_NAMES

_GENERATE_SCRIPT_PROMPT = """You are an expert AutoHotkey v1 scripter writing
automation helpers for Old School RuneScape players.

Write one complete, runnable AutoHotkey v1 script for the request below.

Requirements:
- Start with `#NoEnv`, `#SingleInstance Force` and `SendMode Input`.
- Bind F1 to start, F2 to pause and F3 to exit.
- Randomize every delay and click position slightly.
- Put configurable values (coordinates, delays) in globals at the top.
- Comment each section briefly.

Focus area: {focus}

Request:
{request}

Respond with the script only. Do not wrap it in markdown fences and do not
add any explanation before or after it."""


def make_generate_script_prompt(request: str, template: str) -> str:
    focus = SCRIPT_CATEGORY_NAMES.get(template)
    if focus is None:
        focus = "General purpose (choose whatever fits the request)"
    return _GENERATE_SCRIPT_PROMPT.format(focus=focus, request=request.strip())

"""
AutoHotkey script generation for the AI generator page.

Gemini writes the script when an API key is configured. Without one, or when
the call fails for any reason, a static template is returned instead so the
page always has something to show.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from models import gemini, prompts
from shared.types import GenerationSource

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[\w+-]*\s*\n(.*?)\n?```\s*$", re.DOTALL)


@dataclass(frozen=True)
class GeneratedScript:
    code: str
    source: GenerationSource


def strip_code_fences(text: str) -> str:
    text = text.strip()
    match = _FENCE_RE.match(text)
    return match.group(1).strip() if match else text


_LOOP_BODIES = {
    "fishing": """
        ; Click fishing spot
        ClickRandomized(523, 412)
        RandomSleep(3000, 5000)

        ; Check inventory
        if (IsInventoryFull()) {
            DropAllFish()
        }""",
    "combat": """
        ; Attack target
        ClickTarget()
        RandomSleep(1500, 2500)

        ; Use special attack
        if (SpecialReady()) {
            UseSpecial()
        }""",
}

_CUSTOM_LOOP_BODY = """
        ; Custom action based on prompt
        PerformAction()
        RandomSleep(DELAY_MIN, DELAY_MAX)"""

_TEMPLATE = """; AI Generated Script - {template}
; Generated from prompt: {prompt}
; Generated at: {generated_at}

#NoEnv
#SingleInstance Force
SendMode Input
SetWorkingDir %A_ScriptDir%

; === Configuration ===
global DELAY_MIN := 500
global DELAY_MAX := 1500
global ANTI_BAN := true

; === Main Hotkeys ===
F1::StartScript()
F2::PauseScript()
F3::ExitApp

; === Functions ===
StartScript() {{
    Loop {{
        ; Main automation loop{loop_body}

        ; Anti-ban measures
        Random, roll, 1, 10
        if (ANTI_BAN && roll > 8) {{
            PerformAntiBan()
        }}
    }}
}}

RandomSleep(min, max) {{
    Random, delay, %min%, %max%
    Sleep, %delay%
}}

ClickRandomized(x, y) {{
    Random, offsetX, -5, 5
    Random, offsetY, -5, 5
    Click, % x + offsetX, % y + offsetY
}}

PerformAntiBan() {{
    Random, action, 1, 3
    if (action = 1) {{
        ; Move mouse randomly
        Random, newX, 100, 700
        Random, newY, 100, 500
        MouseMove, %newX%, %newY%, 10
    }} else if (action = 2) {{
        ; Check stats
        Send, {{Tab}}
        RandomSleep(500, 1000)
        Send, {{Tab}}
    }} else {{
        ; Rotate camera
        Send, {{Left}}
        RandomSleep(200, 400)
    }}
}}

PauseScript() {{
    Pause, Toggle
}}
"""


def render_template(prompt: str, template: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    # Keep the prompt on its comment line.
    one_line_prompt = " ".join(prompt.split())
    return _TEMPLATE.format(
        template=template,
        prompt=one_line_prompt,
        generated_at=now.strftime("%Y-%m-%d %H:%M:%S UTC"),
        loop_body=_LOOP_BODIES.get(template, _CUSTOM_LOOP_BODY),
    )


def generate_script(
    prompt: str,
    template: str = "custom",
    api_key: Optional[str] = None,
    model: str = "gemini-3-flash-preview",
) -> GeneratedScript:
    if api_key:
        try:
            text = gemini.call_predict(
                prompts.make_generate_script_prompt(prompt, template),
                model=model,
                api_key=api_key,
            )
            code = strip_code_fences(text)
            if code:
                return GeneratedScript(code=code, source=GenerationSource.GEMINI)
            logger.warning("Gemini returned an empty script; using template")
        except Exception:
            logger.exception("Gemini script generation failed; using template")
    else:
        logger.info("No Gemini API key configured; using template")
    return GeneratedScript(
        code=render_template(prompt, template), source=GenerationSource.TEMPLATE
    )

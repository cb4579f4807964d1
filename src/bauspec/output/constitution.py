"""Constitution pre-filler: writes detected stack facts into template placeholders.

A placeholder is a bullet of the form ``- **Label:** [e.g. ...]``.  Each
pass replaces the first placeholder for its label and is skipped when the
stack has nothing to say.  Filled lines no longer contain ``[e.g.``, so a
second run is a no-op.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from bauspec.schemas.stack import DetectedStack, Language

ARCHITECTURE_HINT = "[Fill in: e.g., server components, MVC, hexagonal]"


def _placeholder(label: str) -> re.Pattern[str]:
    return re.compile(rf"- \*\*{re.escape(label)}:\*\* \[e\.g\..*?\]")


def _stack_summary(stack: DetectedStack) -> str | None:
    if not (stack.framework and stack.language):
        return None
    parts = [stack.framework, stack.language.value, stack.styling, stack.database]
    return ", ".join(part for part in parts if part)


def _language_rules(stack: DetectedStack) -> str | None:
    if stack.language is Language.TYPESCRIPT:
        return "TypeScript strict mode, no `any` types"
    return None


# (placeholder label, value for that line or None to leave it alone)
PREFILL_PASSES: tuple[tuple[str, Callable[[DetectedStack], str | None]], ...] = (
    ("Stack", _stack_summary),
    ("Language rules", _language_rules),
    ("Data layer", lambda s: s.database),
    ("Auth", lambda s: s.auth),
    ("Deployment", lambda s: s.deployment),
    ("Architecture pattern", lambda s: ARCHITECTURE_HINT if s.framework else None),
)


def prefill_constitution(template: str, stack: DetectedStack) -> str:
    """Return ``template`` with every placeholder the stack can answer filled in."""
    content = template
    for label, value_for in PREFILL_PASSES:
        value = value_for(stack)
        if not value:
            continue
        line = f"- **{label}:** {value}"
        content = _placeholder(label).sub(lambda _m: line, content, count=1)
    return content


def prefill_constitution_file(path: str | Path, stack: DetectedStack) -> bool:
    """Pre-fill a constitution file in place.  Returns True if it changed."""
    path = Path(path)
    original = path.read_text()
    filled = prefill_constitution(original, stack)
    if filled == original:
        return False
    path.write_text(filled)
    return True

"""Response post-processing for diagnosis LLM output."""

from __future__ import annotations

import re

from symvora.core.llm.system_prompt import DISCLAIMER

_BOLD = re.compile(r"(\*\*|__)(.+?)\1", re.DOTALL)
_ITALIC = re.compile(r"(?<![\w*])([*_])(?!\s)(.+?)(?<!\s)\1(?![\w*])")
_HEADING = re.compile(r"^#{1,6}\s+", re.MULTILINE)

# Any of these phrases counts as the model having included its own disclaimer.
_DISCLAIMER_MARKERS = (
    "informational purposes only",
    "not a substitute for professional medical advice",
    "consult a healthcare professional",
    "not medical advice",
)


def strip_markdown(content: str) -> str:
    """Remove bold, italic and heading markers the model was asked not to use."""
    content = _BOLD.sub(r"\2", content)
    content = _ITALIC.sub(r"\2", content)
    content = _HEADING.sub("", content)
    return content.strip()


def has_disclaimer(content: str) -> bool:
    normalized = " ".join(content.lower().split())
    return any(marker in normalized for marker in _DISCLAIMER_MARKERS)


def enforce_disclaimer(content: str) -> tuple[str, bool]:
    """Ensure the advice ends with a medical disclaimer.

    Returns: (possibly modified content, whether the disclaimer was appended)
    """
    if has_disclaimer(content):
        return content, False
    return f"{content}\n\n⚠️ IMPORTANT: {DISCLAIMER}", True

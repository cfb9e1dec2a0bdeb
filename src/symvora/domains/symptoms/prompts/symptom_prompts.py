"""MCP Prompts — pre-built interaction templates for symptom checks."""

from __future__ import annotations

from fastmcp import FastMCP


def register_symptom_prompts(mcp: FastMCP) -> None:
    """Register symptom checker MCP prompts."""

    @mcp.prompt()
    def describe_symptoms_prompt(duration: str = "the past few days") -> str:
        """Prompt template for describing symptoms before a check."""
        return f"""I'd like to check some symptoms I've had for {duration}. Please help me describe:

1. What I'm feeling and where
2. When it started and whether it is getting better or worse
3. Anything that makes it better or worse
4. Other symptoms that came with it

Then run a symptom check with that description. I understand the result is \
general information, not a medical diagnosis."""

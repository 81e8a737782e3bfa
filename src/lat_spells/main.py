"""
Spell parser MCP server.

Exposes the spell parser to a host through stateless tools. Every call is
independent; the server keeps no session state between calls.
"""

import json
import logging
import os
from typing import Annotated, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .dictionary import get_dictionary
from .grammar import SpellParser
from .types import Category, SpellDescriptor

logger = logging.getLogger("lat-spells")

load_dotenv()


def _log_level(name: str) -> int:
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=_log_level(os.getenv("LAT_SPELLS_LOG_LEVEL", "INFO")),
)

parser = SpellParser(get_dictionary())
logger.debug(f"📖 Dictionary loaded ({len(parser.dictionary)} forms)")

mcp = FastMCP(
    name="lat-spells"
)


def _format_spell(spell: SpellDescriptor) -> str:
    cast = "Quick Cast" if spell.is_quick_cast else "Full Cast"
    lines = [
        f"**{cast}:** {spell.source_text}",
        f"**Action:** {spell.action.value}",
        f"**Element:** {spell.element.value}",
        f"**Modifier:** {spell.modifier.value}",
    ]
    if spell.target is not None:
        lines.append(f"**Target:** {spell.target.value}")
    if spell.origin is not None:
        lines.append(f"**Origin:** {spell.origin.value}")
    if spell.emphasis_phrases:
        lines.append(f"**Emphasis:** {', '.join(e.value for e in spell.emphasis_phrases)}")
    return "\n".join(lines)


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def parse_spell(
    text: Annotated[str, Field(description="Spell incantation, e.g. 'Ure Ignis Magnus ad Hostem'")],
    output_format: Annotated[Literal["text", "json"], Field(description="Output format")] = "text",
) -> str:
    """Parse a spell incantation into its action, element, modifier and extensions.

    Returns a readable summary, or the parse outcome as JSON when
    output_format is 'json'. Invalid spells produce the parse error instead.
    """
    outcome = parser.try_parse(text)
    if output_format == "json":
        return outcome.model_dump_json(exclude_none=True)
    if outcome.error is not None:
        return f"❌ {outcome.error.message}"
    return _format_spell(outcome.spell)


@mcp.tool
def list_vocabulary(
    category: Annotated[str | None, Field(description="Only list words of this category, e.g. 'Element'")] = None,
) -> str:
    """List the words the spell parser understands."""
    dictionary = parser.dictionary
    if category is None:
        categories = list(Category)
    else:
        try:
            categories = [Category(category.strip().title())]
        except ValueError:
            valid = ", ".join(c.value for c in Category)
            return f"❌ Unknown category '{category}'. Valid categories: {valid}"

    listing = {c.value: dictionary.forms(c) for c in categories}
    return json.dumps(listing, indent=2)


logger.debug("✅ All tools registered")


def main() -> None:
    """Main entry point for the spell parser MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()

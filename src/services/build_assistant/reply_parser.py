"""Parse the line-oriented build reply returned by the LLM."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

PART_LINE = re.compile(r'^(\w+):\s*"(.+?)",\s*Price:\s*"(.+?)"$', re.IGNORECASE)
TOTAL_LINE = re.compile(r'^Total:\s*"(.+?)"$', re.IGNORECASE)

# Reply label -> builder slot.
PART_KEYS: Dict[str, str] = {
    "cpu": "cpu",
    "gpu": "gpu",
    "motherboard": "mobo",
    "ram": "ram",
    "storage": "ssd",
    "psu": "psu",
    "case": "case",
}


@dataclass(slots=True, frozen=True)
class BuildPart:
    name: str
    price: str


@dataclass(slots=True)
class BuildSuggestion:
    """Structured view of one generated build."""

    reply: str
    parts: Dict[str, BuildPart] = field(default_factory=dict)
    total: Optional[str] = None


def parse_build_reply(reply: str) -> BuildSuggestion:
    """Pick the known ``Key: "name", Price: "amount"`` lines out of a reply.

    Unknown labels and free text are ignored; a later line for the same slot
    replaces an earlier one.
    """
    suggestion = BuildSuggestion(reply=reply)
    for raw_line in reply.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        match = PART_LINE.match(line)
        if match:
            slot = PART_KEYS.get(match.group(1).lower())
            if slot:
                suggestion.parts[slot] = BuildPart(
                    name=match.group(2), price=match.group(3)
                )
            continue

        total = TOTAL_LINE.match(line)
        if total:
            suggestion.total = total.group(1)
    return suggestion

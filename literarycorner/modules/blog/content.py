"""Blog body text to renderable blocks.

Posts are stored as plain text. Paragraphs are separated by a blank line and
a paragraph written as ``**Some Heading:**`` is rendered as a section heading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

HEADING = "heading"
PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    kind: str  # heading | paragraph
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "text": self.text}


def is_heading(chunk: str) -> bool:
    return chunk.startswith("**") and chunk.endswith(":**")


def heading_text(chunk: str) -> str:
    # Only the first colon goes; "**Part 2: Tips:**" -> "Part 2 Tips:"
    return chunk.replace("**", "").replace(":", "", 1)


def parse_blocks(content: str) -> List[Block]:
    blocks: List[Block] = []
    for chunk in (content or "").split("\n\n"):
        chunk = chunk.strip()
        if not chunk:
            continue
        if is_heading(chunk):
            blocks.append(Block(HEADING, heading_text(chunk)))
        else:
            blocks.append(Block(PARAGRAPH, chunk))
    return blocks

"""Turn assistant reply text into display lines with bullet and bold markup."""

import re
from dataclasses import dataclass, field
from typing import List, Literal

BULLET_MARKER = "* "
_EMPHASIS = re.compile(r"(\*\*.*?\*\*)")


@dataclass
class Segment:
    text: str
    emphasized: bool = False


@dataclass
class RenderedLine:
    kind: Literal["spacer", "bullet", "paragraph"]
    segments: List[Segment] = field(default_factory=list)


def render_segments(line: str) -> List[Segment]:
    segments = []
    for part in _EMPHASIS.split(line):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            segments.append(Segment(part[2:-2], emphasized=True))
        else:
            segments.append(Segment(part))
    return segments


def render_message(text: str) -> List[RenderedLine]:
    lines = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            lines.append(RenderedLine("spacer"))
        elif stripped.startswith(BULLET_MARKER):
            lines.append(RenderedLine("bullet", render_segments(stripped[len(BULLET_MARKER):])))
        else:
            lines.append(RenderedLine("paragraph", render_segments(line)))
    return lines


def to_markdown(lines: List[RenderedLine]) -> str:
    """Re-emit rendered lines as Markdown for clients that render it natively."""
    out = []
    for line in lines:
        body = "".join(f"**{s.text}**" if s.emphasized else s.text for s in line.segments)
        if line.kind == "spacer":
            out.append("")
        elif line.kind == "bullet":
            out.append(f"- {body}")
        else:
            out.append(body)
    return "\n".join(out)

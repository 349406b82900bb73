"""Template compiler for validation messages.

Splits a message template into an ordered sequence of segments:
- TEXT: literal text copied verbatim
- PLACEHOLDER: ``{name}`` slot substituted from the message parameters

Syntax rules:
- ``{name}`` is a placeholder; everything between the braces is the name
- ``{}`` is a placeholder with an empty name
- a ``{`` with no closing ``}`` later in the string is literal text
"""

from dataclasses import dataclass
from enum import Enum, auto


class SegmentType(Enum):
    """Kinds of template segments."""

    TEXT = auto()
    PLACEHOLDER = auto()


@dataclass(frozen=True)
class Segment:
    """One piece of a compiled template.

    Attributes:
        type: TEXT or PLACEHOLDER
        value: Literal text, or the placeholder name
    """

    type: SegmentType
    value: str

    @classmethod
    def text(cls, value: str) -> "Segment":
        return cls(SegmentType.TEXT, value)

    @classmethod
    def placeholder(cls, name: str) -> "Segment":
        return cls(SegmentType.PLACEHOLDER, name)

    def __repr__(self) -> str:
        return f"Segment({self.type.name}, {self.value!r})"


CompiledTemplate = tuple[Segment, ...]


def compile_template(template: str) -> CompiledTemplate:
    """Compile a template string into segments.

    Scans left to right, buffering literal characters. A ``{`` looks ahead
    for ``}``; if found, the buffer is flushed and the enclosed name becomes
    a placeholder, otherwise the brace stays in the literal buffer.

    Args:
        template: Raw template (e.g., "Field '{field}' must not be blank")

    Returns:
        Tuple of segments in source order
    """
    segments: list[Segment] = []
    buffer: list[str] = []

    position = 0
    length = len(template)
    while position < length:
        char = template[position]

        if char != "{":
            buffer.append(char)
            position += 1
            continue

        close = template.find("}", position)
        if close == -1:
            # Unclosed brace degrades to literal text, merged with its neighbours
            buffer.append(char)
            position += 1
            continue

        if buffer:
            segments.append(Segment.text("".join(buffer)))
            buffer.clear()
        segments.append(Segment.placeholder(template[position + 1:close]))
        position = close + 1

    if buffer:
        segments.append(Segment.text("".join(buffer)))

    return tuple(segments)


def placeholder_names(template: str) -> list[str]:
    """Names referenced by a template, in order of first appearance."""
    names: list[str] = []
    for segment in compile_template(template):
        if segment.type is SegmentType.PLACEHOLDER and segment.value not in names:
            names.append(segment.value)
    return names

#!/usr/bin/env python3
"""
Definition data model
Plain definitions, definitions tagged with their source dictionary, and the
two terminal rendering helpers used by the renderer
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

StyleType = Union[str, Style]

WORD_TYPE_STYLE = Style(italic=True)
EMPHASIS_WORD_TYPE_STYLE = Style(bold=True, italic=True)
EMPHASIS_TEXT_STYLE = Style(color='cyan')


@dataclass(frozen=True)
class Definition:
    """A single definition of a word"""
    word_type: str  # noun, verb, interjection, intransitive verb, etc
    text: str

    def _line(self, width: int, word_type_style: Optional[StyleType],
              text_style: Optional[StyleType]) -> Text:
        padding = ' ' * max(width - cell_len(self.word_type), 1)
        return Text.assemble(
            (self.word_type, word_type_style),
            padding,
            (self.text, text_style),
        )

    def render(self, width: int = 0, styled: bool = False) -> Text:
        """Render as a word type column followed by the text, italic word type when styled"""
        return self._line(width, WORD_TYPE_STYLE if styled else None, None)

    def render_emphasized(self, width: int = 0,
                          word_type_style: StyleType = EMPHASIS_WORD_TYPE_STYLE,
                          text_style: StyleType = EMPHASIS_TEXT_STYLE) -> Text:
        """Render with the given styles for both columns"""
        return self._line(width, word_type_style, text_style)


@dataclass(frozen=True)
class SourcedDefinition:
    """A definition together with the dictionary it came from and its place in that dictionary's list"""
    dictionary: str
    rank: int
    definition: Definition

    def __post_init__(self):
        if self.rank < 0:
            raise ValueError(f"rank must be zero or positive, got {self.rank}")


# dictionary name -> definitions ordered by rank
GroupedDefinitions = Dict[str, List[Definition]]

#!/usr/bin/env python3
"""
Terminal rendering of grouped definitions
"""

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from .models import GroupedDefinitions

COLUMN_PADDING = 2
DICTIONARY_STYLE = Style(bgcolor='grey50')
BANNER_STYLE = Style(color='white', bgcolor='red')


def column_width(grouped: GroupedDefinitions) -> int:
    """Width of the word type column, shared by every dictionary of the block"""
    widest = max(
        (cell_len(definition.word_type) for definitions in grouped.values() for definition in definitions),
        default=0,
    )
    return widest + COLUMN_PADDING


def render(grouped: GroupedDefinitions, styled: bool = True) -> Text:
    """
    Render definitions one dictionary at a time.

    Each dictionary gets a header line, one line per definition and a blank
    separator line. When styled, the header is highlighted and the first
    definition of each dictionary is emphasized.
    """
    block = Text()
    if not grouped:
        return block

    width = column_width(grouped)
    for dictionary, definitions in grouped.items():
        block.append(dictionary, style=DICTIONARY_STYLE if styled else None)
        block.append('\n')
        for index, definition in enumerate(definitions):
            if styled and index == 0:
                block.append_text(definition.render_emphasized(width))
            else:
                block.append_text(definition.render(width, styled))
            block.append('\n')
        block.append('\n')
    return block


def render_word_banner(word: str, styled: bool = True) -> Text:
    return Text(word, style=BANNER_STYLE if styled else '')

#!/usr/bin/env python3
"""
Wordnik Definition Extractor
Turns a Wordnik word page into definitions tagged with their source dictionary
"""

import logging
from typing import List, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .errors import ExtractionError, ExtractionIndexingError
from .models import Definition, SourcedDefinition

logger = logging.getLogger(__name__)

ACTIVE_MODULE_SELECTOR = '.word-module.module-definitions#define .guts.active'
SOURCE_PREFIX = 'from '


def capitalize_first(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched"""
    if not text:
        raise ExtractionIndexingError("cannot capitalize an empty string")
    return text[0].upper() + text[1:]


def normalize_dictionary_name(heading_text: str) -> str:
    """
    Clean a dictionary heading such as "from The Century Dictionary."

    Strips the "from " prefix and one trailing period, and capitalizes the
    first letter.
    """
    name = heading_text.strip()
    if name.startswith(SOURCE_PREFIX):
        name = name[len(SOURCE_PREFIX):]
    if name.endswith('.'):
        name = name[:-1]
    return capitalize_first(name.strip())


def strip_word_type(text: str, word_type: str) -> str:
    """
    Remove the word type from the start of a definition, once.

    The abbreviation and italic parts may be separated by any whitespace (or
    none) in the page, so the word type is matched word by word. Matching
    stops at the first word that differs.
    """
    for token in word_type.split():
        rest = text.lstrip()
        if not rest.startswith(token):
            break
        text = rest[len(token):]
    return text


def normalize_definition_text(raw_text: str, word_type: str) -> str:
    """Remove the leading word type from a list item's text and capitalize it"""
    return capitalize_first(strip_word_type(raw_text, word_type).strip())


def _first_text(element: Tag, name: str) -> str:
    found = element.find(name)
    return found.get_text() if found is not None else ''


def _heading_text(heading: Tag) -> str:
    # Comments and CDATA are NavigableStrings too
    for child in heading.children:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            return str(child)
    return ''


def extract(document: Union[str, BeautifulSoup]) -> List[SourcedDefinition]:
    """
    Extract the definitions listed on a word page.

    Each ``ul`` in the active definitions module belongs to the ``h3`` heading
    at the same position. The position of an item inside its list is its rank.
    Returns an empty list when the page has no definitions section.
    """
    soup = document if isinstance(document, BeautifulSoup) else BeautifulSoup(document, 'html.parser')

    module = soup.select_one(ACTIVE_MODULE_SELECTOR)
    if module is None:
        logger.info("No definitions section found in document")
        return []

    headings = module.find_all('h3')
    lists = module.find_all('ul')
    if len(lists) > len(headings):
        raise ExtractionError(
            f"Definitions section has {len(lists)} lists but only {len(headings)} dictionary headings"
        )

    results = []
    for index, definition_list in enumerate(lists):
        try:
            dictionary = normalize_dictionary_name(_heading_text(headings[index]))
        except ExtractionIndexingError:
            logger.warning(f"Skipping definition list {index}: dictionary heading has no text")
            continue

        for rank, item in enumerate(definition_list.find_all('li')):
            word_type = (_first_text(item, 'abbr') + ' ' + _first_text(item, 'i')).strip()
            try:
                text = normalize_definition_text(item.get_text(), word_type)
            except ExtractionIndexingError:
                logger.warning(f"Skipping empty definition {rank} from '{dictionary}'")
                continue

            results.append(SourcedDefinition(
                dictionary=dictionary,
                rank=rank,
                definition=Definition(word_type=word_type, text=text),
            ))

    logger.debug(f"Extracted {len(results)} definitions from {len(lists)} lists")
    return results

"""
Dictionary lookup from the command line.

This package contains the pieces of the lookup pipeline:
- Definition model and ranking/grouping by source dictionary
- Extraction of definitions from Wordnik word pages
- Concurrent lookup of several words
- Terminal rendering
"""

from .errors import (
    DictionaryLookupError,
    ExtractionError,
    ExtractionIndexingError,
    MalformedDocumentError,
    TransportError,
    UnexpectedStatusError,
)
from .extractor import extract
from .lookup import LookupOutcome, lookup_all, lookup_word
from .models import Definition, SourcedDefinition
from .ranking import flatten_grouped, group_by_dictionary
from .renderer import render

__all__ = [
    'Definition',
    'SourcedDefinition',
    'group_by_dictionary',
    'flatten_grouped',
    'extract',
    'lookup_all',
    'lookup_word',
    'LookupOutcome',
    'render',
    'DictionaryLookupError',
    'TransportError',
    'UnexpectedStatusError',
    'MalformedDocumentError',
    'ExtractionError',
    'ExtractionIndexingError',
]

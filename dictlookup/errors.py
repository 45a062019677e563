#!/usr/bin/env python3
"""
Error types raised by the dictionary lookup pipeline
"""

from typing import Optional


class DictionaryLookupError(Exception):
    """Base class for every failure while looking up a word"""

    def __init__(self, message: str, word: Optional[str] = None):
        super().__init__(message)
        self.word = word


class TransportError(DictionaryLookupError):
    """Raised when the request could not be sent or timed out."""


class UnexpectedStatusError(DictionaryLookupError):
    """Raised when the dictionary site answers with anything but 200."""

    def __init__(self, message: str, status: int, word: Optional[str] = None):
        super().__init__(message, word)
        self.status = status


class MalformedDocumentError(DictionaryLookupError):
    """Raised when the response body cannot be read as HTML."""


class ExtractionError(DictionaryLookupError):
    """Raised when the definitions section does not have the expected shape."""


class ExtractionIndexingError(ExtractionError):
    """Raised when a heading or list item has no text to work with."""

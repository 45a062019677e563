#!/usr/bin/env python3
"""
Concurrent Wordnik Lookup
Fetches and extracts every requested word concurrently, reporting results in
the order the words were given
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import aiohttp
from bs4 import BeautifulSoup, ParserRejectedMarkup

from .config import LookupConfig, config as default_config
from .errors import (
    DictionaryLookupError,
    MalformedDocumentError,
    TransportError,
    UnexpectedStatusError,
)
from .extractor import extract
from .models import SourcedDefinition

logger = logging.getLogger(__name__)


@dataclass
class LookupOutcome:
    """Result of looking up one word: its definitions, or the error that stopped it"""
    word: str
    definitions: List[SourcedDefinition] = field(default_factory=list)
    error: Optional[DictionaryLookupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_session(conf: LookupConfig) -> aiohttp.ClientSession:
    """Build the HTTP session shared by all lookups"""
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=conf.timeout),
        headers={'User-Agent': conf.user_agent},
    )


async def fetch_document(session, word: str, conf: LookupConfig) -> str:
    """Download the word page and return its HTML"""
    url = conf.word_url(word)
    headers = {'User-Agent': conf.user_agent}
    logger.debug(f"GET {url}")

    try:
        async with session.get(url, headers=headers) as response:
            if response.status != 200:
                raise UnexpectedStatusError(
                    f"unexpected status {response.status} for '{word}', likely a non-word was passed",
                    status=response.status,
                    word=word,
                )
            try:
                return await response.text()
            except UnicodeDecodeError as e:
                raise MalformedDocumentError(f"malformed document for '{word}': {e}", word=word) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise TransportError(f"couldn't connect to {url}: {str(e) or type(e).__name__}", word=word) from e


async def lookup_word(session, word: str, conf: LookupConfig) -> List[SourcedDefinition]:
    """Fetch one word page and extract its definitions"""
    html = await fetch_document(session, word, conf)
    try:
        soup = BeautifulSoup(html, 'html.parser')
    except ParserRejectedMarkup as e:
        raise MalformedDocumentError(f"malformed document for '{word}': {e}", word=word) from e

    try:
        definitions = extract(soup)
    except DictionaryLookupError as e:
        e.word = e.word or word
        raise

    logger.info(f"Found {len(definitions)} definitions for '{word}'")
    return definitions


async def _collect(session, words: Sequence[str], conf: LookupConfig,
                   fail_fast: bool) -> List[LookupOutcome]:
    # One slot per word, read back strictly in input order
    slots = [asyncio.create_task(lookup_word(session, word, conf)) for word in words]
    outcomes = []

    try:
        for word, slot in zip(words, slots):
            try:
                outcomes.append(LookupOutcome(word=word, definitions=await slot))
            except DictionaryLookupError as e:
                if fail_fast:
                    raise
                logger.warning(f"Lookup failed for '{word}': {e}")
                outcomes.append(LookupOutcome(word=word, error=e))
    finally:
        # Slots not read yet, including the one that raised
        unread = slots[len(outcomes):]
        for task in unread:
            task.cancel()
        if unread:
            await asyncio.gather(*unread, return_exceptions=True)

    return outcomes


async def lookup_all(words: Sequence[str], session=None, conf: Optional[LookupConfig] = None,
                     fail_fast: bool = True) -> List[LookupOutcome]:
    """
    Look up every word concurrently.

    Outcomes come back in the same order as ``words``. With ``fail_fast`` the
    first error (in word order) cancels the remaining lookups and is raised;
    otherwise each outcome carries its own error.
    """
    conf = conf or default_config
    if not words:
        return []

    if session is not None:
        return await _collect(session, words, conf, fail_fast)

    async with create_session(conf) as owned_session:
        return await _collect(owned_session, words, conf, fail_fast)

"""Shared fixtures: a sample Wordnik page and a fake HTTP session."""

import asyncio
import textwrap
from urllib.parse import unquote

import aiohttp
import pytest

SAMPLE_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="word-module module-definitions" id="define">
        <div class="guts">
          <h3>from An Inactive Tab.</h3>
          <ul><li><abbr>n.</abbr> Should never be read.</li></ul>
        </div>
        <div class="guts active">
          <h3 class="source">from The American Heritage Dictionary of the English Language, 5th Edition. <a href="#">More</a></h3>
          <ul>
            <li><abbr title="partOfSpeech">n.</abbr> <i>noun</i> a domesticated carnivorous mammal.</li>
            <li><abbr title="partOfSpeech">n.</abbr> <i>noun</i> A person regarded as contemptible.</li>
          </ul>
          <h3 class="source">from Wiktionary, Creative Commons Attribution/Share-Alike License.</h3>
          <ul>
            <li><abbr>verb</abbr> To follow persistently.</li>
            <li><i>intransitive verb</i> to hunt with dogs.</li>
          </ul>
        </div>
      </div>
    </body></html>
    """
)

EMPTY_PAGE = "<html><body><h1>dog</h1><p>Nothing here yet.</p></body></html>"


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    async def text(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _FakeRequest:
    def __init__(self, session, url):
        self.session = session
        self.url = url

    async def __aenter__(self):
        word = unquote(self.url.rsplit('/', 1)[-1])
        await asyncio.sleep(self.session.delays.get(word, 0))
        if word in self.session.failures:
            raise self.session.failures[word]
        status, body = self.session.pages[word]
        self.session.completed.append(word)
        return FakeResponse(status, body)

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; pages maps word -> (status, body)."""

    def __init__(self, pages=None, delays=None, failures=None):
        self.pages = pages or {}
        self.delays = delays or {}
        self.failures = failures or {}
        self.requests = []
        self.completed = []

    def get(self, url, headers=None):
        self.requests.append((url, headers))
        return _FakeRequest(self, url)


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def connection_error():
    return aiohttp.ClientConnectionError("connection refused")


@pytest.fixture
def empty_page():
    return EMPTY_PAGE

"""Tests for the concurrent lookup orchestrator, run against a fake session."""

import asyncio

import pytest

from dictlookup.config import LookupConfig
from dictlookup.errors import (
    MalformedDocumentError,
    TransportError,
    UnexpectedStatusError,
)
from dictlookup.lookup import fetch_document, lookup_all, lookup_word


@pytest.fixture
def conf():
    return LookupConfig(base_url="https://dictionary.test/words/", user_agent="test-agent/1.0")


def test_fetch_sends_user_agent_to_word_url(fake_session, sample_page, conf):
    session = fake_session(pages={"dog": (200, sample_page)})

    html = asyncio.run(fetch_document(session, "dog", conf))

    assert html == sample_page
    assert session.requests == [("https://dictionary.test/words/dog", {"User-Agent": "test-agent/1.0"})]


def test_non_200_status_is_unexpected(fake_session, conf):
    session = fake_session(pages={"../test": (404, "not found")})

    with pytest.raises(UnexpectedStatusError) as excinfo:
        asyncio.run(fetch_document(session, "../test", conf))

    assert excinfo.value.status == 404
    assert excinfo.value.word == "../test"


def test_connection_failure_is_transport_error(fake_session, connection_error, conf):
    session = fake_session(failures={"dog": connection_error})

    with pytest.raises(TransportError, match="couldn't connect"):
        asyncio.run(fetch_document(session, "dog", conf))


def test_timeout_is_transport_error(fake_session, conf):
    session = fake_session(failures={"dog": asyncio.TimeoutError()})

    with pytest.raises(TransportError, match="TimeoutError"):
        asyncio.run(fetch_document(session, "dog", conf))


def test_undecodable_body_is_malformed(fake_session, conf):
    bad_body = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    session = fake_session(pages={"dog": (200, bad_body)})

    with pytest.raises(MalformedDocumentError):
        asyncio.run(lookup_word(session, "dog", conf))


def test_lookup_word_extracts_definitions(fake_session, sample_page, conf):
    session = fake_session(pages={"dog": (200, sample_page)})

    definitions = asyncio.run(lookup_word(session, "dog", conf))

    assert len(definitions) == 4


def test_outcomes_follow_input_order_not_completion_order(fake_session, sample_page, empty_page, conf):
    session = fake_session(
        pages={"b": (200, sample_page), "a": (200, empty_page)},
        delays={"b": 0.05},
    )

    outcomes = asyncio.run(lookup_all(["b", "a"], session=session, conf=conf))

    assert session.completed == ["a", "b"]
    assert [o.word for o in outcomes] == ["b", "a"]
    assert len(outcomes[0].definitions) == 4
    assert outcomes[1].definitions == []
    assert all(o.ok for o in outcomes)


def test_lookups_run_concurrently(fake_session, empty_page, conf):
    words = ["w%d" % i for i in range(5)]
    session = fake_session(
        pages={word: (200, empty_page) for word in words},
        delays={word: 0.2 for word in words},
    )

    async def timed():
        loop = asyncio.get_running_loop()
        started = loop.time()
        await lookup_all(words, session=session, conf=conf)
        return loop.time() - started

    assert asyncio.run(timed()) < 0.8


def test_fail_fast_aborts_whole_batch(fake_session, sample_page, conf):
    session = fake_session(
        pages={"dog": (200, sample_page), "zzxq": (404, ""), "slow": (200, sample_page)},
        delays={"slow": 5},
    )

    with pytest.raises(UnexpectedStatusError) as excinfo:
        asyncio.run(lookup_all(["dog", "zzxq", "slow"], session=session, conf=conf))

    assert excinfo.value.word == "zzxq"
    assert "slow" not in session.completed


def test_fail_fast_cancels_pending_on_any_error(fake_session, sample_page, conf):
    session = fake_session(
        pages={"slow": (200, sample_page)},
        failures={"boom": RuntimeError("boom")},
        delays={"slow": 5},
    )

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(lookup_all(["boom", "slow"], session=session, conf=conf))

    assert "slow" not in session.completed


def test_keep_going_isolates_failures(fake_session, sample_page, connection_error, conf):
    session = fake_session(
        pages={"dog": (200, sample_page), "cat": (200, sample_page)},
        failures={"zzxq": connection_error},
    )

    outcomes = asyncio.run(
        lookup_all(["dog", "zzxq", "cat"], session=session, conf=conf, fail_fast=False)
    )

    assert [o.ok for o in outcomes] == [True, False, True]
    assert isinstance(outcomes[1].error, TransportError)
    assert outcomes[1].definitions == []
    assert len(outcomes[2].definitions) == 4


def test_no_words_makes_no_requests(fake_session, conf):
    session = fake_session()

    assert asyncio.run(lookup_all([], session=session, conf=conf)) == []
    assert session.requests == []

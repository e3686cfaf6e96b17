"""Tests for the individual text commands."""
from __future__ import annotations

import random
import http.client
import io
import urllib.error
import urllib.request
from datetime import timedelta

import pytest

from hatysa.commands import (
    PONG,
    SketchifyClient,
    clap,
    fullwidth,
    ping,
    react,
    sketchify,
    split_uptime,
    spongebob,
    validate_url,
    zalgo,
)
from hatysa.commands.clap import CLAP
from hatysa.commands.zalgo import COMBINING_MARKS, marks_per_char
from hatysa.errors import (
    InvalidUrlError,
    MissingArgumentError,
    NonAlphanumericError,
    RequestError,
    ValidationError,
    WhitespaceError,
)


def _strip_marks(text: str) -> str:
    return "".join(char for char in text if ord(char) not in COMBINING_MARKS)


def test_clap_inserts_separator_between_words():
    result = clap("a b c")
    assert result == f"a {CLAP} b {CLAP} c"
    assert result.count(CLAP) == 2


def test_clap_collapses_repeated_whitespace():
    assert clap("  so   much\tfun ") == f"so {CLAP} much {CLAP} fun"


def test_clap_single_word_has_no_separator():
    assert clap("wow") == "wow"


@pytest.mark.parametrize("text", ["", "   "])
def test_clap_without_words_is_single_clap(text):
    assert clap(text) == CLAP


def test_spongebob_starts_lowercase_and_alternates():
    assert spongebob("abc") == "aBc"
    assert spongebob("ABCD") == "aBcD"


def test_spongebob_skips_non_letters():
    assert spongebob("a1b") == "a1B"
    assert spongebob("hi there!") == "hI tHeRe!"


def test_spongebob_empty():
    assert spongebob("") == ""


def test_fullwidth_maps_printable_ascii():
    assert fullwidth("Hi!") == "Ｈｉ！"
    assert fullwidth("a b") == "ａ\u3000ｂ"
    assert fullwidth("~") == "～"


def test_fullwidth_leaves_non_ascii_untouched():
    assert fullwidth("é漢\n") == "é漢\n"


@pytest.mark.parametrize("text", ["hello world", "Zalgo 123!", "x"])
def test_fullwidth_preserves_length(text):
    assert len(fullwidth(text)) == len(text)


def test_fullwidth_passes_fullwidth_characters_through():
    assert fullwidth("ａｂｃ\u3000！") == "ａｂｃ\u3000！"


def test_zalgo_preserves_base_characters_in_order():
    text = "He comes"
    output = zalgo(text, rng=random.Random(7))
    assert _strip_marks(output) == text
    assert len(output) == len(text) * 11


def test_zalgo_is_deterministic_with_seeded_rng():
    assert zalgo("abc", rng=random.Random(3)) == zalgo("abc", rng=random.Random(3))


def test_zalgo_marks_are_combining_diacritics():
    output = zalgo("a", rng=random.Random(1))
    assert output[0] == "a"
    assert all(ord(char) in COMBINING_MARKS for char in output[1:])


def test_zalgo_respects_max_chars():
    text = "abcd"
    output = zalgo(text, max_chars=20, rng=random.Random(2))
    assert len(output) <= 20
    assert _strip_marks(output) == text


def test_zalgo_never_shorter_than_input():
    text = "too long for the limit"
    output = zalgo(text, max_chars=5, rng=random.Random(2))
    assert output == text


def test_zalgo_empty_input():
    assert zalgo("", max_chars=10) == ""


def test_marks_per_char_limits():
    assert marks_per_char("abc", None) == 10
    assert marks_per_char("abc", 2000) == 10
    assert marks_per_char("abc", 12) == 3
    assert marks_per_char("abc", 1) == 0
    assert marks_per_char("abc", None, limit=4) == 4


def test_react_converts_letters_and_digits():
    assert react("hello")
    assert react("Ab1") == ("\U0001F1E6", "\U0001F1E7", "1\ufe0f\u20e3")
    assert len(react("ab12")) == 4


def test_react_drops_repeated_emoji_in_order():
    assert react("hello") == ("\U0001F1ED", "\U0001F1EA", "\U0001F1F1", "\U0001F1F4")
    assert react("Aa") == ("\U0001F1E6",)
    assert react("1001") == ("1\ufe0f\u20e3", "0\ufe0f\u20e3")


def test_react_rejects_whitespace():
    with pytest.raises(ValidationError):
        react("hello world")
    with pytest.raises(WhitespaceError):
        react("hello world")


def test_react_rejects_non_alphanumeric():
    with pytest.raises(NonAlphanumericError) as excinfo:
        react("a!")
    assert "A!" in excinfo.value.user_message


def test_react_rejects_non_ascii_letters():
    with pytest.raises(NonAlphanumericError):
        react("é")


def test_react_requires_argument():
    with pytest.raises(MissingArgumentError):
        react("")


def test_validate_url_accepts_http_and_https():
    assert validate_url("https://git.sr.ht") == "https://git.sr.ht"
    assert validate_url("http://lobste.rs/t/rust") == "http://lobste.rs/t/rust"


@pytest.mark.parametrize("raw", ["%393j+}[4", "ftp://example.com", "example.com", "http://"])
def test_validate_url_rejects_invalid(raw):
    with pytest.raises(InvalidUrlError):
        validate_url(raw)


def test_validate_url_rejects_multiple_urls():
    with pytest.raises(WhitespaceError):
        validate_url("https://git.sr.ht https://lobste.rs")


def test_sketchify_returns_fetched_url():
    calls = []

    def fetch(long_url: str) -> str:
        calls.append(long_url)
        return "https://verylegit.link/free-bitcoin.exe\n"

    assert sketchify("https://git.sr.ht", fetch) == "https://verylegit.link/free-bitcoin.exe"
    assert calls == ["https://git.sr.ht"]


def test_sketchify_adds_missing_scheme():
    assert (
        sketchify("https://git.sr.ht", lambda url: "verylegit.link/virus.zip")
        == "http://verylegit.link/virus.zip"
    )


def test_sketchify_rejects_empty_response():
    with pytest.raises(RequestError):
        sketchify("https://git.sr.ht", lambda url: "   ")


def test_sketchify_does_not_fetch_invalid_url():
    def fetch(long_url: str) -> str:  # pragma: no cover - must not be called
        raise AssertionError("fetch should not be called")

    with pytest.raises(InvalidUrlError):
        sketchify("not-a-url", fetch)


def test_split_uptime():
    assert split_uptime(timedelta(days=1, hours=2, minutes=3, seconds=4)) == (1, 2, 3, 4)
    assert split_uptime(timedelta(seconds=59.9)) == (0, 0, 0, 59)
    assert split_uptime(timedelta(seconds=-5)) == (0, 0, 0, 0)


def test_ping():
    assert ping() == PONG == "Pong!"


def _serve(monkeypatch, outcome):
    requests = []

    def fake_urlopen(request, timeout=None):
        requests.append((request, timeout))
        if isinstance(outcome, Exception):
            raise outcome
        return io.BytesIO(outcome)

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
    return requests


def test_sketchify_client_posts_long_url(monkeypatch):
    requests = _serve(monkeypatch, b"verylegit.link/sketchy.exe")
    client = SketchifyClient("http://verylegit.link/sketchify", timeout=3.0)
    assert client("https://git.sr.ht") == "verylegit.link/sketchy.exe"
    request, timeout = requests[0]
    assert request.get_method() == "POST"
    assert request.data == b"long_url=https%3A%2F%2Fgit.sr.ht"
    assert timeout == 3.0


@pytest.mark.parametrize(
    "outcome",
    [
        b"\xff\xfeverylegit.link/x",
        http.client.IncompleteRead(b"verylegit"),
        urllib.error.URLError("connection refused"),
        TimeoutError("timed out"),
    ],
)
def test_sketchify_client_wraps_transport_failures(monkeypatch, outcome):
    _serve(monkeypatch, outcome)
    client = SketchifyClient("http://verylegit.link/sketchify")
    with pytest.raises(RequestError):
        client("https://git.sr.ht")

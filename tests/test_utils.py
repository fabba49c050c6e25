# File: tests/test_utils.py
import pytest

from seo_doctor.models import Invalid, Parsed
from seo_doctor.parser.html_parser import HtmlDocument, parse_json_payload
from seo_doctor.utils import is_network_target, normalize_url, resolve_url, round_half_up, same_origin


@pytest.mark.parametrize(
    "url,expected",
    [
        ("HTTPS://Example.COM", "https://example.com/"),
        ("http://example.com:80/a#frag", "http://example.com/a"),
        ("https://example.com:8443/a?b=1", "https://example.com:8443/a?b=1"),
        ("index.html", "index.html"),
        ("ftp://example.com/x", "ftp://example.com/x"),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


def test_network_targets():
    assert is_network_target("https://example.com")
    assert is_network_target("HTTP://example.com")
    assert not is_network_target("site/index.html")
    assert not is_network_target("file:///tmp/a.html")


def test_same_origin():
    assert same_origin("https://example.com/a", "https://example.com:443/b")
    assert not same_origin("https://example.com/", "http://example.com/")
    assert not same_origin("https://example.com/", "https://www.example.com/")
    assert not same_origin("mailto:a@example.com", "https://example.com/")


def test_resolve_url():
    assert resolve_url("/a", "https://example.com/x/y") == Parsed("https://example.com/a")
    assert resolve_url("https://cdn.example.com/a", "file:///tmp/i.html") == Parsed("https://cdn.example.com/a")
    assert isinstance(resolve_url("http://[::1", "https://example.com/"), Invalid)
    assert isinstance(resolve_url("https://example.com:port/", "https://example.com/"), Invalid)
    assert isinstance(resolve_url("/a", "not a url"), Invalid)
    assert resolve_url("mailto:a@example.com", "https://example.com/") == Parsed("mailto:a@example.com")


def test_round_half_up():
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(92.5) == 93
    assert round_half_up(2.5) == 3


def test_json_payload():
    assert parse_json_payload('{"@type": "Article"}') == Parsed({"@type": "Article"})
    invalid = parse_json_payload("{oops")
    assert isinstance(invalid, Invalid)
    assert invalid.raw == "{oops"
    assert isinstance(parse_json_payload("[" * 100_000 + "]" * 100_000), Invalid)


def test_html_document_lookups():
    doc = HtmlDocument(
        '<html lang="de"><head><title> Hallo </title>'
        '<link rel="Canonical" href="https://example.com/">'
        '<meta property="og:image" content="i.png">'
        '<script type="application/ld+json; charset=utf-8">{"a": 1}</script>'
        '</head><body><svg><title>icon</title></svg><a href="/x">X</a><a>no href</a></body></html>'
    )
    assert doc.title() == "Hallo"
    assert doc.html_lang() == "de"
    assert doc.link_href("canonical") == "https://example.com/"
    assert doc.meta_property("og:image") == "i.png"
    assert doc.meta("description") is None
    assert doc.hrefs() == ["/x"]
    assert doc.json_ld() == [Parsed({"a": 1})]

import pytest

from mdthat.urlparse import Url, parse_url


def _reassemble(u: Url) -> str:
    return "".join(
        [
            u.protocol or "",
            "//" if u.slashes else "",
            f"{u.auth}@" if u.auth is not None else "",
            u.hostname or "",
            f":{u.port}" if u.port is not None else "",
            u.pathname or "",
            u.search or "",
            u.hash or "",
        ]
    )


def test_documented_example():
    url = (
        "https://www.reddit.com/r/programming/comments/vxttiq/"
        "comment/ifyqsqt/?utm_source=reddit&utm_medium=web2x&context=3"
    )
    u = parse_url(url)
    assert u.hostname == "www.reddit.com"
    assert u.pathname == "/r/programming/comments/vxttiq/comment/ifyqsqt/"
    assert u.search == "?utm_source=reddit&utm_medium=web2x&context=3"
    assert u.protocol == "https:"
    assert u.slashes is True


@pytest.mark.parametrize(
    "url",
    [
        "https://www.reddit.com/r/programming/?q=1#frag",
        "http://a@b@c/",
        "http://a@b/c@d",
        "http://foo?bar",
        "http://example.org:foo",
        "http://example.org:/",
        "http://example.org:8080/x?y#z",
        "mailto:foo@example.org",
        "JAVASCRIPT:alert(1)",
        "javascript:alert(1)",
        "//www.google.com/foobar",
        "www.google.com/foobar",
        "http:\\\\example.org\\",
        "https://ουτοπία.δπθ.gr/",
        "",
    ],
)
def test_parts_reassemble_to_input(url):
    assert _reassemble(parse_url(url)) == url


def test_surrounding_whitespace_is_trimmed():
    assert parse_url("  http://foo.com  \n") == parse_url("http://foo.com")


def test_last_at_sign_before_host_end_separates_auth():
    u = parse_url("http://a@b@c/")
    assert u.auth == "a@b"
    assert u.hostname == "c"
    assert u.pathname == "/"


def test_at_sign_after_path_start_is_not_auth():
    u = parse_url("http://a@b/c@d")
    assert u.auth == "a"
    assert u.hostname == "b"
    assert u.pathname == "/c@d"


def test_at_sign_in_query_is_not_auth():
    u = parse_url("http://a@b?@c")
    assert u.auth == "a"
    assert u.search == "?@c"


def test_no_leading_slash_added_to_path():
    u = parse_url("http://foo?bar")
    assert u.hostname == "foo"
    assert u.pathname == ""
    assert u.search == "?bar"


def test_trailing_colon_goes_to_path():
    u = parse_url("http://example.org:foo")
    assert u.hostname == "example.org"
    assert u.pathname == ":foo"
    assert u.port is None


def test_port_is_extracted():
    u = parse_url("http://example.org:8080/x")
    assert u.hostname == "example.org"
    assert u.port == "8080"
    assert u.pathname == "/x"


def test_ipv6_brackets_are_stripped():
    u = parse_url("http://[::1]:80/")
    assert u.hostname == "::1"
    assert u.port == "80"


def test_hostless_protocol_keeps_slashes_in_path():
    u = parse_url("javascript://x")
    assert u.protocol == "javascript:"
    assert u.slashes is False
    assert u.hostname is None
    assert u.pathname == "//x"


def test_protocol_relative_url():
    u = parse_url("//www.google.com/foobar")
    assert u.protocol is None
    assert u.slashes is True
    assert u.hostname == "www.google.com"
    assert u.pathname == "/foobar"


def test_hash_and_search_are_split():
    u = parse_url("http://example.org/p?q#h")
    assert u.hash == "#h"
    assert u.search == "?q"
    assert u.pathname == "/p"


def test_case_is_preserved():
    u = parse_url("HTTP://GOOGLE.COM/")
    assert u.protocol == "HTTP:"
    assert u.hostname == "GOOGLE.COM"


def test_non_ascii_hostname_is_kept():
    u = parse_url("https://ουτοπία.δπθ.gr/")
    assert u.hostname == "ουτοπία.δπθ.gr"


def test_mailto_hostname_and_auth():
    u = parse_url("mailto:foo@example.org")
    assert u.auth == "foo"
    assert u.hostname == "example.org"
    assert u.slashes is False
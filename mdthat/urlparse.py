"""Lenient URL parser derived from the legacy node.js algorithm.

It never fails: any input yields a ``Url``, and nothing is normalised or
lost. Differences from the node.js parser:

- no leading slash is added to paths (``http://foo?bar`` has pathname ``""``);
- backslashes are not turned into slashes;
- a trailing colon after the host is part of the path;
- nothing is percent-encoded in the result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_PROTOCOL_PATTERN = re.compile(r"[a-z0-9.+-]+:", re.IGNORECASE)
_PORT_PATTERN = re.compile(r":[0-9]*\Z")
_HOSTNAME_PART_PATTERN = re.compile(r"[+a-z0-9A-Z_-]{0,63}")
_HOSTNAME_PART_START = re.compile(r"([+a-z0-9A-Z_-]{0,63})(.*)")

# Characters that end the host: delimiters, unwise characters, the quote
# (a common XSS vector) and characters never allowed in a hostname.
_NON_HOST_CHARS = frozenset("<>\"` \r\n\t{}|\\^`'%/?;#")
_HOST_ENDING_CHARS = frozenset("/?#")

# Protocols that never have a hostname.
_HOSTLESS_PROTOCOLS = frozenset({"javascript", "javascript:"})
# Protocols that always contain a "//" part.
_SLASHED_PROTOCOLS = frozenset(
    {
        "http", "https", "ftp", "gopher", "file",
        "http:", "https:", "ftp:", "gopher:", "file:",
    }
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass
class Url:
    """Parts of a parsed URL; every field can be modified freely."""

    protocol: Optional[str] = None
    slashes: bool = False
    auth: Optional[str] = None
    port: Optional[str] = None
    hostname: Optional[str] = None
    hash: Optional[str] = None
    search: Optional[str] = None
    pathname: Optional[str] = None


def _find_first(text: str, chars: frozenset) -> Optional[int]:
    return next((i for i, ch in enumerate(text) if ch in chars), None)


def _has_host(protocol: Optional[str], slashes: bool) -> bool:
    if protocol is not None and protocol in _HOSTLESS_PROTOCOLS:
        return False
    return slashes or (protocol is not None and protocol not in _SLASHED_PROTOCOLS)


def parse_url(url: str) -> Url:
    """Parse ``url`` into a ``Url``, doing the best possible on any input."""
    result = Url()
    rest = url.strip()

    proto_match = _PROTOCOL_PATTERN.match(rest)
    if proto_match:
        result.protocol = proto_match.group()
        rest = rest[proto_match.end():]

    # "//foo/bar" is host=foo, path=/bar, as browsers resolve relative urls.
    if rest.startswith("//") and not (
        result.protocol is not None and result.protocol in _HOSTLESS_PROTOCOLS
    ):
        rest = rest[2:]
        result.slashes = True

    if _has_host(result.protocol, result.slashes):
        rest = _parse_host(url, rest, result)

    hash_pos = rest.find("#")
    if hash_pos >= 0:
        result.hash = rest[hash_pos:]
        rest = rest[:hash_pos]
    query_pos = rest.find("?")
    if query_pos >= 0:
        result.search = rest[query_pos:]
        rest = rest[:query_pos]
    if rest:
        result.pathname = rest

    if (
        result.protocol is not None
        and result.protocol.translate(_ASCII_LOWER) in _SLASHED_PROTOCOLS
        and result.hostname
        and result.pathname is None
    ):
        result.pathname = ""

    return result


def _parse_host(url: str, rest: str, result: Url) -> str:
    """Fill auth, hostname and port of ``result``; return what follows the host."""
    # An "@" before the first host-ending character separates the auth part:
    # http://a@b@c/ => auth a@b, host c; http://a@b/c@d => auth a, host b.
    host_end = _find_first(rest, _HOST_ENDING_CHARS)
    head = rest if host_end is None else rest[:host_end]
    at_sign = head.rfind("@")
    if at_sign >= 0:
        result.auth = rest[:at_sign]
        rest = rest[at_sign + 1:]

    end = _find_first(rest, _NON_HOST_CHARS)
    if end is None:
        end = len(rest)
    if rest[:end].endswith(":"):
        end -= 1
    host = rest[:end]
    rest = rest[end:]

    port_match = _PORT_PATTERN.search(host)
    if port_match:
        port = port_match.group()
        if port != ":":
            result.port = port[1:]
        host = host[: port_match.start()]
    result.hostname = host

    ipv6 = host.startswith("[") and host.endswith("]")
    if ipv6:
        result.hostname = host[1:-1]
        return rest

    parts = host.split(".")
    for index, part in enumerate(parts):
        if not part or _HOSTNAME_PART_PATTERN.fullmatch(part):
            continue
        # Non-ASCII characters count as one valid character each.
        ascii_part = "".join("x" if ord(ch) > 127 else ch for ch in part)
        if _HOSTNAME_PART_PATTERN.fullmatch(ascii_part):
            continue
        valid_parts = parts[:index]
        not_host = parts[index + 1:]
        start = _HOSTNAME_PART_START.fullmatch(part)
        if start:
            valid_parts.append(start.group(1))
            not_host.append(start.group(2))
        if not_host:
            cut = len(url) - len(rest) - len(".".join(not_host))
            rest = url[max(cut, 0):]
        result.hostname = ".".join(valid_parts)
        break

    return rest
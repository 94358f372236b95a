"""IP literal canonicalization for anonymous-user page titles.

Responsibilities:
- Detect IPv4 and IPv6 literals (IPv6 optionally with `%zone` and `/prefix`).
- Rewrite every spelling of an address into one canonical form, so user pages
  of anonymous editors key consistently.
"""

from __future__ import annotations

import re

_V4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|0?[0-9]?[0-9])"
_V4_ADDRESS = rf"{_V4_OCTET}(?:\.{_V4_OCTET}){{3}}"

# Octets embedded in an IPv6 literal may not carry leading zeros.
_V6_V4_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_V6_V4_TAIL = rf"{_V6_V4_OCTET}(?:\.{_V6_V4_OCTET}){{3}}"
_HEXTET = r"[0-9A-Fa-f]{1,4}"

_V6_ADDRESS = "|".join(
    [
        rf"(?:{_HEXTET}:){{7}}(?:{_HEXTET}|:)",
        rf"(?:{_HEXTET}:){{6}}(?::{_HEXTET}|{_V6_V4_TAIL}|:)",
        rf"(?:{_HEXTET}:){{5}}(?:(?::{_HEXTET}){{1,2}}|:{_V6_V4_TAIL}|:)",
        rf"(?:{_HEXTET}:){{4}}(?:(?::{_HEXTET}){{1,3}}|(?::{_HEXTET})?:{_V6_V4_TAIL}|:)",
        rf"(?:{_HEXTET}:){{3}}(?:(?::{_HEXTET}){{1,4}}|(?::{_HEXTET}){{0,2}}:{_V6_V4_TAIL}|:)",
        rf"(?:{_HEXTET}:){{2}}(?:(?::{_HEXTET}){{1,5}}|(?::{_HEXTET}){{0,3}}:{_V6_V4_TAIL}|:)",
        rf"(?:{_HEXTET}:){{1}}(?:(?::{_HEXTET}){{1,6}}|(?::{_HEXTET}){{0,4}}:{_V6_V4_TAIL}|:)",
        rf":(?:(?::{_HEXTET}){{1,7}}|(?::{_HEXTET}){{0,5}}:{_V6_V4_TAIL}|:)",
    ]
)

_IPV4_RE = re.compile(rf"^{_V4_ADDRESS}$")
_IPV6_RE = re.compile(
    rf"^(?P<address>{_V6_ADDRESS})"
    r"(?P<zone>%[^/]+)?"
    r"(?P<prefix>/(?:12[0-8]|1[01][0-9]|[1-9]?\d))?$"
)

_IPV6_GROUP_COUNT = 8


def is_ip_literal(text: str) -> bool:
    """Return whether `text` is an IPv4 literal or an IPv6 literal with optional suffixes."""

    return bool(_IPV4_RE.match(text) or _IPV6_RE.match(text))


def _canonical_ipv4(address: str) -> str:
    """Strip leading zeros from each octet of a dotted-quad address."""

    return ".".join(octet.lstrip("0") or "0" for octet in address.split("."))


def _expand_abbreviation(address: str) -> str:
    """Replace a `::` abbreviation with the zero groups it stands for."""

    if "::" not in address:
        return address
    head, _, tail = address.partition("::")
    head_groups = head.split(":") if head else []
    tail_groups = tail.split(":") if tail else []
    present = len(head_groups) + len(tail_groups)
    if tail_groups and "." in tail_groups[-1]:
        # A dotted IPv4 tail fills two 16-bit groups.
        present += 1
    zeros = ["0"] * (_IPV6_GROUP_COUNT - present)
    return ":".join(head_groups + zeros + tail_groups)


def _strip_group_zeros(group: str) -> str:
    if "." in group:
        return group
    return group.lstrip("0") or "0"


def _canonical_ipv6(address: str) -> str:
    """Uppercase, expand and zero-strip an IPv6 address without suffixes."""

    expanded = _expand_abbreviation(address.upper())
    return ":".join(_strip_group_zeros(group) for group in expanded.split(":"))


def sanitize_ip(text: str) -> str:
    """Return the canonical spelling of an IP literal, or `text` trimmed if it is none.

    Examples:
        `010.0.000.1` becomes `10.0.0.1`; `cebc:2004:f::` becomes
        `CEBC:2004:F:0:0:0:0:0`; `::1/24` becomes `0:0:0:0:0:0:0:1/24`.
    """

    candidate = text.strip()
    if _IPV4_RE.match(candidate):
        return _canonical_ipv4(candidate)

    match = _IPV6_RE.match(candidate)
    if match is None:
        # Usernames reach this path too and must pass through untouched.
        return candidate

    zone = match.group("zone") or ""
    prefix = match.group("prefix") or ""
    return _canonical_ipv6(match.group("address")) + zone + prefix

"""Default format dictionaries per schema draft."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict, Tuple

from ..library.dictionary import Dictionary
from . import common
from .attribute import FormatAttribute

DRAFTV4 = "draftv4"
DRAFTV3 = "draftv3"

_FACTORIES: Dict[str, Callable[[], FormatAttribute]] = {
    "date-time": common.DateTimeAttribute,
    "email": common.email_attribute,
    "hostname": common.HostnameAttribute,
    "ipv4": common.ipv4_attribute,
    "ipv6": common.ipv6_attribute,
    "uri": common.URIAttribute,
    "regex": common.regex_attribute,
    "uuid": common.uuid_attribute,
    "date": common.date_attribute,
    "time": common.TimeAttribute,
    "utc-millisec": common.UTCMillisecAttribute,
    "host-name": lambda: common.HostnameAttribute("host-name"),
    "ip-address": lambda: common.ipv4_attribute("ip-address"),
}

DRAFTV4_FORMATS: Tuple[str, ...] = (
    "date-time",
    "email",
    "hostname",
    "ipv4",
    "ipv6",
    "uri",
    "regex",
    "uuid",
)

DRAFTV3_FORMATS: Tuple[str, ...] = DRAFTV4_FORMATS + (
    "date",
    "time",
    "utc-millisec",
    "host-name",
    "ip-address",
)

_DRAFTS: Dict[str, Tuple[str, ...]] = {
    DRAFTV4: DRAFTV4_FORMATS,
    DRAFTV3: DRAFTV3_FORMATS,
}


def available_drafts() -> Tuple[str, ...]:
    return tuple(_DRAFTS)


@lru_cache(maxsize=None)
def get_format_dictionary(draft: str = DRAFTV4) -> Dictionary[FormatAttribute]:
    """Return the frozen dictionary of built-in formats for *draft*.

    The result is cached; dictionaries are immutable so sharing is safe.
    """
    if draft not in _DRAFTS:
        raise ValueError(f"Unknown draft: '{draft}'. Valid drafts: {list(_DRAFTS)}")

    builder = Dictionary.new_builder()
    for name in _DRAFTS[draft]:
        builder.add_entry(name, _FACTORIES[name]())
    return builder.freeze()

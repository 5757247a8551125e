# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Built-in format attributes.

Formats that ``jsonschema`` checks without optional extras (email, ipv4,
ipv6, regex, date, uuid) delegate to :class:`jsonschema.FormatChecker`. The
others are checked here with the standard library.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, time, timedelta, timezone
from decimal import Decimal
from urllib.parse import urlsplit

from jsonschema import FormatChecker
from jsonschema.exceptions import FormatError

from ..messages import FormatMessages
from ..processing.validation_data import ValidationData
from ..report.processing_report import ProcessingReport
from ..utils.node_type import NodeType
from .attribute import AbstractFormatAttribute


_CHECKER = FormatChecker()


class CheckerFormatAttribute(AbstractFormatAttribute):
    """String format delegated to a ``jsonschema`` format checker.

    *checker_format* is the name the checker knows the format by, which can
    differ from the attribute name (draft v3 ``ip-address`` is ``ipv4``).
    """

    def __init__(
        self,
        name: str,
        message: FormatMessages,
        checker_format: str = None,
        checker: FormatChecker = _CHECKER,
    ):
        super().__init__(name, NodeType.STRING)
        self.message = message
        self.checker_format = checker_format or name
        self.checker = checker
        if self.checker_format not in self.checker.checkers:
            raise ValueError(
                f"Format '{self.checker_format}' is not available in the installed jsonschema "
                f"(available: {sorted(self.checker.checkers)})"
            )

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        value = data.instance.node
        try:
            self.checker.check(value, self.checker_format)
        except FormatError as e:
            msg = self.new_message(data, self.message)
            if e.cause is not None:
                msg.put("reason", str(e.cause))
            report.error(msg)


_DATE_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


class DateTimeAttribute(AbstractFormatAttribute):
    """RFC 3339 ``date-time``: the calendar date and offset must be valid.

    A leap second (``:60``) is accepted at any minute; whether one was actually
    inserted there is not checked.
    """

    def __init__(self, name: str = "date-time"):
        super().__init__(name, NodeType.STRING)

    @staticmethod
    def is_valid(value: str) -> bool:
        m = _DATE_TIME_RE.fullmatch(value)
        if m is None:
            return False
        year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
        offset = m.group(8)
        try:
            if offset not in ("Z", "z"):
                sign = -1 if offset[0] == "-" else 1
                off_hours, off_minutes = int(offset[1:3]), int(offset[4:6])
                if off_hours > 23 or off_minutes > 59:
                    return False
                tz = timezone(sign * timedelta(hours=off_hours, minutes=off_minutes))
            else:
                tz = timezone.utc
            if second == 60:
                second = 59
            datetime(year, month, day, hour, minute, second, tzinfo=tz)
        except ValueError:
            return False
        return True

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        if not self.is_valid(data.instance.node):
            report.error(self.new_message(data, FormatMessages.INVALID_DATE_TIME))


_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)


class TimeAttribute(AbstractFormatAttribute):
    """Draft v3 ``time``: ``HH:MM:SS``."""

    def __init__(self, name: str = "time"):
        super().__init__(name, NodeType.STRING)

    @staticmethod
    def is_valid(value: str) -> bool:
        m = _TIME_RE.fullmatch(value)
        if m is None:
            return False
        try:
            time(*(int(g) for g in m.groups()))
        except ValueError:
            return False
        return True

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        if not self.is_valid(data.instance.node):
            report.error(self.new_message(data, FormatMessages.INVALID_TIME))


_HOSTNAME_LABEL_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")


class HostnameAttribute(AbstractFormatAttribute):
    """RFC 1034 host name; a single trailing dot is accepted."""

    def __init__(self, name: str = "hostname"):
        super().__init__(name, NodeType.STRING)

    @staticmethod
    def is_valid(value: str) -> bool:
        if value.endswith("."):
            value = value[:-1]
        if not value or len(value) > 255:
            return False
        return all(_HOSTNAME_LABEL_RE.fullmatch(label) for label in value.split("."))

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        if not self.is_valid(data.instance.node):
            report.error(self.new_message(data, FormatMessages.INVALID_HOSTNAME))


# Characters allowed anywhere in an RFC 3986 URI reference, plus percent escapes.
_URI_CHARS_RE = re.compile(r"^(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class URIAttribute(AbstractFormatAttribute):
    """URI reference; relative references are accepted."""

    def __init__(self, name: str = "uri"):
        super().__init__(name, NodeType.STRING)

    @staticmethod
    def is_valid(value: str) -> bool:
        if not _URI_CHARS_RE.fullmatch(value):
            return False
        try:
            parts = urlsplit(value)
            # Accessing port validates it.
            parts.port
        except ValueError:
            return False
        return not parts.scheme or bool(_SCHEME_RE.fullmatch(parts.scheme))

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        if not self.is_valid(data.instance.node):
            report.error(self.new_message(data, FormatMessages.INVALID_URI))


_MAX_EPOCH = 2 ** 63 - 1


class UTCMillisecAttribute(AbstractFormatAttribute):
    """Draft v3 ``utc-millisec``: milliseconds since the epoch."""

    def __init__(self, name: str = "utc-millisec"):
        super().__init__(name, NodeType.INTEGER, NodeType.NUMBER)

    @staticmethod
    def is_finite(value) -> bool:
        if isinstance(value, Decimal):
            return value.is_finite()
        if isinstance(value, float):
            return math.isfinite(value)
        return True

    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        value = data.instance.node
        if not self.is_finite(value):
            report.error(self.new_message(data, FormatMessages.EPOCH_OVERFLOW))
            return
        if value < 0:
            report.warn(self.new_message(data, FormatMessages.EPOCH_NEGATIVE))
        if value > _MAX_EPOCH or value < -_MAX_EPOCH - 1:
            report.error(self.new_message(data, FormatMessages.EPOCH_OVERFLOW))


def email_attribute(name: str = "email") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_EMAIL, "email")


def ipv4_attribute(name: str = "ipv4") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_IPV4, "ipv4")


def ipv6_attribute(name: str = "ipv6") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_IPV6, "ipv6")


def regex_attribute(name: str = "regex") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_REGEX, "regex")


def date_attribute(name: str = "date") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_DATE, "date")


def uuid_attribute(name: str = "uuid") -> CheckerFormatAttribute:
    return CheckerFormatAttribute(name, FormatMessages.INVALID_UUID, "uuid")

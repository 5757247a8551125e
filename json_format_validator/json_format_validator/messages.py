"""Message texts reported by the format keyword stage and its attributes."""

from enum import Enum


class FormatMessages(str, Enum):
    FORMAT_NOT_SUPPORTED = "format attribute not supported"

    INVALID_DATE_TIME = "string is not a valid date-time"
    INVALID_DATE = "string is not a valid date (expected YYYY-MM-DD)"
    INVALID_TIME = "string is not a valid time (expected HH:MM:SS)"
    INVALID_EMAIL = "string is not a valid email address"
    INVALID_HOSTNAME = "string is not a valid hostname"
    INVALID_IPV4 = "string is not a valid IPv4 address"
    INVALID_IPV6 = "string is not a valid IPv6 address"
    INVALID_URI = "string is not a valid URI"
    INVALID_REGEX = "string is not a valid regular expression"
    INVALID_UUID = "string is not a valid UUID"

    EPOCH_NEGATIVE = "value for utc-millisec is negative"
    EPOCH_OVERFLOW = "value for utc-millisec does not fit in a signed 64-bit integer"

    def __str__(self) -> str:
        return self.value

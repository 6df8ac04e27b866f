# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared access signature (SAS) query parameters for file service URLs."""

import dataclasses
import re
import urllib.parse
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Union

SAS_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_SAS_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d+))?)?Z)?$"
)


class SASProtocol(Enum):
    """Enumeration for the protocols a SAS may be used over."""

    HTTPS = "https"
    HTTPS_AND_HTTP = "https,http"


@dataclasses.dataclass(frozen=True)
class IPRange:
    """An IP address or range of addresses permitted to use a SAS."""

    start: str = ""
    end: str = ""

    @classmethod
    def parse(cls, value: str) -> "IPRange":
        start, _, end = value.partition("-")
        return cls(start=start, end=end)

    def __str__(self) -> str:
        if not self.start:
            return ""
        if not self.end:
            return self.start
        return f"{self.start}-{self.end}"


# Maps the SAS query key to the field that holds its value.
_QUERY_KEY_TO_FIELD = {
    "sv": "version",
    "ss": "services",
    "srt": "resource_types",
    "spr": "protocol",
    "st": "start_time",
    "se": "expiry_time",
    "sip": "ip_range",
    "si": "identifier",
    "sr": "resource",
    "sp": "permissions",
    "sig": "signature",
    "rscc": "cache_control",
    "rscd": "content_disposition",
    "rsce": "content_encoding",
    "rscl": "content_language",
    "rsct": "content_type",
}


def parse_sas_datetime(value: str) -> datetime:
    """Parses a SAS start or expiry time into a UTC datetime.

    Accepts the ISO 8601 forms the service issues: a bare date, or a date and
    time in UTC with minute, second or sub-second precision. Sub-second
    digits beyond microseconds are truncated.

    Args:
        value: The time as it appears in the query string.

    Returns:
        A timezone-aware datetime in UTC.

    Raises:
        ValueError: If the value is not in one of the accepted forms.
    """
    match = _SAS_DATETIME_PATTERN.match(value)
    if not match:
        raise ValueError(
            f"Invalid SAS time: '{value}'. Must be ISO 8601 in UTC, "
            "e.g. '2020-01-01T00:00:00Z'."
        )
    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        microsecond,
        tzinfo=timezone.utc,
    )


def format_sas_datetime(value: datetime) -> str:
    """Formats a datetime as a SAS start or expiry time.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(SAS_TIME_FORMAT)


@dataclasses.dataclass(frozen=True)
class SASQueryParameters:
    """The SAS-related query parameters of a file service URL.

    Instances are immutable. Changing any of these values invalidates the
    signature, so a new SAS has to be computed rather than edited in place.

    Start and expiry times are kept exactly as they appeared on the wire so
    that re-encoding a parsed SAS does not alter the signed string; use
    `start_datetime()` and `expiry_datetime()` for parsed values.
    """

    version: str = ""
    services: str = ""
    resource_types: str = ""
    protocol: Union[SASProtocol, str] = ""
    start_time: str = ""
    expiry_time: str = ""
    ip_range: IPRange = dataclasses.field(default_factory=IPRange)
    identifier: str = ""
    resource: str = ""
    permissions: str = ""
    signature: str = ""
    cache_control: str = ""
    content_disposition: str = ""
    content_encoding: str = ""
    content_language: str = ""
    content_type: str = ""

    @classmethod
    def from_query(
        cls, params: Dict[str, List[str]], delete_parameters: bool = True
    ) -> "SASQueryParameters":
        """Extracts the SAS parameters from a parsed query string.

        Keys are matched case-insensitively and the first value of each key
        is used.

        Args:
            params: A mapping of query keys to lists of values, as returned
                by `urllib.parse.parse_qs`.
            delete_parameters: Whether to remove the recognized keys from
                `params`.

        Returns:
            The SAS parameters found in `params`.
        """
        values = {}
        recognized = []
        for key, key_values in params.items():
            field_name = _QUERY_KEY_TO_FIELD.get(key.lower())
            if field_name is None:
                continue
            recognized.append(key)
            if field_name in values or not key_values:
                continue
            value = key_values[0]
            if field_name == "protocol":
                value = _parse_protocol(value)
            elif field_name == "ip_range":
                value = IPRange.parse(value)
            values[field_name] = value

        if delete_parameters:
            for key in recognized:
                del params[key]

        return cls(**values)

    def start_datetime(self) -> Optional[datetime]:
        """Returns the parsed start time, or None if it is not set."""
        if not self.start_time:
            return None
        return parse_sas_datetime(self.start_time)

    def expiry_datetime(self) -> Optional[datetime]:
        """Returns the parsed expiry time, or None if it is not set."""
        if not self.expiry_time:
            return None
        return parse_sas_datetime(self.expiry_time)

    def encode(self) -> str:
        """Encodes the SAS parameters as a query string.

        Keys are emitted in alphabetical order and unset fields are skipped.

        Returns:
            The encoded query string, or "" if no parameter is set.
        """
        pairs = []
        for key, field_name in sorted(_QUERY_KEY_TO_FIELD.items()):
            value = getattr(self, field_name)
            if isinstance(value, SASProtocol):
                value = value.value
            else:
                value = str(value)
            if value:
                pairs.append((key, value))
        return urllib.parse.urlencode(pairs, errors="surrogateescape")

    def is_empty(self) -> bool:
        return not self.encode()

    def __bool__(self) -> bool:
        return not self.is_empty()


def _parse_protocol(value: str) -> Union[SASProtocol, str]:
    try:
        return SASProtocol(value)
    except ValueError:
        return value

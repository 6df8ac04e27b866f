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

"""Parses file service URLs into their parts and builds them back."""

import dataclasses
import logging
import urllib.parse
from typing import Dict, List, Union

from fileshare.url.sas_query_parameters import SASQueryParameters
from fileshare.utils.host_utils import is_ip_endpoint_style

logger = logging.getLogger(__name__)

SHARE_SNAPSHOT_QUERY_KEY = "sharesnapshot"

# Percent-encoded bytes that are not valid UTF-8 are carried as lone
# surrogates so that they are encoded back unchanged.
# Characters left unescaped in the path besides the unreserved set.
_PATH_SAFE_CHARS = "/$&+,:;=@"


@dataclasses.dataclass
class FileURLParts:
    """The components of a share, directory or file URL.

    Parse an existing URL with `FileURLParts.from_url()`, change any of the
    fields, then call `url()` to build the URL again.

    Changing any SAS-related field requires computing a new SAS signature.

    Attributes:
        scheme: The URL scheme, e.g. "https".
        host: The URL host including any port, e.g.
            "account.file.example.com" or "10.0.0.1:443".
        share_name: The share name, e.g. "myshare". Empty if the URL does not
            address a share.
        directory_or_file_path: The path of the directory or file within the
            share, e.g. "mydirectory/myfile". Empty for the share root.
        share_snapshot: The share snapshot. Empty if the URL does not
            reference a snapshot.
        sas: The shared access signature parameters.
        unparsed_params: All other query parameters, mapping each key to its
            values in order.
        account_name: The storage account name. Only used with IP endpoint
            style URLs, e.g. "https://10.0.0.1/account/share".
    """

    scheme: str = ""
    host: str = ""
    share_name: str = ""
    directory_or_file_path: str = ""
    share_snapshot: str = ""
    sas: SASQueryParameters = dataclasses.field(
        default_factory=SASQueryParameters
    )
    unparsed_params: Dict[str, List[str]] = dataclasses.field(
        default_factory=dict
    )
    account_name: str = ""
    _ip_endpoint_style: bool = dataclasses.field(
        default=False, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._ip_endpoint_style = is_ip_endpoint_style(self.host)

    @property
    def is_ip_endpoint_style(self) -> bool:
        """Whether the host was an IP address when these parts were created."""
        return self._ip_endpoint_style

    @classmethod
    def from_url(
        cls, url: Union[str, urllib.parse.SplitResult]
    ) -> "FileURLParts":
        """Parses a URL into its parts.

        Snapshot and SAS query parameters are recognized case-insensitively;
        any other query parameters are kept in `unparsed_params`. Parsing
        never fails: missing path segments are left empty.

        Args:
            url: The URL string, or a URL already split by
                `urllib.parse.urlsplit`.

        Returns:
            A new FileURLParts instance.
        """
        if isinstance(url, str):
            url = urllib.parse.urlsplit(url)

        parts = cls(scheme=url.scheme, host=url.netloc)
        logger.debug(
            "Parsing file URL for host %s (IP endpoint style: %s)",
            parts.host,
            parts.is_ip_endpoint_style,
        )

        path = urllib.parse.unquote(url.path, errors="surrogateescape")
        if path.startswith("/"):
            path = path[1:]

        if path:
            if parts.is_ip_endpoint_style:
                parts.account_name, _, path = path.partition("/")
            parts.share_name, _, parts.directory_or_file_path = path.partition(
                "/"
            )

        params = urllib.parse.parse_qs(
            url.query, keep_blank_values=True, errors="surrogateescape"
        )

        snapshot_keys = [
            key for key in params if key.lower() == SHARE_SNAPSHOT_QUERY_KEY
        ]
        if snapshot_keys and params[snapshot_keys[0]]:
            parts.share_snapshot = params[snapshot_keys[0]][0]
        for key in snapshot_keys:
            del params[key]

        parts.sas = SASQueryParameters.from_query(
            params, delete_parameters=True
        )
        parts.unparsed_params = params
        return parts

    def _path(self) -> str:
        path = ""
        if self.is_ip_endpoint_style and self.account_name:
            path += "/" + self.account_name
        if self.share_name:
            path += "/" + self.share_name
            if self.directory_or_file_path:
                path += "/" + self.directory_or_file_path
        return urllib.parse.quote(
            path, safe=_PATH_SAFE_CHARS, errors="surrogateescape"
        )

    def _query(self) -> str:
        query_parts = []
        unparsed = urllib.parse.urlencode(
            self.unparsed_params, doseq=True, errors="surrogateescape"
        )
        if unparsed:
            query_parts.append(unparsed)
        if self.share_snapshot:
            query_parts.append(
                SHARE_SNAPSHOT_QUERY_KEY
                + "="
                + urllib.parse.quote(
                    self.share_snapshot, safe=":", errors="surrogateescape"
                )
            )
        sas = self.sas.encode()
        if sas:
            query_parts.append(sas)
        return "&".join(query_parts)

    def split_result(self) -> urllib.parse.SplitResult:
        """Builds the URL as a `urllib.parse.SplitResult`.

        The query string holds the unparsed parameters, then the share
        snapshot, then the SAS parameters.
        """
        return urllib.parse.SplitResult(
            scheme=self.scheme,
            netloc=self.host,
            path=self._path(),
            query=self._query(),
            fragment="",
        )

    def url(self) -> str:
        """Builds the URL string from these parts."""
        return urllib.parse.urlunsplit(self.split_result())


def parse_file_url(url: Union[str, urllib.parse.SplitResult]) -> FileURLParts:
    """Parses a URL into a `FileURLParts`. See `FileURLParts.from_url()`."""
    return FileURLParts.from_url(url)


def build_file_url(parts: FileURLParts) -> str:
    return parts.url()

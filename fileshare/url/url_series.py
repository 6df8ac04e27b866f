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

"""Applies the URL parts translator to batches of URLs held in pandas.

Requires the `pandas` extra: `pip install fileshare-url[pandas]`.
"""

import logging

import pandas as pd

from fileshare.url.file_url_parts import FileURLParts

logger = logging.getLogger(__name__)

PARTS_COLUMNS = [
    "scheme",
    "host",
    "account_name",
    "share_name",
    "directory_or_file_path",
    "share_snapshot",
    "is_ip_endpoint_style",
]


def _parse_or_empty(url) -> FileURLParts:
    if pd.isna(url):
        return FileURLParts()
    return FileURLParts.from_url(str(url))


def parse_file_urls(urls: pd.Series) -> pd.DataFrame:
    """Parses a batch of file service URLs into their parts.

    Args:
        urls: A pandas Series of URL strings. Missing values produce a row of
            empty parts.

    Returns:
        A DataFrame with one row per URL, indexed like `urls`, with the
        columns listed in `PARTS_COLUMNS`.
    """
    logger.info(f"Parsing batch of {urls.size} file URLs")
    rows = []
    for url in urls:
        parts = _parse_or_empty(url)
        rows.append([getattr(parts, column) for column in PARTS_COLUMNS])
    return pd.DataFrame(rows, index=urls.index, columns=PARTS_COLUMNS)


def with_share_snapshot(urls: pd.Series, snapshot: str) -> pd.Series:
    """Points every URL in a batch at the given share snapshot.

    Args:
        urls: A pandas Series of URL strings.
        snapshot: The share snapshot to reference. An empty string removes
            any snapshot from the URLs.

    Returns:
        A Series of rebuilt URLs with the same index as `urls`. Missing
        values are passed through unchanged.
    """
    logger.info(f"Setting share snapshot on batch of {urls.size} file URLs")

    def _rebuild(url):
        if pd.isna(url):
            return url
        parts = FileURLParts.from_url(str(url))
        parts.share_snapshot = snapshot
        return parts.url()

    return urls.apply(_rebuild)

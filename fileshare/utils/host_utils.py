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

"""A module for classifying the host portion of file service URLs."""

import ipaddress
from typing import Tuple


def split_host_port(host: str) -> Tuple[str, str]:
    """Splits a URL host into its hostname and port.

    Brackets around IPv6 literals are removed. Unbracketed text containing
    more than one colon is treated as a bare IPv6 literal without a port.

    Args:
        host: The host string, e.g. "10.0.0.1:443", "[::1]:8080" or
            "account.file.example.com".

    Returns:
        A tuple containing the hostname and the port ("" if absent).
    """
    # userinfo is not part of the host
    host = host.rpartition("@")[2]

    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            return host[1:], ""
        port = host[end + 1 :]
        return host[1:end], port[1:] if port.startswith(":") else ""

    if host.count(":") == 1:
        hostname, _, port = host.partition(":")
        return hostname, port

    return host, ""


def is_ip_endpoint_style(host: str) -> bool:
    """Checks whether a host is a bare IP address rather than a domain name.

    With an IP endpoint the storage account is addressed as the first path
    segment: http(s)://IP(:port)/account/share/...
    """
    hostname, _ = split_host_port(host)
    if not hostname:
        return False
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True

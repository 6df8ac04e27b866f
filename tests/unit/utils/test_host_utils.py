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

"""Unit tests for host classification."""

import unittest

from fileshare.utils.host_utils import is_ip_endpoint_style, split_host_port


class HostUtilsTest(unittest.TestCase):
    """Test suite for host_utils."""

    def test_split_host_port(self):
        cases = {
            "account.file.example.com": ("account.file.example.com", ""),
            "account.file.example.com:443": ("account.file.example.com", "443"),
            "10.0.0.1:443": ("10.0.0.1", "443"),
            "[::1]:8080": ("::1", "8080"),
            "[::1]": ("::1", ""),
            "::1": ("::1", ""),
            "user:pass@10.0.0.1:80": ("10.0.0.1", "80"),
            "": ("", ""),
        }
        for host, expected in cases.items():
            with self.subTest(host=host):
                self.assertEqual(split_host_port(host), expected)

    def test_ip_endpoints(self):
        for host in [
            "10.0.0.1",
            "10.0.0.1:443",
            "127.0.0.1:10000",
            "[::1]:8080",
            "[::1]",
            "[2001:db8::1]:443",
        ]:
            with self.subTest(host=host):
                self.assertTrue(is_ip_endpoint_style(host))

    def test_named_hosts(self):
        for host in [
            "account.service.example.com",
            "account.service.example.com:443",
            "localhost:10000",
            "10.0.0",
            "[not-an-ip]:80",
            "",
        ]:
            with self.subTest(host=host):
                self.assertFalse(is_ip_endpoint_style(host))


if __name__ == "__main__":
    unittest.main()

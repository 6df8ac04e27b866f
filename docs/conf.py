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

# Sphinx configuration for the fileshare-url API reference.

import os
import sys

# autodoc imports the package from the repository root.
sys.path.insert(0, os.path.abspath(".."))

project = "fileshare-url"
copyright = "2025, Google LLC"
author = "Google LLC"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",  # Google-style docstrings
    "sphinx_rtd_theme",
]

autodoc_member_order = "bysource"
autodoc_mock_imports = ["pandas"]
napoleon_numpy_docstring = False

exclude_patterns = ["_build"]

html_theme = "sphinx_rtd_theme"

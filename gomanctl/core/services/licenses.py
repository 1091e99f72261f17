"""
License headers — the short notice placed on top of generated files.

Only headers live here.  Full license texts (and LICENSE files) are the
business of project initialization, not of adding a command.
"""

from __future__ import annotations

from gomanctl.core.config.loader import ConfigError
from gomanctl.core.models.project import License
from gomanctl.core.models.settings import Settings

DEFAULT_LICENSE = "apache"

_APACHE_HEADER = """\
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License."""

_MIT_HEADER = """\
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE."""

_GPL3_HEADER = """\
This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <http://www.gnu.org/licenses/>."""

_BSD_HEADER = """\
Use of this source code is governed by a BSD-style
license that can be found in the LICENSE file."""

LICENSES: dict[str, License] = {
    "apache": License(name="Apache 2.0", header=_APACHE_HEADER),
    "mit": License(name="MIT License", header=_MIT_HEADER),
    "gpl3": License(name="GNU General Public License 3.0", header=_GPL3_HEADER),
    "bsd": License(name="BSD 3-Clause License", header=_BSD_HEADER),
    "none": License(name="None", header=""),
}

_ALIASES: dict[str, str] = {
    "apache-2.0": "apache",
    "apache2": "apache",
    "gpl-3.0": "gpl3",
    "gplv3": "gpl3",
    "bsd-3-clause": "bsd",
}


def find_license(name: str) -> License:
    """Look up a license by key or alias (case-insensitive).

    Raises:
        ConfigError: If the license is unknown.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in LICENSES:
        raise ConfigError(
            f"Unknown license '{name}'. Known: {', '.join(supported_licenses())}"
        )
    return LICENSES[key]


def resolve_license(settings: Settings) -> License:
    """Pick the license for a project.

    A custom ``license_header`` wins over a named license; no
    configuration at all means Apache 2.0.
    """
    if settings.license_header.strip():
        return License(
            name=settings.license or "custom",
            header=settings.license_header.rstrip("\n"),
        )
    return find_license(settings.license or DEFAULT_LICENSE)


def supported_licenses() -> list[str]:
    """Return the license keys with a built-in header."""
    return sorted(LICENSES.keys())

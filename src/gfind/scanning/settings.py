# Copyright 2026 Firefly Software Solutions Inc.
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
"""Scan settings bound from the ``gfind.scan`` configuration section."""

from __future__ import annotations

import sysconfig
from dataclasses import dataclass, field

from gfind.core.config import Config, config_properties


def _interpreter_library_paths() -> tuple[str, ...]:
    paths = sysconfig.get_paths()
    found: list[str] = []
    for key in ("stdlib", "platstdlib"):
        path = paths.get(key)
        if path and path not in found:
            found.append(path)
    return tuple(found)


@config_properties(prefix="gfind.scan")
@dataclass(frozen=True)
class ScanSettings:
    """Knobs for module traversal.

    ``excluded_path_fragments`` and ``excluded_path_prefixes`` decide which
    modules count as third-party or interpreter code. ``console_output``
    toggles the colored console lines. ``follow_references`` limits a scan
    to the root modules when false.
    """

    excluded_path_fragments: tuple[str, ...] = ("site-packages", "dist-packages", ".eggs")
    excluded_path_prefixes: tuple[str, ...] = field(default_factory=_interpreter_library_paths)
    console_output: bool = True
    follow_references: bool = True

    @classmethod
    def from_config(cls, config: Config) -> ScanSettings:
        return config.bind(cls)

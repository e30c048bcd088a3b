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
"""Detection of third-party and interpreter modules that are never scanned."""

from __future__ import annotations

import os

from gfind.scanning.settings import ScanSettings


def is_third_party_or_system(location: str | None, settings: ScanSettings) -> bool:
    """Decide from a module's file location whether to leave it alone.

    Built-in and frozen modules without a location count as system modules.
    """
    if not location:
        return True
    normalized = os.path.normcase(location)
    if any(os.path.normcase(fragment) in normalized for fragment in settings.excluded_path_fragments):
        return True
    return any(
        normalized.startswith(os.path.normcase(prefix))
        for prefix in settings.excluded_path_prefixes
        if prefix
    )

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
"""The ``exclude_from_search`` marker.

Decorating a class keeps it out of every scan, even when it implements the
capability being searched for::

    @exclude_from_search
    class ManualGreeter(Greeter):
        ...

The marker is a class attribute, so subclasses of an excluded class are
excluded as well.
"""

from __future__ import annotations

import inspect
from typing import TypeVar

T = TypeVar("T", bound=type)

_EXCLUDE_ATTR = "__gfind_exclude_from_search__"


def exclude_from_search(cls: T) -> T:
    """Mark a class so scanners skip it."""
    if not inspect.isclass(cls):
        raise TypeError(f"@exclude_from_search can only be applied to classes, not {cls!r}")
    setattr(cls, _EXCLUDE_ATTR, True)
    return cls


def is_excluded(cls: type) -> bool:
    """Check the marker on *cls* or any of its bases."""
    return bool(getattr(cls, _EXCLUDE_ATTR, False))

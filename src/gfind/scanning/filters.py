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
"""Type filter: which declared classes get registered for a capability."""

from __future__ import annotations

import enum
import inspect
from collections.abc import Iterable, Iterator
from typing import Any

from gfind.scanning.markers import is_excluded
from gfind.scanning.validator import is_protocol


def is_concrete_class(obj: Any) -> bool:
    """True for instantiable classes: not abstract, not a Protocol, not an Enum."""
    if not inspect.isclass(obj):
        return False
    if inspect.isabstract(obj) or is_protocol(obj):
        return False
    return not issubclass(obj, enum.Enum)


def matching_interfaces(cls: type, capability: type) -> list[type]:
    """Entries of *cls*'s MRO that are exactly *capability*.

    Only an exact match counts; a sub- or super-interface of the capability
    does not.
    """
    return [base for base in inspect.getmro(cls)[1:] if base is capability]


def filter_types(types: Iterable[Any], capability: type) -> Iterator[tuple[type, type]]:
    """Yield ``(implementation, interface)`` pairs in declaration order."""
    for candidate in types:
        if not inspect.isclass(candidate) or is_excluded(candidate):
            continue
        if candidate is capability or not is_concrete_class(candidate):
            continue
        for interface in matching_interfaces(candidate, capability):
            yield candidate, interface

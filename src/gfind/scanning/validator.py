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
"""Pre-flight check that a capability is an interface."""

from __future__ import annotations

import inspect
from typing import Any, Protocol

from gfind.kernel.exceptions import InvalidCapabilityError


def is_protocol(cls: Any) -> bool:
    """Check if a class is a ``typing.Protocol`` class (not Protocol itself)."""
    return inspect.isclass(cls) and bool(getattr(cls, "_is_protocol", False)) and cls is not Protocol


def is_interface(obj: Any) -> bool:
    """An interface is a Protocol class or an abstract base class."""
    return inspect.isclass(obj) and (is_protocol(obj) or inspect.isabstract(obj))


def validate_interface(capability: Any) -> None:
    """Raise InvalidCapabilityError unless *capability* is an interface."""
    if not is_interface(capability):
        raise InvalidCapabilityError(capability)

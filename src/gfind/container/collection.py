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
"""In-memory service collection: an ordered list of service descriptors."""

from __future__ import annotations

from collections.abc import Iterator

from gfind.container.registry import ServiceDescriptor
from gfind.container.types import Lifetime


class ServiceCollection:
    """Ordered, append-only collection of service registrations.

    Implements ``ServiceCollectionPort``. Duplicate registrations are kept
    in order; deciding between them is left to whichever container consumes
    the descriptors.
    """

    def __init__(self) -> None:
        self._descriptors: list[ServiceDescriptor] = []

    def add(self, descriptor: ServiceDescriptor) -> None:
        """Append a descriptor."""
        self._descriptors.append(descriptor)

    def add_scoped(self, service_type: type, implementation_type: type) -> None:
        self.add(ServiceDescriptor(service_type, implementation_type, Lifetime.SCOPED))

    def add_transient(self, service_type: type, implementation_type: type) -> None:
        self.add(ServiceDescriptor(service_type, implementation_type, Lifetime.TRANSIENT))

    def add_singleton(self, service_type: type, implementation_type: type) -> None:
        self.add(ServiceDescriptor(service_type, implementation_type, Lifetime.SINGLETON))

    def get_descriptors(self, service_type: type) -> list[ServiceDescriptor]:
        """Return every descriptor registered for *service_type*, in order."""
        return [d for d in self._descriptors if d.service_type is service_type]

    def implementations_of(self, service_type: type) -> list[type]:
        return [d.implementation_type for d in self.get_descriptors(service_type)]

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, item: object) -> bool:
        return item in self._descriptors

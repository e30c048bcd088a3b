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
"""ServiceCollectionPort — the contract gfind registers services through."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ServiceCollectionPort(Protocol):
    """Port for a caller-owned dependency injection registry.

    gfind never resolves services; it only pushes registrations. Any
    container exposing these three primitives can be populated.
    """

    def add_scoped(self, service_type: type, implementation_type: type) -> None: ...
    def add_transient(self, service_type: type, implementation_type: type) -> None: ...
    def add_singleton(self, service_type: type, implementation_type: type) -> None: ...

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
"""Service registration metadata."""

from __future__ import annotations

from dataclasses import dataclass

from gfind.container.types import Lifetime


@dataclass(frozen=True)
class ServiceDescriptor:
    """One entry in a service collection: an implementation bound to a service type."""

    service_type: type
    implementation_type: type
    lifetime: Lifetime = Lifetime.SINGLETON

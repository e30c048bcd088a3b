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
"""Module scanning: traversal, type filtering and registration."""

from gfind.scanning.catalog import ModuleCatalog, TypeCatalog
from gfind.scanning.filters import filter_types, is_concrete_class, matching_interfaces
from gfind.scanning.guard import is_third_party_or_system
from gfind.scanning.markers import exclude_from_search, is_excluded
from gfind.scanning.registrar import register
from gfind.scanning.scanner import ModuleScanner
from gfind.scanning.settings import ScanSettings
from gfind.scanning.validator import is_interface, validate_interface

__all__ = [
    "ModuleCatalog",
    "ModuleScanner",
    "ScanSettings",
    "TypeCatalog",
    "exclude_from_search",
    "filter_types",
    "is_concrete_class",
    "is_excluded",
    "is_interface",
    "is_third_party_or_system",
    "matching_interfaces",
    "register",
    "validate_interface",
]

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
"""gfind — register every implementation of an interface by scanning modules."""

from gfind.container import Lifetime, ServiceCollection, ServiceCollectionPort, ServiceDescriptor
from gfind.extensions import (
    register_scoped_services,
    register_services,
    register_singleton_services,
    register_transient_services,
)
from gfind.kernel.exceptions import (
    ConfigurationException,
    GFindException,
    InvalidCapabilityError,
    MissingRootModuleError,
    UnnamedModuleError,
)
from gfind.scanning import ModuleScanner, ScanSettings, exclude_from_search

__version__ = "1.0.0"

__all__ = [
    "ConfigurationException",
    "GFindException",
    "InvalidCapabilityError",
    "Lifetime",
    "MissingRootModuleError",
    "ModuleScanner",
    "ScanSettings",
    "ServiceCollection",
    "ServiceCollectionPort",
    "ServiceDescriptor",
    "UnnamedModuleError",
    "__version__",
    "exclude_from_search",
    "register_scoped_services",
    "register_services",
    "register_singleton_services",
    "register_transient_services",
]

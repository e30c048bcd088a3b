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
"""Module traversal: depth-first walk over module references, registering as it goes."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console

from gfind.console import print_load_error
from gfind.container.port import ServiceCollectionPort
from gfind.container.registry import ServiceDescriptor
from gfind.container.types import Lifetime
from gfind.kernel.exceptions import MissingRootModuleError, UnnamedModuleError
from gfind.scanning.catalog import ModuleCatalog, TypeCatalog
from gfind.scanning.filters import filter_types
from gfind.scanning.guard import is_third_party_or_system
from gfind.scanning.registrar import register
from gfind.scanning.settings import ScanSettings
from gfind.scanning.validator import validate_interface

_logger = logging.getLogger(__name__)


class ModuleScanner:
    """Registers every concrete implementation of a capability reachable from a root module.

    Each :meth:`scan` call keeps its own visited set, so a module is scanned
    at most once per call. Modules that live in third-party or interpreter
    locations are neither scanned nor walked into. A reference that fails to
    import, for any reason, is logged and dropped; the rest of the scan
    carries on.
    """

    def __init__(
        self,
        services: ServiceCollectionPort,
        *,
        catalog: TypeCatalog | None = None,
        logger: logging.Logger | None = None,
        console: Console | None = None,
        settings: ScanSettings | None = None,
    ) -> None:
        self._services = services
        self._catalog: TypeCatalog = catalog or ModuleCatalog()
        self._logger = logger or _logger
        self._console = console
        self._settings = settings or ScanSettings()

    @property
    def settings(self) -> ScanSettings:
        return self._settings

    def scan(self, root: Any, capability: type, lifetime: Lifetime = Lifetime.SCOPED) -> list[ServiceDescriptor]:
        """Walk from *root* and register matches of *capability* under *lifetime*.

        Returns the descriptors registered during this call, in order.
        """
        validate_interface(capability)
        if root is None:
            raise MissingRootModuleError("root")

        registered: list[ServiceDescriptor] = []
        visited: set[str] = set()
        pending: list[Any] = [root]

        while pending:
            module = pending.pop()

            name = self._catalog.module_name(module)
            if not name:
                raise UnnamedModuleError(module)
            if name in visited:
                continue
            visited.add(name)

            if is_third_party_or_system(self._catalog.location(module), self._settings):
                self._logger.debug("Skipping third-party or system module %s", name)
                continue

            registered.extend(self._register_module(module, capability, lifetime))

            if self._settings.follow_references:
                self._push_references(module, visited, pending)

        return registered

    def _register_module(self, module: Any, capability: type, lifetime: Lifetime) -> list[ServiceDescriptor]:
        descriptors: list[ServiceDescriptor] = []
        for implementation, interface in filter_types(self._catalog.declared_types(module), capability):
            register(
                self._services,
                interface,
                implementation,
                lifetime,
                log=self._logger,
                console=self._console,
                console_output=self._settings.console_output,
            )
            descriptors.append(ServiceDescriptor(interface, implementation, lifetime))
        return descriptors

    def _push_references(self, module: Any, visited: set[str], pending: list[Any]) -> None:
        for reference in self._catalog.references(module):
            if reference in visited:
                continue
            try:
                pending.append(self._catalog.load(reference))
            except Exception as exc:
                self._logger.error(
                    "Error: Unable to load module %s",
                    reference,
                    extra={"reference": reference, "reason": str(exc)},
                )
                if self._settings.console_output:
                    print_load_error(reference, out=self._console)

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
"""Public entry points: register every implementation of an interface in one call.

Usage::

    services = ServiceCollection()
    register_scoped_services(services, Greeter, "myapp")
    register_singleton_services(services, Repository, [myapp.data, "plugins"])

With no module given, scanning starts from the program's ``__main__``
module. A list of modules starts one independent traversal per entry.
"""

from __future__ import annotations

import logging
import sys
import types
from collections.abc import Sequence, Set as AbstractSet
from typing import Any, TypeAlias

from rich.console import Console

from gfind.container.port import ServiceCollectionPort
from gfind.container.registry import ServiceDescriptor
from gfind.container.types import Lifetime
from gfind.kernel.exceptions import MissingRootModuleError
from gfind.scanning.catalog import ModuleCatalog, TypeCatalog
from gfind.scanning.scanner import ModuleScanner
from gfind.scanning.settings import ScanSettings
from gfind.scanning.validator import validate_interface

ModuleRef: TypeAlias = "types.ModuleType | str"
Modules: TypeAlias = "ModuleRef | Sequence[ModuleRef] | AbstractSet[ModuleRef] | None"

_logger = logging.getLogger("gfind")


def register_services(
    services: ServiceCollectionPort,
    capability: type,
    modules: Modules = None,
    lifetime: Lifetime = Lifetime.SCOPED,
    *,
    logger: logging.Logger | None = None,
    console: Console | None = None,
    catalog: TypeCatalog | None = None,
    settings: ScanSettings | None = None,
) -> list[ServiceDescriptor]:
    """Register all concrete implementations of *capability* found from *modules*.

    Args:
        services: Collection receiving the registrations.
        capability: Interface (Protocol or ABC) the classes must implement.
        modules: Root module, dotted module name, or a sequence or set of them.
            Defaults to the ``__main__`` module.
        lifetime: Lifetime given to every registration.
        logger: Logger for registration and load-error records. Records carry
            their fields in ``extra``, so pass a ``logging.Logger`` rather than
            a ``LoggerAdapter``. Defaults to the ``gfind`` logger.
        console: Rich console for colored output. Defaults to the shared one.
        catalog: Introspection backend. Defaults to ``ModuleCatalog``.
        settings: Scan settings. Defaults to ``ScanSettings()``.

    Returns:
        Descriptors registered by this call, in registration order.

    Raises:
        InvalidCapabilityError: *capability* is not an interface.
        MissingRootModuleError: no root module could be determined.
        UnnamedModuleError: a module without a name was reached.
    """
    validate_interface(capability)

    catalog = catalog or ModuleCatalog()
    scanner = ModuleScanner(
        services,
        catalog=catalog,
        logger=logger or _logger,
        console=console,
        settings=settings,
    )

    registered: list[ServiceDescriptor] = []
    for root in _resolve_roots(modules, catalog):
        registered.extend(scanner.scan(root, capability, lifetime))
    return registered


def register_scoped_services(
    services: ServiceCollectionPort,
    capability: type,
    modules: Modules = None,
    **options: Any,
) -> list[ServiceDescriptor]:
    """Register implementations of *capability* with a scoped lifetime."""
    return register_services(services, capability, modules, Lifetime.SCOPED, **options)


def register_transient_services(
    services: ServiceCollectionPort,
    capability: type,
    modules: Modules = None,
    **options: Any,
) -> list[ServiceDescriptor]:
    """Register implementations of *capability* with a transient lifetime."""
    return register_services(services, capability, modules, Lifetime.TRANSIENT, **options)


def register_singleton_services(
    services: ServiceCollectionPort,
    capability: type,
    modules: Modules = None,
    **options: Any,
) -> list[ServiceDescriptor]:
    """Register implementations of *capability* with a singleton lifetime."""
    return register_services(services, capability, modules, Lifetime.SINGLETON, **options)


def _resolve_roots(modules: Modules, catalog: TypeCatalog) -> list[Any]:
    if modules is None:
        return [_entry_module()]
    if isinstance(modules, (Sequence, AbstractSet)) and not isinstance(modules, str):
        return [_resolve_root(module, catalog) for module in modules]
    return [_resolve_root(modules, catalog)]


def _resolve_root(module: Any, catalog: TypeCatalog) -> Any:
    if module is None:
        raise MissingRootModuleError("modules")
    if isinstance(module, str):
        return catalog.load(module)
    return module


def _entry_module() -> types.ModuleType:
    main = sys.modules.get("__main__")
    if main is None:
        raise MissingRootModuleError("module")
    return main

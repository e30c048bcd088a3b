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
"""TypeCatalog — the introspection surface traversal runs against.

Traversal never touches ``importlib`` or module attributes directly; it asks
a catalog. ``ModuleCatalog`` answers for real Python modules, and
``gfind.testing.InMemoryTypeCatalog`` answers for hand-built module graphs.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import types
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TypeCatalog(Protocol):
    """Port over a module system: names, locations, types and references."""

    def module_name(self, module: Any) -> str | None: ...
    def location(self, module: Any) -> str | None: ...
    def declared_types(self, module: Any) -> Iterable[type]: ...
    def references(self, module: Any) -> Iterable[str]: ...
    def load(self, reference: str) -> Any: ...


class ModuleCatalog:
    """TypeCatalog over imported Python modules.

    A module's references are, in order:

    1. its submodules, when it is a package;
    2. modules bound as names in its namespace (``import x.y``);
    3. modules that define classes and functions it imported
       (``from x.y import Thing``).
    """

    def module_name(self, module: types.ModuleType) -> str | None:
        name = getattr(module, "__name__", None)
        return name if isinstance(name, str) and name else None

    def location(self, module: types.ModuleType) -> str | None:
        location = getattr(module, "__file__", None)
        if location:
            return str(location)
        # Namespace packages have no __file__, only a search path
        for entry in getattr(module, "__path__", None) or ():
            return str(entry)
        return None

    def declared_types(self, module: types.ModuleType) -> list[type]:
        """Classes defined in *module* itself, in declaration order."""
        name = self.module_name(module)
        found: list[type] = []
        for obj in list(vars(module).values()):
            if inspect.isclass(obj) and obj.__module__ == name and obj not in found:
                found.append(obj)
        return found

    def references(self, module: types.ModuleType) -> list[str]:
        own_name = self.module_name(module)
        names: dict[str, None] = {}

        path = getattr(module, "__path__", None)
        if path is not None:
            for _finder, modname, _ispkg in pkgutil.iter_modules(path, prefix=f"{own_name}."):
                # Importing a package's __main__ runs it
                if not modname.endswith(".__main__"):
                    names[modname] = None

        for obj in list(vars(module).values()):
            if isinstance(obj, types.ModuleType):
                ref = getattr(obj, "__name__", None)
            elif inspect.isclass(obj) or inspect.isfunction(obj):
                ref = getattr(obj, "__module__", None)
            else:
                continue
            if isinstance(ref, str) and ref and ref != own_name:
                names[ref] = None

        return list(names)

    def load(self, reference: str) -> types.ModuleType:
        """Import a module by dotted name.

        Raises whatever the import raises: ``ImportError`` for a missing module,
        or any exception the module body throws while executing.
        """
        return importlib.import_module(reference)

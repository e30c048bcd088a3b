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
"""Registrar: pushes one discovered implementation into a service collection."""

from __future__ import annotations

import logging

from rich.console import Console

from gfind.console import print_registration
from gfind.container.port import ServiceCollectionPort
from gfind.container.types import Lifetime

logger = logging.getLogger(__name__)


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def register(
    services: ServiceCollectionPort,
    interface: type,
    implementation: type,
    lifetime: Lifetime,
    *,
    log: logging.Logger | None = None,
    console: Console | None = None,
    console_output: bool = True,
) -> None:
    """Register *implementation* as *interface* under *lifetime*.

    Emits one INFO record and, unless disabled, one console line.
    """
    impl_name = qualified_name(implementation)
    interface_name = qualified_name(interface)

    (log or logger).info(
        "Registering service %s as %s with lifetime %s",
        impl_name,
        interface_name,
        lifetime,
        extra={"implementation": impl_name, "interface": interface_name, "lifetime": str(lifetime)},
    )
    if console_output:
        print_registration(impl_name, interface_name, lifetime, out=console)

    if lifetime is Lifetime.SCOPED:
        services.add_scoped(interface, implementation)
    elif lifetime is Lifetime.TRANSIENT:
        services.add_transient(interface, implementation)
    else:
        services.add_singleton(interface, implementation)

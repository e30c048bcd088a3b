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
"""Shared Rich console for registration output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

GFIND_THEME = Theme({
    "message": "blue",
    "service": "green_yellow",
    "interface": "pink1",
    "lifetime": "light_salmon1",
    "error": "bold red",
    "info": "cyan",
    "dim": "dim",
})

console = Console(theme=GFIND_THEME)


def print_registration(
    implementation: str,
    interface: str,
    lifetime: object,
    *,
    out: Console | None = None,
) -> None:
    """Print 'Registering service X as Y with lifetime Z' with each part colored."""
    target = out or console
    with target.use_theme(GFIND_THEME):
        target.print(
            f"[message]Registering service [service]{escape(implementation)}[/service]"
            f" as [interface]{escape(interface)}[/interface]"
            f" with lifetime [lifetime]{escape(str(lifetime))}[/lifetime][/message]"
        )


def print_load_error(module_name: str, *, out: Console | None = None) -> None:
    """Print a red line for a module reference that could not be loaded."""
    target = out or console
    with target.use_theme(GFIND_THEME):
        target.print(f"[error]Error: Unable to load module {escape(module_name)}[/error]")

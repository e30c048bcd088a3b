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
"""gfind exceptions — configuration failures raised during service discovery."""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class GFindException(Exception):
    """Base exception for all gfind errors.

    Carries an optional error code and context dict for structured error data.
    Catch GFindException to handle every library failure, or catch specific
    subclasses for targeted handling.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SCAN_INVALID_CAPABILITY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(GFindException):
    """The caller's setup is wrong; scanning cannot proceed.

    Never retried: the caller is expected to fix its own configuration.
    """


class InvalidCapabilityError(ConfigurationException, TypeError):
    """The capability used to filter classes is not an interface."""

    def __init__(self, capability: Any) -> None:
        self.capability = capability
        name = getattr(capability, "__name__", repr(capability))
        super().__init__(
            message=f"{name} must be an interface.",
            code="SCAN_INVALID_CAPABILITY",
            context={"capability": name},
        )


class UnnamedModuleError(ConfigurationException, RuntimeError):
    """A module reached during traversal has no stable name to track it by."""

    def __init__(self, module: Any) -> None:
        self.module = module
        super().__init__(
            message=f"Module {module!r} has no resolvable name; traversal cannot track it.",
            code="SCAN_UNNAMED_MODULE",
        )


class MissingRootModuleError(GFindException, ValueError):
    """No root module was available to start scanning from."""

    def __init__(self, parameter: str = "module") -> None:
        self.parameter = parameter
        super().__init__(
            message=f"Value cannot be None: '{parameter}'. No root module to scan.",
            code="SCAN_MISSING_ROOT",
            context={"parameter": parameter},
        )

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
"""Unified exception hierarchy for pyjmx.

All library exceptions inherit from PyJmxException, so callers can catch
the root type or a specific subclass.

Categories:
- BusinessException: invalid input, such as a malformed object name
- InfrastructureException: registry, reflection and container failures
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class PyJmxException(Exception):
    """Base exception for all pyjmx errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "REGISTRY_QUERY").
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
# Business Exceptions
# =============================================================================


class BusinessException(PyJmxException):
    """Invalid input supplied by the caller."""


class ValidationException(BusinessException):
    """Input validation failures."""


class MalformedObjectNameException(ValidationException):
    """An object name string does not follow ``domain:key=value[,key=value]``."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyJmxException):
    """Infrastructure failures: registry access, reflection, bean wiring."""


class ManagementException(InfrastructureException):
    """Failure interacting with the management registry or a managed bean."""


class RegistryQueryException(ManagementException):
    """The live-instance registry could not be queried."""


class InstanceAlreadyExistsException(ManagementException):
    """An instance is already registered under the requested object name."""


class InstanceNotFoundException(ManagementException):
    """No instance is registered under the requested object name."""


class ReflectionAccessException(ManagementException):
    """A managed member could not be inspected."""

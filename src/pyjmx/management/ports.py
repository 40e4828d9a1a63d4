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
"""Ports through which the inspector reads its inputs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pyjmx.management.registry import ObjectInstance


@runtime_checkable
class RegistryReader(Protocol):
    """Read access to the live management registry."""

    def query_all(self) -> list[ObjectInstance]:
        """Return every currently registered instance."""
        ...


@runtime_checkable
class BoundTypeSource(Protocol):
    """Produces the distinct classes an object graph can create."""

    def bound_types(self) -> Iterable[type]: ...

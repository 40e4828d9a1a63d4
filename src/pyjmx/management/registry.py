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
"""In-process management registry holding live managed instances by name."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

from pyjmx.kernel.exceptions import InstanceAlreadyExistsException, InstanceNotFoundException
from pyjmx.management.object_name import ObjectName

logger = logging.getLogger(__name__)


def class_name_of(cls: type) -> str:
    """Fully qualified class name used to join instances to classes."""
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class ObjectInstance:
    """A registered instance: its object name and the name of its class."""

    object_name: ObjectName
    class_name: str

    @property
    def canonical_name(self) -> str:
        return self.object_name.canonical_name


class ManagementRegistry:
    """Registry of live managed objects keyed by :class:`ObjectName`.

    All operations are guarded by a lock. :meth:`query_all` returns a
    snapshot in registration order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[ObjectName, tuple[ObjectInstance, Any]] = {}

    def register(self, obj: Any, name: ObjectName | str) -> ObjectInstance:
        """Register *obj* under *name*.

        Raises:
            InstanceAlreadyExistsException: *name* is already taken.
            MalformedObjectNameException: *name* is not a valid object name.
        """
        object_name = ObjectName.coerce(name)
        instance = ObjectInstance(object_name=object_name, class_name=class_name_of(type(obj)))
        with self._lock:
            if object_name in self._entries:
                raise InstanceAlreadyExistsException(
                    f"An instance is already registered as '{object_name}'",
                    code="INSTANCE_EXISTS",
                    context={"object_name": str(object_name)},
                )
            self._entries[object_name] = (instance, obj)
        logger.debug(
            "instance_registered",
            extra={"object_name": str(object_name), "class_name": instance.class_name},
        )
        return instance

    def unregister(self, name: ObjectName | str) -> None:
        object_name = ObjectName.coerce(name)
        with self._lock:
            if self._entries.pop(object_name, None) is None:
                raise InstanceNotFoundException(
                    f"No instance is registered as '{object_name}'",
                    code="INSTANCE_NOT_FOUND",
                    context={"object_name": str(object_name)},
                )
        logger.debug("instance_unregistered", extra={"object_name": str(object_name)})

    def is_registered(self, name: ObjectName | str) -> bool:
        object_name = ObjectName.coerce(name)
        with self._lock:
            return object_name in self._entries

    def get(self, name: ObjectName | str) -> Any:
        """Return the object registered under *name*."""
        object_name = ObjectName.coerce(name)
        with self._lock:
            entry = self._entries.get(object_name)
        if entry is None:
            raise InstanceNotFoundException(
                f"No instance is registered as '{object_name}'",
                code="INSTANCE_NOT_FOUND",
                context={"object_name": str(object_name)},
            )
        return entry[1]

    def query_all(self) -> list[ObjectInstance]:
        with self._lock:
            return [instance for instance, _obj in self._entries.values()]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_platform_registry: ManagementRegistry | None = None
_platform_lock = threading.Lock()


def get_platform_registry() -> ManagementRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _platform_registry
    with _platform_lock:
        if _platform_registry is None:
            _platform_registry = ManagementRegistry()
        return _platform_registry

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
"""Exports managed beans from a container into a management registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pyjmx.management.decorators import has_managed_members
from pyjmx.management.object_name import ObjectName, generated_name_of
from pyjmx.management.registry import ManagementRegistry, ObjectInstance, get_platform_registry

if TYPE_CHECKING:
    from pyjmx.container.container import Container

logger = logging.getLogger(__name__)


class ManagementExporter:
    """Registers objects with a :class:`ManagementRegistry` and remembers them.

    Defaults to the platform registry.
    """

    def __init__(self, registry: ManagementRegistry | None = None) -> None:
        self._registry = registry if registry is not None else get_platform_registry()
        self._exported: list[ObjectName] = []

    @property
    def exported_names(self) -> list[ObjectName]:
        return list(self._exported)

    def export(self, obj: Any, name: ObjectName | str) -> ObjectInstance:
        instance = self._registry.register(obj, name)
        self._exported.append(instance.object_name)
        logger.info(
            "bean_exported",
            extra={"object_name": instance.canonical_name, "class_name": instance.class_name},
        )
        return instance

    def unexport(self, name: ObjectName | str) -> None:
        object_name = ObjectName.coerce(name)
        self._registry.unregister(object_name)
        if object_name in self._exported:
            self._exported.remove(object_name)
        logger.info("bean_unexported", extra={"object_name": object_name.canonical_name})

    def export_container(self, container: Container) -> list[ObjectInstance]:
        """Resolve and export every registered bean that has managed members.

        Named beans are exported as ``<module>:type=<Class>,name=<bean>``,
        unnamed ones as ``<module>:name=<Class>``. Names already present in the
        registry are skipped.
        """
        exported: list[ObjectInstance] = []
        for reg in container.registrations():
            if not has_managed_members(reg.impl_type):
                continue
            object_name = generated_name_of(reg.impl_type, reg.name or None)
            if self._registry.is_registered(object_name):
                logger.warning(
                    "bean_export_skipped",
                    extra={"object_name": object_name.canonical_name, "reason": "already registered"},
                )
                continue
            exported.append(self.export(container.resolve(reg.impl_type), object_name))
        return exported

    def unexport_all(self) -> None:
        """Unregister everything this exporter exported, newest first."""
        for object_name in reversed(self._exported):
            if self._registry.is_registered(object_name):
                self._registry.unregister(object_name)
        self._exported.clear()

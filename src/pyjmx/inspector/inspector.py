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
"""ManagementInspector — report of managed members exposed by live beans."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, TextIO

from pyjmx.config.properties.inspector import InspectorProperties
from pyjmx.container.graph import ObjectGraph
from pyjmx.inspector.members import managed_members
from pyjmx.inspector.printer import ColumnPrinter
from pyjmx.inspector.record import InspectionRecord
from pyjmx.kernel.exceptions import PyJmxException, RegistryQueryException
from pyjmx.management.ports import BoundTypeSource, RegistryReader
from pyjmx.management.registry import class_name_of, get_platform_registry

if TYPE_CHECKING:
    from pyjmx.container.container import Container

logger = logging.getLogger(__name__)


class ManagementInspector:
    """Joins an object graph with the live registry and reports managed members.

    The records are computed once, at construction, from a snapshot of the
    registry. For every candidate class with at least one registered instance,
    each managed member yields one :class:`InspectionRecord` per instance name.
    Records are unique and ordered by ``(member_name, entity_name)``.

    Construction raises :class:`RegistryQueryException` if the registry cannot
    be queried and :class:`ReflectionAccessException` if a managed member
    cannot be inspected. Nothing is retried.
    """

    NAME_COLUMN = "NAME"
    MEMBER_COLUMN = "METHOD/ATTRIBUTE"
    TYPE_COLUMN = "TYPE"
    DESCRIPTION_COLUMN = "DESCRIPTION"

    def __init__(
        self,
        bound_types: BoundTypeSource | Iterable[type],
        registry: RegistryReader | None = None,
        properties: InspectorProperties | None = None,
    ) -> None:
        self._properties = properties or InspectorProperties()
        registry = registry if registry is not None else get_platform_registry()

        names_by_class = self._index_names(registry)
        candidates = bound_types.bound_types() if isinstance(bound_types, BoundTypeSource) else bound_types

        records: set[InspectionRecord] = set()
        inspected = 0
        for cls in candidates:
            class_name = class_name_of(cls)
            names = names_by_class.get(class_name)
            if not names:
                logger.debug("class_skipped", extra={"class_name": class_name, "reason": "no live instance"})
                continue
            inspected += 1
            for member in managed_members(cls):
                for name in names:
                    records.add(InspectionRecord(name, member.name, member.description, member.kind))

        self._records: tuple[InspectionRecord, ...] = tuple(sorted(records))
        logger.debug("inspection_complete", extra={"classes": inspected, "records": len(self._records)})

    @classmethod
    def from_container(
        cls,
        container: Container,
        registry: RegistryReader | None = None,
        properties: InspectorProperties | None = None,
    ) -> ManagementInspector:
        """Inspect every class reachable from *container*'s bindings."""
        return cls(ObjectGraph(container), registry=registry, properties=properties)

    @staticmethod
    def _index_names(registry: RegistryReader) -> dict[str, list[str]]:
        """Map class name to the canonical names of its live instances."""
        try:
            instances = registry.query_all()
        except PyJmxException:
            raise
        except Exception as exc:
            raise RegistryQueryException(
                f"Failed to query the management registry: {exc}",
                code="REGISTRY_QUERY",
            ) from exc

        names: defaultdict[str, list[str]] = defaultdict(list)
        for instance in instances:
            names[instance.class_name].append(instance.canonical_name)
        logger.debug("inspection_started", extra={"live_instances": len(instances), "classes": len(names)})
        return dict(names)

    @property
    def records(self) -> tuple[InspectionRecord, ...]:
        return self._records

    def __iter__(self) -> Iterator[InspectionRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def render(self, out: TextIO) -> None:
        """Print the report to *out* as an aligned four-column table."""
        self._make_printer().print(out)

    def _make_printer(self) -> ColumnPrinter:
        printer = ColumnPrinter(
            padding=self._properties.column_padding,
            show_header=self._properties.show_header,
        )
        for column in (self.NAME_COLUMN, self.MEMBER_COLUMN, self.TYPE_COLUMN, self.DESCRIPTION_COLUMN):
            printer.add_column(column)

        for record in self._records:
            printer.add_value(self.NAME_COLUMN, record.entity_name)
            printer.add_value(self.MEMBER_COLUMN, record.member_name)
            printer.add_value(self.TYPE_COLUMN, record.kind.name.lower())
            printer.add_value(self.DESCRIPTION_COLUMN, record.description)
        return printer

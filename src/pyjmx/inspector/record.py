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
"""Inspection records: one reportable (instance, managed member) pair."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum


class MemberKind(Enum):
    """Whether a managed member reads a value or performs an operation."""

    ATTRIBUTE = "attribute"
    ACTION = "action"


@functools.total_ordering
@dataclass(frozen=True)
class InspectionRecord:
    """A managed member of one registered instance.

    Records sort by ``(member_name, entity_name)``. Equality covers every
    field, so records sharing that key but differing in ``description`` or
    ``kind`` are distinct; they sort after the key by kind, then description.
    """

    entity_name: str
    member_name: str
    description: str
    kind: MemberKind

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.member_name, self.entity_name)

    def _full_key(self) -> tuple[str, str, str, str]:
        return (self.member_name, self.entity_name, self.kind.name, self.description)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InspectionRecord):
            return NotImplemented
        return self._full_key() < other._full_key()

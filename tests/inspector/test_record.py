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
"""Tests for InspectionRecord ordering and equality."""

import dataclasses

import pytest

from pyjmx.inspector.record import InspectionRecord, MemberKind


def _record(entity: str, member: str, description: str = "", kind: MemberKind = MemberKind.ATTRIBUTE):
    return InspectionRecord(entity_name=entity, member_name=member, description=description, kind=kind)


class TestInspectionRecordOrdering:
    def test_member_name_sorts_first(self):
        records = [_record("a:type=Z", "size"), _record("z:type=A", "count")]
        assert [r.member_name for r in sorted(records)] == ["count", "size"]

    def test_entity_name_breaks_ties(self):
        records = [_record("b:type=X", "size"), _record("a:type=X", "size")]
        assert [r.entity_name for r in sorted(records)] == ["a:type=X", "b:type=X"]

    def test_sort_key(self):
        assert _record("a:type=X", "size").sort_key == ("size", "a:type=X")

    def test_comparison_operators(self):
        low, high = _record("a:type=X", "count"), _record("a:type=X", "size")
        assert low < high
        assert high > low
        assert low <= low


class TestInspectionRecordEquality:
    def test_identical_records_collapse(self):
        assert len({_record("a:type=X", "size", "d"), _record("a:type=X", "size", "d")}) == 1

    def test_same_key_different_description_are_distinct(self):
        first = _record("a:type=X", "size", "first")
        second = _record("a:type=X", "size", "second")
        assert first != second
        assert sorted({second, first}) == [first, second]

    def test_same_key_different_kind_are_distinct(self):
        action = _record("a:type=X", "size", kind=MemberKind.ACTION)
        attribute = _record("a:type=X", "size", kind=MemberKind.ATTRIBUTE)
        assert sorted({attribute, action}) == [action, attribute]

    def test_records_are_immutable(self):
        record = _record("a:type=X", "size")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.member_name = "other"  # type: ignore[misc]

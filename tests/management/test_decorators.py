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
"""Tests for the @managed marker."""

import inspect

import pytest

from pyjmx.management.decorators import ManagedInfo, has_managed_members, managed, managed_info


class Pool:
    @managed(description="Connections in use")
    @property
    def active(self) -> int:
        return 3

    @property
    @managed(description="Idle connections")
    def idle(self) -> int:
        return 1

    @managed
    def reset(self) -> None:
        pass

    @managed(description="Pool implementation version")
    @staticmethod
    def version() -> str:
        return "1.0"

    @managed(description="Instances created")
    @classmethod
    def created(cls) -> int:
        return 0

    def unmanaged(self) -> int:
        return 0


class Plain:
    def run(self) -> None:
        pass

    @managed(description="hidden")
    def _private(self) -> int:
        return 0


class ExtendedPool(Pool):
    pass


class TestManagedDecorator:
    def test_bare_decorator_has_empty_description(self):
        assert managed_info(Pool.reset) == ManagedInfo(description="")

    def test_description_is_recorded(self):
        info = managed_info(inspect.getattr_static(Pool, "active"))
        assert info is not None
        assert info.description == "Connections in use"

    def test_property_marked_below_property(self):
        info = managed_info(inspect.getattr_static(Pool, "idle"))
        assert info is not None
        assert info.description == "Idle connections"

    def test_static_and_class_methods(self):
        assert managed_info(inspect.getattr_static(Pool, "version")).description == "Pool implementation version"
        assert managed_info(inspect.getattr_static(Pool, "created")).description == "Instances created"

    def test_decorated_members_still_work(self):
        pool = Pool()
        assert pool.active == 3
        assert Pool.version() == "1.0"
        assert Pool.created() == 0

    def test_unmarked_member_has_no_info(self):
        assert managed_info(Pool.unmanaged) is None
        assert managed_info(42) is None

    def test_rejects_non_callables(self):
        with pytest.raises(TypeError, match="@managed"):
            managed(description="x")(42)


class TestHasManagedMembers:
    def test_class_with_managed_members(self):
        assert has_managed_members(Pool)

    def test_private_members_are_ignored(self):
        assert not has_managed_members(Plain)

    def test_inherited_members_count(self):
        assert has_managed_members(ExtendedPool)

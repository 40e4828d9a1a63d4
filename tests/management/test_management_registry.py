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
"""Tests for the in-process ManagementRegistry."""

import pytest

from pyjmx.kernel.exceptions import (
    InstanceAlreadyExistsException,
    InstanceNotFoundException,
    MalformedObjectNameException,
)
from pyjmx.management.object_name import ObjectName
from pyjmx.management.ports import RegistryReader
from pyjmx.management.registry import (
    ManagementRegistry,
    ObjectInstance,
    class_name_of,
    get_platform_registry,
)


class Cache:
    class Stats:
        pass


class TestClassNameOf:
    def test_module_and_qualname(self):
        assert class_name_of(Cache) == f"{Cache.__module__}.Cache"
        assert class_name_of(Cache.Stats) == f"{Cache.__module__}.Cache.Stats"


class TestManagementRegistry:
    def test_register_returns_object_instance(self):
        registry = ManagementRegistry()
        instance = registry.register(Cache(), "app:type=Cache")
        assert instance == ObjectInstance(ObjectName.parse("app:type=Cache"), class_name_of(Cache))
        assert instance.canonical_name == "app:type=Cache"

    def test_duplicate_registration_raises(self):
        registry = ManagementRegistry()
        registry.register(Cache(), "app:type=Cache,name=a")
        with pytest.raises(InstanceAlreadyExistsException):
            registry.register(Cache(), "app:name=a,type=Cache")

    def test_malformed_name_raises(self):
        with pytest.raises(MalformedObjectNameException):
            ManagementRegistry().register(Cache(), "not a name")

    def test_get_and_is_registered(self):
        registry = ManagementRegistry()
        cache = Cache()
        registry.register(cache, ObjectName.of("app", type="Cache"))
        assert registry.is_registered("app:type=Cache")
        assert registry.get("app:type=Cache") is cache

    def test_unregister(self):
        registry = ManagementRegistry()
        registry.register(Cache(), "app:type=Cache")
        registry.unregister("app:type=Cache")
        assert not registry.is_registered("app:type=Cache")
        assert len(registry) == 0

    def test_unregister_unknown_raises(self):
        with pytest.raises(InstanceNotFoundException):
            ManagementRegistry().unregister("app:type=Missing")

    def test_get_unknown_raises(self):
        with pytest.raises(InstanceNotFoundException):
            ManagementRegistry().get("app:type=Missing")

    def test_query_all_in_registration_order(self):
        registry = ManagementRegistry()
        registry.register(Cache(), "app:type=Cache,name=b")
        registry.register(Cache(), "app:type=Cache,name=a")
        assert [i.canonical_name for i in registry.query_all()] == [
            "app:name=b,type=Cache",
            "app:name=a,type=Cache",
        ]

    def test_query_all_is_a_snapshot(self):
        registry = ManagementRegistry()
        registry.register(Cache(), "app:type=Cache")
        snapshot = registry.query_all()
        registry.clear()
        assert len(snapshot) == 1
        assert registry.query_all() == []

    def test_is_a_registry_reader(self):
        assert isinstance(ManagementRegistry(), RegistryReader)


class TestPlatformRegistry:
    def test_singleton(self):
        assert get_platform_registry() is get_platform_registry()

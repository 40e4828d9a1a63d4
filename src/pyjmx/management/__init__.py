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
"""pyjmx management — managed markers, object names and the live registry."""

from pyjmx.management.decorators import ManagedInfo, has_managed_members, managed, managed_info
from pyjmx.management.exporter import ManagementExporter
from pyjmx.management.object_name import ObjectName, generated_name_of
from pyjmx.management.ports import BoundTypeSource, RegistryReader
from pyjmx.management.registry import (
    ManagementRegistry,
    ObjectInstance,
    class_name_of,
    get_platform_registry,
)

__all__ = [
    "BoundTypeSource",
    "ManagedInfo",
    "ManagementExporter",
    "ManagementRegistry",
    "ObjectInstance",
    "ObjectName",
    "RegistryReader",
    "class_name_of",
    "generated_name_of",
    "get_platform_registry",
    "has_managed_members",
    "managed",
    "managed_info",
]

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
"""pyjmx DI container — type-hint driven dependency injection."""

from pyjmx.container.container import Container
from pyjmx.container.exceptions import (
    BeanCreationException,
    BeanCurrentlyInCreationError,
    NoSuchBeanError,
    NoUniqueBeanError,
)
from pyjmx.container.graph import ObjectGraph
from pyjmx.container.stereotypes import component, service
from pyjmx.container.types import Scope

__all__ = [
    "BeanCreationException",
    "BeanCurrentlyInCreationError",
    "Container",
    "NoSuchBeanError",
    "NoUniqueBeanError",
    "ObjectGraph",
    "Scope",
    "component",
    "service",
]

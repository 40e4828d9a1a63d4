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
"""The ``@managed`` marker for methods and properties exposed for management."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, overload

F = TypeVar("F")

_MANAGED_ATTR = "__pyjmx_managed__"


@dataclass(frozen=True)
class ManagedInfo:
    """Metadata attached to a managed member."""

    description: str = ""


@overload
def managed(member: F) -> F: ...


@overload
def managed(*, description: str = "") -> Callable[[F], F]: ...


def managed(member: Any = None, *, description: str = "") -> Any:
    """Expose a method or property for management.

    Can be used with or without arguments, above or below ``@property``::

        class Pool:
            @managed(description="Connections in use")
            @property
            def active(self) -> int: ...

            @managed
            def reset(self) -> None: ...

    A method is reported as an attribute only if it takes no arguments and
    declares a return value. Annotate getters: an unannotated ``def size(self)``
    is reported as an action even if it returns something.
    """

    def decorator(target: Any) -> Any:
        info = ManagedInfo(description=description)
        func = target.fget if isinstance(target, property) else target
        if isinstance(func, (staticmethod, classmethod)):
            func = func.__func__
        if not callable(func):
            raise TypeError(f"@managed can only be applied to functions or properties, got {target!r}")
        setattr(func, _MANAGED_ATTR, info)
        return target

    if member is not None:
        return decorator(member)
    return decorator


def unwrap_member(member: Any) -> Any:
    """Return the function behind a property, staticmethod or classmethod."""
    if isinstance(member, property):
        return member.fget
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def managed_info(member: Any) -> ManagedInfo | None:
    """Return the ``@managed`` metadata of *member*, or ``None`` if unmarked."""
    info = getattr(unwrap_member(member), _MANAGED_ATTR, None)
    return info if isinstance(info, ManagedInfo) else None


def has_managed_members(cls: type) -> bool:
    """True if any public member of *cls* (inherited included) is managed."""
    for name in dir(cls):
        if name.startswith("_"):
            continue
        if managed_info(inspect.getattr_static(cls, name, None)) is not None:
            return True
    return False

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
"""Discovery and classification of managed members on a class."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pyjmx.inspector.record import MemberKind
from pyjmx.kernel.exceptions import ReflectionAccessException
from pyjmx.management.decorators import managed_info, unwrap_member

_NO_VALUE = (type(None), typing.NoReturn, typing.Never)

_MISSING = object()


@dataclass(frozen=True)
class ManagedMember:
    """A managed member found on a class."""

    name: str
    description: str
    kind: MemberKind


def classify(returns_value: bool, parameter_count: int) -> MemberKind:
    """ATTRIBUTE only for a zero-parameter member that returns a value."""
    if not returns_value:
        return MemberKind.ACTION
    return MemberKind.ACTION if parameter_count > 0 else MemberKind.ATTRIBUTE


def managed_members(cls: type) -> Iterator[ManagedMember]:
    """Yield the public managed members of *cls*, inherited ones included.

    Raises:
        ReflectionAccessException: a managed member's signature or type hints
            cannot be read.
    """
    for name in sorted(dir(cls)):
        if name.startswith("_"):
            continue
        member = inspect.getattr_static(cls, name, _MISSING)
        if member is _MISSING:
            continue
        info = managed_info(member)
        if info is None:
            continue
        yield ManagedMember(name=name, description=info.description, kind=member_kind(cls, name, member))


def member_kind(cls: type, name: str, member: Any) -> MemberKind:
    """Classify a raw class attribute (as returned by ``getattr_static``)."""
    if isinstance(member, property):
        return MemberKind.ATTRIBUTE

    func = unwrap_member(member)
    try:
        sig = inspect.signature(func)
        hints = typing.get_type_hints(func)
    except (NameError, TypeError, ValueError) as exc:
        raise ReflectionAccessException(
            f"Cannot inspect managed member {cls.__qualname__}.{name}: {exc}",
            code="REFLECTION_ACCESS",
            context={"class": cls.__qualname__, "member": name},
        ) from exc

    params = list(sig.parameters.values())
    if params and _takes_receiver(member):
        params = params[1:]

    return classify(_returns_value(hints), len(params))


def _takes_receiver(member: Any) -> bool:
    """Plain functions and classmethods receive ``self``/``cls`` implicitly."""
    return isinstance(member, classmethod) or inspect.isfunction(member)


def _returns_value(hints: dict[str, Any]) -> bool:
    if "return" not in hints:
        return False
    return not any(hints["return"] is t for t in _NO_VALUE)

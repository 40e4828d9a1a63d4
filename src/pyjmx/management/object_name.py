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
"""Object names: ``domain:key=value[,key=value...]`` identifiers for managed beans."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyjmx.kernel.exceptions import MalformedObjectNameException

_RESERVED = frozenset(":=,*?\"")


class ObjectName:
    """An immutable, parsed object name.

    The canonical form lists key properties sorted by key, so two names that
    differ only in property order are equal::

        >>> ObjectName.parse("app:type=Pool,name=main").canonical_name
        'app:name=main,type=Pool'

    Quoted values and wildcard patterns are not supported.
    """

    __slots__ = ("_domain", "_properties", "_canonical")

    def __init__(self, domain: str, properties: Mapping[str, str]) -> None:
        if not domain:
            raise MalformedObjectNameException("Object name domain must not be empty", code="OBJECT_NAME")
        if set(domain) & set(":*?"):
            raise MalformedObjectNameException(
                f"Invalid character in domain '{domain}'",
                code="OBJECT_NAME",
                context={"domain": domain},
            )
        if not properties:
            raise MalformedObjectNameException(
                f"Object name '{domain}:' has no key properties",
                code="OBJECT_NAME",
                context={"domain": domain},
            )
        for key, value in properties.items():
            _check_part(key, "key")
            _check_part(value, "value")

        self._domain = domain
        self._properties = dict(properties)
        ordered = ",".join(f"{k}={self._properties[k]}" for k in sorted(self._properties))
        self._canonical = f"{domain}:{ordered}"

    @classmethod
    def parse(cls, name: str) -> ObjectName:
        """Parse ``domain:key=value,...``."""
        domain, sep, rest = name.partition(":")
        if not sep:
            raise MalformedObjectNameException(
                f"Object name '{name}' is missing the domain separator ':'",
                code="OBJECT_NAME",
            )

        properties: dict[str, str] = {}
        for pair in rest.split(",") if rest else []:
            key, eq, value = pair.partition("=")
            if not eq:
                raise MalformedObjectNameException(
                    f"Key property '{pair}' in '{name}' is not of the form key=value",
                    code="OBJECT_NAME",
                )
            if key in properties:
                raise MalformedObjectNameException(
                    f"Duplicate key '{key}' in object name '{name}'",
                    code="OBJECT_NAME",
                )
            properties[key] = value
        return cls(domain, properties)

    @classmethod
    def of(cls, domain: str, **properties: str) -> ObjectName:
        return cls(domain, properties)

    @classmethod
    def coerce(cls, name: ObjectName | str) -> ObjectName:
        """Accept either an :class:`ObjectName` or its string form."""
        return name if isinstance(name, ObjectName) else cls.parse(name)

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    @property
    def canonical_name(self) -> str:
        return self._canonical

    def get(self, key: str) -> str | None:
        return self._properties.get(key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ObjectName):
            return NotImplemented
        return self._canonical == other._canonical

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __str__(self) -> str:
        return self._canonical

    def __repr__(self) -> str:
        return f"ObjectName({self._canonical!r})"


def _check_part(part: str, what: str) -> None:
    if not part:
        raise MalformedObjectNameException(f"Object name {what} must not be empty", code="OBJECT_NAME")
    bad = sorted(set(part) & _RESERVED)
    if bad:
        raise MalformedObjectNameException(
            f"Object name {what} '{part}' contains reserved characters {bad}",
            code="OBJECT_NAME",
            context={what: part},
        )


def generated_name_of(cls: type, name: str | None = None) -> ObjectName:
    """Default object name for a managed class.

    ``<module>:name=<ClassName>``, or ``<module>:type=<ClassName>,name=<name>``
    when several beans of the same class need distinct names.
    """
    if name:
        return ObjectName.of(cls.__module__, type=cls.__name__, name=name)
    return ObjectName.of(cls.__module__, name=cls.__name__)

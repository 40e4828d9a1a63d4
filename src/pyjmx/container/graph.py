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
"""Object graph traversal over a container's bindings."""

from __future__ import annotations

import inspect
import types
from collections.abc import Iterator
from typing import TYPE_CHECKING, Annotated, Any, Union, get_args, get_origin

if TYPE_CHECKING:
    from pyjmx.container.container import Container


class ObjectGraph:
    """Enumerates the distinct classes a :class:`Container` can produce.

    Walks registered implementation types, bound interface types, and the
    constructor dependencies reachable from them. Each class is yielded once,
    in discovery order. Builtin types are never yielded.
    """

    _MAX_DEPTH = 10

    def __init__(self, container: Container) -> None:
        self._container = container

    def bound_types(self) -> Iterator[type]:
        seen: dict[type, None] = {}

        for reg in self._container.registrations():
            self._visit(reg.impl_type, 0, seen)
        for interface, impls in self._container.bindings().items():
            self._visit(interface, 0, seen)
            for impl in impls:
                self._visit(impl, 0, seen)

        yield from seen

    def __iter__(self) -> Iterator[type]:
        return self.bound_types()

    def _visit(self, cls: Any, depth: int, seen: dict[type, None]) -> None:
        if not isinstance(cls, type) or cls in seen or depth >= self._MAX_DEPTH:
            return
        if cls.__module__ == "builtins":
            return
        seen[cls] = None
        for hint in self._constructor_hints(cls).values():
            base = self._extract_base_type(hint)
            if base is not None:
                self._visit(base, depth + 1, seen)

    @staticmethod
    def _constructor_hints(cls: type) -> dict[str, Any]:
        """Resolved ``__init__`` annotations, or ``{}`` when they cannot be read."""
        init = getattr(cls, "__init__", None)
        if not inspect.isfunction(init):
            return {}
        try:
            hints = inspect.get_annotations(init, eval_str=True)
        except (NameError, SyntaxError, TypeError):
            return {}
        hints.pop("return", None)
        return hints

    @staticmethod
    def _extract_base_type(hint: Any) -> type | None:
        """Unwrap ``Annotated[T, ...]``, ``Optional[T]`` and ``list[T]`` to ``T``."""
        if isinstance(hint, type) and get_origin(hint) is None:
            return hint

        origin = get_origin(hint)
        args = get_args(hint)

        if origin is Annotated or origin is list:
            return ObjectGraph._extract_base_type(args[0]) if args else None

        if origin is Union or isinstance(hint, types.UnionType):
            non_none = [a for a in args if a is not type(None)]
            if len(non_none) == 1:
                return ObjectGraph._extract_base_type(non_none[0])

        return None

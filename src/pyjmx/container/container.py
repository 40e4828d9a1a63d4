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
"""Lightweight DI container with type-hint based resolution."""

from __future__ import annotations

import difflib
import inspect
import logging
import types
import typing
from typing import Any, TypeVar, Union, cast, get_args, get_origin

from pyjmx.container.exceptions import (
    BeanCurrentlyInCreationError,
    NoSuchBeanError,
    NoUniqueBeanError,
)
from pyjmx.container.registry import Registration
from pyjmx.container.types import Scope

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Supports constructor injection via type hints, singleton and transient
    scopes, interface-to-implementation binding, named beans, ``Optional[T]``
    and ``list[T]`` parameters, and circular dependency detection.
    """

    def __init__(self) -> None:
        self._registrations: dict[type, Registration] = {}
        self._named: dict[str, Registration] = {}
        self._bindings: dict[type, list[type]] = {}
        self._resolving: dict[type, None] = {}  # insertion-ordered chain

    def register(self, cls: type, scope: Scope | None = None, name: str = "") -> None:
        """Register a class for injection.

        Stereotype metadata (``@component(name=..., scope=...)``) is used when
        *scope* or *name* are not given explicitly.
        """
        bean_name = name or getattr(cls, "__pyjmx_bean_name__", "")
        bean_scope = scope or getattr(cls, "__pyjmx_scope__", None) or Scope.SINGLETON
        reg = Registration(impl_type=cls, scope=bean_scope, name=bean_name)
        self._registrations[cls] = reg
        if bean_name:
            self._named[bean_name] = reg
        logger.debug("bean_registered", extra={"bean": reg.bean_name, "scope": bean_scope.name})

    def bind(self, interface: type, implementation: type) -> None:
        """Bind an interface/base class to a concrete implementation."""
        impls = self._bindings.setdefault(interface, [])
        if implementation not in impls:
            impls.append(implementation)

    def registrations(self) -> list[Registration]:
        return list(self._registrations.values())

    def bindings(self) -> dict[type, list[type]]:
        return {interface: list(impls) for interface, impls in self._bindings.items()}

    def contains(self, name: str) -> bool:
        return name in self._named

    def resolve(self, cls: type[T]) -> T:
        """Resolve an instance of the given type."""
        if cls in self._registrations:
            return cast(T, self._resolve_registration(self._registrations[cls]))

        impls = self._bindings.get(cls, [])
        if not impls:
            raise NoSuchBeanError(
                bean_type=cls,
                suggestions=self._similar_names(getattr(cls, "__name__", "")),
            )
        if len(impls) > 1:
            raise NoUniqueBeanError(bean_type=cls, candidates=impls)
        return cast(T, self._resolve_registration(self._registrations[impls[0]]))

    def resolve_by_name(self, name: str) -> Any:
        if name not in self._named:
            raise NoSuchBeanError(bean_name=name, suggestions=self._similar_names(name))
        return self._resolve_registration(self._named[name])

    def resolve_all(self, cls: type[T]) -> list[T]:
        """Resolve every implementation bound to *cls*."""
        return [self._resolve_registration(self._registrations[impl]) for impl in self._bindings.get(cls, [])]

    def _resolve_registration(self, reg: Registration) -> Any:
        if reg.scope == Scope.SINGLETON and reg.instance is not None:
            return reg.instance

        instance = self._create_instance(reg)
        if reg.scope == Scope.SINGLETON:
            reg.instance = instance
        return instance

    def _create_instance(self, reg: Registration) -> Any:
        if reg.impl_type in self._resolving:
            raise BeanCurrentlyInCreationError(chain=list(self._resolving), current=reg.impl_type)
        self._resolving[reg.impl_type] = None
        try:
            init = reg.impl_type.__init__  # type: ignore[misc]
            if init is object.__init__:
                return reg.impl_type()

            hints = typing.get_type_hints(init)
            hints.pop("return", None)
            sig = inspect.signature(init)

            kwargs: dict[str, Any] = {}
            for param_name, param_type in hints.items():
                param = sig.parameters.get(param_name)
                has_default = param is not None and param.default is not inspect.Parameter.empty
                try:
                    kwargs[param_name] = self._resolve_param(param_type)
                except (NoSuchBeanError, NoUniqueBeanError):
                    if has_default:
                        continue
                    raise NoSuchBeanError(
                        bean_type=param_type if isinstance(param_type, type) else None,
                        required_by=f"{reg.impl_type.__qualname__}.__init__({param_name})",
                        suggestions=self._similar_names(getattr(param_type, "__name__", "")),
                    ) from None
            return reg.impl_type(**kwargs)
        finally:
            self._resolving.pop(reg.impl_type, None)

    def _resolve_param(self, param_type: Any) -> Any:
        """Resolve one constructor parameter, handling Optional and list."""
        origin = get_origin(param_type)

        if origin is Union or isinstance(param_type, types.UnionType):
            non_none = [a for a in get_args(param_type) if a is not type(None)]
            if len(non_none) == 1:
                try:
                    return self.resolve(non_none[0])
                except (NoSuchBeanError, NoUniqueBeanError):
                    return None

        if origin is list:
            args = get_args(param_type)
            if args:
                return self.resolve_all(args[0])

        return self.resolve(param_type)

    def _similar_names(self, name: str) -> list[str]:
        if not name:
            return []
        known = [reg.bean_name for reg in self._registrations.values()]
        return difflib.get_close_matches(name, known, n=5, cutoff=0.4)

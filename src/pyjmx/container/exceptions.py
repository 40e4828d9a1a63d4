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
"""Container exceptions — fatal errors while wiring beans."""

from __future__ import annotations

from pyjmx.kernel.exceptions import InfrastructureException


def _type_name(t: object) -> str:
    return getattr(t, "__name__", repr(t))


class BeanCreationException(InfrastructureException):
    """A bean could not be created; the object graph is unusable."""

    def __init__(self, message: str, reason: str) -> None:
        self.reason = reason
        super().__init__(message=message, code="BEAN_CREATION")


class NoSuchBeanError(BeanCreationException):
    """No bean found for the requested type or name."""

    def __init__(
        self,
        *,
        bean_type: type | None = None,
        bean_name: str | None = None,
        required_by: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.bean_type = bean_type
        self.bean_name = bean_name
        self.required_by = required_by
        self.suggestions = suggestions or []

        if bean_type is not None:
            headline = f"No bean of type '{_type_name(bean_type)}' is registered"
        elif bean_name:
            headline = f"No bean named '{bean_name}' is registered"
        else:
            headline = "No matching bean is registered"

        lines = [f"NoSuchBeanError: {headline}"]
        if required_by:
            lines.append(f"  Required by: {required_by}")
        if self.suggestions:
            lines.append(f"  Similar registered beans: {', '.join(self.suggestions)}")

        super().__init__("\n".join(lines), reason=headline)


class NoUniqueBeanError(BeanCreationException):
    """Several implementations are bound to a type and none is primary."""

    def __init__(self, *, bean_type: type, candidates: list[type]) -> None:
        self.bean_type = bean_type
        self.candidates = candidates

        headline = f"Multiple beans of type '{_type_name(bean_type)}' found"
        message = (
            f"NoUniqueBeanError: {headline}\n"
            f"  Candidates: {[_type_name(c) for c in candidates]}"
        )
        super().__init__(message, reason=headline)


class BeanCurrentlyInCreationError(BeanCreationException):
    """Circular dependency detected during bean resolution.

    ``chain`` holds the resolution path in the order it was entered.
    """

    def __init__(self, *, chain: list[type], current: type) -> None:
        self.chain = chain
        self.current = current

        path = " -> ".join(_type_name(t) for t in [*chain, current])
        headline = f"Circular dependency: {path}"
        super().__init__(f"BeanCurrentlyInCreationError: {headline}", reason=headline)

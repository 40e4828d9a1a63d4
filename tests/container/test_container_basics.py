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
"""Tests for DI container registration and resolution."""

from typing import Optional

import pytest

from pyjmx.container import (
    BeanCurrentlyInCreationError,
    Container,
    NoSuchBeanError,
    NoUniqueBeanError,
    Scope,
    component,
    service,
)


class Clock:
    def now(self) -> int:
        return 42


class Scheduler:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


class OptionalClockUser:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock


class Sink:
    pass


class FileSink(Sink):
    pass


class SocketSink(Sink):
    pass


class Fanout:
    def __init__(self, sinks: list[Sink]) -> None:
        self.sinks = sinks


class CircularB:
    def __init__(self, a: "CircularA") -> None:
        self.a = a


class CircularA:
    def __init__(self, b: CircularB) -> None:
        self.b = b


@service(name="auditTrail")
class AuditTrail:
    pass


@component(scope=Scope.TRANSIENT)
class RequestCounter:
    pass


class TestContainerBasics:
    def test_register_and_resolve(self):
        container = Container()
        container.register(Clock)
        assert container.resolve(Clock).now() == 42

    def test_constructor_injection(self):
        container = Container()
        container.register(Clock)
        container.register(Scheduler)
        scheduler = container.resolve(Scheduler)
        assert isinstance(scheduler.clock, Clock)

    def test_singleton_returns_same_instance(self):
        container = Container()
        container.register(Clock)
        assert container.resolve(Clock) is container.resolve(Clock)

    def test_transient_returns_new_instance(self):
        container = Container()
        container.register(Clock, scope=Scope.TRANSIENT)
        assert container.resolve(Clock) is not container.resolve(Clock)

    def test_unregistered_raises_no_such_bean(self):
        container = Container()
        with pytest.raises(NoSuchBeanError, match="Clock"):
            container.resolve(Clock)

    def test_missing_dependency_names_requirer(self):
        container = Container()
        container.register(Scheduler)
        with pytest.raises(NoSuchBeanError) as exc_info:
            container.resolve(Scheduler)
        assert "Scheduler.__init__(clock)" in str(exc_info.value)

    def test_optional_dependency_resolves_to_none(self):
        container = Container()
        container.register(OptionalClockUser)
        assert container.resolve(OptionalClockUser).clock is None

    def test_interface_binding(self):
        container = Container()
        container.register(FileSink)
        container.bind(Sink, FileSink)
        assert isinstance(container.resolve(Sink), FileSink)

    def test_ambiguous_binding_raises(self):
        container = Container()
        container.register(FileSink)
        container.register(SocketSink)
        container.bind(Sink, FileSink)
        container.bind(Sink, SocketSink)
        with pytest.raises(NoUniqueBeanError):
            container.resolve(Sink)

    def test_list_injection(self):
        container = Container()
        container.register(FileSink)
        container.register(SocketSink)
        container.bind(Sink, FileSink)
        container.bind(Sink, SocketSink)
        container.register(Fanout)
        sinks = container.resolve(Fanout).sinks
        assert [type(s) for s in sinks] == [FileSink, SocketSink]

    def test_circular_dependency_detected(self):
        container = Container()
        container.register(CircularA)
        container.register(CircularB)
        with pytest.raises(BeanCurrentlyInCreationError) as exc_info:
            container.resolve(CircularA)
        assert exc_info.value.chain == [CircularA, CircularB]
        assert "CircularA -> CircularB -> CircularA" in str(exc_info.value)


class TestStereotypes:
    def test_named_service(self):
        container = Container()
        container.register(AuditTrail)
        assert container.contains("auditTrail")
        assert isinstance(container.resolve_by_name("auditTrail"), AuditTrail)

    def test_stereotype_scope_is_used(self):
        container = Container()
        container.register(RequestCounter)
        assert container.resolve(RequestCounter) is not container.resolve(RequestCounter)

    def test_resolve_by_unknown_name_suggests(self):
        container = Container()
        container.register(AuditTrail)
        with pytest.raises(NoSuchBeanError) as exc_info:
            container.resolve_by_name("auditTrial")
        assert exc_info.value.suggestions == ["auditTrail"]

    def test_registrations_report_bean_names(self):
        container = Container()
        container.register(AuditTrail)
        container.register(Clock)
        assert [reg.bean_name for reg in container.registrations()] == ["auditTrail", "Clock"]

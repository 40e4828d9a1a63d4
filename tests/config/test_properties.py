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
"""Tests for typed configuration properties."""

import pytest

from pyjmx.config.properties import InspectorProperties, LoggingProperties
from pyjmx.core.config import Config


class TestInspectorProperties:
    def test_defaults(self):
        props = Config({}).bind(InspectorProperties)
        assert props.column_padding == 2
        assert props.show_header is True

    def test_values_from_config(self):
        config = Config({"pyjmx": {"inspector": {"column_padding": "4", "show_header": False}}})
        props = config.bind(InspectorProperties)
        assert props.column_padding == 4
        assert props.show_header is False

    def test_out_of_range_padding_fails_fast(self):
        config = Config({"pyjmx": {"inspector": {"column_padding": 0}}})
        with pytest.raises(ValueError, match="InspectorProperties"):
            config.bind(InspectorProperties)


class TestLoggingProperties:
    def test_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.level == {"root": "INFO"}
        assert props.format == "console"

    def test_values_from_config(self):
        config = Config({"pyjmx": {"logging": {"level": {"root": "DEBUG", "pyjmx.inspector": "WARNING"}, "format": "json"}}})
        props = config.bind(LoggingProperties)
        assert props.level["pyjmx.inspector"] == "WARNING"
        assert props.format == "json"

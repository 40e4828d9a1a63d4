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
"""Inspector report configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pyjmx.core.config import config_properties


@config_properties(prefix="pyjmx.inspector")
class InspectorProperties(BaseModel):
    """Report layout settings (pyjmx.inspector.*).

    ``column_padding`` is the number of spaces between adjacent columns.
    """

    column_padding: int = Field(default=2, ge=1, le=16)
    show_header: bool = True

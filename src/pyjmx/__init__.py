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
"""pyjmx — inspect the managed members of live beans in a DI object graph.

Typical use::

    container = Container()
    container.register(ConnectionPool)
    ManagementExporter().export_container(container)
    ManagementInspector.from_container(container).render(sys.stdout)
"""

from pyjmx.inspector import InspectionRecord, ManagementInspector, MemberKind
from pyjmx.management import ManagementExporter, ManagementRegistry, ObjectName, managed

__version__ = "0.1.0"

__all__ = [
    "InspectionRecord",
    "ManagementExporter",
    "ManagementInspector",
    "ManagementRegistry",
    "MemberKind",
    "ObjectName",
    "__version__",
    "managed",
]

# Copyright 2024 inuex35
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

"""Ship-structure blockage zones: matching and collection editing"""

from .zones import (
    add_zone,
    blocking_zones,
    is_blocking,
    remove_zone,
    zone_from_center,
    zone_sector,
)

__all__ = [
    'is_blocking', 'blocking_zones', 'zone_sector',
    'zone_from_center', 'add_zone', 'remove_zone',
]

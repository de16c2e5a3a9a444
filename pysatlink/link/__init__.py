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

"""Link status: classification, full evaluation and heading planning"""

from .classifier import classify_signal
from .evaluation import LinkEvaluation, evaluate_link
from .heading import SWEEP_COLUMNS, suggest_heading, sweep_headings

__all__ = [
    'classify_signal',
    'LinkEvaluation', 'evaluate_link',
    'sweep_headings', 'suggest_heading', 'SWEEP_COLUMNS',
]

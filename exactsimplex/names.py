#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
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
#
#
#
"""Static strings used in the exactsimplex package

    Tableau labels

        BV = 'BV'

        P = 'P'

        RHS = 'RHS'

        DECISION_PREFIX = 'decision_prefix'

        SLACK_PREFIX = 'slack_prefix'

        DEFAULT_DECISION_PREFIX = 'x'

        DEFAULT_SLACK_PREFIX = 's'

    Solver status
    
        OPTIMAL = 'optimal'

        UNBOUNDED = 'unbounded'

        NOT_OPTIMAL = 'not_optimal'

    Solve options

        SINK = 'sink'
"""

# Tableau labels
BV = 'BV'
P = 'P'
RHS = 'RHS'
DECISION_PREFIX = 'decision_prefix'
SLACK_PREFIX = 'slack_prefix'
DEFAULT_DECISION_PREFIX = 'x'
DEFAULT_SLACK_PREFIX = 's'

# Solver status
OPTIMAL = 'optimal'
UNBOUNDED = 'unbounded'
NOT_OPTIMAL = 'not_optimal'

# Solve options
SINK = 'sink'

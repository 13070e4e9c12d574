# Copyright 2025 Google LLC
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
# ==============================================================================

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6

# bcrypt cost factor for stored password hashes.
PASSWORD_HASH_ROUNDS = 10
# bcrypt only reads the first 72 bytes of its input.
PASSWORD_MAX_BYTES = 72

DEFAULT_SCRIPT_AUTHOR = "User"
MAX_SCRIPT_NAME_LENGTH = 200
MAX_SCRIPT_CODE_LENGTH = 100_000
MAX_GENERATION_PROMPT_LENGTH = 2000

STATS_HISTORY_LIMIT = 100
SAMPLER_HISTORY_LIMIT = 20
SAMPLE_INTERVAL_SECONDS = 5.0

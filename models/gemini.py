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

import logging
import time

from google import genai
from google.genai import types

from models import api_config

logger = logging.getLogger(__name__)

API_KEY_LOGGING_MESSAGE = "Ran with user-specified API key"
QUERY_RESPONSE_MAX_OUTPUT_TOKENS = 4000


class GeminiInvalidResponseException(Exception):
    pass


class GeminiNotConfiguredException(Exception):
    pass


def call_predict(
    query: str,
    model="gemini-3-flash-preview",
    api_key: str | None = None,
    temperature: float = 0,
) -> str:
    if not api_key:
        api_key = api_config.DEFAULT_API_KEY
    else:
        logger.info(API_KEY_LOGGING_MESSAGE)
    if not api_key:
        raise GeminiNotConfiguredException("No Gemini API key configured")

    client = genai.Client(api_key=api_key)

    start_time = time.time()
    truncated_query = (query[:200] + "...") if len(query) > 200 else query
    logger.debug("Calling Gemini, prompt: '%s'", truncated_query)
    response = client.models.generate_content(
        model=model,
        contents=query,
        config=types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=QUERY_RESPONSE_MAX_OUTPUT_TOKENS,
        ),
    )
    logger.info("Gemini call took: %.2fs", time.time() - start_time)
    if not response.text:
        raise GeminiInvalidResponseException()
    return response.text

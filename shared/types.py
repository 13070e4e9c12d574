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

from enum import StrEnum


class ScriptCategory(StrEnum):
    COMBAT = "combat"
    FISHING = "fishing"
    MINING = "mining"
    MAGIC = "magic"
    AGILITY = "agility"
    CRAFTING = "crafting"
    COOKING = "cooking"
    WOODCUTTING = "woodcutting"
    SMITHING = "smithing"
    FLETCHING = "fletching"
    HERBLORE = "herblore"
    FARMING = "farming"
    CONSTRUCTION = "construction"
    RUNECRAFTING = "runecrafting"
    THIEVING = "thieving"
    HUNTER = "hunter"
    FIREMAKING = "firemaking"
    MINIGAMES = "minigames"
    PVP = "pvp"
    BANKING = "banking"
    UTILITY = "utility"


# Display names for the categories; PvP is the only one that is not title-cased.
SCRIPT_CATEGORY_NAMES = {
    category: ("PvP" if category == ScriptCategory.PVP else category.value.title())
    for category in ScriptCategory
}


class NewsCategory(StrEnum):
    UPDATE = "update"
    EVENT = "event"
    LEAK = "leak"
    PATCH = "patch"


class GenerationSource(StrEnum):
    GEMINI = "gemini"
    TEMPLATE = "template"

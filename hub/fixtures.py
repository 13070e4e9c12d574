"""
Demo catalog loaded into a storage client when it is first constructed.

Rows are plain dicts keyed by column name so both the in-memory and the
SQLAlchemy client can build their own representation from them. Relative
timestamps ("two hours ago") are resolved against the ``now`` passed in.
"""

from __future__ import annotations

from typing import NamedTuple

from shared.types import NewsCategory

HOUR = 60 * 60
DAY = 24 * HOUR


class _Fixture(NamedTuple):
    id: str
    name: str
    category: str
    author: str
    runs: int
    favorite: bool
    last_run_hours_ago: float
    created_days_ago: int
    version: str
    description: str
    body: str


def _ahk(name: str, version: str, body: str) -> str:
    lines = [f"; {name} v{version}", "#NoEnv", "SendMode Input", ""]
    lines.extend(body.strip("\n").splitlines())
    lines.extend(["", "F2::Pause", "F3::ExitApp"])
    return "\n".join(lines)


_CATALOG: tuple[_Fixture, ...] = (
    # Combat
    _Fixture(
        "1", "1-Tick Prayer Flicker", "combat", "PrayerMaster", 3421, True, 2, 30, "2.1",
        "Advanced prayer flicking for maximum efficiency. Perfectly times prayer "
        "activation to conserve prayer points while maintaining full protection.",
        """
F1::
Loop {
    Send, {F5}
    Sleep, 50
    Send, {F5}
    Sleep, 550
    if (A_Index mod 10 == 0) {
        Random, delay, 100, 300
        Sleep, %delay%
    }
}
return
""",
    ),
    _Fixture(
        "2", "Tribrid Gear Switcher", "combat", "TribridKing", 2156, False, 5, 45, "1.8",
        "Quick gear switching between melee, range, and magic setups. Essential "
        "for high-level PvP and PvM encounters.",
        """
F1::  ; melee
Click, 580, 250
Click, 620, 250
Click, 580, 290
return

F4::  ; range
Click, 580, 330
Click, 620, 330
Click, 580, 370
return
""",
    ),
    _Fixture(
        "3", "Tick Eating Helper", "combat", "TickMaster", 1823, True, 12, 60, "1.4",
        "Assists with tick eating mechanics for survival in dangerous PvM "
        "situations. Times food consumption perfectly.",
        """
F1::
Click, 700, 250  ; shark
Sleep, 30
Click, 740, 250  ; karambwan
return
""",
    ),
    _Fixture(
        "46", "Vorkath Helper Elite", "combat", "VorkathSlayer", 3234, True, 3, 140, "3.0",
        "Advanced Vorkath boss helper with acid walk, prayer switches, and woox "
        "walk support.",
        """
F1::  ; woox walk step
Click, 410, 300
Sleep, 600
Click, 470, 300
Sleep, 600
return

F4::Send, {F5}  ; toggle protect from magic
""",
    ),
    _Fixture(
        "47", "Zulrah Rotation Helper", "combat", "ZulrahMaster", 2876, False, 8, 73, "2.2",
        "Helps with Zulrah rotations and prayer/gear switches. Supports all 4 "
        "rotations.",
        """
global phase := 1

F1::
phase := Mod(phase, 4) + 1
ToolTip, Rotation phase %phase%
Click, 580, 250
Click, 620, 250
return
""",
    ),
    _Fixture(
        "48", "Nightmare Zone AFK", "combat", "NMZAfker", 4123, True, 2, 115, "1.9",
        "AFK Nightmare Zone with absorption and overload management. Maximum "
        "points per hour.",
        """
F1::
Loop {
    Click, 580, 250  ; absorption dose
    Random, wait, 60000, 90000
    Sleep, %wait%
    if (Mod(A_Index, 5) == 0)
        Click, 620, 250  ; overload
}
return
""",
    ),
    _Fixture(
        "49", "Jad Prayer Switcher", "combat", "JadKiller", 2567, False, 24, 82, "1.2",
        "Perfect prayer switching for TzTok-Jad fight caves. Never miss a prayer "
        "flick.",
        """
F1::Click, 690, 310  ; protect from magic
F4::Click, 725, 310  ; protect from missiles
""",
    ),
    _Fixture(
        "50", "Corrupted Gauntlet Helper", "combat", "GauntletGod", 1876, True, 15, 105, "2.0",
        "Advanced Corrupted Gauntlet assistance including boss prayer switches and "
        "tornado dodging.",
        """
global attacks := 0

F1::
attacks++
if (attacks >= 4) {
    Click, 690, 310
    attacks := 0
}
return
""",
    ),
    _Fixture(
        "52", "Slayer Task Helper", "combat", "SlayerPro", 3678, True, 5, 87, "2.6",
        "Assists with slayer tasks including cannon placement, prayer flicking, and "
        "loot management.",
        """
F1::
Click, 560, 300  ; set up cannon
Sleep, 2400
Loop {
    Click, 423, 298  ; reload
    Random, wait, 20000, 30000
    Sleep, %wait%
}
return
""",
    ),
    # Fishing
    _Fixture(
        "4", "Elite Barbarian Fishing", "fishing", "FishingElite", 4892, True, 1, 90, "3.4",
        "Advanced barbarian fishing with shift-drop, anti-ban delays, and automatic "
        "inventory management. Maximizes XP rates.",
        """
F1::
Loop {
    Click, 523, 412  ; fishing spot
    Random, wait, 3000, 5000
    Sleep, %wait%
    PixelGetColor, slot, 700, 460
    if (slot != 0x3E3529) {
        Send, {Shift down}
        Click, 580, 250
        Send, {Shift up}
    }
}
return
""",
    ),
    _Fixture(
        "5", "Karambwan 1-Tick Fishing", "fishing", "TickFisher", 2134, False, 8, 120, "1.6",
        "Advanced karambwan fishing using 1-tick manipulation for maximum XP "
        "rates. Requires precise timing.",
        """
F1::
Loop {
    Click, 501, 377  ; karambwan spot
    Sleep, 600
}
return
""",
    ),
    # Woodcutting
    _Fixture(
        "6", "Redwood AFK Cutter", "woodcutting", "WoodcutPro", 3567, True, 3, 75, "2.0",
        "Semi-AFK redwood cutting with automatic re-clicking when tree depletes. "
        "Includes random camera movements.",
        """
F1::
Loop {
    Click, 445, 320  ; redwood
    Random, wait, 45000, 60000
    Sleep, %wait%
    Send, {Left down}
    Sleep, 300
    Send, {Left up}
}
return
""",
    ),
    _Fixture(
        "7", "Teak 2-Tick Woodcutter", "woodcutting", "TickChop", 1456, False, 24, 50, "1.3",
        "Advanced 2-tick woodcutting method for teaks. Maximizes XP using tick "
        "manipulation.",
        """
F1::
Loop {
    Click, 400, 310  ; teak A
    Sleep, 1200
    Click, 460, 310  ; teak B
    Sleep, 1200
}
return
""",
    ),
    # Mining
    _Fixture(
        "8", "3-Tick Granite Mining", "mining", "MiningGod", 2789, True, 6, 80, "2.3",
        "Efficient 3-tick granite mining in the quarry. Uses herb tar method for "
        "tick manipulation.",
        """
F1::
Loop {
    Click, 580, 250  ; guam
    Click, 620, 250  ; tar
    Click, 430, 300  ; granite
    Sleep, 1800
}
return
""",
    ),
    _Fixture(
        "9", "Motherlode Mine Helper", "mining", "MLMaster", 3234, False, 4, 65, "2.8",
        "Automates Motherlode Mine activities including ore collection, depositing, "
        "and sack management.",
        """
F1::
Loop {
    Click, 412, 287  ; pay-dirt vein
    Random, wait, 25000, 35000
    Sleep, %wait%
    Click, 520, 340  ; hopper
    Sleep, 4000
}
return
""",
    ),
    # Magic
    _Fixture(
        "10", "High Alchemy Pro", "magic", "AlchMaster", 5678, True, 0.5, 100, "4.0",
        "Efficient high alchemy script with automatic item switching and anti-ban "
        "features. Tracks profit/loss.",
        """
global casts := 0

F1::
Loop {
    Send, {F6}
    Click, 712, 369  ; high level alchemy
    Sleep, 100
    Click, 712, 369  ; item
    casts++
    Random, wait, 1800, 2100
    Sleep, %wait%
}
return
""",
    ),
    _Fixture(
        "11", "Superglass Make Banking", "magic", "GlassMaker", 2345, False, 18, 70, "1.7",
        "Automated Superglass Make spell casting with banking. Maximizes crafting "
        "XP through magic.",
        """
F1::
Loop {
    Click, 440, 200  ; bank booth
    Sleep, 900
    Send, 1
    Send, {Esc}
    Click, 640, 300  ; superglass make
    Sleep, 2400
}
return
""",
    ),
    _Fixture(
        "12", "Teleport Trainer", "magic", "TeleMage", 1876, False, 48, 85, "1.1",
        "Rapid teleport casting for magic training. Cycles through different "
        "teleport spells efficiently.",
        """
F1::
Loop {
    Click, 600, 280  ; camelot teleport
    Random, wait, 3000, 3400
    Sleep, %wait%
}
return
""",
    ),
    # Agility
    _Fixture(
        "13", "Seers Village Rooftop", "agility", "AgilityPro", 4123, True, 0.75, 110, "3.1",
        "Complete automation of Seers Village rooftop agility course with mark of "
        "grace collection.",
        """
obstacles := [[350, 260], [420, 300], [480, 240], [400, 330], [460, 280], [380, 250]]

F1::
Loop {
    for index, point in obstacles {
        Click, % point[1] ", " point[2]
        Random, wait, 4500, 6500
        Sleep, %wait%
    }
}
return
""",
    ),
    _Fixture(
        "14", "Ardougne Rooftop Runner", "agility", "RoofRunner", 3456, False, 10, 95, "2.4",
        "Efficient Ardougne rooftop course running with automatic mark collection "
        "and stamina management.",
        """
F1::
Loop {
    Click, 390, 270
    Random, wait, 5000, 7000
    Sleep, %wait%
    if (Mod(A_Index, 30) == 0)
        Click, 580, 250  ; stamina potion
}
return
""",
    ),
    _Fixture(
        "15", "Varrock Rooftop Course", "agility", "VarrockRunner", 2567, False, 36, 75, "1.5",
        "Beginner-friendly Varrock rooftop agility course script. Perfect for "
        "levels 30-50.",
        """
F1::
Loop {
    Click, 410, 290
    Random, wait, 4000, 6000
    Sleep, %wait%
}
return
""",
    ),
    # Minigames
    _Fixture(
        "16", "Wintertodt Helper Pro", "minigames", "WinterdtPro", 3987, True, 4, 120, "2.9",
        "Complete Wintertodt automation including fletching, burning, healing, and "
        "brazier repair.",
        """
F1::
Loop {
    Click, 430, 310  ; bruma root
    Sleep, 15000
    Click, 580, 250  ; knife on roots
    Sleep, 12000
    Click, 470, 280  ; brazier
    Sleep, 10000
}
return
""",
    ),
    _Fixture(
        "17", "Pest Control Points", "minigames", "VoidHunter", 2876, False, 14, 88, "1.9",
        "Automated Pest Control participation for void points. Attacks portals and "
        "NPCs efficiently.",
        """
F1::
Loop {
    Click, 445, 285  ; nearest portal
    Random, wait, 8000, 12000
    Sleep, %wait%
}
return
""",
    ),
    _Fixture(
        "18", "Guardians of the Rift", "minigames", "RiftGuardian", 2134, True, 7, 60, "2.1",
        "Automated runecrafting at Guardians of the Rift minigame. Mines fragments "
        "and charges cells.",
        """
F1::
Loop {
    Click, 445, 350  ; guardian remains
    Sleep, 3000
    Click, 423, 276  ; charge cell
    Sleep, 2000
}
return
""",
    ),
    _Fixture(
        "19", "Tempoross Fisher", "minigames", "TempoBoss", 1789, False, 20, 55, "2.3",
        "Automated Tempoross fishing boss. Handles all mechanics including dousing "
        "fires and tethering.",
        """
F1::
Loop {
    Click, 423, 298  ; harpoonfish
    Random, wait, 5000, 8000
    Sleep, %wait%
    Click, 445, 285  ; load cannon
    Sleep, 1000
    Click, 467, 302  ; tether
    Sleep, 3000
}
return
""",
    ),
    # PvP
    _Fixture(
        "20", "NH Tribrid Switcher", "pvp", "DeepWildsPK", 2456, True, 9, 100, "3.9",
        "No-honor tribrid switching for deep wilderness PKing. Includes freeze "
        "timers and veng timing.",
        """
global freezeTimer := 0

F1::
Click, 580, 250
Click, 620, 250
Click, 660, 250
freezeTimer := A_TickCount
return
""",
    ),
    _Fixture(
        "21", "LMS Quick Prayers", "pvp", "LMSChamp", 3123, False, 5, 78, "2.0",
        "Last Man Standing prayer switching and gear swaps. Essential for "
        "competitive LMS.",
        """
F1::Click, 690, 310
F4::Click, 725, 310
F5::Click, 760, 310
""",
    ),
    _Fixture(
        "22", "Edge PKing Helper", "pvp", "EdgeLord", 1987, False, 48, 65, "1.6",
        "Edgeville PKing assistant with veng timing, spec combos, and safe eating.",
        """
F1::
Click, 600, 420  ; special attack bar
Sleep, 50
Click, 440, 300  ; target
return
""",
    ),
    # Construction
    _Fixture(
        "23", "Construction Butler Pro", "construction", "BuildMaster", 2678, True, 11, 92, "2.5",
        "Advanced construction training with butler management. Supports all "
        "furniture types.",
        """
F1::
Loop {
    Click, 430, 300  ; build space
    Sleep, 600
    Send, 6
    Sleep, 1800
    Click, 430, 300  ; remove
    Send, 1
    Sleep, 1200
}
return
""",
    ),
    _Fixture(
        "24", "Mahogany Tables", "construction", "TableMaker", 1543, False, 26, 58, "1.4",
        "Optimized mahogany table construction for maximum XP rates. Includes "
        "demon butler timing.",
        """
F1::
Loop {
    Click, 430, 300
    Send, 6
    Sleep, 2000
    Click, 430, 300
    Send, 1
    Sleep, 1500
}
return
""",
    ),
    # Farming
    _Fixture(
        "25", "Herb Run Master", "farming", "HerbFarmer", 3456, True, 2, 85, "3.3",
        "Complete herb farming run covering all patches. Includes disease "
        "protection and composting.",
        """
F1::
Click, 440, 310  ; harvest
Sleep, 6000
Click, 580, 250  ; ultracompost
Sleep, 1200
Click, 620, 250  ; seed
return
""",
    ),
    _Fixture(
        "26", "Tree Run Optimizer", "farming", "TreeGrower", 2123, False, 15, 72, "2.0",
        "Automated tree farming runs for all tree and fruit tree patches. Maximizes "
        "farming XP.",
        """
F1::
Click, 450, 300  ; check health
Sleep, 2400
Click, 580, 250  ; sapling
Sleep, 1800
return
""",
    ),
    _Fixture(
        "27", "Birdhouse Runner", "farming", "BirdKeeper", 2876, False, 8, 63, "1.8",
        "Quick birdhouse run script for passive hunter XP. Covers all birdhouse "
        "locations.",
        """
F1::
Click, 430, 300  ; empty birdhouse
Sleep, 1800
Click, 580, 250  ; new birdhouse
Click, 620, 250  ; seeds
return
""",
    ),
    # Crafting
    _Fixture(
        "28", "Glass Blowing Pro", "crafting", "GlassExpert", 2345, False, 17, 54, "2.2",
        "Efficient glass blowing for crafting XP. Supports all glass items with "
        "banking.",
        """
F1::
Loop {
    Click, 580, 250  ; pipe
    Click, 620, 250  ; molten glass
    Send, {Space}
    Sleep, 50000
}
return
""",
    ),
    _Fixture(
        "29", "D'hide Body Crafter", "crafting", "HideWorker", 1876, False, 22, 48, "1.5",
        "Creates dragonhide bodies for profit and XP. Includes thread management.",
        """
F1::
Loop {
    Click, 580, 250  ; needle
    Click, 620, 250  ; leather
    Send, {Space}
    Sleep, 15000
}
return
""",
    ),
    # Smithing
    _Fixture(
        "30", "Blast Furnace Gold", "smithing", "BlastMaster", 3789, True, 6, 96, "3.0",
        "Efficient gold bar smelting at Blast Furnace. Includes coffer management "
        "and stamina potions.",
        """
F1::
Loop {
    Click, 520, 300  ; conveyor belt
    Sleep, 4200
    Click, 460, 350  ; bar dispenser
    Sleep, 3000
}
return
""",
    ),
    _Fixture(
        "31", "Cannonball Maker", "smithing", "CannonProfit", 2567, False, 19, 67, "1.9",
        "AFK cannonball smithing for profit. Automatically handles furnace and "
        "banking.",
        """
F1::
Loop {
    Click, 470, 290  ; furnace
    Sleep, 1200
    Send, {Space}
    Sleep, 160000
}
return
""",
    ),
    # Fletching
    _Fixture(
        "32", "Dart Fletcher Pro", "fletching", "DartMaster", 2987, False, 13, 59, "2.1",
        "High-speed dart fletching for quick fletching XP. Supports all dart types.",
        """
F1::
Loop {
    Click, 580, 250  ; dart tips
    Click, 620, 250  ; feathers
    Sleep, 60
}
return
""",
    ),
    _Fixture(
        "33", "Yew Longbow Stringer", "fletching", "BowStringer", 2234, False, 25, 51, "1.7",
        "Strings yew longbows for profit and fletching XP. Efficient banking "
        "included.",
        """
F1::
Loop {
    Click, 580, 250  ; bow string
    Click, 620, 250  ; unstrung bow
    Send, {Space}
    Sleep, 17000
}
return
""",
    ),
    # Herblore
    _Fixture(
        "34", "Prayer Potion Maker", "herblore", "PotionBrewer", 2456, False, 16, 62, "2.0",
        "Creates prayer potions efficiently with banking. Great for ironman "
        "accounts.",
        """
F1::
Loop {
    Click, 580, 250  ; ranarr potion (unf)
    Click, 620, 250  ; snape grass
    Send, {Space}
    Sleep, 17000
}
return
""",
    ),
    _Fixture(
        "35", "Herb Cleaner Ultra", "herblore", "HerbCleaner", 1987, False, 28, 49, "1.3",
        "Fast herb cleaning with banking. Processes hundreds of herbs per hour.",
        """
F1::
Loop, 28 {
    Click, 580, 250
    Sleep, 80
}
return
""",
    ),
    # Cooking
    _Fixture(
        "36", "Wine Maker Pro", "cooking", "WineMaker", 2678, False, 10, 56, "2.2",
        "Fast cooking XP through wine making. Handles jug of water and grapes "
        "efficiently.",
        """
F1::
Loop {
    Click, 580, 250  ; jug of water
    Click, 620, 250  ; grapes
    Send, {Space}
    Sleep, 17000
}
return
""",
    ),
    _Fixture(
        "37", "Karambwan Cooker", "cooking", "CookMaster", 2123, True, 21, 53, "1.8",
        "1-tick karambwan cooking at Myth's guild or Hosidius range. Maximum "
        "cooking XP.",
        """
F1::
Loop, 28 {
    Click, 580, 250
    Click, 450, 300  ; range
    Send, 3
    Sleep, 600
}
return
""",
    ),
    # Utility
    _Fixture(
        "38", "Universal Drop All", "utility", "DropMaster", 5432, True, 0.5, 150, "4.2",
        "Drops entire inventory with customizable patterns. Essential for power "
        "skilling.",
        """
F1::
Send, {Shift down}
Loop, 28 {
    row := (A_Index - 1) // 4
    col := Mod(A_Index - 1, 4)
    Click, % 580 + col * 42 ", " 250 + row * 36
    Sleep, 40
}
Send, {Shift up}
return
""",
    ),
    _Fixture(
        "39", "Bank Standing Helper", "utility", "BankStander", 3876, False, 7, 68, "2.7",
        "Automates repetitive bank standing skills. Customizable for any bankable "
        "skill.",
        """
F1::
Loop {
    Click, 440, 200  ; bank
    Sleep, 900
    Send, 1
    Send, {Esc}
    Click, 580, 250
    Click, 620, 250
    Send, {Space}
    Sleep, 17000
}
return
""",
    ),
    _Fixture(
        "40", "Camera Rotation Tool", "utility", "CameraMan", 2345, False, 23, 47, "1.2",
        "Automatically rotates camera for better visibility. Useful for various "
        "activities.",
        """
F1::
Send, {Right down}
Sleep, 400
Send, {Right up}
return
""",
    ),
    _Fixture(
        "41", "Window Quick Switch", "utility", "WindowPro", 1765, False, 35, 42, "1.0",
        "Quick switching between game client and other applications. Perfect for "
        "multi-logging.",
        """
F1::WinActivate, RuneLite
F4::WinActivate, ahk_class Chrome_WidgetWin_1
""",
    ),
    _Fixture(
        "42", "XP Tracker Logger", "utility", "XPTracker", 1543, False, 42, 38, "1.1",
        "Logs XP gains and calculates rates. Useful for tracking training "
        "efficiency.",
        """
F1::
FormatTime, stamp,, yyyy-MM-dd HH:mm:ss
FileAppend, %stamp% checkpoint`n, xp_log.txt
return
""",
    ),
    # Banking
    _Fixture(
        "43", "Quick Banking Pro", "banking", "BankingPro", 4567, True, 1, 130, "3.6",
        "Lightning fast banking with preset support. Reduces banking time "
        "significantly.",
        """
F1::
Click, 440, 200  ; bank booth
Sleep, 900
Click, 430, 330  ; deposit inventory
Click, 380, 120  ; preset
Send, {Esc}
return
""",
    ),
    _Fixture(
        "44", "Inventory Organizer", "banking", "InvOrganizer", 2789, False, 12, 57, "2.0",
        "Automatically organizes inventory items. Perfect for activities requiring "
        "specific layouts.",
        """
F1::
MouseClickDrag, Left, 580, 250, 700, 466
Sleep, 100
return
""",
    ),
    _Fixture(
        "45", "Bank Tab Switcher", "banking", "TabMaster", 1987, False, 30, 44, "1.4",
        "Quick bank tab navigation with hotkeys. Speeds up finding items in "
        "organized banks.",
        """
Numpad1::Click, 120, 90
Numpad2::Click, 160, 90
Numpad3::Click, 200, 90
""",
    ),
    # Runecrafting
    _Fixture(
        "51", "Runecraft ZMI Runner", "runecrafting", "RCMaster", 2345, False, 18, 61, "2.4",
        "Efficient ZMI altar runecrafting with follow patterns and obstacle "
        "navigation.",
        """
F1::
Loop {
    Click, 450, 280  ; altar
    Sleep, 2400
    Click, 600, 300  ; ourania teleport
    Sleep, 4200
}
return
""",
    ),
    # Thieving
    _Fixture(
        "53", "Thieving Ardougne Knights", "thieving", "ThiefMaster", 4231, True, 4, 125, "3.2",
        "Automated pickpocketing of Ardougne Knights with coin pouch opening and "
        "food eating.",
        """
F1::
Loop {
    Click, 440, 300  ; knight
    Sleep, 600
    if (Mod(A_Index, 28) == 0)
        Click, 580, 250  ; coin pouches
}
return
""",
    ),
    # Hunter
    _Fixture(
        "54", "Hunter Birdhouse Helper", "hunter", "BirdHunter", 2134, False, 20, 52, "1.6",
        "Complete birdhouse run automation with seed filling and nest collection.",
        """
F1::
Click, 430, 300  ; birdhouse
Sleep, 1800
Click, 620, 250  ; hops seeds
Sleep, 600
return
""",
    ),
    # Firemaking
    _Fixture(
        "55", "Firemaking Wintertodt", "firemaking", "PyroMaster", 1987, False, 32, 41, "1.9",
        "Specialized Wintertodt script focusing on firemaking XP with fletching "
        "disabled.",
        """
F1::
Loop {
    Click, 430, 310  ; bruma root
    Sleep, 15000
    Click, 470, 280  ; feed brazier
    Sleep, 12000
    Click, 700, 250  ; heal
    Sleep, 500
}
return
""",
    ),
)


def sample_scripts(now: float) -> list[dict]:
    return [
        {
            "id": fixture.id,
            "name": fixture.name,
            "description": fixture.description,
            "category": fixture.category,
            "code": _ahk(fixture.name, fixture.version, fixture.body),
            "author": fixture.author,
            "user_id": None,
            "is_public": True,
            "is_favorite": 1 if fixture.favorite else 0,
            "execution_count": fixture.runs,
            "last_executed": now - fixture.last_run_hours_ago * HOUR,
            "created_at": now - fixture.created_days_ago * DAY,
        }
        for fixture in _CATALOG
    ]


def sample_news(now: float) -> list[dict]:
    return [
        {
            "id": "1",
            "title": "Desert Treasure II - The Fallen Empire Released!",
            "summary": "The highly anticipated grandmaster quest is now live",
            "content": "Players can now embark on the epic Desert Treasure II quest...",
            "image_url": None,
            "category": NewsCategory.UPDATE.value,
            "source": "Official",
            "published_at": now,
            "created_at": now,
        },
        {
            "id": "2",
            "title": "Christmas Event 2024 Now Live",
            "summary": "Help save Christmas in Gielinor and earn exclusive holiday rewards!",
            "content": "The annual Christmas event has arrived...",
            "image_url": None,
            "category": NewsCategory.EVENT.value,
            "source": "Wiki",
            "published_at": now - 5 * HOUR,
            "created_at": now,
        },
    ]


def initial_stats(now: float) -> dict:
    return {
        "id": "1",
        "cpu_usage": 42,
        "gpu_usage": 58,
        "ram_usage": 62,
        "fps": 117,
        "timestamp": now,
    }

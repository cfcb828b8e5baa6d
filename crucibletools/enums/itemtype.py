"""Inventory item types and sub types."""

from __future__ import annotations

from enum import Enum


class ItemType(Enum):
    """Top-level inventory item type."""

    UNKNOWN = -1
    NONE = 0
    CURRENCY = 1
    ARMOR = 2
    WEAPON = 3
    MESSAGE = 7
    ENGRAM = 8
    CONSUMABLE = 9
    EXCHANGE_MATERIAL = 10
    MISSION_REWARD = 11
    QUEST_STEP = 12
    QUEST_STEP_COMPLETE = 13
    EMBLEM = 14
    QUEST = 15
    SUBCLASS = 16
    CLAN_BANNER = 17
    AURA = 18
    MOD = 19
    DUMMY = 20
    SHIP = 21
    VEHICLE = 22
    EMOTE = 23
    GHOST = 24
    PACKAGE = 25
    BOUNTY = 26
    WRAPPER = 27
    SEASONAL_ARTIFACT = 28
    FINISHER = 29


class ItemSubType(Enum):
    """Inventory item sub type, such as a weapon or armour slot kind."""

    UNKNOWN = -1
    NONE = 0
    CRUCIBLE = 1
    VANGUARD = 2
    EXOTIC = 5
    AUTO_RIFLE = 6
    SHOTGUN = 7
    MACHINEGUN = 8
    HAND_CANNON = 9
    ROCKET_LAUNCHER = 10
    FUSION_RIFLE = 11
    SNIPER_RIFLE = 12
    PULSE_RIFLE = 13
    SCOUT_RIFLE = 14
    CRM = 16
    SIDEARM = 17
    SWORD = 18
    MASK = 19
    SHADER = 20
    ORNAMENT = 21
    FUSION_RIFLE_LINE = 22
    GRENADE_LAUNCHER = 23
    SUBMACHINE_GUN = 24
    TRACE_RIFLE = 25
    HELMET_ARMOR = 26
    GAUNTLETS_ARMOR = 27
    CHEST_ARMOR = 28
    LEG_ARMOR = 29
    CLASS_ARMOR = 30
    BOW = 31
    DUMMY_REPEATABLE_BOUNTY = 32

    def __str__(self) -> str:
        name = _DISPLAY_NAMES.get(self)
        if name is not None:
            return name
        return "".join(part.capitalize() for part in self.name.split("_"))


_DISPLAY_NAMES: dict[ItemSubType, str] = {
    ItemSubType.UNKNOWN: "Unknown",
    ItemSubType.AUTO_RIFLE: "Auto Rifle",
    ItemSubType.MACHINEGUN: "Machine Gun",
    ItemSubType.HAND_CANNON: "Hand Cannon",
    ItemSubType.ROCKET_LAUNCHER: "Rocket Launcher",
    ItemSubType.FUSION_RIFLE: "Fusion Rifle",
    ItemSubType.SNIPER_RIFLE: "Sniper Rifle",
    ItemSubType.PULSE_RIFLE: "Pulse Rifle",
    ItemSubType.SCOUT_RIFLE: "Scount Rifle",
    ItemSubType.FUSION_RIFLE_LINE: "Linear Fusion Rifle",
    ItemSubType.GRENADE_LAUNCHER: "Grenade Launcher",
    ItemSubType.SUBMACHINE_GUN: "Submachine Gun",
    ItemSubType.TRACE_RIFLE: "Trace Rifle",
    ItemSubType.HELMET_ARMOR: "Helmet",
    ItemSubType.GAUNTLETS_ARMOR: "Gauntlets",
    ItemSubType.CHEST_ARMOR: "Chest",
    ItemSubType.LEG_ARMOR: "Legs",
    ItemSubType.CLASS_ARMOR: "Class Armor",
}
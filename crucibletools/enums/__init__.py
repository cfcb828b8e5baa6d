"""Enumerations for modes, platforms, standings, characters, items, medals, weapon sorts and moments in time."""
import pytest

from crucibletools.enums.mode import Mode, UnknownEnumValueError


@pytest.mark.parametrize("mode", list(Mode))
def test_id_round_trip(mode):
    assert Mode.from_id(mode.to_id()) is mode


@pytest.mark.parametrize("bad_id", [1, 8, 14, 23, 33, 85, 1000, -1])
def test_from_id_unknown_raises(bad_id):
    with pytest.raises(UnknownEnumValueError):
        Mode.from_id(bad_id)


def test_unknown_enum_error_is_value_error():
    with pytest.raises(ValueError):
        Mode.from_id(999)


def test_known_ids():
    assert Mode.from_id(5) is Mode.ALL_PVP
    assert Mode.PRIVATE_MATCHES_ALL.to_id() == 32
    assert Mode.from_id(84) is Mode.TRIALS_OF_OSIRIS


@pytest.mark.parametrize(
    "text, expected",
    [
        ("all_pvp", Mode.ALL_PVP),
        ("ALL_PVP", Mode.ALL_PVP),
        ("mayhem", Mode.ALL_MAYHEM),
        ("all_private", Mode.PRIVATE_MATCHES_ALL),
        ("quickplay", Mode.PVP_QUICKPLAY),
        ("crimsom_doubles", Mode.CRIMSON_DOUBLES),
        ("heroic_adventures", Mode.HEROIC_ADVENTURE),
        ("Trials_Of_Osiris", Mode.TRIALS_OF_OSIRIS),
    ],
)
def test_from_str(text, expected):
    assert Mode.from_str(text) is expected


@pytest.mark.parametrize("text", ["", "reserved9", "crimson_doubles", "pvp"])
def test_from_str_unknown(text):
    with pytest.raises(ValueError, match="Unknown Mode type"):
        Mode.from_str(text)


def test_display_names():
    assert str(Mode.from_id(5)) == "All PvP"
    assert str(Mode.from_id(32)) == "Private Matches All"
    assert f"{Mode.from_id(84)}" == "Trials Of Osiris"
    assert str(Mode.from_id(9)) == "Reserved9"


def test_display_names_are_distinct_and_readable():
    names = [Mode.from_id(mode.to_id()).__str__() for mode in Mode]
    assert len(set(names)) == len(names)
    assert all(name and not name.startswith("Mode.") for name in names)


def test_private_modes_are_crucible():
    private = [Mode.from_id(mode_id) for mode_id in (32, 51, 52, 53, 54, 55, 56, 57)]
    assert all(mode.is_private() for mode in private)
    assert all(mode.is_crucible() for mode in private)
    assert sum(Mode.from_id(m.to_id()).is_private() for m in Mode) == 8


def test_is_crucible():
    assert Mode.ALL_PVP.is_crucible()
    assert Mode.MOMENTUM.is_crucible()
    assert not Mode.GAMBIT.is_crucible()
    assert not Mode.SOCIAL.is_crucible()
    assert not Mode.ELIMINATION.is_crucible()


def test_is_gambit():
    assert Mode.GAMBIT.is_gambit()
    assert Mode.GAMBIT_PRIME.is_gambit()
    assert not Mode.ALL_PVP.is_gambit()


def test_is_rumble():
    assert Mode.RUMBLE.is_rumble()
    assert Mode.PRIVATE_MATCHES_RUMBLE.is_rumble()
    assert not Mode.ALL_MAYHEM.is_rumble()


def test_is_nightfall():
    assert Mode.SCORED_HEROIC_NIGHTFALL.is_nightfall()
    assert Mode.NIGHTFALL.is_nightfall()
    assert not Mode.STRIKE.is_nightfall()


def test_is_private():
    assert Mode.PRIVATE_MATCHES_MAYHEM.is_private()
    assert not Mode.ALL_MAYHEM.is_private()
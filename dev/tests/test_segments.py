"""Per-segment decoder tests, fed with already decompressed payloads."""

import struct

import pytest

from sc2kit.entities import (
    City, MapLayer, MiscStatistic, Industry, STATISTIC_INDEX,
    BuildingCorner, TileFlag, UndergroundItem, Zone,
)
from sc2kit.formats.sc2.base import get_decoder_class, SEGMENT_DECODERS
from sc2kit.formats.sc2.errors import MalformedSegmentError, StatisticIndexError
from sc2kit.formats.sc2.segments import (
    ALTM, CNAM, MISC, XBIT, XBLD, XLAB, XUND, XZON, IntegerMap,
    altitude_from_byte, corners_from_byte, flags_from_byte,
    underground_from_byte, zone_from_byte, UNDERGROUND_RANGES,
)
from sc2kit.utils.binary import IoBuffer

from sc2_builders import TILE_COUNT, altm, cnam, label_slot, misc_values, tile_bytes


def run(decoder_class, payload: bytes, name: str = "", quick: bool = False, city: City = None) -> City:
    city = city or City()
    decoder_class(segment_name=name).read(city, IoBuffer.from_bytes(payload), quick=quick)
    return city


# ─── registry ────────────────────────────────────────────────────────────────

def test_registry_routes_every_known_segment():
    expected = {
        "CNAM": CNAM, "MISC": MISC, "XLAB": XLAB, "ALTM": ALTM, "XBIT": XBIT,
        "XUND": XUND, "XZON": XZON, "XBLD": XBLD,
    }
    for name, cls in expected.items():
        assert get_decoder_class(name) is cls
    for name in ("XPLC", "XFIR", "XPOP", "XROG", "XTRF", "XPLT", "XVAL", "XCRM"):
        assert get_decoder_class(name) is IntegerMap
    assert len(SEGMENT_DECODERS) == 16


@pytest.mark.parametrize("name", ["XTER", "XTXT", "XMIC", "XTHG", "ABCD"])
def test_unknown_segments_have_no_decoder(name):
    assert get_decoder_class(name) is None


def test_compression_per_segment():
    assert not CNAM.compressed
    assert not ALTM.compressed
    for cls in (MISC, XLAB, XBIT, XUND, XZON, XBLD, IntegerMap):
        assert cls.compressed


# ─── CNAM ────────────────────────────────────────────────────────────────────

def test_city_name():
    city = run(CNAM, cnam("Springfield"))
    assert city.city_name == "Springfield"


def test_city_name_cut_at_nul():
    city = run(CNAM, cnam("Metropolis", padding=b"\0garbage"))
    assert city.city_name == "Metropolis"


def test_city_name_padding_is_consumed():
    io = IoBuffer.from_bytes(cnam("Ur", slot_length=40))
    CNAM(segment_name="CNAM").read(City(), io)
    assert io.remaining == 0


def test_city_name_longer_than_segment():
    with pytest.raises(MalformedSegmentError):
        run(CNAM, bytes([20]) + b"short")


def test_city_name_empty_segment():
    with pytest.raises(MalformedSegmentError):
        run(CNAM, b"")


# ─── MISC ────────────────────────────────────────────────────────────────────

def _misc_payload(values) -> bytes:
    return struct.pack(f">{len(values)}i", *values)


def test_statistics_by_index():
    values = misc_values({5: 123456, 3: 1950, 1035: 3, 443: -1})
    city = run(MISC, _misc_payload(values))
    assert city.get_statistic(MiscStatistic.AVAILABLE_FUNDS) == 123456
    assert city.get_statistic(MiscStatistic.YEAR_OF_FOUNDING) == 1950
    assert city.get_statistic(MiscStatistic.CITY_SIZE) == 3
    assert city.get_statistic(MiscStatistic.NEIGHBOR_SIZE_2) == -1
    assert len(city.statistics) == len(STATISTIC_INDEX)


def test_every_value_kept_positionally():
    values = list(range(1200))
    city = run(MISC, _misc_payload(values))
    assert city.misc_values == tuple(values)
    assert city.get_misc_value(1199) == 1199


def test_industry_blocks():
    values = list(range(1200))
    city = run(MISC, _misc_payload(values))
    for offset, industry in enumerate(Industry):
        ratio = city.get_statistic(MiscStatistic.for_industry(industry, "ratio"))
        tax = city.get_statistic(MiscStatistic.for_industry(industry, "tax_rate"))
        demand = city.get_statistic(MiscStatistic.for_industry(industry, "demand"))
        assert tax == ratio + 11
        assert demand == ratio + 22
        assert ratio == values[STATISTIC_INDEX[MiscStatistic.STEEL_MINING_RATIO]] + offset


def test_short_misc_is_an_error():
    with pytest.raises(StatisticIndexError):
        run(MISC, _misc_payload([0] * 1035))


def test_misc_just_long_enough():
    city = run(MISC, _misc_payload(misc_values({1035: 77}, count=1036)))
    assert city.get_statistic(MiscStatistic.CITY_SIZE) == 77


def test_misc_ragged_length():
    with pytest.raises(MalformedSegmentError):
        run(MISC, _misc_payload([0] * 1200) + b"\0\0")


# ─── XLAB ────────────────────────────────────────────────────────────────────

def _labels(mayor: str, signs=()) -> bytes:
    slots = [label_slot(mayor)] + [label_slot(s) for s in signs]
    slots += [label_slot("")] * (256 - len(slots))
    return b"".join(slots)


def test_mayor_and_signs():
    city = run(XLAB, _labels("Ada", ["Park", "", "Dam"]))
    assert city.mayor_name == "Ada"
    assert city.sign_texts == ["Park", "Dam"]


def test_quick_mode_reads_only_mayor():
    city = run(XLAB, _labels("Ada", ["Park"]), quick=True)
    assert city.mayor_name == "Ada"
    assert city.sign_texts == []


def test_quick_mode_needs_one_slot_only():
    city = run(XLAB, label_slot("Grace"), quick=True)
    assert city.mayor_name == "Grace"


def test_full_mode_needs_all_slots():
    with pytest.raises(MalformedSegmentError):
        run(XLAB, label_slot("Grace") * 10)


def test_label_length_over_slot_width():
    bad = bytes([30]) + b"x" * 24
    with pytest.raises(MalformedSegmentError):
        run(XLAB, bad + label_slot("") * 255)


def test_label_with_full_width_text():
    text = "A" * 24
    city = run(XLAB, _labels(text))
    assert city.mayor_name == text


# ─── ALTM ────────────────────────────────────────────────────────────────────

def test_altitude_conversion():
    assert altitude_from_byte(0x1F) == 1600
    assert altitude_from_byte(0x00) == 50
    assert altitude_from_byte(0xE1) == 100


def test_altitude_segment():
    city = run(ALTM, altm(4, {(0, 0): 0x1F, (127, 127): 0x00, (3, 9): 0xFF}))
    assert city.get_tile(0, 0).altitude == 1600
    assert city.get_tile(127, 127).altitude == 50
    assert city.get_tile(3, 9).altitude == 1600
    assert city.get_tile(64, 64).altitude == 250


def test_altitude_ignores_first_byte():
    payload = bytes([0xFF, 0x00]) * TILE_COUNT
    city = run(ALTM, payload)
    assert city.get_tile(10, 10).altitude == 50


def test_altitude_wrong_length():
    with pytest.raises(MalformedSegmentError):
        run(ALTM, b"\0" * TILE_COUNT)
    with pytest.raises(MalformedSegmentError):
        run(ALTM, b"\0" * (TILE_COUNT * 2 + 2))


# ─── XBIT ────────────────────────────────────────────────────────────────────

def test_flag_masks():
    assert flags_from_byte(0x01) == TileFlag.SALTY
    assert flags_from_byte(0x0A) == TileFlag(0)
    assert flags_from_byte(0xFF) == (
        TileFlag.SALTY | TileFlag.WATER_COVERED | TileFlag.WATER_SUPPLIED
        | TileFlag.PIPED | TileFlag.POWERED | TileFlag.CONDUCTIVE
    )


def test_flags_segment():
    city = run(XBIT, tile_bytes(0, {(1, 0): 0xFF, (2, 0): 0x41, (0, 1): 0x34}))
    all_set = city.get_tile(1, 0)
    assert all_set.is_salty and all_set.is_water_covered and all_set.is_water_supplied
    assert all_set.is_piped and all_set.is_powered and all_set.is_conductive

    salty_powered = city.get_tile(2, 0)
    assert salty_powered.flags == TileFlag.SALTY | TileFlag.POWERED

    wet = city.get_tile(0, 1)
    assert wet.is_water_covered and wet.is_water_supplied and wet.is_piped
    assert not wet.is_salty and not wet.is_powered

    assert city.get_tile(50, 50).flags == TileFlag(0)


def test_flags_truncated_segment():
    with pytest.raises(MalformedSegmentError):
        run(XBIT, b"\0" * (TILE_COUNT - 1))


# ─── XUND ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("code, item", [
    (0x00, UndergroundItem.NONE),
    (0x01, UndergroundItem.SUBWAY),
    (0x0F, UndergroundItem.SUBWAY),
    (0x10, UndergroundItem.PIPE),
    (0x1E, UndergroundItem.PIPE),
    (0x1F, UndergroundItem.PIPE_AND_SUBWAY),
    (0x20, UndergroundItem.PIPE_AND_SUBWAY),
    (0x21, UndergroundItem.TUNNEL),
    (0x22, UndergroundItem.TUNNEL),
    (0x23, UndergroundItem.SUBWAY_STATION),
    (0x24, None),
    (0xFF, None),
])
def test_underground_table(code, item):
    assert underground_from_byte(code) is item


def test_underground_ranges_do_not_overlap():
    covered = []
    for low, high, _ in UNDERGROUND_RANGES:
        covered.extend(range(low, high + 1))
    assert len(covered) == len(set(covered)) == 0x24


def test_underground_segment():
    city = run(XUND, tile_bytes(0, {(3, 3): 0x10, (4, 3): 0x1F, (5, 3): 0x7F}))
    assert city.get_tile(3, 3).underground is UndergroundItem.PIPE
    assert city.get_tile(3, 3).has_pipe and not city.get_tile(3, 3).has_subway
    both = city.get_tile(4, 3)
    assert both.has_pipe and both.has_subway
    assert city.get_tile(5, 3).underground is UndergroundItem.NONE


# ─── XZON ────────────────────────────────────────────────────────────────────

def test_zone_byte_0x11():
    assert zone_from_byte(0x11) is Zone.LIGHT_RESIDENTIAL
    assert corners_from_byte(0x11) == BuildingCorner.TOP_RIGHT


@pytest.mark.parametrize("code, zone", [(z.value, z) for z in Zone])
def test_zone_codes(code, zone):
    assert zone_from_byte(code) is zone


def test_unknown_zone_codes():
    assert zone_from_byte(0x0A) is None
    assert zone_from_byte(0x0F) is None


@pytest.mark.parametrize("mask, corner", [
    (0x10, BuildingCorner.TOP_RIGHT),
    (0x20, BuildingCorner.BOTTOM_RIGHT),
    (0x40, BuildingCorner.BOTTOM_LEFT),
    (0x80, BuildingCorner.TOP_LEFT),
])
def test_each_corner_bit(mask, corner):
    assert corners_from_byte(mask | 0x03) == corner


def test_zoning_segment():
    city = run(XZON, tile_bytes(0, {(10, 20): 0x11, (11, 20): 0xF6, (12, 20): 0x3C}))
    tile = city.get_tile(10, 20)
    assert tile.zone is Zone.LIGHT_RESIDENTIAL and tile.is_residential
    assert tile.has_corner_top_right
    assert not (tile.has_corner_top_left or tile.has_corner_bottom_left or tile.has_corner_bottom_right)

    full = city.get_tile(11, 20)
    assert full.zone is Zone.DENSE_INDUSTRIAL and full.is_industrial
    assert full.corners == (BuildingCorner.TOP_LEFT | BuildingCorner.TOP_RIGHT
                            | BuildingCorner.BOTTOM_LEFT | BuildingCorner.BOTTOM_RIGHT)

    odd = city.get_tile(12, 20)
    assert odd.zone is Zone.NONE
    assert odd.corners == BuildingCorner.TOP_RIGHT | BuildingCorner.BOTTOM_RIGHT


# ─── XBLD ────────────────────────────────────────────────────────────────────

def test_building_codes_pass_through():
    city = run(XBLD, tile_bytes(0, {(7, 8): 0x2A}))
    tile = city.get_tile(7, 8)
    assert tile.building_code == 0x2A
    assert tile.building.code == 0x2A
    assert (tile.building.x, tile.building.y) == (7, 8)
    assert city.get_tile(0, 0).building.is_empty


def test_custom_building_factory():
    seen = []

    def factory(code, x, y):
        seen.append((code, x, y))
        return f"bld-{code}"

    city = run(XBLD, tile_bytes(1), city=City(building_factory=factory))
    assert len(seen) == TILE_COUNT
    assert seen[0] == (1, 0, 0)
    assert seen[-1] == (1, 127, 127)
    assert city.get_tile(5, 5).building == "bld-1"


# ─── integer maps ────────────────────────────────────────────────────────────

def test_integer_map_values_verbatim():
    payload = bytes(i % 256 for i in range(TILE_COUNT))
    city = run(IntegerMap, payload, name="XPLT")
    values = city.get_map(MapLayer.POLLUTION)
    assert list(values[:300]) == [i % 256 for i in range(300)]
    grid = city.get_map_grid("XPLT")
    assert grid[1, 0] == 128
    assert grid[0, 1] == 1


@pytest.mark.parametrize("layer", list(MapLayer))
def test_each_layer_routes_to_its_map(layer):
    city = run(IntegerMap, tile_bytes(9), name=layer.value)
    assert city.has_map(layer)
    assert city.map_layers == [layer]


def test_integer_map_wrong_length():
    with pytest.raises(MalformedSegmentError):
        run(IntegerMap, b"\0" * (TILE_COUNT + 1), name="XCRM")

import pytest

from watchface.timezones import fnv_hash, posix_tz_for_olson


def test_empty_string_hashes_to_offset_basis():
    assert fnv_hash("") == 2166136261


def test_hash_fits_in_32_bits():
    value = fnv_hash("America/Argentina/ComodRivadavia")
    assert 0 <= value < 2**32


def test_hash_depends_on_input():
    assert fnv_hash("Europe/Paris") != fnv_hash("Europe/Rome")


def test_london_masked_hash_matches_table():
    assert fnv_hash("Europe/London") & 0x1FFFFF == 16206


@pytest.mark.parametrize(
    "olson, expected",
    [
        ("Australia/Melbourne", "AEST-10AEDT,M10.1.0,M4.1.0/3"),
        ("Australia/Brisbane", "AEST-10"),
        ("Europe/London", "GMT0BST,M3.5.0/1,M10.5.0"),
        ("America/New_York", "EST5EDT,M3.2.0,M11.1.0"),
        ("UTC", "UTC0"),
        ("Asia/Kolkata", "IST-5:30"),
        ("Pacific/Norfolk", "<+11>-11<+12>,M10.1.0,M4.1.0/3"),
    ],
)
def test_known_zones(olson, expected):
    assert posix_tz_for_olson(olson) == expected


def test_aliases_share_rule():
    assert posix_tz_for_olson("Asia/Calcutta") == posix_tz_for_olson("Asia/Kolkata")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        posix_tz_for_olson("")
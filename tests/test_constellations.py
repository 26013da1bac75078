"""Tests for constellation shaping from the visible star list."""

import pytest

from skydome.models import Star
from skydome.sky import CONSTELLATION_PATTERNS, build_constellations


def make_stars(visible_count, hidden_every=None):
    """Build a star list with `visible_count` stars above the horizon.

    With hidden_every=n, a below-horizon star is inserted after every n
    visible ones.
    """
    stars = []
    for i in range(visible_count):
        stars.append(
            Star(id=f"s{i}", magnitude=3.0, altitude=40.0 + i * 0.5, azimuth=10.0 * i)
        )
        if hidden_every and (i + 1) % hidden_every == 0:
            stars.append(
                Star(id=f"h{i}", magnitude=3.0, altitude=-10.0, azimuth=5.0 * i)
            )
    return stars


def names(constellations):
    return [c.name for c in constellations]


class TestThresholds:
    """Constellations exist only when enough stars are visible."""

    def test_six_visible(self):
        _, constellations = build_constellations(make_stars(6))
        assert constellations == []

    def test_seven_visible(self):
        _, constellations = build_constellations(make_stars(7))
        assert names(constellations) == ["Ursa Major"]

    def test_thirteen_visible(self):
        _, constellations = build_constellations(make_stars(13))
        assert names(constellations) == ["Ursa Major"]

    def test_fourteen_visible(self):
        _, constellations = build_constellations(make_stars(14))
        assert names(constellations) == ["Ursa Major", "Orion"]

    def test_eighteen_visible(self):
        _, constellations = build_constellations(make_stars(18))
        assert names(constellations) == ["Ursa Major", "Orion"]

    def test_nineteen_visible(self):
        _, constellations = build_constellations(make_stars(19))
        assert names(constellations) == ["Ursa Major", "Orion", "Cassiopeia"]

    def test_hidden_stars_do_not_count(self):
        stars = make_stars(6) + [
            Star(id=f"h{i}", magnitude=2.0, altitude=0.0, azimuth=0.0)
            for i in range(20)
        ]
        _, constellations = build_constellations(stars)
        assert constellations == []

    def test_empty(self):
        stars, constellations = build_constellations([])
        assert stars == []
        assert constellations == []


class TestShaping:
    def test_ursa_major_offsets(self):
        original = make_stars(7)
        stars, _ = build_constellations(original)

        assert stars[0].azimuth == original[0].azimuth - 5
        assert stars[1].azimuth == original[1].azimuth - 2
        assert stars[2].azimuth == original[2].azimuth + 2
        assert stars[3].azimuth == original[3].azimuth + 5
        assert stars[4].altitude == original[4].altitude - 3
        assert stars[5].altitude == original[5].altitude - 5
        assert stars[6].altitude == original[6].altitude - 7
        assert stars[0].altitude == original[0].altitude
        assert stars[4].azimuth == original[4].azimuth

    def test_orion_offsets(self):
        original = make_stars(14)
        stars, _ = build_constellations(original)

        expected = [(5, -5), (5, 5), (2, -3), (2, 0), (2, 3), (-3, -5), (-3, 5)]
        for slot, (d_alt, d_az) in enumerate(expected):
            assert stars[7 + slot].altitude == original[7 + slot].altitude + d_alt
            assert stars[7 + slot].azimuth == original[7 + slot].azimuth + d_az

    def test_cassiopeia_offsets(self):
        original = make_stars(19)
        stars, _ = build_constellations(original)

        expected = [(0, -8), (-3, -4), (3, 0), (-3, 4), (0, 8)]
        for slot, (d_alt, d_az) in enumerate(expected):
            assert stars[14 + slot].altitude == original[14 + slot].altitude + d_alt
            assert stars[14 + slot].azimuth == original[14 + slot].azimuth + d_az

    def test_slices_skip_hidden_stars(self):
        original = make_stars(19, hidden_every=3)
        stars, constellations = build_constellations(original)

        hidden = [s for s in stars if s.id.startswith("h")]
        assert hidden == [s for s in original if s.id.startswith("h")]

        orion_ids = [s.id for s in constellations[1].stars()]
        assert orion_ids == [f"s{i}" for i in range(7, 14)]

    def test_stars_beyond_slices_untouched(self):
        original = make_stars(25)
        stars, _ = build_constellations(original)
        assert stars[19:] == original[19:]

    def test_input_list_not_modified(self):
        original = make_stars(19)
        snapshot_of_input = list(original)
        build_constellations(original)
        assert original == snapshot_of_input

    def test_offset_can_push_star_below_horizon(self):
        stars = make_stars(7)
        stars[6] = Star(id="s6", magnitude=3.0, altitude=4.0, azimuth=60.0)

        shaped, constellations = build_constellations(stars)

        assert shaped[6].altitude == -3.0
        assert constellations[0].lines[-1].end is shaped[6]

    def test_offset_can_push_azimuth_negative(self):
        stars = make_stars(7)
        stars[0] = Star(id="s0", magnitude=3.0, altitude=40.0, azimuth=2.0)

        shaped, _ = build_constellations(stars)

        assert shaped[0].azimuth == -3.0


class TestTopology:
    def _edges(self, constellation, stars):
        index = {id(star): i for i, star in enumerate(stars)}
        return [(index[id(l.start)], index[id(l.end)]) for l in constellation.lines]

    def test_ursa_major_chain(self):
        stars, constellations = build_constellations(make_stars(7))
        assert self._edges(constellations[0], stars) == [
            (0, 1),
            (1, 2),
            (2, 3),
            (3, 4),
            (4, 5),
            (5, 6),
        ]

    def test_orion_lines(self):
        stars, constellations = build_constellations(make_stars(14))
        edges = self._edges(constellations[1], stars)

        assert len(edges) == 9
        assert edges[:6] == [(7, 8), (8, 9), (9, 10), (10, 11), (11, 12), (12, 13)]
        assert edges[6:] == [(13, 8), (7, 10), (10, 12)]

    def test_cassiopeia_chain(self):
        stars, constellations = build_constellations(make_stars(19))
        assert self._edges(constellations[2], stars) == [
            (14, 15),
            (15, 16),
            (16, 17),
            (17, 18),
        ]

    def test_lines_hold_shaped_objects(self):
        stars, constellations = build_constellations(make_stars(19))
        for constellation in constellations:
            for line in constellation.lines:
                assert any(line.start is star for star in stars)
                assert any(line.end is star for star in stars)

    def test_center_mean(self):
        stars, constellations = build_constellations(make_stars(7))
        members = stars[:7]

        center = constellations[0].center
        assert center.altitude == pytest.approx(sum(s.altitude for s in members) / 7)
        assert center.azimuth == pytest.approx(sum(s.azimuth for s in members) / 7)

    def test_pattern_table(self):
        assert [(p.name, p.start, p.stop) for p in CONSTELLATION_PATTERNS] == [
            ("Ursa Major", 0, 7),
            ("Orion", 7, 14),
            ("Cassiopeia", 14, 19),
        ]

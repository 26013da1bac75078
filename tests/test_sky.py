"""Tests for the sky model generator."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from skydome.models import Location
from skydome.sky import (
    NAMED_STARS,
    SeededSequence,
    generate_sky,
    generate_stars,
    is_night_hour,
    seed_for,
    time_to_millis,
)


@pytest.fixture
def new_york():
    return Location(latitude=40.7128, longitude=-74.006, name="New York, USA")


@pytest.fixture
def night_time():
    return datetime(2024, 6, 21, 22, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def day_time():
    return datetime(2024, 6, 21, 14, 0, 0, tzinfo=timezone.utc)


class TestSeededSequence:
    """Tests for the sine-hash sequence."""

    def test_draw_in_unit_interval(self):
        sequence = SeededSequence(1719007200000 + 4071.28 - 74.006)
        for counter in range(500):
            value = sequence.draw(counter)
            assert 0.0 <= value < 1.0

    def test_draw_matches_formula(self):
        seed = 12345.678
        sequence = SeededSequence(seed)
        x = math.sin(seed + 7) * 10000
        assert sequence.draw(7) == x - math.floor(x)

    def test_same_counter_same_value(self):
        sequence = SeededSequence(42.0)
        assert sequence.draw(3) == sequence.draw(3)
        assert sequence.draw(3) != sequence.draw(4)


class TestTimeAndSeed:
    def test_epoch_is_zero(self):
        assert time_to_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_known_instant(self, night_time):
        assert time_to_millis(night_time) == 1719007200000

    def test_sub_second_precision(self):
        time = datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
        assert time_to_millis(time) == 1500

    def test_naive_time_is_utc(self, night_time):
        naive = night_time.replace(tzinfo=None)
        assert time_to_millis(naive) == time_to_millis(night_time)

    def test_offset_time_same_instant(self, night_time):
        shifted = night_time.astimezone(timezone(timedelta(hours=2)))
        assert time_to_millis(shifted) == time_to_millis(night_time)

    def test_seed_formula(self, night_time, new_york):
        expected = 1719007200000 + 40.7128 * 100 + -74.006
        assert seed_for(night_time, new_york) == expected


class TestNightHours:
    @pytest.mark.parametrize("hour", [18, 19, 22, 23, 0, 3, 6])
    def test_night(self, hour):
        assert is_night_hour(hour) is True

    @pytest.mark.parametrize("hour", [7, 9, 12, 14, 17])
    def test_day(self, hour):
        assert is_night_hour(hour) is False


class TestGenerateStars:
    """Tests for raw star generation before constellation shaping."""

    def test_star_counts_and_ids(self, night_time, new_york):
        stars = generate_stars(night_time, new_york)

        assert len(stars) == 210
        assert [s.id for s in stars[:200]] == [f"star-{i}" for i in range(200)]
        assert [s.id for s in stars[200:]] == [f"named-star-{i}" for i in range(10)]
        assert len({s.id for s in stars}) == 210

    def test_generic_star_bounds(self, night_time, new_york):
        for star in generate_stars(night_time, new_york)[:200]:
            assert star.name is None
            assert 1.0 <= star.magnitude < 6.0
            assert 0.0 <= star.azimuth < 360.0
            assert 0.0 <= star.altitude <= 90.0

    def test_named_star_table(self, night_time, new_york):
        named = generate_stars(night_time, new_york)[200:]

        assert [s.name for s in named] == [name for name, _ in NAMED_STARS]
        assert [s.magnitude for s in named] == [mag for _, mag in NAMED_STARS]
        assert named[0].name == "Polaris"
        assert named[2].magnitude == -1.46

    def test_named_star_placement(self, night_time, new_york):
        named = generate_stars(night_time, new_york)[200:]

        for i, star in enumerate(named):
            assert star.azimuth == pytest.approx(i * 36.0)
            assert 30.0 <= star.altitude < 80.0

    def test_single_draw_per_generic_star(self, night_time, new_york):
        """All three draws for one star see the same counter and value."""
        sequence = SeededSequence(seed_for(night_time, new_york))

        for i, star in enumerate(generate_stars(night_time, new_york)[:200]):
            r = sequence.draw(i)
            assert star.altitude == 90 - abs(r * 180 - 90)
            assert star.azimuth == r * 360
            assert star.magnitude == r * 5 + 1

    def test_daytime_transform_on_generic_stars_only(self, day_time, new_york):
        sequence = SeededSequence(seed_for(day_time, new_york))
        stars = generate_stars(day_time, new_york)

        for i, star in enumerate(stars[:200]):
            r = sequence.draw(i)
            assert star.altitude == (90 - abs(r * 180 - 90)) * 0.7 - 20
            assert -20.0 <= star.altitude <= 43.0

        for i, star in enumerate(stars[200:]):
            assert star.altitude == 30 + sequence.draw(200 + i) * 50
            assert star.altitude > 0

    def test_hour_boundaries(self, new_york):
        six = datetime(2024, 6, 21, 6, 59, tzinfo=timezone.utc)
        seven = datetime(2024, 6, 21, 7, 0, tzinfo=timezone.utc)

        assert all(s.altitude >= 0 for s in generate_stars(six, new_york)[:200])
        assert any(s.altitude < 0 for s in generate_stars(seven, new_york)[:200])


class TestGenerateSky:
    """Tests for complete snapshots."""

    def test_deterministic(self, night_time, new_york):
        first = generate_sky(night_time, new_york)
        second = generate_sky(night_time, new_york)

        assert first.stars == second.stars
        assert first.constellations == second.constellations
        for a, b in zip(first.stars, second.stars):
            assert (a.id, a.magnitude, a.altitude, a.azimuth) == (
                b.id,
                b.magnitude,
                b.altitude,
                b.azimuth,
            )

    def test_new_snapshot_each_call(self, night_time, new_york):
        first = generate_sky(night_time, new_york)
        second = generate_sky(night_time, new_york)
        assert first is not second

    def test_different_location_changes_sky(self, night_time, new_york):
        london = Location(latitude=51.5074, longitude=-0.1278, name="London, UK")
        assert generate_sky(night_time, new_york).stars != generate_sky(
            night_time, london
        ).stars

    def test_night_scenario(self, night_time, new_york):
        snapshot = generate_sky(night_time, new_york)

        assert len(snapshot.stars) == 210
        assert len([s for s in snapshot.stars if s.name]) == 10
        assert [c.name for c in snapshot.constellations] == [
            "Ursa Major",
            "Orion",
            "Cassiopeia",
        ]
        assert snapshot.time == night_time
        assert snapshot.location == new_york

    def test_daytime_has_fewer_visible_stars(self, night_time, day_time, new_york):
        night = generate_stars(night_time, new_york)
        day = generate_stars(day_time, new_york)

        night_visible = [s for s in night if s.altitude > 0]
        day_visible = [s for s in day if s.altitude > 0]

        assert len(day_visible) < len(night_visible)
        assert len(night_visible) >= 200

    def test_daytime_named_stars_stay_up(self, day_time, new_york):
        snapshot = generate_sky(day_time, new_york)
        named = [s for s in snapshot.stars if s.name]

        assert len(named) == 10
        assert all(s.altitude >= 30.0 for s in named)
        assert [s.azimuth for s in named] == pytest.approx([i * 36.0 for i in range(10)])

    def test_lines_reference_snapshot_stars(self, night_time, new_york):
        snapshot = generate_sky(night_time, new_york)
        star_ids = {id(star) for star in snapshot.stars}

        for constellation in snapshot.constellations:
            for line in constellation.lines:
                assert id(line.start) in star_ids
                assert id(line.end) in star_ids

    def test_one_object_per_star_id(self, night_time, new_york):
        snapshot = generate_sky(night_time, new_york)
        by_id = {star.id: star for star in snapshot.stars}

        for constellation in snapshot.constellations:
            for line in constellation.lines:
                assert by_id[line.start.id] is line.start
                assert by_id[line.end.id] is line.end

    def test_center_is_mean_of_members(self, night_time, new_york):
        snapshot = generate_sky(night_time, new_york)

        for constellation in snapshot.constellations:
            members = constellation.stars()
            assert constellation.center.altitude == pytest.approx(
                sum(s.altitude for s in members) / len(members)
            )
            assert constellation.center.azimuth == pytest.approx(
                sum(s.azimuth for s in members) / len(members)
            )

    def test_constellation_members_are_shifted(self, night_time, new_york):
        """Known quirk: joining a constellation moves a star in the snapshot."""
        raw = {s.id: s for s in generate_stars(night_time, new_york)}
        snapshot = generate_sky(night_time, new_york)

        ursa_major = snapshot.constellations[0]
        first = ursa_major.lines[0].start
        assert first.azimuth == raw[first.id].azimuth - 5
        assert first.altitude == raw[first.id].altitude

        shaped = _constellation_ids(snapshot)
        for star in snapshot.stars:
            if star.id not in shaped:
                assert star == raw[star.id]


def _constellation_ids(snapshot):
    return {s.id for c in snapshot.constellations for s in c.stars()}

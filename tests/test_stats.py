from flightinfo.services.stats import compute_stats


def test_empty_collection_yields_zero_stats():
    stats = compute_stats([])

    assert stats.model_dump() == {
        "total": 0,
        "in_air": 0,
        "on_ground": 0,
        "avg_altitude": 0,
        "avg_speed": 0,
        "max_altitude": 0,
        "countries": 0,
    }


def test_averages_cover_airborne_aircraft_only(aircraft_factory):
    aircraft = [
        aircraft_factory("aaa111", altitude=30000, speed=400),
        aircraft_factory("bbb222", altitude=10000, speed=300),
        aircraft_factory("ccc333", altitude=0, speed=5),
    ]

    stats = compute_stats(aircraft)

    assert stats.total == 3
    assert stats.in_air == 2
    assert stats.on_ground == 1
    assert stats.avg_altitude == 20000
    assert stats.avg_speed == 350
    assert stats.max_altitude == 30000
    assert stats.countries == 1


def test_all_grounded_aircraft_have_zero_averages(aircraft_factory):
    aircraft = [aircraft_factory("aaa111", altitude=50, speed=10)]

    stats = compute_stats(aircraft)

    assert stats.on_ground == 1
    assert stats.avg_altitude == 0
    assert stats.avg_speed == 0
    assert stats.max_altitude == 50


def test_averages_round_halves_up(aircraft_factory):
    aircraft = [
        aircraft_factory("aaa111", altitude=35000, speed=450),
        aircraft_factory("bbb222", altitude=35001, speed=451),
    ]

    stats = compute_stats(aircraft)

    assert stats.avg_altitude == 35001
    assert stats.avg_speed == 451

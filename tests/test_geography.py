import pytest

from iss_tui.data.geography import OCEAN_FALLBACK, resolve, resolve_place, water_body_name
from iss_tui.data.nominatim_client import GeocodeResult
from iss_tui.errors import GeocodeError


class FakeGeocoder:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def reverse(self, lat, lon, zoom):
        self.calls.append(zoom)
        response = self.responses[zoom]
        if isinstance(response, Exception):
            raise response
        return response


UNABLE = GeocodeResult(error="Unable to geocode")


def test_country_is_returned_without_coarse_lookup():
    geocoder = FakeGeocoder({3: GeocodeResult(country="France", name="Paris")})
    assert resolve(geocoder, 48.85, 2.35) == "France"
    assert geocoder.calls == [3]


def test_open_pacific_resolves_to_ocean_name():
    geocoder = FakeGeocoder({3: GeocodeResult(name="Pacific Ocean", type="ocean")})
    assert resolve(geocoder, 0.0, -160.0) == "Pacific Ocean"
    assert geocoder.calls == [3]


@pytest.mark.parametrize("name", ["North Atlantic Ocean", "ARCTIC OCEAN", "southern ocean"])
def test_ocean_names_are_returned_verbatim(name):
    geocoder = FakeGeocoder({3: GeocodeResult(name=name, type="water")})
    assert resolve(geocoder, 10.0, -30.0) == name


@pytest.mark.parametrize(
    "result, expected",
    [
        (GeocodeResult(name="Bering Strait", type="strait"), "Bering Strait"),
        (GeocodeResult(name="Coral Sea", type="sea"), "Coral Sea"),
        (GeocodeResult(name="Bay of Bengal", type="bay"), "Bay of Bengal"),
        (GeocodeResult(name="Drake Passage", category="natural"), "Drake Passage"),
        (GeocodeResult(name="Atlantic", addresstype="ocean"), "Atlantic"),
        (GeocodeResult(display_name="Gulf of Mexico, North America"), "Gulf of Mexico"),
        (GeocodeResult(name="Springfield", type="city"), None),
        (GeocodeResult(), None),
    ],
)
def test_water_body_classification(result, expected):
    assert water_body_name(result) == expected


def test_unable_to_geocode_goes_straight_to_coarse_tier():
    geocoder = FakeGeocoder({3: UNABLE, 2: GeocodeResult(name="Indian Ocean", type="ocean")})
    assert resolve(geocoder, -20.0, 80.0) == "Indian Ocean"
    assert geocoder.calls == [3, 2]


def test_empty_country_without_water_falls_back_to_coarse_tier():
    geocoder = FakeGeocoder({
        3: GeocodeResult(name="Unnamed Reef", type="reef"),
        2: GeocodeResult(name="South Pacific Ocean"),
    })
    assert resolve(geocoder, -30.0, -120.0) == "South Pacific Ocean"
    assert geocoder.calls == [3, 2]


def test_unclassifiable_everywhere_returns_ocean():
    geocoder = FakeGeocoder({3: UNABLE, 2: GeocodeResult(name="Somewhere", type="place")})
    assert resolve(geocoder, -50.0, 100.0) == OCEAN_FALLBACK == "Ocean"


def test_coarse_failure_returns_ocean():
    geocoder = FakeGeocoder({3: UNABLE, 2: GeocodeError("timeout")})
    assert resolve_place(geocoder, -50.0, 100.0) == "Ocean"


def test_first_tier_failure_raises_from_resolve_place_only():
    geocoder = FakeGeocoder({3: GeocodeError("connection refused")})
    with pytest.raises(GeocodeError):
        resolve_place(geocoder, 1.0, 2.0)
    assert resolve(geocoder, 1.0, 2.0) == "Ocean"


def test_resolution_is_deterministic():
    responses = {3: GeocodeResult(name="Tasman Sea", type="sea")}
    first = resolve(FakeGeocoder(responses), -40.0, 160.0)
    second = resolve(FakeGeocoder(responses), -40.0, 160.0)
    assert first == second == "Tasman Sea"

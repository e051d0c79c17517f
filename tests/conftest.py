import pytest

from tests.fakes import make_card


@pytest.fixture
def sample_cards():
    """A small deck covering every star rating and some shared name fragments."""
    return [
        make_card(1, "Chocobo", 3),
        make_card(2, "Behemoth", 5),
        make_card(3, "Fat Chocobo", 3),
        make_card(4, "Moogle", 1),
        make_card(5, "Cactuar", 2),
        make_card(6, "Tonberry", 4),
        make_card(7, "Bahamut", 5),
    ]


@pytest.fixture
def api_payload():
    """Raw API body as served by the card endpoint."""
    return {
        "results": [
            {
                "id": 1,
                "name": "Chocobo",
                "description": "A large flightless bird.",
                "image": "https://triad.raelys.com/images/cards/large/1.png",
                "icon": "https://triad.raelys.com/images/cards/small/1.png",
                "stars": 3,
                "patch": "4.0",
            },
            {
                "id": 2,
                "name": "Behemoth",
                "description": "King of beasts.",
                "image": "https://triad.raelys.com/images/cards/large/2.png",
                "icon": "https://triad.raelys.com/images/cards/small/2.png",
                "stars": 5,
            },
        ]
    }


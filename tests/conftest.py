import pytest

from sim_rating import Rating


@pytest.fixture
def sample_ratings():
    """125 ratings, canonical keys."""
    return {
        "oneStar": 10,
        "twoStar": 20,
        "threeStar": 15,
        "fourStar": 30,
        "fiveStar": 50,
    }


@pytest.fixture
def review_ratings():
    """96 ratings, keys in five-star-first order."""
    return {
        "fiveStar": 42,
        "fourStar": 27,
        "threeStar": 15,
        "twoStar": 8,
        "oneStar": 4,
    }


@pytest.fixture
def empty_ratings():
    return {
        "oneStar": 0,
        "twoStar": 0,
        "threeStar": 0,
        "fourStar": 0,
        "fiveStar": 0,
    }


@pytest.fixture
def rating(sample_ratings):
    return Rating(sample_ratings)

import pytest

from job_scout.models import SalaryRange
from job_scout.normalize import LOCATION_MAP, extract_salary, normalize_location, normalize_salary


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_missing_location_defaults_to_remote(raw):
    assert normalize_location(raw) == "Remote"


@pytest.mark.parametrize("raw, expected", sorted(LOCATION_MAP.items()))
def test_table_locations_are_canonicalized(raw, expected):
    assert normalize_location(raw) == expected


def test_munchen_maps_to_munich():
    assert normalize_location("München") == "Munich"
    assert normalize_location("Munich, DE") == "Munich"


@pytest.mark.parametrize("raw", ["Anywhere in the World", "ANYWHERE", "  anywhere (UTC-5 to UTC+2) "])
def test_anywhere_becomes_worldwide(raw):
    assert normalize_location(raw) == "Worldwide"


def test_unknown_location_is_trimmed_passthrough():
    assert normalize_location("  Lisbon, Portugal ") == "Lisbon, Portugal"
    assert normalize_location("USA Only") == "USA Only"


def test_location_table_is_read_only():
    with pytest.raises(TypeError):
        LOCATION_MAP["Paris, FR"] = "Paris"


def test_extract_salary_range_with_hyphen():
    text = "<p>We pay $100k - $120k plus equity.</p>"
    assert extract_salary(text) == "$100k - $120k"


def test_extract_salary_range_with_en_dash_and_to():
    assert extract_salary("Pay: $250,000–$280,000 a year") == "$250,000–$280,000"
    assert extract_salary("Range $90K to $110K.") == "$90K to $110K"


def test_extract_salary_single_amount_returns_first_match():
    assert extract_salary("Base $50K, bonus $5k") == "$50K"
    assert extract_salary("Base $45,000 USD") == "$45,000 "


@pytest.mark.parametrize("text", [None, "", "Competitive salary", "100k per year", "€80k"])
def test_extract_salary_without_dollar_amount(text):
    assert extract_salary(text) == ""


def test_normalize_salary_k_range():
    assert normalize_salary("$100k - $120k") == SalaryRange(min=100000, max=120000)


def test_normalize_salary_single_k_value():
    result = normalize_salary("$85K")
    assert result.min == result.max == 85000


def test_normalize_salary_thousands_suffix_keeps_leading_group():
    # ",000" confirms the grouping; only the leading digits are taken.
    assert normalize_salary("$45,000") == SalaryRange(min=45, max=45)
    assert normalize_salary("$250,000 - $280,000") == SalaryRange(min=250, max=280)


def test_normalize_salary_orders_min_and_max():
    result = normalize_salary("$150k to $90k")
    assert (result.min, result.max) == (90000, 150000)


@pytest.mark.parametrize("raw", [None, "", "$100-$200", "$95,500", "negotiable"])
def test_normalize_salary_absent_without_suffixed_amount(raw):
    assert normalize_salary(raw) is None


def test_salary_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        SalaryRange(min=2, max=1)


def test_salary_ignores_non_ascii_digits():
    assert extract_salary("Pay: $٤٥k") == ""
    assert normalize_salary("$٤٥k") is None
    assert normalize_salary("$٤٥k or $50k") == SalaryRange(min=50000, max=50000)

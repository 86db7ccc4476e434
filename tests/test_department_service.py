import pytest

from ecocampus.services.department_service import OTHER_DEPARTMENT, extract_department


@pytest.mark.parametrize(
    ("affiliation", "expected"),
    [
        ("SYBAF", "BAF"),
        ("FYBCOM", "BCOM"),
        ("tybsc", "BSC"),
        ("  SYBAF  ", "BAF"),
        ("BA", "BA"),
        ("ba", "BA"),
        ("x", "X"),
        ("", OTHER_DEPARTMENT),
        ("   ", OTHER_DEPARTMENT),
        (None, OTHER_DEPARTMENT),
    ],
)
def test_extract_department(affiliation, expected):
    assert extract_department(affiliation) == expected


def test_extract_department_keeps_cohort_convention_for_unprefixed_codes():
    """Codes without a cohort prefix are still truncated, not corrected."""

    assert extract_department("BCOM") == "OM"


def test_extract_department_accepts_non_string_values():
    assert extract_department(12345) == "345"

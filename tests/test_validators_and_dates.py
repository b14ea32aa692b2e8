from __future__ import annotations

from datetime import date, time

import pytest

from keyon_parents.common.datetime_utils import (
    format_long_date_es,
    format_short_date_es,
    parse_clock_time,
    parse_iso_date,
)
from keyon_parents.common.validators import clean_recipient_id, require_date_range, require_non_empty
from keyon_parents.core.exceptions import ValidationError


@pytest.mark.parametrize("value", [None, "", "   ", "undefined", "null", 42])
def test_clean_recipient_id_rejects_placeholders(value):
    assert clean_recipient_id(value) is None


def test_clean_recipient_id_strips():
    assert clean_recipient_id("  P001 ") == "P001"


def test_require_non_empty():
    assert require_non_empty("  ana ", "Usuario") == "ana"
    with pytest.raises(ValidationError):
        require_non_empty("  ", "Usuario")


def test_require_date_range():
    require_date_range(date(2024, 11, 1), date(2024, 11, 1))
    with pytest.raises(ValidationError):
        require_date_range(date(2024, 11, 2), date(2024, 11, 1))


def test_spanish_date_formats():
    assert format_long_date_es(date(2024, 11, 15)) == "viernes, 15 de noviembre de 2024"
    assert format_short_date_es(date(2024, 9, 3)) == "3 sep"


def test_parsers():
    assert parse_iso_date("2024-11-15") == date(2024, 11, 15)
    assert parse_clock_time("07:15") == time(7, 15)
    assert parse_clock_time("07:15:30") == time(7, 15, 30)

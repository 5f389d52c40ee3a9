"""Tests for periodfmt.domain.models."""

import pytest

from periodfmt.domain.models import Period, parse_period


class TestPeriod:
    """Tests for the Period value type."""

    def test_fields_are_not_normalized(self) -> None:
        """Should keep months and days apart."""
        period = Period(months=3, days=1)

        assert period.months == 3
        assert period.days == 1

    def test_of_months_plus_days(self) -> None:
        assert Period.of_months(3).plus_days(1) == Period(3, 1)

    def test_of_days_plus_months(self) -> None:
        assert Period.of_days(40).plus_months(2) == Period(months=2, days=40)

    def test_negated(self) -> None:
        assert Period(3, -1).negated() == Period(-3, 1)

    def test_is_zero(self) -> None:
        assert Period().is_zero()
        assert not Period(days=1).is_zero()

    def test_is_immutable(self) -> None:
        period = Period(1, 1)
        with pytest.raises(AttributeError):
            period.months = 2  # type: ignore[misc]

    def test_str_iso_format(self) -> None:
        assert str(Period(3, 1)) == "P3M1D"
        assert str(Period(days=-5)) == "P-5D"
        assert str(Period()) == "P0D"


class TestParsePeriod:
    """Tests for parse_period."""

    def test_months_and_days(self) -> None:
        assert parse_period("P3M1D") == Period(3, 1)

    def test_lowercase(self) -> None:
        assert parse_period("p3m1d") == Period(3, 1)

    def test_years_fold_into_months(self) -> None:
        assert parse_period("P1Y2M") == Period(months=14)

    def test_weeks_fold_into_days(self) -> None:
        assert parse_period("P2W3D") == Period(days=17)

    def test_leading_sign_negates_all(self) -> None:
        assert parse_period("-P1M2D") == Period(-1, -2)

    def test_component_sign(self) -> None:
        assert parse_period("P1M-2D") == Period(1, -2)

    def test_round_trips_str(self) -> None:
        assert parse_period(str(Period(7, 12))) == Period(7, 12)

    @pytest.mark.parametrize("text", ["", "P", "3M1D", "P1D3M", "PT1H", "P1.5M"])
    def test_invalid_raises_valueerror(self, text: str) -> None:
        """Should reject text that isn't a PnYnMnWnD period."""
        with pytest.raises(ValueError):
            parse_period(text)

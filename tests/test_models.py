"""Tests for filter argument models."""

import pytest
from pydantic import ValidationError

from medianFilter.models import FilterOptions
from medianFilter.models import InvalidArgumentError
from medianFilter.models import Padding


class TestFilterOptions:
    def test_defaults(self):
        options = FilterOptions()
        assert options.window == 1
        assert options.padding is Padding.ZEROPAD
        assert options.axis == "auto"

    def test_padding_normalized(self):
        assert FilterOptions(padding=" Truncate ").padding is Padding.TRUNCATE
        assert FilterOptions(padding=Padding.TRUNCATE).padding is Padding.TRUNCATE

    def test_axis_none_means_auto(self):
        assert FilterOptions(axis=None).axis == "auto"
        assert FilterOptions(axis="AUTO").axis == "auto"
        assert FilterOptions(axis=2).axis == 2

    def test_window_must_be_positive(self):
        with pytest.raises(ValidationError, match="greater than 0"):
            FilterOptions(window=0)

    def test_bool_window_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            FilterOptions(window=True)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            FilterOptions(mode="zeropad")

    def test_frozen(self):
        options = FilterOptions(window=3)
        with pytest.raises(ValidationError):
            options.window = 5


class TestParse:
    def test_parse_valid(self):
        options = FilterOptions.parse(window=5, padding="truncate", axis=0)
        assert options == FilterOptions(window=5, padding=Padding.TRUNCATE, axis=0)

    def test_parse_wraps_validation_error(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            FilterOptions.parse(window=-1)
        assert isinstance(excinfo.value.__cause__, ValidationError)

    @pytest.mark.parametrize("padding", ["reflect", "", 3])
    def test_parse_bad_padding(self, padding):
        with pytest.raises(InvalidArgumentError):
            FilterOptions.parse(padding=padding)

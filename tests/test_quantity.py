"""Unit tests for quantity extraction."""

import pytest

from shoplist.parse.models import QuantityMatch
from shoplist.parse.quantity import extract_quantity, extract_range, parse_mixed_number


class TestParseMixedNumber:
    """Tests for parse_mixed_number."""

    def test_integers_and_decimals(self):
        """Test plain numbers."""
        assert parse_mixed_number("2") == 2.0
        assert parse_mixed_number("0.75") == 0.75

    def test_fractions(self):
        """Test simple and mixed fractions."""
        assert parse_mixed_number("1/2") == 0.5
        assert parse_mixed_number("1 1/2") == 1.5
        assert parse_mixed_number("2 3/4") == 2.75

    def test_number_words(self):
        """Test number words."""
        assert parse_mixed_number("two") == 2.0
        assert parse_mixed_number("Half") == 0.5
        assert parse_mixed_number("dozen") == 12.0

    def test_unrecognized_pieces_ignored(self):
        """Test that words which are not numbers add nothing."""
        assert parse_mixed_number("3 onions") == 3.0
        assert parse_mixed_number("2 cups") == 2.0

    def test_nothing_recognized(self):
        """Test inputs without any numeric piece."""
        assert parse_mixed_number("onions") is None
        assert parse_mixed_number("") is None

    def test_zero_sum(self):
        """Test that a zero total counts as unparsed."""
        assert parse_mixed_number("0") is None
        assert parse_mixed_number("1/0") is None


class TestExtractRange:
    """Tests for extract_range."""

    def test_dash(self):
        """Test ranges written with a hyphen or en dash."""
        assert extract_range("2-3") == "2-3"
        assert extract_range("2 – 4 eggs") == "2-4"

    def test_to(self):
        """Test ranges written with "to"."""
        assert extract_range("1 1/2 to 2") == "1.5-2"
        assert extract_range("one to two") == "1-2"

    def test_values_not_original_text(self):
        """Test that range sides are rendered as numbers."""
        assert extract_range("1/2 - 3/4") == "0.5-0.75"

    def test_no_range(self):
        """Test text without a usable range."""
        assert extract_range("2 cups flour") is None
        assert extract_range("1 tomato") is None
        assert extract_range("salt-free butter") is None


class TestExtractQuantity:
    """Tests for extract_quantity."""

    def test_range(self):
        """Test a range is extracted and removed from the head."""
        assert extract_quantity("2-3 onions, sliced") == QuantityMatch("2-3", "onions, sliced")
        assert extract_quantity("1 to 2 cups stock") == QuantityMatch("1-2", "cups stock")

    def test_range_of_fractions(self):
        """Test a range whose sides are fractions."""
        assert extract_quantity("1/2 - 3/4 cup sugar") == QuantityMatch("0.5-0.75", "cup sugar")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("400g chicken breast", QuantityMatch("400 g", "chicken breast")),
            ("2LBS beef", QuantityMatch("2 lb", "beef")),
            ("1.5kg potatoes", QuantityMatch("1.5 kg", "potatoes")),
            ("~500ml stock", QuantityMatch("~500 milliliter", "stock")),
            ("12oz pasta", QuantityMatch("12 ounce", "pasta")),
            ("6inch tortillas", QuantityMatch("6 inch", "tortillas")),
        ],
    )
    def test_fused_number_and_unit(self, text, expected):
        """Test numbers written directly against a unit."""
        assert extract_quantity(text) == expected

    def test_fused_only_knows_short_units(self):
        """Test that fused detection does not use the full synonym table."""
        assert extract_quantity("2cups flour") == QuantityMatch("", "2cups flour")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1/2 tsp salt", QuantityMatch("1/2", "tsp salt")),
            ("2 cups flour", QuantityMatch("2", "cups flour")),
            ("1 1/2 cups flour", QuantityMatch("1 1/2", "cups flour")),
            ("0.75 cup sugar", QuantityMatch("0.75", "cup sugar")),
            ("three eggs", QuantityMatch("three", "eggs")),
            ("An onion", QuantityMatch("An", "onion")),
            ("~2 cups rice", QuantityMatch("~2", "cups rice")),
        ],
    )
    def test_single_token(self, text, expected):
        """Test literal quantity tokens at the head of the text."""
        assert extract_quantity(text) == expected

    def test_no_quantity(self):
        """Test text that does not start with a quantity."""
        assert extract_quantity("salt") == QuantityMatch("", "salt")
        assert extract_quantity("apples") == QuantityMatch("", "apples")
        assert extract_quantity("") == QuantityMatch("", "")

    def test_range_needs_both_sides(self):
        """Test that "to" inside a word does not create a range."""
        assert extract_quantity("2 cups tomato sauce") == QuantityMatch("2", "cups tomato sauce")

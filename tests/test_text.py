"""Tests for turning pasted text and recipe objects into parser lines."""

from shoplist.parse import ingredient_to_line, parse_ingredients, split_raw_text


class TestSplitRawText:
    """Tests for split_raw_text."""

    def test_multiline(self):
        """Test each non-blank line becomes an entry."""
        text = "2 eggs\n\n  1 cup milk  \n"
        assert split_raw_text(text) == ["2 eggs", "1 cup milk"]

    def test_multiline_keeps_commas(self):
        """Test commas inside lines are not split when there are several lines."""
        assert split_raw_text("salt, to taste\npepper") == ["salt, to taste", "pepper"]

    def test_single_line_splits_on_commas(self):
        """Test a single line is treated as a comma-separated list."""
        assert split_raw_text("eggs, milk ,bread") == ["eggs", "milk", "bread"]
        assert split_raw_text("2 cups flour") == ["2 cups flour"]

    def test_duplicates_removed_in_order(self):
        """Test exact duplicates are dropped, keeping the first one."""
        assert split_raw_text("eggs\nmilk\neggs") == ["eggs", "milk"]
        assert split_raw_text("eggs, milk, eggs") == ["eggs", "milk"]

    def test_empty(self):
        """Test blank and non-string input."""
        assert split_raw_text("") == []
        assert split_raw_text(" \n ") == []
        assert split_raw_text(None) == []


class TestIngredientToLine:
    """Tests for ingredient_to_line."""

    def test_string_passthrough(self):
        """Test plain strings are returned unchanged."""
        assert ingredient_to_line("2 eggs") == "2 eggs"

    def test_object_with_quantity(self):
        """Test quantity is placed before the name."""
        assert ingredient_to_line({"name": "flour", "quantity": "2 cups"}) == "2 cups flour"

    def test_object_with_notes(self):
        """Test notes are appended in parentheses."""
        entry = {"name": "flour", "quantity": "2 cups", "notes": "sifted"}
        assert ingredient_to_line(entry) == "2 cups flour (sifted)"
        assert ingredient_to_line({"name": "eggs", "notes": "large"}) == "eggs (large)"

    def test_descriptor_notes_are_cleaned(self):
        """Test notes made only of descriptors leave empty parentheses after parsing."""
        line = ingredient_to_line({"name": "butter", "notes": "softened"})
        assert line == "butter (softened)"
        assert [result.item for result in parse_ingredients([line])] == ["butter ()"]

    def test_object_without_name(self):
        """Test objects without a name give an empty line."""
        assert ingredient_to_line({"quantity": "1"}) == ""
        assert ingredient_to_line({"name": "  "}) == ""

    def test_other_types(self):
        """Test anything else becomes an empty line."""
        assert ingredient_to_line(None) == ""
        assert ingredient_to_line(3) == ""

    def test_flattened_objects_parse(self, structured_ingredients):
        """Test flattened recipe objects feed the batch parser."""
        lines = [ingredient_to_line(entry) for entry in structured_ingredients]
        results = parse_ingredients(lines)
        assert [(result.quantity, result.item) for result in results] == [
            ("2 cups", "flour"),
            ("1 tbsp", "butter (room temperature)"),
            ("", "eggs"),
        ]

import pytest

from syntax_factory.utils import format_name, format_type, is_union_type, normalize_type, split_union_type, union_key


class TestTypeNormalization:
    """Test union canonicalization"""

    @pytest.mark.parametrize("raw", ["B|A", "A|B", " B | A ", "A |\tB"])
    def test_union_orders_agree(self, raw):
        assert union_key(raw) == "A|B"
        assert normalize_type(raw) == "A | B"

    def test_plain_type_unchanged(self):
        assert normalize_type("Identifier") == "Identifier"
        assert union_key("Identifier") == "Identifier"

    def test_whitespace_removed_inside_names(self):
        assert normalize_type(" Node Array ") == "NodeArray"

    def test_duplicates_kept_in_sort_order(self):
        assert normalize_type("B | A | B") == "A | B | B"

    def test_three_members(self):
        assert normalize_type("C|A|B") == "A | B | C"

    def test_absent_type(self):
        assert normalize_type(None) is None
        assert normalize_type("") is None
        assert union_key(None) is None

    def test_format_type_spaces_separators(self):
        assert format_type("A|B") == "A | B"
        assert format_type("A  |B") == "A | B"

    def test_split_union_type(self):
        assert split_union_type("B|A") == ["A", "B"]
        assert split_union_type("") == []
        assert split_union_type(None) == []

    def test_is_union_type(self):
        assert is_union_type("A|B")
        assert not is_union_type("A")
        assert not is_union_type(None)


class TestNameFormatting:
    """Test identifier-safe names"""

    def test_union_name(self):
        assert format_name("A|B") == "AOrB"
        assert format_name("A | B") == "AOrB"

    def test_plain_name_is_identity(self):
        assert format_name("CallExpression") == "CallExpression"

    def test_absent_name(self):
        assert format_name(None) is None
        assert format_name("") is None


if __name__ == "__main__":
    pytest.main([__file__])

import pytest

from gostructify.shared.naming import to_camel_case, to_pascal_case


class TestToPascalCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("user_accounts", "UserAccounts"),
            ("id", "Id"),
            ("email", "Email"),
            ("created_at", "CreatedAt"),
            ("user_ID", "UserID"),
            ("single", "Single"),
            ("a", "A"),
            ("", ""),
            ("_", ""),
            ("__id", "Id"),
            ("trailing_", "Trailing"),
            ("double__underscore", "DoubleUnderscore"),
            ("address_line_2", "AddressLine2"),
            ("2fa_code", "2faCode"),
            ("PascalCase", "PascalCase"),
            ("camelCase", "CamelCase"),
        ],
    )
    def test_to_pascal_case(self, input_str, expected):
        assert to_pascal_case(input_str) == expected

    def test_only_first_character_of_segment_changes(self):
        # the rest of each segment keeps its case
        assert to_pascal_case("xml_HTTP_request") == "XmlHTTPRequest"

    def test_no_underscores_in_output(self):
        for value in ["a_b_c", "_leading", "trailing_", "mid__dle", "x1_y2_z3"]:
            assert "_" not in to_pascal_case(value)

    def test_deterministic(self):
        results = {to_pascal_case("order_line_items") for _ in range(5)}
        assert results == {"OrderLineItems"}

    def test_no_op_without_underscores(self):
        assert to_pascal_case("UserAccounts") == "UserAccounts"

    def test_unicode_first_rune(self):
        assert to_pascal_case("élan_vital") == "ÉlanVital"


class TestToCamelCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("user_accounts", "userAccounts"),
            ("id", "id"),
            ("", ""),
            ("_created_at", "createdAt"),
            ("Table_name", "tableName"),
        ],
    )
    def test_to_camel_case(self, input_str, expected):
        assert to_camel_case(input_str) == expected

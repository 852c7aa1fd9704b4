"""Test identifier normalization."""
from enumwarp.utils import camel_to_snake, qualified_table_name


class TestCamelToSnake:

    def test_camel_case(self):
        assert camel_to_snake("SomeEnum") == "some_enum"
        assert camel_to_snake("SomeEnumName") == "some_enum_name"

    def test_lower_camel_case(self):
        assert camel_to_snake("someEnum") == "some_enum"

    def test_each_capital_starts_a_segment(self):
        assert camel_to_snake("HOGE") == "h_o_g_e"
        assert camel_to_snake("HTTPServer") == "h_t_t_p_server"

    def test_already_lowercase(self):
        assert camel_to_snake("status") == "status"

    def test_digits_stay_in_segment(self):
        assert camel_to_snake("Status2Code") == "status2_code"

    def test_empty(self):
        assert camel_to_snake("") == ""


def test_qualified_table_name():
    assert qualified_table_name("enums", "status") == "enums.status"

import pandas as pd
import pytest

from splitcov.color import fix_colors, is_hex_color, is_named_color, is_valid_color


class TestIsHexColor:
    def test_must_start_with_hash(self):
        assert not is_hex_color('123fff')

    def test_short_hex_code(self):
        assert not is_hex_color('#333')

    @pytest.mark.parametrize('color', ['#123fFf', '#000000', '#fFfFfF'])
    def test_valid(self, color):
        assert is_hex_color(color)

    @pytest.mark.parametrize('color', ['#123qqq', 'black', '#123q', '#1234567'])
    def test_invalid(self, color):
        assert not is_hex_color(color)


class TestIsValidColor:
    def test_named_color(self):
        assert is_named_color('blue')
        assert is_valid_color('Blue')

    def test_unknown_name(self):
        assert not is_valid_color('arst')

    def test_empty(self):
        assert not is_valid_color('')
        assert not is_valid_color(None)


class TestFixColors:
    def test_invalid_colors_replaced(self):
        df = pd.DataFrame({'sample_color': ['arst', 'blue', '#123FFF', '123FFF']})
        assert fix_colors(df) == ['#333333', 'blue', '#123FFF', '#333333']

    def test_empty_string_replaced(self):
        df = pd.DataFrame({'sample_color': ['', 'red']})
        assert fix_colors(df) == ['#333333', 'red']

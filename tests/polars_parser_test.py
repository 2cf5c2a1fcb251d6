import unittest

import polars as pl

from tests.conftest_context import ContextTestCase
from src.lexbool import BooleanTokens, InvalidInput, set_falsey_values, set_truthy_values
from src.lexbool.dataframe.polars import PolarsParser


class TestPolarsParser(ContextTestCase):

    def setUp(self):
        self.df = pl.DataFrame({
            'bools': ['yes', 'NO', None, 'maybe', 'T', '0']
        })

    def test_parse_bool_value(self):
        self.assertIs(PolarsParser.parse_bool_value('TRUE'), True)
        self.assertIs(PolarsParser.parse_bool_value('f'), False)
        self.assertIsNone(PolarsParser.parse_bool_value(None))
        self.assertIsNone(PolarsParser.parse_bool_value(float('nan')))
        with self.assertRaises(InvalidInput):
            PolarsParser.parse_bool_value('maybe')

    def test_parse_boolean_expr(self):
        result = self.df.select(PolarsParser.parse_boolean_expr('bools'))
        self.assertEqual(result['bools'].dtype, pl.Boolean)
        self.assertEqual(result['bools'].to_list(), [True, False, None, None, True, False])

    def test_is_boolean_expr(self):
        result = self.df.select(PolarsParser.is_boolean_expr('bools'))
        self.assertEqual(result['bools'].to_list(), [True, True, True, False, True, True])

    def test_blank_strings(self):
        df = pl.DataFrame({'bools': ['', '   ', 'no']})
        self.assertEqual(df.select(PolarsParser.parse_boolean_expr('bools'))['bools'].to_list(), [None, None, False])
        self.assertEqual(df.select(PolarsParser.is_boolean_expr('bools'))['bools'].to_list(), [True, True, True])

    def test_non_ascii_is_not_lowercased(self):
        # KELVIN SIGN lower-cases to 'k' with str.to_lowercase()
        def body():
            set_truthy_values(['ok'])
            df = pl.DataFrame({'bools': ['OK', 'O\u212a']})
            parsed = df.select(PolarsParser.parse_boolean_expr('bools'))['bools'].to_list()
            checked = df.select(PolarsParser.is_boolean_expr('bools'))['bools'].to_list()
            with self.assertRaises(InvalidInput):
                PolarsParser.parse_bool_value('O\u212a')
            return parsed, checked

        self.assertEqual(self.run_in_fresh_context(body), ([True, None], [True, False]))

    def test_explicit_tokens(self):
        tokens = BooleanTokens(truthy=('maybe',), falsey=('no',))
        result = self.df.select(PolarsParser.parse_boolean_expr('bools', tokens))
        self.assertEqual(result['bools'].to_list(), [None, False, None, True, None, None])

    def test_expression_uses_building_thread_tokens(self):
        def body():
            set_falsey_values(['maybe'])
            return PolarsParser.parse_boolean_expr('bools')

        expression = self.run_in_fresh_context(body)
        result = self.df.select(expression)
        self.assertEqual(result['bools'].to_list(), [True, None, None, False, True, None])


if __name__ == '__main__':
    unittest.main()

# test_reader.py
#
# Source text to tokens

import unittest

from catforth import Forth, lit, tokenize, DefinitionError
from catforth.reader import parse_number


class TestReader(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual([1, -2, 16, 1.5, 2000.0, '2dup', '-', '1+'],
                         tokenize('1 -2 0x10 1.5 2e3 2dup - 1+'))

    def test_underscored_integers_stay_integers(self):
        self.assertEqual(1000, parse_number('1_000'))
        self.assertIsInstance(parse_number('-1_000'), int)
        self.assertEqual(1000.5, parse_number('1_000.5'))

    def test_parse_number_rejects_words(self):
        for token in ('add', '+', 'inf', 'x1'):
            with self.assertRaises(ValueError):
                parse_number(token)

    def test_strings(self):
        self.assertEqual([lit('hello world'), 'print'],
                         tokenize('"hello world" print'))
        self.assertEqual([lit('')], tokenize('""'))

    def test_unterminated_string_runs_to_end(self):
        self.assertEqual([1, lit('open')], tokenize('1 "open'))

    def test_colon_names_the_definition(self):
        self.assertEqual([lit('sq'), 'define', 'dup', 'mul', ';'],
                         tokenize(': sq dup mul ;'))
        self.assertEqual([lit('two words'), 'define', 1, ';'],
                         tokenize(': "two words" 1 ;'))

    def test_colon_without_name(self):
        with self.assertRaises(DefinitionError):
            tokenize('1 :')

    def test_comments(self):
        self.assertEqual([1, 2, 3],
                         tokenize('1 ( a (nested) comment ) 2 \\ rest of line\n3'))
        self.assertEqual(['(x)', '\\y'], tokenize('(x) \\y'))

    def test_execute_source(self):
        f = Forth()
        f.execute(': sq dup mul ; 7 sq')
        self.assertEqual([49], f.stack)


if __name__ == '__main__':
    unittest.main()

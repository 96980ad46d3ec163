# test_compiler.py
#
# Compile/interpret dispatch, colon definitions and immediate words

import io
import unittest

from catforth import Forth, lit, DefinitionError, InvalidWordName, UndefinedWord


class TestCompiler(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.f = Forth(out=self.out)

    def tearDown(self):
        self.f = None

    def body(self, name):
        """Cells of a colon word up to and including its first exit"""
        address = self.f.words[name].address
        cells = []
        for cell in self.f.code[address:]:
            cells.append(cell)
            if cell[0] == 'exit':
                break
        return cells

    def test_compile_matches_interpret(self):
        self.f.run(lit('sum'), 'define', 2, 3, 'add', 'return')
        self.assertEqual([], self.f.stack)
        self.f.run('sum')

        direct = Forth()
        direct.run(2, 3, 'add')
        self.assertEqual(direct.stack, self.f.stack)
        self.assertEqual([5], self.f.stack)

    def test_consecutive_literals_share_a_cell(self):
        self.f.execute(': three 1 2 3 ;')
        cells = self.body('three')
        self.assertEqual([('literal', (1, 2, 3)), ('exit',)], cells)

    def test_lit_token_compiles_strings(self):
        self.f.run(lit('greet'), 'define', lit('hi', 'there'), 'return', 'greet')
        self.assertEqual(['hi', 'there'], self.f.stack)

    def test_literals_do_not_merge_into_abandoned_body(self):
        with self.assertRaises(UndefinedWord):
            self.f.execute(': bad 1 2 nosuch')
        self.assertFalse(self.f.compiling)
        self.assertNotIn('bad', self.f.words)

        self.f.execute(': good 3 ;')
        self.assertEqual(('literal', (3,)), self.body('good')[0])
        self.f.run('good')
        self.assertEqual([3], self.f.stack)

    def test_abandon_is_logged(self):
        with self.assertLogs('catforth.compiler', level='WARNING') as cm:
            with self.assertRaises(UndefinedWord):
                self.f.execute(': bad nosuch')
        self.assertIn("'bad'", cm.output[0])

    def test_immediate_word_runs_at_compile_time_only(self):
        self.f.execute(': hi "hi, immediately" print ; immediate')
        self.assertEqual('', self.out.getvalue())
        self.assertTrue(self.f.words['hi'].immediate)

        self.f.execute(': a 123 hi print ;')
        self.assertEqual('hi, immediately\n', self.out.getvalue())

        hi = self.f.words['hi']
        self.assertNotIn(('call', hi.address, 'hi'), self.body('a'))

        self.f.execute('a a')
        self.assertEqual('hi, immediately\n123\n123\n', self.out.getvalue())

    def test_immediate_inside_definition(self):
        self.f.execute(': now immediate "x" print ;')
        self.assertTrue(self.f.words['now'].immediate)

    def test_immediate_needs_a_word(self):
        f = Forth(prelude=False)
        with self.assertRaises(DefinitionError):
            f.run('immediate')

    def test_compile_only_words(self):
        for word in ('return', ';', 'does', 'exit'):
            with self.assertRaises(DefinitionError):
                self.f.run(word)
        with self.assertRaises(DefinitionError):
            self.f.run(5, 'literal')
        self.assertEqual([5], self.f.stack)

    def test_literal_compiles_a_compile_time_value(self):
        self.f.push(7)
        self.f.run(lit('seven'), 'define', 'literal', 'return')
        self.assertEqual([], self.f.stack)
        self.f.run('seven', 'seven')
        self.assertEqual([7, 7], self.f.stack)

    def test_self_reference_compiles_recursive_call(self):
        self.f.execute(': forever forever ;')
        word = self.f.words['forever']
        self.assertEqual(('call', word.address, 'forever'), self.f.code[word.address])

    def test_word_is_installed_at_end_of_definition(self):
        self.f.execute(': later 1')
        self.assertTrue(self.f.compiling)
        self.assertNotIn('later', self.f.words)
        self.f.execute(';')
        self.assertFalse(self.f.compiling)
        self.assertIn('later', self.f.words)

    def test_define_inside_definition_is_refused(self):
        self.f.execute(': starter "inner" define ; immediate')
        with self.assertRaises(DefinitionError):
            self.f.execute(': outer starter')
        self.assertFalse(self.f.compiling)
        self.assertNotIn('outer', self.f.words)
        self.assertEqual(['inner'], self.f.stack)

    def test_defining_word_starts_a_definition_at_run_time(self):
        self.f.execute(': def-sq "sq" define ;')
        self.f.execute('def-sq dup mul ;')
        self.f.execute('4 sq')
        self.assertEqual([16], self.f.stack)

    def test_undefined_word_while_interpreting(self):
        with self.assertRaises(UndefinedWord):
            self.f.execute('1 nosuch')
        self.assertEqual([1], self.f.stack)
        self.assertFalse(self.f.compiling)

    def test_invalid_definition_name(self):
        with self.assertRaises(InvalidWordName):
            self.f.run(5, 'define')
        self.assertEqual([5], self.f.stack)
        self.assertFalse(self.f.compiling)


if __name__ == '__main__':
    unittest.main()

"""
catforth Compiler - Token dispatch, colon definitions, immediate words
"""

import logging

from .core import DefinitionError
from .dictionary import Word, check_name

logger = logging.getLogger(__name__)


def lit(*values):
    """A token pushing values verbatim, even when they are strings"""
    return ('literal', values)


class ForthCompiler:
    """Mixin providing compile/interpret dispatch and word definition"""

    def _register_compiler_words(self):
        """Register compiler words"""
        self.define_native('define', self._define)
        self.define_native('return', self._return, immediate=True)
        self.define_native(';', self._return, immediate=True)
        self.define_native('immediate', self._immediate, immediate=True)
        self.define_native('exit', self._exit, immediate=True)
        self.define_native('literal', self._literal, immediate=True)

    def run(self, *tokens):
        """Feed tokens to the VM, compiling or interpreting each in turn"""
        with self._lock:
            for token in tokens:
                self.interpret(token)
        return self

    def interpret(self, token):
        try:
            if isinstance(token, str):
                self._interpret_word(token)
            elif isinstance(token, tuple) and len(token) == 2 and token[0] == 'literal':
                self._interpret_literals(tuple(token[1]))
            else:
                self._interpret_literals((token,))
        except Exception:
            if self.compiling:
                self._abandon_definition()
            raise
        return self

    def _interpret_literals(self, values):
        if self.compiling:
            self.compile_literals(values)
        else:
            self.stack.extend(values)

    def _interpret_word(self, name):
        current = self._current
        if self.compiling and current is not None and name == current.name:
            self.code.append(('call', current.address, name))
            return
        word = self.lookup(name)
        if self.compiling and not word.immediate:
            self.compile_word(word)
        else:
            self.execute_word(word)

    def compile_word(self, word):
        """Append a cell invoking word"""
        if word.kind == 'native':
            self.code.append(('native', word))
        elif word.kind == 'colon':
            self.code.append(('call', word.address, word.name))
        else:
            self.code.append(('created', word))

    def compile_literals(self, values):
        """Append a literal cell, merging with a literal cell just before it"""
        code = self.code
        if code and len(code) - 1 >= self._literal_barrier and code[-1][0] == 'literal':
            code[-1] = ('literal', code[-1][1] + tuple(values))
        else:
            code.append(('literal', tuple(values)))

    def _mark_address(self):
        """Start a new addressable body at here"""
        address = self.here()
        self._literal_barrier = address
        return address

    def _require_compiling(self, word_name):
        if not self.compiling:
            raise DefinitionError(f"'{word_name}' is only valid inside a definition")

    def _define(self, name):
        """( name -- ) start compiling a colon definition"""
        check_name(name)
        if self.compiling:
            raise DefinitionError(
                f"cannot define '{name}' inside the definition of '{self._current.name}'")
        self._current = Word(name, 'colon', address=self._mark_address())
        self.compiling = True

    def _return(self):
        self._require_compiling('return')
        word = self._current
        self.code.append(('exit',))
        self.compiling = False
        self._current = None
        if word is not None:
            self._install(word)
            self._last_defined_word = word
            logger.debug("defined '%s' at %d..%d", word.name, word.address, len(self.code) - 1)

    def _immediate(self):
        if self.compiling and self._current is not None:
            self._current.immediate = True
        elif self._last_defined_word is not None:
            self._last_defined_word.immediate = True
        else:
            raise DefinitionError("'immediate' with no word defined")

    def _exit(self):
        self._require_compiling('exit')
        self.code.append(('exit',))

    def _literal(self, value):
        self._require_compiling('literal')
        self.compile_literals((value,))

    def _abandon_definition(self):
        if self._current is not None:
            logger.warning("abandoning definition of '%s'", self._current.name)
        self.compiling = False
        self._current = None

"""
catforth REPL - Assembled VM, interactive loop and DSL interface
"""

import logging

from .core import ForthBase, DEFAULT_RETURN_STACK_SIZE
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .dictionary import ForthDictionary
from .compiler import ForthCompiler, lit
from .interpreter import ForthInterpreter
from .memory import ForthMemory
from .defining import ForthDefining
from .io_words import ForthIO
from .reader import tokenize

logger = logging.getLogger(__name__)

PRELUDE = r"""
: dup ( x -- x x ) 0 pick ;
: over ( x y -- x y x ) 1 pick ;
: variable ( value name -- ) create store ;
: constant ( value name -- ) create store does load ;
"""


class Forth(ForthBase, ForthDictionary, ForthStack, ForthCompiler,
            ForthInterpreter, ForthMemory, ForthDefining, ForthArithmetic,
            ForthIO):
    """Complete VM combining all mixins"""

    def __init__(self, return_stack_size=DEFAULT_RETURN_STACK_SIZE, out=None,
                 prelude=True):
        super().__init__(return_stack_size=return_stack_size, out=out)
        self._register_all_words()
        if prelude:
            self.execute(PRELUDE)
        logger.debug("VM ready: %d words, %d cells", len(self.words), len(self.code))

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_stack_words()
        self._register_compiler_words()
        self._register_memory_words()
        self._register_defining_words()
        self._register_arithmetic_words()
        self._register_io_words()

    def execute(self, text):
        """Execute source text"""
        self.run(*tokenize(text))
        return self


class ForthREPL:
    """Mixin providing REPL functionality"""

    def repl(self, get_input=input):
        """Start interactive REPL"""
        print("catforth - type 'bye' to exit")

        while True:
            try:
                prompt = "...> " if self.compiling else "OK> "
                try:
                    line = get_input(prompt)
                except EOFError:
                    break

                if line.strip().lower() == 'bye':
                    break

                self.execute(line)
            except KeyboardInterrupt:
                print("\n(Ctrl+C) type 'bye' to exit")
                self.abort()
            except Exception as e:
                print(f"Error: {e}")
                self.abort()

        return self


class InteractiveForth(Forth, ForthREPL):
    """Forth with REPL and a chaining DSL.

    f = InteractiveForth()
    f(5, "hello").word('constant', 'hello', 'print')
    f.define('inc', 1, 'add')(10).word('inc')
    """

    def __repr__(self):
        return f"<InteractiveForth depth={len(self.stack)} words={len(self.words)}>"

    def __call__(self, *values):
        """Feed values as literals: pushed, or compiled while compiling"""
        return self.run(lit(*values)) if values else self

    def lit(self, *values):
        return self(*values)

    def word(self, *names):
        return self.run(*names)

    def define(self, name, *tokens):
        """Compile a colon word from tokens"""
        return self.run(lit(name), 'define', *tokens, 'return')

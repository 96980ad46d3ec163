"""
catforth - A concatenative, Forth-like virtual machine

Usage:
    from catforth import InteractiveForth
    forth = InteractiveForth()
    forth.execute(': printer create store does load print ;')
    forth.execute('5 "hello" printer hello')

    forth(1, 2).word('add', 'print')
"""

from .core import (ForthException, StackUnderflow, ReturnStackUnderflow,
                   ReturnStackOverflow, UndefinedWord, InvalidWordName,
                   ArityMismatch, InvalidArgument, DefinitionError)
from .dictionary import Word
from .compiler import lit
from .memory import DataCell
from .reader import tokenize
from .repl import Forth, ForthREPL, InteractiveForth

__all__ = [
    'Forth', 'InteractiveForth', 'Word', 'DataCell', 'lit', 'tokenize',
    'ForthException', 'StackUnderflow', 'ReturnStackUnderflow',
    'ReturnStackOverflow', 'UndefinedWord', 'InvalidWordName',
    'ArityMismatch', 'InvalidArgument', 'DefinitionError',
]
__version__ = '0.1.0'

"""
catforth Dictionary - Word entries, native words and bulk import
"""

import inspect
import logging
from collections.abc import Mapping

from .core import ArityMismatch, InvalidWordName, UndefinedWord

logger = logging.getLogger(__name__)


class Word:
    """A dictionary entry.

    kind is 'native' (func, arity), 'colon' (address) or 'created'
    (data, does_address). A native with push_none set pushes its result
    even when that result is None.
    """

    def __init__(self, name, kind, immediate=False, func=None, arity=0,
                 address=None, data=None, push_none=False):
        self.name = name
        self.kind = kind
        self.immediate = immediate
        self.func = func
        self.arity = arity
        self.address = address
        self.data = data
        self.does_address = None
        self.push_none = push_none

    def __repr__(self):
        flag = ' immediate' if self.immediate else ''
        if self.kind == 'native':
            return f"<Word {self.name!r} native/{self.arity}{flag}>"
        if self.kind == 'colon':
            return f"<Word {self.name!r} @{self.address}{flag}>"
        return f"<Word {self.name!r} created does@{self.does_address}{flag}>"


def derive_arity(func):
    """Number of required positional parameters of func"""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        raise ArityMismatch(f"cannot determine the arity of {func!r}; pass arity=")
    arity = 0
    for param in sig.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is not param.empty:
                break
            arity += 1
        elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
            raise ArityMismatch(f"{func!r} has a required keyword-only parameter '{param.name}'")
    return arity


def _accepts(func, arity):
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(*range(arity))
    except TypeError:
        return False
    return True


def check_name(name):
    if not isinstance(name, str) or not name or name.isspace():
        raise InvalidWordName(name)


class ForthDictionary:
    """Mixin providing word registration and lookup"""

    def _install(self, word):
        """Register word, shadowing any older entry of the same name"""
        check_name(word.name)
        if word.name in self.words:
            logger.debug("'%s' redefined", word.name)
        self.words[word.name] = word
        self.definitions.append(word)
        return word

    def lookup(self, name):
        try:
            return self.words[name]
        except (KeyError, TypeError):
            raise UndefinedWord(name) from None

    def define_native(self, name, func, immediate=False, arity=None, push_none=False):
        """Register a host callable popping a fixed number of arguments.

        A None result pushes nothing unless push_none is set, for words
        whose result is a stack value in its own right.
        """
        check_name(name)
        if not callable(func):
            raise TypeError(f"native '{name}' needs a callable, got {func!r}")
        if arity is None:
            arity = derive_arity(func)
        elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise ArityMismatch(f"'{name}': impossible arity {arity!r}")
        elif not _accepts(func, arity):
            raise ArityMismatch(f"'{name}': {func!r} cannot take {arity} arguments")
        return self._install(Word(name, 'native', immediate=immediate,
                                  func=func, arity=arity, push_none=push_none))

    def define_constant(self, name, value):
        return self.define_native(name, lambda: value, arity=0, push_none=True)

    def import_words(self, lib):
        """Register each name -> callable/constant of a mapping or object.

        Every name is checked before anything is installed.
        """
        if isinstance(lib, Mapping):
            items = list(lib.items())
        else:
            items = [(k, getattr(lib, k)) for k in dir(lib) if not k.startswith('_')]
        for name, _ in items:
            check_name(name)
        imported = []
        for name, value in items:
            if callable(value):
                try:
                    imported.append(self.define_native(name, value))
                except ArityMismatch as e:
                    logger.warning("skipping '%s': %s", name, e)
            else:
                imported.append(self.define_constant(name, value))
        return imported

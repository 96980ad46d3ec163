"""
catforth Defining Words - CREATE and DOES>

A factory word such as

    : constant create store does load ;

compiles to

    create store (does a) exit | load exit
                                 ^ a

Running the factory creates a word owning a fresh data cell; the
('does', a) cell then points the most recently created word at address a.
Invoking such a word pushes its data cell and calls a. Every word made by
the same factory shares the code at a.
"""

import logging

from .core import DefinitionError
from .dictionary import Word, check_name
from .memory import DataCell

logger = logging.getLogger(__name__)


class ForthDefining:
    """Mixin providing the CREATE/DOES> protocol"""

    def _register_defining_words(self):
        """Register defining words"""
        self.define_native('create', self._create)
        self.define_native('does', self._does, immediate=True)
        self.define_native('does>', self._does, immediate=True)

    def _create(self, name):
        """( name -- cell )"""
        check_name(name)
        cell = DataCell()
        word = self._install(Word(name, 'created', data=cell))
        self._last_created = word
        self._last_defined_word = word
        logger.debug("created '%s'", name)
        return cell

    def _does(self):
        self._require_compiling('does')
        behavior = self.here() + 2
        self.code.append(('does', behavior))
        self.code.append(('exit',))
        self._mark_address()

    def _bind_does(self, address):
        """Run-time half of does: attach the behavior at address"""
        word = self._last_created
        if word is None:
            raise DefinitionError("'does' ran with no created word to attach to")
        word.does_address = address
        logger.debug("'%s' does @%d", word.name, address)

"""
catforth Core - Base class with fundamental infrastructure
- Exception classes
- VM context: stacks, code space, dictionary
- Configuration defaults
"""

import logging
import sys
import threading

logger = logging.getLogger(__name__)

DEFAULT_RETURN_STACK_SIZE = 1024


class ForthException(Exception):
    """Base class for every error raised by the VM"""


class StackUnderflow(ForthException):
    """An operation needed more values than the data stack holds"""
    def __init__(self, needed, available, word=None):
        self.needed = needed
        self.available = available
        self.word = word
        where = f" in '{word}'" if word else ""
        super().__init__(f"stack underflow{where}: need {needed}, have {available}")


class ReturnStackUnderflow(ForthException):
    """exit below the frame of the current invocation"""


class ReturnStackOverflow(ForthException):
    """Call nesting exceeded the return stack capacity"""
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"return stack overflow (capacity {capacity})")


class UndefinedWord(ForthException):
    def __init__(self, name):
        self.name = name
        super().__init__(f"undefined word '{name}'")


class InvalidWordName(ForthException):
    def __init__(self, name):
        self.name = name
        super().__init__(f"{name!r} is not a valid word name")


class ArityMismatch(ForthException):
    """A native callable's arity cannot be satisfied"""


class InvalidArgument(ForthException):
    """A stack primitive got a count, index or composite it cannot use"""


class DefinitionError(ForthException):
    """A defining word was used outside the state it requires"""


class ForthBase:
    """Base mixin providing the VM context"""

    def __init__(self, return_stack_size=DEFAULT_RETURN_STACK_SIZE, out=None):
        self.stack = []
        self.rstack = []
        self.code = []
        self.words = {}
        self.definitions = []

        self.ip = None
        self.compiling = False

        self._current = None
        self._last_defined_word = None
        self._literal_barrier = 0
        self._last_created = None

        self.return_stack_size = return_stack_size
        self.out = out if out is not None else sys.stdout

        self._lock = threading.RLock()

    def here(self):
        """Address the next compiled cell will occupy"""
        return len(self.code)

    def abort(self):
        """Drop execution and compile state after a failure"""
        self._abandon_definition()
        self.rstack.clear()
        self.ip = None
        logger.debug("aborted; data stack depth %d", len(self.stack))
        return self

"""
catforth Interpreter - The threaded execution loop over code space
"""

import logging

from .core import ForthException, ReturnStackOverflow, ReturnStackUnderflow, StackUnderflow

logger = logging.getLogger(__name__)


class ForthInterpreter:
    """Mixin providing word execution"""

    def execute_word(self, word):
        """Run a word (or the word named) now"""
        if isinstance(word, str):
            word = self.lookup(word)
        with self._lock:
            if word.kind == 'native':
                self._call_native(word)
            elif word.kind == 'colon':
                self.execute_address(word.address)
            else:
                self.stack.append(word.data)
                if word.does_address is not None:
                    self.execute_address(word.does_address)
        return self

    def execute_address(self, address):
        """Run code space from address until its matching exit"""
        with self._lock:
            outer_ip = self.ip
            if outer_ip is None and self.rstack:
                # left behind by a failed top-level run
                logger.debug("discarding %d stale return addresses", len(self.rstack))
                self.rstack.clear()
            base = len(self.rstack)
            self.ip = address
            try:
                self._run(base)
            finally:
                self.ip = outer_ip
        return self

    def _call_native(self, word):
        arity = word.arity
        if len(self.stack) < arity:
            raise StackUnderflow(arity, len(self.stack), word.name)
        if arity:
            args = self.stack[-arity:]
            del self.stack[-arity:]
        else:
            args = []
        try:
            result = word.func(*args)
        except Exception:
            self.stack.extend(args)
            raise
        if result is not None or word.push_none:
            self.stack.append(result)

    def _nest(self, address):
        if len(self.rstack) >= self.return_stack_size:
            raise ReturnStackOverflow(self.return_stack_size)
        self.rstack.append(self.ip)
        self.ip = address

    def _run(self, base):
        code = self.code
        while self.ip is not None:
            if self.ip >= len(code):
                raise ForthException(f"ran off the end of code space at {self.ip}")
            cell = code[self.ip]
            self.ip += 1
            op = cell[0]
            if op == 'native':
                self._call_native(cell[1])
            elif op == 'literal':
                self.stack.extend(cell[1])
            elif op == 'call':
                self._nest(cell[1])
            elif op == 'created':
                word = cell[1]
                self.stack.append(word.data)
                if word.does_address is not None:
                    self._nest(word.does_address)
            elif op == 'does':
                self._bind_does(cell[1])
            elif op == 'exit':
                depth = len(self.rstack)
                if depth > base:
                    self.ip = self.rstack.pop()
                elif depth == base:
                    self.ip = None
                else:
                    raise ReturnStackUnderflow(
                        f"exit at depth {depth} below frame base {base}")
            else:
                raise ForthException(f"corrupt cell at {self.ip - 1}: {cell!r}")

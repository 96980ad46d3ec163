"""
catforth Stack Operations - Data stack primitives and the words over them
"""

from .core import StackUnderflow, InvalidArgument


def _check_index(idx, what):
    if isinstance(idx, bool) or not isinstance(idx, int):
        raise InvalidArgument(f"{what}: expected an integer, got {idx!r}")
    if idx < 0:
        raise InvalidArgument(f"{what}: negative value {idx}")


class ForthStack:
    """Mixin providing data stack manipulation"""

    def _register_stack_words(self):
        """Register stack words"""
        self.define_native('swap', self.swap)
        self.define_native('drop', self.drop)
        self.define_native('gather', self.gather)
        self.define_native('spread', self.spread)
        self.define_native('pluck', self.pluck, push_none=True)
        self.define_native('pick', self.pick, push_none=True)
        self.define_native('depth', self.depth)
        self.define_native('clear', self.clear)

    def _require(self, n, word=None):
        if len(self.stack) < n:
            raise StackUnderflow(n, len(self.stack), word)

    def push(self, *values):
        self.stack.extend(values)
        return self

    def pop(self, n=1):
        """Remove the top n values; a single value when n is 1, else a list oldest-first"""
        _check_index(n, 'pop')
        self._require(n)
        if n == 1:
            return self.stack.pop()
        if n == 0:
            return []
        values = self.stack[-n:]
        del self.stack[-n:]
        return values

    def peek(self):
        self._require(1)
        return self.stack[-1]

    def depth(self):
        return len(self.stack)

    def clear(self):
        self.stack.clear()

    def swap(self):
        self._require(2, 'swap')
        self.stack[-1], self.stack[-2] = self.stack[-2], self.stack[-1]

    def drop(self):
        self._require(1, 'drop')
        self.stack.pop()

    def gather(self, n):
        """( x1 .. xn -- [x1 .. xn] )"""
        _check_index(n, 'gather')
        self._require(n, 'gather')
        self.stack.append(self.pop(n) if n != 1 else [self.stack.pop()])

    def spread(self):
        """( [x1 .. xn] -- x1 .. xn )"""
        self._require(1, 'spread')
        composite = self.stack[-1]
        if not isinstance(composite, (list, tuple)):
            raise InvalidArgument(f"spread: expected a list or tuple, got {composite!r}")
        self.stack.pop()
        self.stack.extend(composite)

    def pluck(self, idx):
        """Remove and return the value idx places below the top"""
        _check_index(idx, 'pluck')
        self._require(idx + 1, 'pluck')
        return self.stack.pop(-(idx + 1))

    def pick(self, idx):
        """Return, without removing, the value idx places below the top"""
        _check_index(idx, 'pick')
        self._require(idx + 1, 'pick')
        return self.stack[-(idx + 1)]

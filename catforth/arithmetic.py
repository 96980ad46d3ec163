"""
catforth Arithmetic - Core library of value words
"""


class ForthArithmetic:
    """Mixin providing arithmetic and comparison words"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self.define_native('add', self._plus)
        self.define_native('+', self._plus)
        self.define_native('sub', self._minus)
        self.define_native('-', self._minus)
        self.define_native('mul', self._mult)
        self.define_native('*', self._mult)
        self.define_native('div', self._div)
        self.define_native('/', self._div)
        self.define_native('mod', self._mod)
        self.define_native('negate', self._negate)

        self.define_native('=', self._equal)
        self.define_native('<', self._less)
        self.define_native('>', self._greater)

        self.define_native('nop', self._nop)

    def _plus(self, a, b):
        return a + b

    def _minus(self, a, b):
        return a - b

    def _mult(self, a, b):
        return a * b

    def _div(self, a, b):
        if isinstance(a, int) and isinstance(b, int) and a % b == 0:
            return a // b
        return a / b

    def _mod(self, a, b):
        return a % b

    def _negate(self, a):
        return -a

    def _equal(self, a, b):
        return a == b

    def _less(self, a, b):
        return a < b

    def _greater(self, a, b):
        return a > b

    def _nop(self):
        pass

"""
catforth I/O - Output words
"""


class ForthIO:
    """Mixin providing output words"""

    def _register_io_words(self):
        """Register I/O words"""
        self.define_native('print', self._print)
        self.define_native('.', self._dot)
        self.define_native('cr', self._cr)
        self.define_native('emit', self._emit)
        self.define_native('type', self._type)

    def _write(self, text):
        self.out.write(text)
        self.out.flush()

    def _print(self, value):
        self._write(f"{value}\n")

    def _dot(self, value):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        self._write(f"{value} ")

    def _cr(self):
        self._write("\n")

    def _emit(self, code):
        self._write(chr(int(code)))

    def _type(self, text):
        self._write(str(text))

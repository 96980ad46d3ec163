"""
catforth Memory - Private data cells of created words
"""

from .core import InvalidArgument


class DataCell:
    """One mutable slot owned by a created word"""

    __slots__ = ('value',)

    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return f"<DataCell {self.value!r}>"


class ForthMemory:
    """Mixin providing load and store on data cells"""

    def _register_memory_words(self):
        """Register memory words"""
        self.define_native('load', self._load, push_none=True)
        self.define_native('store', self._store)
        self.define_native('@', self._load, push_none=True)
        self.define_native('!', self._store)

    def _load(self, cell):
        """( cell -- value )"""
        if not isinstance(cell, DataCell):
            raise InvalidArgument(f"load: {cell!r} is not a data cell")
        return cell.value

    def _store(self, value, cell):
        """( value cell -- )"""
        if not isinstance(cell, DataCell):
            raise InvalidArgument(f"store: {cell!r} is not a data cell")
        cell.value = value

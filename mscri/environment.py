"""Variable environment.

A single flat, global namespace mapping case-sensitive names to values.
There are no nested frames and no shadowing: ``let`` creates a binding the
first time a name is seen and overwrites it afterwards.
"""

from mscri.exceptions import UndefinedVariableException
from mscri.values import Value


class Environment:
    """Flat name to :class:`Value` mapping."""

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def lookup(self, name: str, line=None, file=None) -> Value:
        """
        Return the value bound to ``name``.

        Raises:
            UndefinedVariableException: If ``name`` has never been bound.
        """
        if name in self.vars:
            return self.vars[name]
        raise UndefinedVariableException(name, line, file)

    def bind(self, name: str, value: Value) -> None:
        """
        Bind or rebind ``name``. The previous value, if any, is dropped.
        """
        self.vars[name] = value

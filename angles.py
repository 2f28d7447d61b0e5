# angles tagged with their unit.
# a Degrees is never equal to a Radians, and they don't mix in arithmetic:
# converting between them takes an explicit to_radians() / to_degrees().
import math


class Angle:
    __slots__ = ('_value',)

    def __init__(self, value):
        self._value = float(value)

    def __setattr__(self, name, value):
        if hasattr(self, '_value'):
            raise AttributeError("angles are immutable")
        object.__setattr__(self, name, value)

    @property
    def value(self):
        return self._value

    @property
    def radians(self):
        raise NotImplementedError

    def tan(self):
        return math.tan(self.radians)

    def _same_unit(self, other):
        if type(other) is not type(self):
            raise TypeError(
                "cannot combine %s with %s" % (
                    type(self).__name__, type(other).__name__))
        return other

    def __add__(self, other):
        return type(self)(self._value + self._same_unit(other)._value)

    def __sub__(self, other):
        return type(self)(self._value - self._same_unit(other)._value)

    def __mul__(self, k):
        if isinstance(k, Angle):
            return NotImplemented
        return type(self)(self._value * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if isinstance(k, Angle):
            return NotImplemented
        return type(self)(self._value / k)

    def __neg__(self):
        return type(self)(-self._value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        return self._value < self._same_unit(other)._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._value)


class Radians(Angle):
    __slots__ = ()

    @property
    def radians(self):
        return self._value

    def to_radians(self):
        return self

    def to_degrees(self):
        return Degrees(math.degrees(self._value))


class Degrees(Angle):
    __slots__ = ()

    @property
    def radians(self):
        return math.radians(self._value)

    def to_radians(self):
        return Radians(self.radians)

    def to_degrees(self):
        return self

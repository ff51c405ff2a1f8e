import re

import attr

from betterknown import DIMENSIONS, WKT_GEOMETRY_TYPES


_whitespace = re.compile(r"\s*")


@attr.s(frozen=True)
class Dimension:
    """Coordinate layout selected by a ``Z``, ``M`` or ``ZM`` suffix."""
    has_z = attr.ib(default=False)
    has_m = attr.ib(default=False)

    @property
    def arity(self):
        """Number of values each coordinate is written with."""
        return 2 + self.has_z + self.has_m


_DIMENSIONS = {
    "ZM": Dimension(has_z=True, has_m=True),
    "Z": Dimension(has_z=True),
    "M": Dimension(has_m=True),
    None: Dimension(),
}


class Scanner:
    """A cursor over a WKT string.

    Every ``match*`` method skips leading whitespace and then tries its
    candidates at the current position. A successful match moves the cursor
    past the token; a failed one leaves it where it was. Keywords are
    compared case-insensitively and returned in their canonical upper-case
    form::

        s = Scanner("point empty")
        s.match_type()  # 'POINT'
        s.is_match("EMPTY")  # True

    A scanner belongs to a single parse and must not be reused after an
    error has been raised.
    """
    def __init__(self, value):
        self.value = value
        self.position = 0

    def skip_whitespace(self):
        self.position = _whitespace.match(self.value, self.position).end()

    def match(self, tokens):
        self.skip_whitespace()
        for token in tokens:
            end = self.position + len(token)
            candidate = self.value[self.position:end]
            # only ASCII letters fold, so "ı" is not read as "I"
            if candidate.isascii() and candidate.upper() == token.upper():
                self.position = end
                return token
        return None

    def match_regex(self, patterns):
        """Return the first compiled pattern matching at the cursor."""
        self.skip_whitespace()
        for pattern in patterns:
            m = pattern.match(self.value, self.position)
            if m:
                self.position = m.end()
                return m
        return None

    def is_match(self, token):
        return self.match((token,)) is not None

    def expect(self, token, name):
        if not self.is_match(token):
            raise ParseError("Expected {}".format(name), self.position)

    def expect_group_start(self):
        self.expect("(", "group start")

    def expect_group_end(self):
        self.expect(")", "group end")

    def match_type(self):
        geometry_type = self.match(WKT_GEOMETRY_TYPES)
        if geometry_type is None:
            raise ParseError("Expected geometry type", self.position)
        return geometry_type

    def match_dimension(self):
        return _DIMENSIONS[self.match(DIMENSIONS)]

    def at_end(self):
        self.skip_whitespace()
        return self.position == len(self.value)


class ParseError(ValueError):
    """Input does not follow the WKT grammar."""
    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position

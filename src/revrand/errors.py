# src/revrand/errors.py
# Error kinds raised by the generator. Everything derives from ValueError so
# callers that only catch ValueError still see bad input.


class RevrandError(Exception):
    pass


class ConfigurationError(RevrandError, ValueError):
    """Generator parameters that cannot produce a reversible sequence."""


class NotInvertibleError(ConfigurationError):
    def __init__(self, a: int, n: int, gcd: int):
        self.a = a
        self.n = n
        self.gcd = gcd
        super().__init__(f"{a} has no inverse mod {n} (gcd={gcd}, must be 1)")


class RangeError(RevrandError, ValueError):
    """A value or range outside what the generator can represent."""

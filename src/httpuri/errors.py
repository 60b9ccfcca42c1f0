"""httpuri.errors
Everything raised by this package for bad input derives from UriError, which is a ValueError.
Wrong argument types raise the builtin TypeError.
"""


class UriError(ValueError):
    pass


class MalformedUri(UriError):
    """The input string cannot be split into URI components."""


class UnsupportedScheme(UriError):
    pass


class InvalidPort(UriError):
    pass


class InvalidPortType(InvalidPort, TypeError):
    """A port that is neither None, an int, nor a string of digits."""


class PortOutOfRange(InvalidPort):
    def __init__(self, port: int) -> None:
        super().__init__(f'Invalid port "{port}" specified; must be a valid TCP/UDP port')
        self.port: int = port


class PathContainsQuery(UriError):
    pass


class PathContainsFragment(UriError):
    pass


class QueryContainsFragment(UriError):
    pass

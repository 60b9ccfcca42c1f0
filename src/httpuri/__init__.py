__version__ = "0.1"

from .errors import InvalidPort, InvalidPortType, MalformedUri, PathContainsFragment, PathContainsQuery, PortOutOfRange, QueryContainsFragment, UnsupportedScheme, UriError
from .uri import ALLOWED_SCHEMES, Uri, is_non_standard_port, parse_uri

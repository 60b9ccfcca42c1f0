"""httpuri.uri
An immutable URI value for HTTP messages.
Components are stored percent-encoded; every with_* method validates its input and returns a new Uri
(or the same Uri when nothing would change).
"""

import dataclasses
import logging
import re
import types

from typing import Any, Mapping, Self

from .encoding import filter_fragment, filter_path, filter_query, filter_userinfo
from .errors import (
    InvalidPortType,
    MalformedUri,
    PathContainsFragment,
    PathContainsQuery,
    PortOutOfRange,
    QueryContainsFragment,
    UnsupportedScheme,
)
from .grammar import AUTHORITY_SPLIT_PAT, HOST_PAT, PORT_PAT, URI_SPLIT_PAT

logger = logging.getLogger(__name__)

# Supported schemes and their default ports.
ALLOWED_SCHEMES: Mapping[str, int] = types.MappingProxyType({"http": 80, "https": 443})

_MIN_PORT: int = 1
_MAX_PORT: int = 65535

_SCHEME_SUFFIX_PAT: re.Pattern[str] = re.compile(r":(?://)?\Z")

# An integer string, as accepted by with_port.
_INTEGER_PAT: re.Pattern[str] = re.compile(r"\A[+-]?[0-9]+\Z")


def _require_str(method: str, value: Any) -> None:
    if not isinstance(value, str):
        logger.debug(f"{method} rejected a {type(value).__name__} argument")
        raise TypeError(f"{method} expects a string argument; received {type(value).__name__}")


def _filter_scheme(scheme: str) -> str:
    """Lowercases scheme and strips a trailing ":" or "://"; the result must be empty or allowed."""
    scheme = _SCHEME_SUFFIX_PAT.sub("", scheme.lower())
    if len(scheme) == 0:
        return scheme
    if scheme not in ALLOWED_SCHEMES:
        logger.debug(f"unsupported scheme {scheme!r}")
        raise UnsupportedScheme(
            f'Unsupported scheme requested "{scheme}"; must be empty or in the set ({", ".join(ALLOWED_SCHEMES)})'
        )
    return scheme


def is_non_standard_port(scheme: str, host: str, port: int | None) -> bool:
    """Whether port has to be spelled out in the authority."""
    if not scheme:
        return not (host and port is None)
    if not host and port is None:
        return False
    return scheme not in ALLOWED_SCHEMES or port != ALLOWED_SCHEMES[scheme]


@dataclasses.dataclass(frozen=True, repr=False)
class Uri:
    """A URI with scheme, userinfo, host, port, path, query and fragment.
    Use parse_uri to build one from a string, and the with_* methods to derive new ones.
    """

    scheme: str = ""
    userinfo: str = ""
    host: str = ""
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    def __post_init__(self: Self) -> None:
        if self.scheme and self.scheme not in ALLOWED_SCHEMES:
            raise UnsupportedScheme(f"Unsupported scheme {self.scheme!r}")
        if self.port is None:
            return
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise InvalidPortType(f'Invalid port "{type(self.port).__name__}" specified; must be an integer or None')
        if not _MIN_PORT <= self.port <= _MAX_PORT:
            raise PortOutOfRange(self.port)

    @property
    def authority(self: Self) -> str:
        """[userinfo@]host[:port], or "" when there is no host"""
        if not self.host:
            return ""
        result: str = ""
        if self.userinfo:
            result += f"{self.userinfo}@"
        result += self.host
        if self.port is not None and is_non_standard_port(self.scheme, self.host, self.port):
            result += f":{self.port}"
        return result

    def serialize(self: Self) -> str:
        """Reassembles the components as in RFC 3986 section 5.3"""
        result: str = ""
        if self.scheme:
            result += f"{self.scheme}:"
        authority: str = self.authority
        path: str = self.path
        if authority:
            result += f"//{authority}"
            if path and not path.startswith("/"):
                path = f"/{path}"
        elif path.startswith("//"):
            path = f"/{path.lstrip('/')}"
        result += path
        if self.query:
            result += f"?{self.query}"
        if self.fragment:
            result += f"#{self.fragment}"
        return result

    def __str__(self: Self) -> str:
        return self.serialize()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self.serialize()!r})"

    def with_scheme(self: Self, scheme: str) -> Self:
        _require_str("Uri.with_scheme", scheme)
        scheme = _filter_scheme(scheme)
        if scheme == self.scheme:
            return self
        return dataclasses.replace(self, scheme=scheme)

    def with_userinfo(self: Self, user: str, password: str | None = None) -> Self:
        """A password is only kept together with a non-empty user."""
        _require_str("Uri.with_userinfo", user)
        if password is not None:
            _require_str("Uri.with_userinfo", password)
        userinfo: str = filter_userinfo(user)
        if user and password:
            userinfo += f":{filter_userinfo(password)}"
        if userinfo == self.userinfo:
            return self
        return dataclasses.replace(self, userinfo=userinfo)

    def with_host(self: Self, host: str) -> Self:
        _require_str("Uri.with_host", host)
        if host == self.host:
            return self
        return dataclasses.replace(self, host=host.lower())

    def with_port(self: Self, port: int | str | None) -> Self:
        """port may be None, an int, or an integer string such as "8080"."""
        if port is not None:
            if isinstance(port, bool) or not isinstance(port, (int, str)) or (
                isinstance(port, str) and _INTEGER_PAT.match(port) is None
            ):
                logger.debug(f"rejected port {port!r}")
                raise InvalidPortType(
                    f'Invalid port "{type(port).__name__}" specified; must be an integer, an integer string, or None'
                )
            port = int(port)
        if port == self.port:
            return self
        if port is not None and not _MIN_PORT <= port <= _MAX_PORT:
            logger.debug(f"port {port} out of range")
            raise PortOutOfRange(port)
        return dataclasses.replace(self, port=port)

    def with_path(self: Self, path: str) -> Self:
        _require_str("Uri.with_path", path)
        if "?" in path:
            logger.debug(f"path {path!r} contains a query")
            raise PathContainsQuery("Invalid path provided; must not contain a query string")
        if "#" in path:
            logger.debug(f"path {path!r} contains a fragment")
            raise PathContainsFragment("Invalid path provided; must not contain a URI fragment")
        path = filter_path(path)
        if path == self.path:
            return self
        return dataclasses.replace(self, path=path)

    def with_query(self: Self, query: str) -> Self:
        """A leading "?" is dropped; an empty query removes it."""
        _require_str("Uri.with_query", query)
        if query.startswith("?"):
            query = query[1:]
        if "#" in query:
            logger.debug(f"query {query!r} contains a fragment")
            raise QueryContainsFragment("Invalid query provided; must not contain a URI fragment")
        query = filter_query(query)
        if query == self.query:
            return self
        return dataclasses.replace(self, query=query)

    def with_fragment(self: Self, fragment: str) -> Self:
        """A leading "#" is dropped; an empty fragment removes it."""
        _require_str("Uri.with_fragment", fragment)
        if fragment.startswith("#"):
            fragment = fragment[1:]
        fragment = filter_fragment(fragment)
        if fragment == self.fragment:
            return self
        return dataclasses.replace(self, fragment=fragment)


def _parse_authority(authority: str, has_scheme: bool) -> tuple[str, str, int | None]:
    m: re.Match[str] | None = AUTHORITY_SPLIT_PAT.match(authority)
    if m is None:
        raise MalformedUri(f"malformed authority {authority!r}")

    raw_userinfo: str | None = m["userinfo"]
    host: str = m["host"]
    raw_port: str | None = m["port"]

    if HOST_PAT.match(host) is None:
        raise MalformedUri(f"invalid host {host!r}")

    port: int | None = None
    if raw_port:
        if PORT_PAT.match(raw_port) is None:
            raise MalformedUri(f"invalid port {raw_port!r}")
        port = int(raw_port, base=10)
        if not _MIN_PORT <= port <= _MAX_PORT:
            raise MalformedUri(f"port {port} out of range")

    if len(host) == 0 and (has_scheme or raw_userinfo is not None or port is not None):
        raise MalformedUri(f"missing host in authority {authority!r}")

    userinfo: str = ""
    if raw_userinfo is not None:
        user, colon, password = raw_userinfo.partition(":")
        userinfo = filter_userinfo(user)
        # The password is appended as written, without encoding.
        if colon:
            userinfo += f":{password}"

    return userinfo, host.lower(), port


def parse_uri(data: str = "") -> Uri:
    """Builds a Uri from a URI or relative reference such as "https://user@example.com:8443/a?b#c".
    Each component is normalized the same way the matching with_* method would.
    Raises MalformedUri for input that cannot be split, UnsupportedScheme for schemes other than http(s).
    """
    _require_str("parse_uri", data)
    if len(data) == 0:
        return Uri()

    # Every group is optional, so any string matches.
    m = URI_SPLIT_PAT.match(data)

    scheme: str = _filter_scheme(m["scheme"] or "")

    userinfo: str = ""
    host: str = ""
    port: int | None = None
    if m["authority"] is not None:
        try:
            userinfo, host, port = _parse_authority(m["authority"], has_scheme=m["scheme"] is not None)
        except MalformedUri:
            logger.debug(f"malformed URI {data!r}")
            raise

    return Uri(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=filter_path(m["path"]),
        query=filter_query(m["query"] or ""),
        fragment=filter_fragment(m["fragment"] or ""),
    )

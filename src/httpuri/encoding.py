"""httpuri.encoding
Percent-encoding filters for the textual URI components.
Each filter leaves valid escapes ("%41") alone, so filtering an already filtered value is a no-op.
"""

import re
import string

from .errors import MalformedUri
from .grammar import PCT_ENCODED

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
# Non-ASCII letters are accepted as well, see _is_allowed.
UNRESERVED: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_-.~")

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS: frozenset[str] = frozenset("!$&'()*+,;=")

# ":" is not allowed so that it stays the user/password separator.
USERINFO_CHARS: frozenset[str] = UNRESERVED | SUB_DELIMS

PATH_CHARS: frozenset[str] = UNRESERVED | frozenset("():@&=+$,/;")

# query = *( pchar / "/" / "?" ), fragment = *( pchar / "/" / "?" )
QUERY_CHARS: frozenset[str] = PATH_CHARS | frozenset("?")
FRAGMENT_CHARS: frozenset[str] = QUERY_CHARS

# One token per escape sequence, otherwise one token per character.
_TOKEN_PAT: re.Pattern[str] = re.compile(rf"{PCT_ENCODED}|.", re.DOTALL)


def _is_allowed(char: str, allowed: frozenset[str]) -> bool:
    return char in allowed or (not char.isascii() and char.isalpha())


def _encode_char(char: str) -> str:
    try:
        octets: bytes = char.encode("utf-8")
    except UnicodeEncodeError as exc:
        # Lone surrogates have no UTF-8 form.
        raise MalformedUri(f"cannot percent-encode {char!r}") from exc
    return "".join(f"%{octet:02X}" for octet in octets)


def percent_encode(value: str, allowed: frozenset[str]) -> str:
    """Returns value with every character outside allowed percent-encoded, octet by octet.
    A "%" that does not start an escape sequence becomes "%25".
    e.g. percent_encode("a b%2Fc%", PATH_CHARS) == "a%20b%2Fc%25"
    """
    result: list[str] = []
    for m in _TOKEN_PAT.finditer(value):
        token: str = m[0]
        if len(token) == 3 or _is_allowed(token, allowed):
            result.append(token)
        else:
            result.append(_encode_char(token))
    return "".join(result)


def filter_userinfo(part: str) -> str:
    return percent_encode(part, USERINFO_CHARS)


def filter_path(path: str) -> str:
    """Encodes path and reduces any run of leading slashes to one.
    "//evil.example" must not be read back as a network-path reference.
    """
    path = percent_encode(path, PATH_CHARS)
    if path.startswith("/"):
        path = f"/{path.lstrip('/')}"
    return path


def filter_query(query: str) -> str:
    return percent_encode(query, QUERY_CHARS)


def filter_fragment(fragment: str) -> str:
    return percent_encode(fragment, FRAGMENT_CHARS)

"""httpuri.grammar
RFC 3986 productions expressed as regular expressions.
Only the rules needed to split a URI and to validate its host are kept here.
"""

import re

# Each of these ABNF rules is from RFC 3986, 3987, 6874, or 5234.

# ALPHA = %x41-5A / %x61-7A
_ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
_DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
_HEXDIG: str = rf"(?:{_DIGIT}|[A-Fa-f])"

# ucschar = %xA0-D7FF / %xF900-FDCF / %xFDF0-FFEF
#         / %x10000-1FFFD / %x20000-2FFFD / %x30000-3FFFD
#         / %x40000-4FFFD / %x50000-5FFFD / %x60000-6FFFD
#         / %x70000-7FFFD / %x80000-8FFFD / %x90000-9FFFD
#         / %xA0000-AFFFD / %xB0000-BFFFD / %xC0000-CFFFD
#         / %xD0000-DFFFD / %xE1000-EFFFD
_UCSCHAR: str = "[\xa0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef\U00010000-\U0001FFFD\U00020000-\U0002FFFD\U00030000-\U0003FFFD\U00040000-\U0004FFFD\U00050000-\U0005FFFD\U00060000-\U0006FFFD\U00070000-\U0007FFFD\U00080000-\U0008FFFD\U00090000-\U0009FFFD\U000A0000-\U000AFFFD\U000B0000-\U000BFFFD\U000C0000-\U000CFFFD\U000D0000-\U000DFFFD\U000E0000-\U000EFFFD]"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: str = rf"(?:{_ALPHA}|{_DIGIT}|[-._~])"

# iunreserved = ALPHA / DIGIT / "-" / "." / "_" / "~" / ucschar
_IUNRESERVED: str = rf"(?:{_ALPHA}|{_DIGIT}|[-._~]|{_UCSCHAR})"

# pct-encoded = "%" HEXDIG HEXDIG
PCT_ENCODED: str = rf"%{_HEXDIG}{_HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"[!$&'()*+,;=]"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = rf"(?P<scheme>{_ALPHA}(?:{_ALPHA}|{_DIGIT}|[+\-.])*)"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET: str = rf"(?:{_DIGIT}|[1-9]{_DIGIT}|1{_DIGIT}{{2}}|2[0-4]{_DIGIT}|25[0-5])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS: str = rf"{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}"

# h16 = 1*4HEXDIG
_H16: str = rf"(?:{_HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
_LS32: str = rf"(?:{_H16}:{_H16}|{_IPV4ADDRESS})"

# IPv6address =                                      6( h16 ":" ) ls32
#                       /                       "::" 5( h16 ":" ) ls32
#                       / [               h16 ] "::" 4( h16 ":" ) ls32
#                       / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#                       / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#                       / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#                       / [ *4( h16 ":" ) h16 ] "::"              ls32
#                       / [ *5( h16 ":" ) h16 ] "::"              h16
#                       / [ *6( h16 ":" ) h16 ] "::"
_IPV6ADDRESS: str = (
    "(?:"
    + r"|".join(
        (
                                           rf"(?:{_H16}:){{6}}{_LS32}",
                                         rf"::(?:{_H16}:){{5}}{_LS32}",
                              rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,3}}{_H16})?::(?:{_H16}:){_LS32}",
            rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
            rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
            rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
        )
    )
    + ")"
)

# ZoneID = 1*( unreserved / pct-encoded )
_ZONEID = rf"(?:{_UNRESERVED}|{PCT_ENCODED})+"

# IPv6addrz = IPv6address "%25" ZoneID
_IPV6ADDRZ = rf"{_IPV6ADDRESS}%25{_ZONEID}"

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
_IPVFUTURE: str = rf"[vV]{_HEXDIG}+\.(?:{_UNRESERVED}|{_SUB_DELIMS}|:)+"

# IP-literal = "[" ( IPv6address / IPv6addrz / IPvFuture  ) "]"
_IP_LITERAL: str = rf"\[(?:{_IPV6ADDRESS}|{_IPV6ADDRZ}|{_IPVFUTURE})\]"

# ireg-name = *( iunreserved / pct-encoded / sub-delims )
# (the IRI form, so hosts written with non-ASCII letters still pass)
_IREG_NAME: str = rf"(?:{_IUNRESERVED}|{PCT_ENCODED}|{_SUB_DELIMS})*"

# host = IP-literal / IPv4address / ireg-name
_HOST: str = rf"\A(?:{_IP_LITERAL}|{_IPV4ADDRESS}|{_IREG_NAME})\Z"
HOST_PAT: re.Pattern[str] = re.compile(_HOST)

# port = *DIGIT
_PORT: str = rf"\A{_DIGIT}*\Z"
PORT_PAT: re.Pattern[str] = re.compile(_PORT)

# The component split from RFC 3986 Appendix B, with the scheme held to its
# proper production so that "a/b:c" is read as a path and not as a scheme.
_URI_SPLIT: str = (
    rf"\A(?:{_SCHEME}:)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?\Z"
)
URI_SPLIT_PAT: re.Pattern[str] = re.compile(_URI_SPLIT, re.DOTALL)

# authority = [ userinfo "@" ] host [ ":" port ]
# Each piece is checked against its own rule afterwards.
# The userinfo runs up to the last "@"; an IP literal keeps its colons.
_AUTHORITY_SPLIT: str = (
    r"\A(?:(?P<userinfo>.*)@)?"
    r"(?P<host>\[[^\]]*\]|[^:\[\]]*)"
    r"(?::(?P<port>.*))?\Z"
)
AUTHORITY_SPLIT_PAT: re.Pattern[str] = re.compile(_AUTHORITY_SPLIT, re.DOTALL)

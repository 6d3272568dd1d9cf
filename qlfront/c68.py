"""C68 socket constants and their mapping to and from host values."""

from __future__ import annotations

import errno
from enum import IntEnum


class C68Error(IntEnum):
    """Socket error numbers as used by C68 programs."""

    ENOTSOCK = 40
    EDESTADDRREQ = 41
    EMSGSIZE = 42
    EPROTOTYPE = 43
    ENOPROTOOPT = 44
    EPROTONOSUPPORT = 45
    ESOCKTNOSUPPORT = 46
    EOPNOTSUPP = 47
    EPFNOSUPPORT = 48
    EAFNOSUPPORT = 49
    EADDRINUSE = 50
    EADDRNOTAVAIL = 51
    ENETDOWN = 52
    ENETUNREACH = 53
    ENETRESET = 54
    ECONNABORTED = 55
    ECONNRESET = 56
    ENOBUFS = 57
    EISCONN = 58
    ENOTCONN = 59
    ESHUTDOWN = 60
    ETOOMANYREFS = 61
    ETIMEDOUT = 62
    ECONNREFUSED = 63
    EHOSTDOWN = 64
    EHOSTUNREACH = 65
    EALREADY = 66
    EINPROGRESS = 67


class C68Protocol(IntEnum):
    """IP protocol numbers as used by C68 programs."""

    IP = 0
    ICMP = 1
    GGP = 3
    TCP = 6
    EGP = 8
    PUP = 12
    UDP = 17
    IDP = 22
    TP = 29
    EON = 80
    RAW = 255


_PROTOCOL_NAMES = {
    C68Protocol.IP: " dummy for IP ",
    C68Protocol.ICMP: " control message protocol ",
    C68Protocol.GGP: " gateway^2 (deprecated) ",
    C68Protocol.TCP: " tcp ",
    C68Protocol.EGP: " exterior gateway protocol ",
    C68Protocol.PUP: " pup ",
    C68Protocol.UDP: " user datagram protocol ",
    C68Protocol.IDP: " xns idp ",
    C68Protocol.TP: " tp-4 w/ class negotiation ",
    C68Protocol.EON: " ISO cnlp ",
    C68Protocol.RAW: " raw IP packet ",
}


def _build_errno_map() -> dict[int, C68Error]:
    mapping: dict[int, C68Error] = {}
    for member in C68Error:
        host = getattr(errno, member.name, None)
        if host is not None and host not in mapping:
            mapping[host] = member
    return mapping


_ERRNO_TO_C68 = _build_errno_map()


def c68_error(err: int) -> int:
    """Translate a host errno value to its C68 code, or -1 if it has none."""
    return _ERRNO_TO_C68.get(err, -1)


def protocol_name(proto: int) -> str:
    """Return the descriptive name of a C68 IP protocol number."""
    try:
        return _PROTOCOL_NAMES[C68Protocol(proto)]
    except ValueError:
        return "unknown protocol"


def describe_socket_option(level: int, optname: int) -> str:
    """Describe a socket option that is passed through untranslated."""
    return f"xso_q2x: proto {level} {protocol_name(level)}, optname {optname}"
"""The SLOW packet: header fields, wire encoding and decoding."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

HEADER_SIZE = 32
MAX_DATA_SIZE = 1440
SID_SIZE = 16

_STTL_BITS = 27
_FLAG_BITS = 5
_HEADER_TAIL = struct.Struct("<IIIHBB")
_RULE = "-" * 51


class PacketError(ValueError):
    """Raised when a packet field or a received datagram is invalid."""


class Flag(enum.IntFlag):
    """Header flags; bit 4 is Connect, bit 0 is More Bits."""

    MORE = 0b00001
    ACCEPT = 0b00010
    ACK = 0b00100
    REVIVE = 0b01000
    CONNECT = 0b10000


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise PacketError(f"{name} must fit in {bits} bits, got {value}")


@dataclass(frozen=True)
class SlowPacket:
    """One SLOW packet. All fields are validated on construction."""

    sid: bytes = bytes(SID_SIZE)
    sttl: int = 0
    flags: Flag = Flag(0)
    seqnum: int = 0
    acknum: int = 0
    window: int = 0
    fid: int = 0
    fo: int = 0
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        sid = bytes(self.sid)
        if len(sid) != SID_SIZE:
            raise PacketError(f"sid must be {SID_SIZE} bytes, got {len(sid)}")
        object.__setattr__(self, "sid", sid)

        _check_range("sttl", self.sttl, _STTL_BITS)
        _check_range("flags", int(self.flags), _FLAG_BITS)
        object.__setattr__(self, "flags", Flag(int(self.flags)))
        _check_range("seqnum", self.seqnum, 32)
        _check_range("acknum", self.acknum, 32)
        _check_range("window", self.window, 16)
        _check_range("fid", self.fid, 8)
        _check_range("fo", self.fo, 8)

        data = bytes(self.data)
        if len(data) > MAX_DATA_SIZE:
            raise PacketError(
                f"data must be between 0 and {MAX_DATA_SIZE} bytes, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    def to_bytes(self) -> bytes:
        """Encode the packet in wire format (little-endian header, then data)."""
        sttl_flags = (self.sttl << _FLAG_BITS) | int(self.flags)
        tail = _HEADER_TAIL.pack(
            sttl_flags, self.seqnum, self.acknum, self.window, self.fid, self.fo
        )
        return self.sid + tail + self.data

    def flag_bits(self) -> str:
        """The flags as a five-character bit string, Connect first."""
        return format(int(self.flags), f"0{_FLAG_BITS}b")


def parse_packet(data: bytes) -> SlowPacket:
    """Decode a received datagram into a packet."""
    raw = bytes(data)
    if len(raw) < HEADER_SIZE:
        raise PacketError(
            f"packet too small: {len(raw)} bytes, header needs {HEADER_SIZE}"
        )
    sttl_flags, seqnum, acknum, window, fid, fo = _HEADER_TAIL.unpack_from(
        raw, SID_SIZE
    )
    return SlowPacket(
        sid=raw[:SID_SIZE],
        sttl=(sttl_flags >> _FLAG_BITS) & ((1 << _STTL_BITS) - 1),
        flags=Flag(sttl_flags & ((1 << _FLAG_BITS) - 1)),
        seqnum=seqnum,
        acknum=acknum,
        window=window,
        fid=fid,
        fo=fo,
        data=raw[HEADER_SIZE:],
    )


def format_packet(packet: SlowPacket, title: str) -> str:
    """Render a human-readable dump of the packet."""
    sid = "".join(f"{byte} " for byte in packet.sid)
    lines = [
        _RULE,
        f"Detalhes do Pacote: {title} =>",
        f"SID: {sid}",
        f"STTL: {packet.sttl}",
        f"Flags: {packet.flag_bits()}",
        f"SeqNum: {packet.seqnum}",
        f"AckNum: {packet.acknum}",
        f"Window: {packet.window}",
        f"FID: {packet.fid}",
        f"FO: {packet.fo}",
        f"Data: {packet.data.decode('latin-1')}",
        _RULE,
        "",
    ]
    return "\n".join(lines) + "\n"
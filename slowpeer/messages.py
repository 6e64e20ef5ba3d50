"""Builders for the packets a peripheral sends."""

from __future__ import annotations

from .packet import Flag, SlowPacket

MAX_DATAGRAM_SIZE = 1472

_U32 = 0xFFFFFFFF


def create_connect(receive_window: int) -> SlowPacket:
    """Connect request advertising the given receive window."""
    return SlowPacket(flags=Flag.CONNECT, window=receive_window)


def create_disconnect(sid: bytes, sttl: int, seqnum: int, acknum: int) -> SlowPacket:
    """Disconnect request for an established session."""
    return SlowPacket(
        sid=sid,
        sttl=sttl,
        flags=Flag.CONNECT | Flag.REVIVE | Flag.ACK,
        seqnum=seqnum,
        acknum=acknum,
    )


def data_packet(
    sid: bytes,
    sttl: int,
    last_seqnum: int,
    last_acknum: int,
    window: int,
    more_data: bool,
    data: bytes,
) -> SlowPacket:
    """Data packet following ``last_seqnum``; sets More Bits if more follows."""
    flags = Flag.ACK | Flag.MORE if more_data else Flag.ACK
    return SlowPacket(
        sid=sid,
        sttl=sttl,
        flags=flags,
        seqnum=(last_seqnum + 1) & _U32,
        acknum=last_acknum,
        window=window,
        data=data,
    )
import pytest

from slowpeer.packet import (
    HEADER_SIZE,
    MAX_DATA_SIZE,
    Flag,
    PacketError,
    SlowPacket,
    format_packet,
    parse_packet,
)


def _sample() -> SlowPacket:
    return SlowPacket(
        sid=bytes(range(16)),
        sttl=(1 << 27) - 1,
        flags=Flag.ACK | Flag.MORE,
        seqnum=0xFFFFFFFF,
        acknum=7,
        window=1472,
        fid=3,
        fo=255,
        data=b"hello",
    )


def test_default_packet_is_all_zero_header():
    assert SlowPacket().to_bytes() == bytes(HEADER_SIZE)


def test_encoded_length_is_header_plus_data():
    packet = _sample()
    assert len(packet.to_bytes()) == HEADER_SIZE + len(packet.data)


def test_round_trip():
    packet = _sample()
    assert parse_packet(packet.to_bytes()) == packet


def test_sid_is_first_sixteen_bytes():
    packet = _sample()
    assert packet.to_bytes()[:16] == packet.sid


def test_sttl_is_shifted_above_flags():
    encoded = SlowPacket(sttl=1).to_bytes()
    assert encoded[16:20] == b"\x20\x00\x00\x00"


def test_flags_in_low_bits_of_sttl_word():
    encoded = SlowPacket(flags=Flag.CONNECT).to_bytes()
    assert encoded[16] == int(Flag.CONNECT)


def test_fields_little_endian():
    encoded = SlowPacket(seqnum=1, acknum=2, window=3, fid=4, fo=5).to_bytes()
    assert encoded[20:24] == (1).to_bytes(4, "little")
    assert encoded[24:28] == (2).to_bytes(4, "little")
    assert encoded[28:30] == (3).to_bytes(2, "little")
    assert encoded[30] == 4
    assert encoded[31] == 5


def test_flag_bits_connect():
    assert SlowPacket(flags=Flag.CONNECT).flag_bits() == "10000"


def test_flag_bits_ack_more():
    assert SlowPacket(flags=Flag.ACK | Flag.MORE).flag_bits() == "00101"


def test_parse_too_short_raises():
    with pytest.raises(PacketError):
        parse_packet(bytes(HEADER_SIZE - 1))


def test_parse_header_only_has_empty_data():
    assert parse_packet(bytes(HEADER_SIZE)).data == b""


def test_data_too_large_raises():
    with pytest.raises(PacketError):
        SlowPacket(data=bytes(MAX_DATA_SIZE + 1))


def test_data_at_limit_accepted():
    assert len(SlowPacket(data=bytes(MAX_DATA_SIZE)).data) == MAX_DATA_SIZE


def test_sid_wrong_length_raises():
    with pytest.raises(PacketError):
        SlowPacket(sid=bytes(15))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sttl": 1 << 27},
        {"flags": 32},
        {"seqnum": -1},
        {"acknum": 1 << 32},
        {"window": 1 << 16},
        {"fid": 256},
        {"fo": 256},
    ],
)
def test_out_of_range_fields_raise(kwargs):
    with pytest.raises(PacketError):
        SlowPacket(**kwargs)


def test_packet_error_is_value_error():
    with pytest.raises(ValueError):
        SlowPacket(fo=-1)


def test_format_packet_contents():
    text = format_packet(_sample(), "Teste")
    lines = text.splitlines()
    assert lines[1] == "Detalhes do Pacote: Teste =>"
    assert "Flags: 00101" in lines
    assert "Data: hello" in lines
    assert "FO: 255" in lines
    assert lines[2] == "SID: " + "".join(f"{i} " for i in range(16))
    assert text.endswith("\n\n")
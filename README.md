# slowpeer

`slowpeer` is a library for the peripheral side of the SLOW transport
protocol. SLOW is a small connection-oriented protocol that runs on top of
UDP. The library builds, encodes, decodes and prints SLOW packets. It also
sends a packet to a central server over UDP and waits for the reply.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The packet format

A SLOW packet has a 32-byte header followed by up to 1440 bytes of data. All
multi-byte fields are little-endian.

| Bytes  | Field                                                           |
|--------|-----------------------------------------------------------------|
| 0–15   | session id (SID)                                                |
| 16–19  | session TTL (27 bits) shifted left by 5, OR the 5 flag bits     |
| 20–23  | sequence number                                                 |
| 24–27  | acknowledgement number                                          |
| 28–29  | window                                                          |
| 30     | fragment id                                                     |
| 31     | fragment offset                                                 |
| 32–    | data                                                            |

The flags, from the most significant bit to the least, are: Connect, Revive,
ACK, Accept/Reject, More Bits. They are available as `slowpeer.packet.Flag`
(`CONNECT`, `REVIVE`, `ACK`, `ACCEPT`, `MORE`).

## Modules

### `slowpeer.packet`

- `SlowPacket` is a frozen dataclass with the fields `sid`, `sttl`, `flags`,
  `seqnum`, `acknum`, `window`, `fid`, `fo` and `data`. Every field is checked
  when the packet is built. For example, the SID must be 16 bytes, the TTL
  must fit in 27 bits, and the data must be at most 1440 bytes. A field that
  is out of range raises `PacketError`.
- `SlowPacket.to_bytes()` encodes the packet in wire format.
- `SlowPacket.flag_bits()` returns the flags as a five-character bit string,
  with Connect first (for example `"10000"`).
- `parse_packet(data)` decodes a datagram. If the datagram is shorter than
  the 32-byte header, it raises `PacketError`.
- `format_packet(packet, title)` returns a readable dump of every header field
  and of the data.
- The constants are `HEADER_SIZE` (32), `MAX_DATA_SIZE` (1440) and
  `SID_SIZE` (16).

### `slowpeer.messages`

- `create_connect(receive_window)` builds a connect request.
- `create_disconnect(sid, sttl, seqnum, acknum)` builds a disconnect request.
  Its flags are Connect, Revive and ACK.
- `data_packet(sid, sttl, last_seqnum, last_acknum, window, more_data, data)`
  builds a data packet. Its sequence number is `last_seqnum + 1`, wrapping at
  32 bits. Its flags are ACK, plus More Bits when `more_data` is true.
- `MAX_DATAGRAM_SIZE` (1472) is the largest datagram read from the socket.

### `slowpeer.transport`

- `SlowSocket(host, port, timeout)` resolves `host` and opens a UDP socket
  with the given receive timeout (5 seconds by default). It can be used as a
  context manager.
- `SlowSocket.send_receive(packet)` sends the packet and returns the parsed
  reply.
- `SlowSocket.close()` closes the socket.
- Errors are raised as `TransportError`: the host cannot be resolved, a send
  fails, or a receive fails or times out. Progress is logged through the
  `slowpeer.transport` logger.

## Example

```python
from slowpeer.messages import create_connect, data_packet
from slowpeer.packet import format_packet, parse_packet
from slowpeer.transport import SlowSocket

connect = create_connect(1)
wire = connect.to_bytes()           # 32-byte header, no data
assert parse_packet(wire) == connect
print(format_packet(connect, "Connect"))

with SlowSocket("localhost", 7033, 5.0) as transport:
    reply = transport.send_receive(connect)
    print(format_packet(reply, "Connect reply"))
    packet = data_packet(reply.sid, reply.sttl, reply.seqnum, reply.acknum,
                         1472, False, b"hello")
    print(format_packet(transport.send_receive(packet), "Data reply"))
```

## What the package does not do

- It has no command-line client. There is no interactive program to run.
- It does not track a session for you. It keeps no session TTL countdown and
  no sequence or acknowledgement state between calls. You pass these values
  to the message builders yourself.
- It does not split large payloads into fragments, and it does not handle
  the revive exchange. A single `data_packet` holds at most 1440 bytes of
  data.
- It has no UUID generator. You supply the SID as 16 bytes.
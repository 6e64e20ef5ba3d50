"""UDP transport: send one packet and wait for the reply."""

from __future__ import annotations

import logging
import socket

from .messages import MAX_DATAGRAM_SIZE
from .packet import SlowPacket, parse_packet

log = logging.getLogger(__name__)


class TransportError(OSError):
    """Raised when the socket cannot be set up, send or receive."""


class SlowSocket:
    """A UDP socket bound to one SLOW central."""

    def __init__(self, host: str, port: int, timeout: float = 5.0) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            address = socket.gethostbyname(host)
        except (socket.gaierror, UnicodeError) as exc:
            self._sock.close()
            raise TransportError(f"Host não encontrado: {host}") from exc
        self._sock.settimeout(timeout)
        self.address = (address, port)

    def send_receive(self, packet: SlowPacket) -> SlowPacket:
        """Send ``packet`` and return the parsed reply."""
        payload = packet.to_bytes()
        try:
            sent = self._sock.sendto(payload, self.address)
        except OSError as exc:
            self.close()
            raise TransportError(f"Erro ao enviar o pacote: {exc}") from exc
        log.info("Pacote enviado com sucesso (%d bytes)", sent)
        log.info("Esperando resposta...")

        try:
            response, _ = self._sock.recvfrom(MAX_DATAGRAM_SIZE)
        except OSError as exc:
            raise TransportError(f"Erro ao receber pacote: {exc}") from exc
        log.info("Resposta recebida com %d bytes", len(response))
        return parse_packet(response)

    def close(self) -> None:
        """Close the socket."""
        log.info("Fechando conexão do socket UDP...")
        self._sock.close()

    def __enter__(self) -> "SlowSocket":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
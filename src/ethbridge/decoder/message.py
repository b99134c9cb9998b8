"""MessageDecoder: full pipeline from a bridge log to a typed Message.

Stages run strictly in order: event frame -> payload -> assembly. The first
failing stage aborts the decode with its DecodeError; nothing is retried and no
partially filled message is ever returned.
"""

import logging

from ethbridge.config import Settings, settings as default_settings
from ethbridge.decoder.assembler import MessageAssembler
from ethbridge.decoder.frame import EventFrameDecoder
from ethbridge.decoder.payload import PayloadDecoder
from ethbridge.domain.models.log import LogRecord
from ethbridge.domain.models.message import Message
from ethbridge.exceptions import DecodeError
from ethbridge.infra.rlp.log_codec import decode_log_rlp

logger = logging.getLogger(__name__)


class MessageDecoder:
    """Stateless apart from configuration; safe to share between threads."""

    def __init__(self, settings: Settings | None = None) -> None:
        cfg = settings if settings is not None else default_settings
        self._frame_decoder = EventFrameDecoder(cfg.event_signature, strict_narrowing=cfg.strict_narrowing)
        self._payload_decoder = PayloadDecoder(strict_narrowing=cfg.strict_narrowing)
        self._assembler = MessageAssembler()

    def decode(self, log: LogRecord) -> Message:
        try:
            frame = self._frame_decoder.decode(log)
            payload = self._payload_decoder.decode(frame.payload)
            message = self._assembler.assemble(frame.tag, payload)
        except DecodeError as exc:
            logger.warning("Rejected bridge log %s: %s", _describe(log), exc)
            raise
        logger.debug("Decoded %s nonce=%d from %s", message.kind, message.nonce, _describe(log))
        return message

    def decode_rlp(self, raw: bytes) -> Message:
        """Reconstruct the log from its RLP encoding, then decode it."""
        try:
            log = decode_log_rlp(raw)
        except DecodeError as exc:
            logger.warning("Rejected bridge log: %s", exc)
            raise
        return self.decode(log)


def _describe(log: LogRecord) -> str:
    return f"0x{log.address.hex()}" if log.address is not None else "<unknown emitter>"


def decode_message(log: LogRecord) -> Message:
    """Decode with process-wide settings."""
    return MessageDecoder().decode(log)


def decode_message_rlp(raw: bytes) -> Message:
    return MessageDecoder().decode_rlp(raw)

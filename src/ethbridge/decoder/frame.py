"""EventFrameDecoder: outer AppEvent(uint256,bytes) layer."""

from collections.abc import Sequence

from ethbridge.decoder.utils.abi import decode_tokens, event_topic
from ethbridge.decoder.utils.types import AbiToken, EventFrame
from ethbridge.domain.enums import ParamKind
from ethbridge.domain.models.log import LogRecord
from ethbridge.exceptions import InvalidData, InvalidPayload, InvalidTag

TAG_MASK = 0xFF


class EventFrameDecoder:
    """Validates a log against the AppEvent ABI and splits it into tag + payload blob.

    Both parameters are non-indexed and the event is not anonymous, so the log
    carries exactly one topic (the signature hash) and everything else is in data.
    """

    INPUT_TYPES: tuple[str, ...] = ("uint256", "bytes")

    def __init__(self, signature: str = "AppEvent(uint256,bytes)", strict_narrowing: bool = False) -> None:
        self._signature = signature
        self._topic0 = event_topic(signature)
        self._strict_narrowing = strict_narrowing

    def decode(self, log: LogRecord) -> EventFrame:
        self.check_topics(log.topics)
        tokens = decode_tokens(self.INPUT_TYPES, log.data)
        return self.extract(tokens)

    def check_topics(self, topics: Sequence[bytes]) -> None:
        if len(topics) != 1:
            raise InvalidData(f"{self._signature} expects 1 topic, got {len(topics)}")
        if topics[0] != self._topic0:
            raise InvalidData(f"topic0 0x{topics[0].hex()} is not {self._signature}")

    def extract(self, tokens: Sequence[AbiToken]) -> EventFrame:
        """Pick tag and payload out of decoded tokens, checking position and kind."""
        if len(tokens) < 2:
            raise InvalidPayload(f"expected 2 event tokens, got {len(tokens)}")

        tag_token, payload_token = tokens[0], tokens[1]
        if tag_token.kind is not ParamKind.UINT:
            raise InvalidPayload(f"tag token is {tag_token.kind.value}, expected uint")
        if payload_token.kind is not ParamKind.BYTES:
            raise InvalidPayload(f"payload token is {payload_token.kind.value}, expected bytes")

        if self._strict_narrowing and tag_token.value > TAG_MASK:
            raise InvalidTag(f"tag {tag_token.value} does not fit in one byte")
        return EventFrame(tag=tag_token.value & TAG_MASK, payload=payload_token.value)

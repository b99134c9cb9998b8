"""MessageAssembler: tag + payload -> SendNative | SendToken."""

from ethbridge.decoder.utils.types import Payload
from ethbridge.domain.enums import MessageTag
from ethbridge.domain.models.message import Message, SendNative, SendToken
from ethbridge.exceptions import InvalidTag


class MessageAssembler:
    """Pure mapping from a validated payload to a message variant."""

    def assemble(self, tag: int, payload: Payload) -> Message:
        if tag == MessageTag.SEND_NATIVE:
            # token is decoded for every payload but native transfers drop it
            return SendNative(
                sender=payload.sender,
                recipient=payload.recipient,
                amount=payload.amount,
                nonce=payload.nonce,
            )
        if tag == MessageTag.SEND_TOKEN:
            return SendToken(
                sender=payload.sender,
                recipient=payload.recipient,
                token=payload.token,
                amount=payload.amount,
                nonce=payload.nonce,
            )
        raise InvalidTag(f"unknown message tag {tag}")

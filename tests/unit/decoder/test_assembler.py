import pytest

from ethbridge.decoder.assembler import MessageAssembler
from ethbridge.decoder.utils.types import Payload
from ethbridge.domain.models.message import SendNative, SendToken
from ethbridge.exceptions import InvalidTag

SENDER = bytes.fromhex("cffeaaf7681c89285d65cfbe808b80e502696573")
RECIPIENT = bytes.fromhex("8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48")
TOKEN = bytes.fromhex("e1638d0a9f5349bb7d3d748b514b8553dfddb46c")

PAYLOAD = Payload(sender=SENDER, recipient=RECIPIENT, token=TOKEN, amount=10, nonce=7)


class TestMessageAssembler:
    def test_send_native_drops_token(self):
        msg = MessageAssembler().assemble(0, PAYLOAD)
        assert msg == SendNative(sender=SENDER, recipient=RECIPIENT, amount=10, nonce=7)
        assert not hasattr(msg, "token")

    def test_send_token_keeps_token(self):
        msg = MessageAssembler().assemble(1, PAYLOAD)
        assert msg == SendToken(sender=SENDER, recipient=RECIPIENT, token=TOKEN, amount=10, nonce=7)

    @pytest.mark.parametrize("tag", [2, 3, 127, 255])
    def test_unknown_tag(self, tag):
        with pytest.raises(InvalidTag):
            MessageAssembler().assemble(tag, PAYLOAD)

"""Bridge messages produced by decoding an AppEvent log."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ethbridge.domain.enums import MessageTag
from ethbridge.domain.models.primitives import H256, Address, Uint64, Uint256


class SendNative(BaseModel):
    """Native-currency transfer locked on the source chain."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["send_native"] = "send_native"
    sender: Address
    recipient: H256  # destination account id on the receiving chain
    amount: Uint256
    nonce: Uint64

    @property
    def tag(self) -> MessageTag:
        return MessageTag.SEND_NATIVE


class SendToken(BaseModel):
    """Token transfer locked on the source chain. ``token`` is the token contract."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["send_token"] = "send_token"
    sender: Address
    recipient: H256
    token: Address
    amount: Uint256
    nonce: Uint64

    @property
    def tag(self) -> MessageTag:
        return MessageTag.SEND_TOKEN


Message = Annotated[Union[SendNative, SendToken], Field(discriminator="kind")]

MessageAdapter: TypeAdapter[Message] = TypeAdapter(Message)

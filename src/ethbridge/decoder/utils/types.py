"""Intermediate types passed between decoder stages."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ethbridge.domain.enums import ParamKind
from ethbridge.domain.models.primitives import H256, Address, Uint64, Uint256


class AbiToken(BaseModel):
    """One decoded ABI value tagged with the kind it was decoded as."""

    model_config = ConfigDict(frozen=True)

    kind: ParamKind
    value: Any  # int for UINT, bytes for everything else


class EventFrame(BaseModel):
    """Outer AppEvent parameters: narrowed tag + still-encoded payload."""

    model_config = ConfigDict(frozen=True)

    tag: int
    payload: bytes


class Payload(BaseModel):
    """Inner payload fields. Lives for a single decode call only."""

    model_config = ConfigDict(frozen=True)

    sender: Address
    recipient: H256
    token: Address  # only meaningful for SEND_TOKEN
    amount: Uint256
    nonce: Uint64

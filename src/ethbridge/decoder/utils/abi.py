"""Thin wrapper over eth_abi that yields kind-tagged tokens and folds grammar errors into InvalidData."""

from collections.abc import Sequence
from functools import lru_cache
from typing import Any

import eth_abi
from eth_abi.exceptions import DecodingError
from eth_utils import keccak, to_canonical_address

from ethbridge.decoder.utils.types import AbiToken
from ethbridge.domain.enums import ParamKind
from ethbridge.exceptions import InvalidData


@lru_cache(maxsize=16)
def event_topic(signature: str) -> bytes:
    """topic0 of a non-anonymous event: keccak256 of its canonical signature."""
    return keccak(text=signature)


def decode_tokens(abi_types: Sequence[str], data: bytes) -> list[AbiToken]:
    """Decode ``data`` against ``abi_types`` and tag each value with its ParamKind."""
    try:
        values = eth_abi.decode(list(abi_types), bytes(data))
    except (DecodingError, OverflowError) as exc:
        # OverflowError: offset words past the addressable range of the stream
        raise InvalidData(f"{','.join(abi_types)}: {exc}") from exc
    return [_to_token(abi_type, value) for abi_type, value in zip(abi_types, values)]


def _to_token(abi_type: str, value: Any) -> AbiToken:
    kind = ParamKind.from_abi_type(abi_type)
    if kind is ParamKind.ADDRESS:
        # eth_abi returns checksummed hex; keep the raw 20 bytes
        value = to_canonical_address(value)
    return AbiToken(kind=kind, value=value)

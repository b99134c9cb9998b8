"""PayloadDecoder: inner (address, bytes32, address, uint256, uint256) layer."""

from collections.abc import Iterator, Sequence

from ethbridge.decoder.utils.abi import decode_tokens
from ethbridge.decoder.utils.types import AbiToken, Payload
from ethbridge.domain.enums import ParamKind
from ethbridge.domain.models.primitives import UINT64_MAX
from ethbridge.exceptions import InvalidAddress, InvalidPayload

ADDRESS_LENGTH = 20
RECIPIENT_LENGTH = 32


class PayloadDecoder:
    """Decodes the opaque payload blob of an AppEvent into its five fields.

    Field order: sender, recipient (32-byte account id on the receiving chain),
    token contract, amount, nonce. The nonce is narrowed to 64 bits.
    """

    PAYLOAD_TYPES: tuple[str, ...] = ("address", "bytes32", "address", "uint256", "uint256")

    def __init__(self, strict_narrowing: bool = False) -> None:
        self._strict_narrowing = strict_narrowing

    def decode(self, data: bytes) -> Payload:
        tokens = decode_tokens(self.PAYLOAD_TYPES, data)
        return self.extract(tokens)

    def extract(self, tokens: Sequence[AbiToken]) -> Payload:
        """Walk tokens in declared order. First mismatch aborts the whole payload."""
        it = iter(tokens)

        sender = self._address(_next(it, "sender", ParamKind.ADDRESS), "sender")

        recipient = _next(it, "recipient", ParamKind.FIXED_BYTES).value
        if len(recipient) != RECIPIENT_LENGTH:
            raise InvalidPayload(f"recipient is {len(recipient)} bytes, expected {RECIPIENT_LENGTH}")

        token = self._address(_next(it, "token", ParamKind.ADDRESS), "token")
        amount = _next(it, "amount", ParamKind.UINT).value
        nonce = self._nonce(_next(it, "nonce", ParamKind.UINT).value)

        return Payload(
            sender=sender,
            recipient=bytes(recipient),
            token=token,
            amount=amount,
            nonce=nonce,
        )

    @staticmethod
    def _address(token: AbiToken, field: str) -> bytes:
        if len(token.value) != ADDRESS_LENGTH:
            raise InvalidAddress(f"{field} is {len(token.value)} bytes, expected {ADDRESS_LENGTH}")
        return bytes(token.value)

    def _nonce(self, value: int) -> int:
        if self._strict_narrowing and value > UINT64_MAX:
            raise InvalidPayload(f"nonce {value} does not fit in 64 bits")
        return value & UINT64_MAX


def _next(it: Iterator[AbiToken], field: str, kind: ParamKind) -> AbiToken:
    token = next(it, None)
    if token is None:
        raise InvalidPayload(f"missing {field} token")
    if token.kind is not kind:
        raise InvalidPayload(f"{field} token is {token.kind.value}, expected {kind.value}")
    return token

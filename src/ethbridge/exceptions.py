"""Rejection errors raised while decoding a bridge log.

Every failure in the decode pipeline surfaces as a ``DecodeError`` subclass.
Third-party codec exceptions are re-raised as one of these with the underlying error
chained as ``__cause__``.
"""

from ethbridge.domain.enums import DecodeErrorKind


class DecodeError(Exception):
    """Base class. ``kind`` identifies the rejection category."""

    kind: DecodeErrorKind

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(f"{self.kind.value}: {reason}" if reason else self.kind.value)


class InvalidRLP(DecodeError):
    """The log record could not be reconstructed from its RLP encoding."""

    kind = DecodeErrorKind.INVALID_RLP


class InvalidData(DecodeError):
    """Topics or data do not satisfy the declared ABI grammar."""

    kind = DecodeErrorKind.INVALID_DATA


class InvalidTag(DecodeError):
    """Message tag is not a known variant."""

    kind = DecodeErrorKind.INVALID_TAG


class InvalidAddress(DecodeError):
    """An address token is not exactly 20 bytes."""

    kind = DecodeErrorKind.INVALID_ADDRESS


class InvalidPayload(DecodeError):
    """Structural mismatch: missing token, wrong token kind, wrong fixed length."""

    kind = DecodeErrorKind.INVALID_PAYLOAD

from enum import Enum


class DecodeErrorKind(str, Enum):
    """Categorized rejection reasons for a bridge log."""

    INVALID_RLP = "InvalidRLP"
    INVALID_DATA = "InvalidData"
    INVALID_TAG = "InvalidTag"
    INVALID_ADDRESS = "InvalidAddress"
    INVALID_PAYLOAD = "InvalidPayload"

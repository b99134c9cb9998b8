"""RLP codec for Ethereum receipt logs: [address, [topic, ...], data]."""

import rlp
from rlp.exceptions import RLPException
from rlp.sedes import Binary, CountableList, binary

from ethbridge.domain.models.log import LogRecord
from ethbridge.exceptions import InvalidRLP


class RLPLog(rlp.Serializable):
    fields = [
        ("address", Binary.fixed_length(20)),
        ("topics", CountableList(Binary.fixed_length(32))),
        ("data", binary),
    ]


def decode_log_rlp(raw: bytes) -> LogRecord:
    """Decode one RLP-encoded log. Trailing bytes and wrong field widths are rejected."""
    try:
        decoded = rlp.decode(raw, sedes=RLPLog, strict=True)
    except RLPException as exc:
        raise InvalidRLP(str(exc)) from exc
    return LogRecord(address=decoded.address, topics=tuple(decoded.topics), data=decoded.data)

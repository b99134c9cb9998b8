"""LogRecord: an Ethereum event log as handed over by the upstream source."""

from typing import Any

from eth_utils import decode_hex
from pydantic import BaseModel, ConfigDict

from ethbridge.domain.models.primitives import H256, Address
from ethbridge.exceptions import InvalidData


class LogRecord(BaseModel):
    """Topics + opaque data of one emitted event. Never mutated by the decoder."""

    model_config = ConfigDict(frozen=True)

    address: Address | None = None  # emitting contract, when the source carries it
    topics: tuple[H256, ...] = ()
    data: bytes = b""

    @classmethod
    def from_rpc(cls, entry: dict[str, Any]) -> "LogRecord":
        """Build from an eth_getLogs / Etherscan log entry (0x-hex strings)."""
        try:
            address = entry.get("address")
            return cls(
                address=decode_hex(address) if address else None,
                topics=tuple(decode_hex(t) for t in entry.get("topics", [])),
                data=decode_hex(entry.get("data") or "0x"),
            )
        except (TypeError, ValueError) as exc:  # ValidationError is a ValueError
            raise InvalidData(f"malformed log entry: {exc}") from exc

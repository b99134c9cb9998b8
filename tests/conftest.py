import eth_abi
import pytest
import rlp
from eth_utils import keccak

from ethbridge.domain.models.log import LogRecord

EMITTER = bytes.fromhex("774667629726ec1fabebcec0d9139bd1c8f72a23")


@pytest.fixture(scope="session")
def app_event_topic() -> bytes:
    return keccak(text="AppEvent(uint256,bytes)")


@pytest.fixture()
def encode_payload():
    """ABI-encode (address, bytes32, address, uint256, uint256)."""

    def _encode(*, sender: bytes, recipient: bytes, token: bytes, amount: int, nonce: int) -> bytes:
        return eth_abi.encode(
            ["address", "bytes32", "address", "uint256", "uint256"],
            ["0x" + sender.hex(), recipient, "0x" + token.hex(), amount, nonce],
        )

    return _encode


@pytest.fixture()
def make_log(app_event_topic):
    """Build an AppEvent LogRecord. Pass ``data`` to bypass the outer encoding."""

    def _make(tag: int = 0, payload: bytes = b"", *, topics=None, data: bytes | None = None) -> LogRecord:
        if data is None:
            data = eth_abi.encode(["uint256", "bytes"], [tag, payload])
        return LogRecord(
            address=EMITTER,
            topics=tuple(topics) if topics is not None else (app_event_topic,),
            data=data,
        )

    return _make


@pytest.fixture()
def encode_log_rlp():
    def _encode(log: LogRecord) -> bytes:
        return rlp.encode([log.address, list(log.topics), log.data])

    return _encode

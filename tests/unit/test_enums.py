import pytest

from ethbridge.domain.enums import DecodeErrorKind, MessageTag, ParamKind


class TestMessageTag:
    def test_wire_values(self):
        assert MessageTag.SEND_NATIVE == 0
        assert MessageTag.SEND_TOKEN == 1

    def test_has_2(self):
        assert len(MessageTag) == 2


class TestDecodeErrorKind:
    def test_is_str(self):
        assert isinstance(DecodeErrorKind.INVALID_TAG, str)
        assert DecodeErrorKind.INVALID_TAG == "InvalidTag"

    def test_has_5(self):
        assert len(DecodeErrorKind) == 5


class TestParamKind:
    @pytest.mark.parametrize(
        "abi_type,kind",
        [
            ("address", ParamKind.ADDRESS),
            ("bytes", ParamKind.BYTES),
            ("bytes32", ParamKind.FIXED_BYTES),
            ("bytes4", ParamKind.FIXED_BYTES),
            ("uint256", ParamKind.UINT),
            ("uint8", ParamKind.UINT),
        ],
    )
    def test_from_abi_type(self, abi_type, kind):
        assert ParamKind.from_abi_type(abi_type) is kind

    def test_unsupported_type(self):
        with pytest.raises(ValueError):
            ParamKind.from_abi_type("string")

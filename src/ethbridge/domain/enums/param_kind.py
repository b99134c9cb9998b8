from enum import Enum


class ParamKind(str, Enum):
    """Kind of a decoded ABI token. Sized variants (bytes32, uint256) share one kind."""

    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    BYTES = "bytes"
    UINT = "uint"

    @classmethod
    def from_abi_type(cls, abi_type: str) -> "ParamKind":
        if abi_type == "address":
            return cls.ADDRESS
        if abi_type == "bytes":
            return cls.BYTES
        if abi_type.startswith("bytes"):
            return cls.FIXED_BYTES
        if abi_type.startswith("uint"):
            return cls.UINT
        raise ValueError(f"Unsupported ABI type: {abi_type}")

"""Fixed-width value types shared by log records and bridge messages."""

from typing import Annotated

from pydantic import Field

UINT64_MAX = 2**64 - 1
UINT256_MAX = 2**256 - 1

Address = Annotated[bytes, Field(min_length=20, max_length=20)]
H256 = Annotated[bytes, Field(min_length=32, max_length=32)]
Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX)]
Uint256 = Annotated[int, Field(ge=0, le=UINT256_MAX)]

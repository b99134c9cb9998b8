from ethbridge.domain.enums.decode_error import DecodeErrorKind
from ethbridge.domain.enums.param_kind import ParamKind
from ethbridge.domain.enums.tag import MessageTag

__all__ = [
    "DecodeErrorKind",
    "MessageTag",
    "ParamKind",
]

from enum import IntEnum


class MessageTag(IntEnum):
    """Discriminant carried as the first AppEvent parameter. Narrowed to one byte on the wire."""

    SEND_NATIVE = 0
    SEND_TOKEN = 1

from enum import IntEnum


class Method(IntEnum):
    CACHE = 0
    STREAM = 1

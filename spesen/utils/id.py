import secrets
import time
import uuid


def uuid7() -> str:
    """Generate a time-ordered UUIDv7 string."""
    # 48 bits unix_ts_ms | 4 bits version | 12 bits rand_a | 2 bits variant | 62 bits rand_b
    ms = time.time_ns() // 1_000_000

    value = (ms & 0xFFFFFFFFFFFF) << 80
    value |= 0x7 << 76
    value |= secrets.randbits(12) << 64
    value |= 0x2 << 62
    value |= secrets.randbits(62)

    return str(uuid.UUID(int=value))

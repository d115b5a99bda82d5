import re

# 正規形の UUID (version 1-8, variant RFC 4122) と nil / max UUID
UUID_PATTERN: re.Pattern[str] = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def is_valid_uuid(v: object) -> bool:
    """任意の値が UUID 文字列として妥当かどうか"""
    return isinstance(v, str) and UUID_PATTERN.fullmatch(v) is not None

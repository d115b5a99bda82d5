from dataclasses import dataclass


@dataclass(frozen=True)
class BasePlace:
    """場所（名称 + GeoJSON ジオメトリ）"""

    name: str | None = None
    geography: dict | None = None

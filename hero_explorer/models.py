# models.py
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUCCESS_STATUS = "success"

# 可带符号的 ASCII 整数，不允许空白和下划线
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# 六项总和超过该值的英雄在卡片上高亮
NOTABLE_THRESHOLD = 400
# 单项达到该值时，该项能力条高亮
HIGH_STAT_THRESHOLD = 80

STAT_NAMES = ("intelligence", "strength", "speed", "durability", "power", "combat")


def parse_stat(value: Optional[str]) -> int:
    """Integer value of a stat as sent by the API; "null", "N/A" and the like count as 0."""
    if value is None:
        return 0
    text = str(value)
    if not _INTEGER_RE.fullmatch(text):
        return 0
    return int(text)


def stat_fraction(value: Optional[str]) -> float:
    return min(max(parse_stat(value) / 100, 0.0), 1.0)


def is_high_stat(value: Optional[str]) -> bool:
    return parse_stat(value) >= HIGH_STAT_THRESHOLD


class PowerStats(BaseModel):
    intelligence: str = "null"
    strength: str = "null"
    speed: str = "null"
    durability: str = "null"
    power: str = "null"
    combat: str = "null"

    @field_validator(*STAT_NAMES, mode="before")
    @classmethod
    def as_text(cls, value):
        # 偶尔会收到 null 或数字
        return "null" if value is None else str(value)

    def items(self):
        """(name, raw text) pairs in display order"""
        return [(name, getattr(self, name)) for name in STAT_NAMES]

    def total(self) -> int:
        return sum(parse_stat(raw) for _, raw in self.items())


class HeroImage(BaseModel):
    url: str = ""


class Hero(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    powerstats: PowerStats = Field(default_factory=PowerStats)
    image: HeroImage = Field(default_factory=HeroImage)

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, value):
        return str(value) if isinstance(value, int) else value

    @property
    def total_power(self) -> int:
        return self.powerstats.total()

    @property
    def is_notable(self) -> bool:
        return self.total_power > NOTABLE_THRESHOLD


class ApiResponse(BaseModel):
    """Envelope of /search/<name>: {"response": "success", "results-for": ..., "results": [...]}"""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    results_for: Optional[str] = Field(default=None, alias="results-for")
    results: List[Hero] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_usable(self) -> bool:
        return self.response == SUCCESS_STATUS and len(self.results) > 0

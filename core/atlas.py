import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

def parse_int(value: str) -> int:
    """Base-10 integer with optional sign, limited to the signed 32-bit range."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"Not a base-10 integer: {value!r}")
    number = int(value)
    if number < INT32_MIN or number > INT32_MAX:
        raise ValueError(f"Integer out of range: {value!r}")
    return number

@dataclass(frozen=True)
class Region:
    name: str
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

@dataclass(frozen=True)
class MissingAttribute:
    region_index: int # Position of the SubTexture in the document
    attribute: str
    default: object

@dataclass(frozen=True)
class Descriptor:
    regions: Tuple[Region, ...] = ()
    diagnostics: Tuple[MissingAttribute, ...] = field(default=(), compare=False)

    @classmethod
    def empty(cls) -> 'Descriptor':
        return cls()

    # Bounding size is always derived from the current regions
    @property
    def wanted_width(self) -> int:
        return max((r.right for r in self.regions), default=0)

    @property
    def wanted_height(self) -> int:
        return max((r.bottom for r in self.regions), default=0)

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self):
        return iter(self.regions)

    def duplicate_names(self) -> List[str]:
        counts = Counter(r.name for r in self.regions)
        return [name for name, count in counts.items() if count > 1]

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from .atlas import Descriptor
from .errors import SliceBlockedError
from .validator import needs_resize, minimum_size_message

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]
Pivot = Tuple[float, float]

class Alignment(IntEnum):
    CENTER = 0
    TOP_LEFT = 1
    TOP_CENTER = 2
    TOP_RIGHT = 3
    LEFT_CENTER = 4
    RIGHT_CENTER = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTER = 7
    BOTTOM_RIGHT = 8
    CUSTOM = 9

    @classmethod
    def from_name(cls, name: str) -> 'Alignment':
        """Accepts 'TopLeft', 'top_left', 'top-left' and similar spellings."""
        wanted = str(name).replace('_', '').replace('-', '').replace(' ', '').lower()
        for member in cls:
            if member.name.replace('_', '').lower() == wanted:
                return member
        raise ValueError(f"Unknown alignment: {name!r}")

    @property
    def label(self) -> str:
        return ''.join(part.capitalize() for part in self.name.split('_'))

_PIVOTS: Dict[Alignment, Pivot] = {
    Alignment.CENTER: (0.5, 0.5),
    Alignment.TOP_LEFT: (0.0, 1.0),
    Alignment.TOP_CENTER: (0.5, 1.0),
    Alignment.TOP_RIGHT: (1.0, 1.0),
    Alignment.LEFT_CENTER: (0.0, 0.5),
    Alignment.RIGHT_CENTER: (1.0, 0.5),
    Alignment.BOTTOM_LEFT: (0.0, 0.0),
    Alignment.BOTTOM_CENTER: (0.5, 0.0),
    Alignment.BOTTOM_RIGHT: (1.0, 0.0),
}

def pivot_for(alignment, custom_offset: Pivot) -> Pivot:
    if alignment == Alignment.CUSTOM:
        return (float(custom_offset[0]), float(custom_offset[1]))
    return _PIVOTS.get(alignment, (0.0, 0.0))

@dataclass(frozen=True)
class SliceMetadata:
    name: str
    rect: Rect # (x, y, width, height) with a bottom-left origin
    pivot: Pivot
    alignment: Alignment
    border: Tuple[int, int, int, int] = (0, 0, 0, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'rect': list(self.rect),
            'pivot': list(self.pivot),
            'alignment': self.alignment.label,
            'border': list(self.border),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SliceMetadata':
        return cls(
            name=data['name'],
            rect=tuple(int(v) for v in data['rect']),
            pivot=tuple(float(v) for v in data['pivot']),
            alignment=Alignment.from_name(data.get('alignment', Alignment.CENTER.name)),
            border=tuple(int(v) for v in data.get('border', (0, 0, 0, 0))),
        )

def flip_y(y: int, height: int, image_height: int) -> int:
    return image_height - (y + height)

def build_slice_metadata(descriptor: Descriptor, alignment: Alignment, custom_offset: Pivot,
                         image_height: int, image_width: Optional[int] = None) -> List[SliceMetadata]:
    if descriptor is None or len(descriptor) == 0:
        raise SliceBlockedError("Could not find any SubTextures in the descriptor.")
    too_small = descriptor.wanted_height > image_height
    if image_width is not None:
        too_small = needs_resize(descriptor, image_width, image_height)
    if too_small:
        raise SliceBlockedError(minimum_size_message(descriptor))

    pivot = pivot_for(alignment, custom_offset)
    slices = []
    for region in descriptor:
        rect = (region.x, flip_y(region.y, region.height, image_height), region.width, region.height)
        slices.append(SliceMetadata(name=region.name, rect=rect, pivot=pivot, alignment=Alignment(alignment)))
    logger.debug("Built %d slices for image height %d", len(slices), image_height)
    return slices

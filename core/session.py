import logging
from enum import Enum
from typing import List, Optional, Tuple

from .atlas import Descriptor
from .config import DEFAULT_CUSTOM_OFFSET, SPRITE_MODE_MULTIPLE
from .errors import SliceBlockedError
from .loader import load_descriptor, parse_descriptor
from .slicer import Alignment, SliceMetadata, build_slice_metadata
from .validator import minimum_size_message, needs_resize

logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "Please select a texture to slice."
RESIZE_HINT_MESSAGE = "Try changing the Max Size property in the importer."
NO_REGIONS_MESSAGE = "Could not find any SubTextures in the descriptor."

class SliceOutcome(Enum):
    UPDATED = "The sprite was sliced successfully."
    UNCHANGED = "The sprite is already sliced according to this descriptor."

class SlicerSession:
    """Holds the descriptor for the selected image and applies its slices."""

    def __init__(self, importer, alignment: Alignment = Alignment.CENTER,
                 custom_offset: Tuple[float, float] = DEFAULT_CUSTOM_OFFSET, strict: bool = False):
        self.importer = importer
        self.alignment = alignment
        self.custom_offset = custom_offset
        self.strict = strict
        self.asset_path: Optional[str] = None
        self.descriptor: Optional[Descriptor] = None
        self._image_size: Optional[Tuple[int, int]] = None

    def clear(self):
        self.asset_path = None
        self.descriptor = None
        self._image_size = None

    def select(self, asset_path: Optional[str]):
        # Nothing from the previous image survives a new selection
        self.clear()
        if not asset_path:
            return
        self.asset_path = asset_path
        self._image_size = tuple(self.importer.get_image_dimensions(asset_path))
        self.descriptor = load_descriptor(asset_path, self.importer, strict=self.strict)
        if self.descriptor is not None:
            logger.info("Loaded %d regions for %s (needs %dx%d)", len(self.descriptor), asset_path,
                        self.descriptor.wanted_width, self.descriptor.wanted_height)

    def use_descriptor(self, data: bytes):
        self.descriptor = parse_descriptor(data, strict=self.strict)

    @property
    def image_size(self) -> Optional[Tuple[int, int]]:
        return self._image_size

    def needs_resize(self) -> bool:
        if self.descriptor is None or self._image_size is None:
            return False
        width, height = self._image_size
        return needs_resize(self.descriptor, width, height)

    def blocking_messages(self) -> List[str]:
        if self.asset_path is None:
            return [NO_SELECTION_MESSAGE]
        messages = []
        if self.needs_resize():
            messages.append(minimum_size_message(self.descriptor))
            messages.append(RESIZE_HINT_MESSAGE)
        if self.descriptor is None or len(self.descriptor) == 0:
            messages.append(NO_REGIONS_MESSAGE)
        return messages

    def can_slice(self) -> bool:
        return not self.blocking_messages()

    def build(self) -> List[SliceMetadata]:
        messages = self.blocking_messages()
        if messages:
            raise SliceBlockedError(' '.join(messages))
        width, height = self._image_size
        return build_slice_metadata(self.descriptor, self.alignment, self.custom_offset, height, image_width=width)

    def perform_slice(self) -> SliceOutcome:
        wanted = self.build()

        needs_update = self.importer.get_sprite_mode(self.asset_path) != SPRITE_MODE_MULTIPLE
        if not needs_update:
            needs_update = list(self.importer.get_current_slice_metadata(self.asset_path)) != wanted

        if not needs_update:
            logger.info("%s is already sliced, nothing to apply", self.asset_path)
            return SliceOutcome.UNCHANGED

        self.importer.start_editing()
        try:
            self.importer.apply_slice_metadata(self.asset_path, wanted)
        finally:
            self.importer.stop_editing()
        return SliceOutcome.UPDATED

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from PIL import Image, UnidentifiedImageError

from .config import SIDECAR_SUFFIX, SPRITE_MODE_MULTIPLE, SPRITE_MODE_SINGLE
from .errors import ImporterError
from .slicer import SliceMetadata

logger = logging.getLogger(__name__)

def sibling_path(asset_path: str, extension: str) -> str:
    base, _ = os.path.splitext(asset_path)
    return base + extension

class ImageImporter(ABC):
    """Host side that owns an image and the slice metadata recorded for it."""

    @abstractmethod
    def get_image_dimensions(self, asset_path: str) -> Tuple[int, int]: ...

    @abstractmethod
    def get_current_slice_metadata(self, asset_path: str) -> List[SliceMetadata]: ...

    @abstractmethod
    def get_sprite_mode(self, asset_path: str) -> str: ...

    @abstractmethod
    def apply_slice_metadata(self, asset_path: str, slices: Sequence[SliceMetadata]): ...

    @abstractmethod
    def locate_sibling_descriptor(self, asset_path: str, extension: str) -> Optional[bytes]: ...

    def start_editing(self):
        pass

    def stop_editing(self):
        pass

class FileImageImporter(ImageImporter):
    """Importer backed by image files on disk and a JSON sidecar per image."""

    def __init__(self):
        self.editing_depth = 0

    @staticmethod
    def sidecar_path(asset_path: str) -> str:
        return asset_path + SIDECAR_SUFFIX

    def get_image_dimensions(self, asset_path):
        try:
            with Image.open(asset_path) as img:
                return img.size
        except (OSError, UnidentifiedImageError) as e:
            raise ImporterError(f"Cannot read image {asset_path}: {e}") from e

    def _read_sidecar(self, asset_path):
        path = self.sidecar_path(asset_path)
        if not os.path.exists(path):
            return {}
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ImporterError(f"Cannot read slice metadata {path}: {e}") from e
        if not isinstance(data, dict):
            raise ImporterError(f"Unexpected slice metadata layout in {path}")
        return data

    def get_sprite_mode(self, asset_path):
        return self._read_sidecar(asset_path).get('sprite_mode', SPRITE_MODE_SINGLE)

    def get_current_slice_metadata(self, asset_path):
        data = self._read_sidecar(asset_path)
        try:
            return [SliceMetadata.from_dict(s) for s in data.get('slices', [])]
        except (KeyError, ValueError, TypeError) as e:
            raise ImporterError(f"Corrupt slice entry for {asset_path}: {e}") from e

    def apply_slice_metadata(self, asset_path, slices):
        path = self.sidecar_path(asset_path)
        data = {
            'image': os.path.basename(asset_path),
            'sprite_mode': SPRITE_MODE_MULTIPLE,
            'slices': [s.to_dict() for s in slices],
        }
        # Write next to the target and swap in, so a failed write keeps the old file
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix='.slices-', suffix='.tmp', dir=os.path.dirname(path) or '.')
            with os.fdopen(fd, 'w') as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise ImporterError(f"Cannot write slice metadata {path}: {e}") from e
        logger.info("Wrote %d slices to %s", len(slices), path)

    def locate_sibling_descriptor(self, asset_path, extension):
        path = sibling_path(asset_path, extension)
        if not os.path.isfile(path):
            return None
        with open(path, 'rb') as f:
            return f.read()

    def start_editing(self):
        self.editing_depth += 1

    def stop_editing(self):
        self.editing_depth = max(0, self.editing_depth - 1)

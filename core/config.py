# Module: configuration constants and persisted slicer defaults.
# Main: DESCRIPTOR_EXTENSIONS, MISSING_NAME, SIDECAR_SUFFIX, SlicerSettings.
# Example: from core.config import SlicerSettings; SlicerSettings.load()

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Tuple

from .slicer import Alignment

logger = logging.getLogger(__name__)

# ---- Descriptor discovery ----
XML_EXTENSION = ".xml"
TEXT_EXTENSION = ".txt"
DESCRIPTOR_EXTENSIONS = (XML_EXTENSION, TEXT_EXTENSION) # lookup order

# ---- Parsing ----
ROOT_ELEMENT = "TextureAtlas"
REGION_ELEMENT = "SubTexture"
MISSING_NAME = "ERROR"      # substituted for a SubTexture without a name
TEXT_TOKEN_COUNT = 6

# ---- Importer ----
SIDECAR_SUFFIX = ".slices.json"
SPRITE_MODE_SINGLE = "single"
SPRITE_MODE_MULTIPLE = "multiple"

# ---- User defaults ----
SETTINGS_PATH = os.path.join(str(Path.home()), ".atlas_slicer.json")
DEFAULT_CUSTOM_OFFSET = (0.5, 0.5)

@dataclass
class SlicerSettings:
    alignment: str = Alignment.CENTER.name
    custom_offset: Tuple[float, float] = DEFAULT_CUSTOM_OFFSET
    strict: bool = False

    @classmethod
    def load(cls, filepath: Optional[str] = None) -> 'SlicerSettings':
        filepath = filepath or SETTINGS_PATH
        try:
            if os.path.exists(filepath):
                with open(filepath, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    settings = cls()
                    settings.alignment = Alignment.from_name(data.get('alignment', settings.alignment)).name
                    offset = data.get('custom_offset', settings.custom_offset)
                    settings.custom_offset = (float(offset[0]), float(offset[1]))
                    strict = data.get('strict', settings.strict)
                    if not isinstance(strict, bool):
                        raise TypeError(f"'strict' must be true or false, not {strict!r}")
                    settings.strict = strict
                    return settings
        except (OSError, ValueError, TypeError, KeyError, IndexError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", filepath, e)
        return cls()

    def save(self, filepath: Optional[str] = None):
        filepath = filepath or SETTINGS_PATH
        data = asdict(self)
        data['custom_offset'] = list(self.custom_offset)
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

import pytest

from core.config import SPRITE_MODE_MULTIPLE, SPRITE_MODE_SINGLE
from core.errors import ImporterError
from core.importer import ImageImporter, sibling_path


class FakeImporter(ImageImporter):
    def __init__(self, size=(100, 100), files=None):
        self.size = size
        self.files = dict(files or {})
        self.slices = []
        self.sprite_mode = SPRITE_MODE_SINGLE
        self.apply_calls = 0
        self.fail_apply = False
        self.editing = 0
        self.editing_seen = []

    def get_image_dimensions(self, asset_path):
        return self.size

    def get_current_slice_metadata(self, asset_path):
        return list(self.slices)

    def get_sprite_mode(self, asset_path):
        return self.sprite_mode

    def apply_slice_metadata(self, asset_path, slices):
        self.apply_calls += 1
        self.editing_seen.append(self.editing)
        if self.fail_apply:
            raise ImporterError("reimport failed")
        self.slices = list(slices)
        self.sprite_mode = SPRITE_MODE_MULTIPLE

    def locate_sibling_descriptor(self, asset_path, extension):
        return self.files.get(sibling_path(asset_path, extension))

    def start_editing(self):
        self.editing += 1

    def stop_editing(self):
        self.editing -= 1


@pytest.fixture
def importer():
    return FakeImporter()

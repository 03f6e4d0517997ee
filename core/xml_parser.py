import logging
from typing import Union
from xml.etree import ElementTree

from .atlas import Descriptor, MissingAttribute, Region, parse_int
from .config import MISSING_NAME, REGION_ELEMENT, ROOT_ELEMENT
from .errors import MalformedDescriptorError, MissingAttributeError, UnexpectedRootError

logger = logging.getLogger(__name__)

_NUMERIC_ATTRIBUTES = ('width', 'height', 'x', 'y')

def local_name(tag) -> str:
    # ElementTree spells namespaced tags as "{uri}name"
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]

def parse_xml(text: Union[str, bytes], strict: bool = False) -> Descriptor:
    """Decode a TextureAtlas document into a Descriptor.

    Missing attributes fall back to defaults and are reported through
    ``Descriptor.diagnostics``; with ``strict`` they raise MissingAttributeError.
    """
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        raise MalformedDescriptorError(f"Invalid XML: {e}") from e

    if local_name(root.tag) != ROOT_ELEMENT:
        raise UnexpectedRootError(root.tag)

    regions = []
    diagnostics = []
    index = 0
    for child in root:
        if local_name(child.tag) != REGION_ELEMENT:
            continue
        attrs = child.attrib

        def missing(attribute, default):
            if strict:
                raise MissingAttributeError(attribute, index)
            logger.warning("SubTexture #%d has no '%s' attribute, using %r", index, attribute, default)
            diagnostics.append(MissingAttribute(index, attribute, default))
            return default

        values = {}
        for attribute in _NUMERIC_ATTRIBUTES:
            raw = attrs.get(attribute)
            if raw is None:
                values[attribute] = missing(attribute, 0)
                continue
            try:
                values[attribute] = parse_int(raw)
            except ValueError as e:
                raise MalformedDescriptorError(
                    f"SubTexture #{index}: attribute '{attribute}' is not an integer ({raw!r})") from e

        name = attrs.get('name')
        if name is None:
            name = missing('name', MISSING_NAME)

        regions.append(Region(name=name, **values))
        index += 1

    return Descriptor(regions=tuple(regions), diagnostics=tuple(diagnostics))

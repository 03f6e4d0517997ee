import logging
from typing import Optional

from .atlas import Descriptor
from .config import TEXT_EXTENSION, XML_EXTENSION
from .errors import ParseError
from .text_parser import parse_text
from .xml_parser import parse_xml

logger = logging.getLogger(__name__)

def decode_descriptor(data: bytes) -> str:
    return data.decode('utf-8-sig', errors='replace')

def _usable(descriptor: Optional[Descriptor]) -> bool:
    return descriptor is not None and len(descriptor) > 0

def _parse_xml_bytes(data: bytes, strict: bool = False) -> Descriptor:
    # ElementTree reads the BOM and encoding declaration itself
    return parse_xml(data, strict=strict)

def _parse_text_bytes(data: bytes) -> Descriptor:
    return parse_text(decode_descriptor(data))

def _locate(importer, asset_path: str, extension: str) -> Optional[bytes]:
    try:
        return importer.locate_sibling_descriptor(asset_path, extension)
    except OSError as e:
        logger.warning("Could not read %s descriptor of %s: %s", extension, asset_path, e)
        return None

def _try_parse(parser, data: bytes, source: str, **kwargs) -> Optional[Descriptor]:
    try:
        descriptor = parser(data, **kwargs)
    except ParseError as e:
        logger.warning("Could not parse %s: %s", source, e)
        return None
    if len(descriptor) == 0:
        logger.info("%s contains no SubTextures", source)
    for name in descriptor.duplicate_names():
        logger.warning("%s defines '%s' more than once", source, name)
    return descriptor

def parse_descriptor(data: bytes, strict: bool = False) -> Optional[Descriptor]:
    """Parse descriptor bytes of unknown format, XML first then the text variant."""
    descriptor = _try_parse(_parse_xml_bytes, data, "XML descriptor", strict=strict)
    if _usable(descriptor):
        return descriptor
    descriptor = _try_parse(_parse_text_bytes, data, "text descriptor")
    if _usable(descriptor):
        return descriptor
    return None

def load_descriptor(asset_path: str, importer, strict: bool = False) -> Optional[Descriptor]:
    """Find and parse the descriptor sitting next to an image.

    The .xml sibling wins; the .txt sibling is used when the XML one is
    missing, fails to parse or has no regions. Returns None when nothing usable is found.
    """
    data = _locate(importer, asset_path, XML_EXTENSION)
    if data is not None:
        descriptor = _try_parse(_parse_xml_bytes, data, f"{XML_EXTENSION} descriptor of {asset_path}", strict=strict)
        if _usable(descriptor):
            return descriptor

    data = _locate(importer, asset_path, TEXT_EXTENSION)
    if data is not None:
        descriptor = _try_parse(_parse_text_bytes, data, f"{TEXT_EXTENSION} descriptor of {asset_path}")
        if _usable(descriptor):
            return descriptor

    logger.info("No usable descriptor found for %s", asset_path)
    return None

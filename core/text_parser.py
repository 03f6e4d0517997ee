import logging
import re

from .atlas import Descriptor, Region, parse_int
from .config import TEXT_TOKEN_COUNT
from .errors import MalformedDescriptorError

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

def parse_text(text: str) -> Descriptor:
    # One record per line: name <ignored> x y width height
    regions = []
    for line_no, line in enumerate(_LINE_BREAK.split(text), start=1):
        if not line:
            continue
        tokens = line.split(' ')
        if len(tokens) != TEXT_TOKEN_COUNT or any(not token for token in tokens):
            logger.debug("Skipping line %d: %r", line_no, line)
            continue
        try:
            x, y, width, height = (parse_int(token) for token in tokens[2:])
        except ValueError as e:
            raise MalformedDescriptorError(f"Line {line_no}: {e}") from e
        regions.append(Region(name=tokens[0], x=x, y=y, width=width, height=height))
    return Descriptor(regions=tuple(regions))

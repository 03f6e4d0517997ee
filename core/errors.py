class ParseError(Exception):
    """Base class for descriptor decoding failures."""


class MalformedDescriptorError(ParseError):
    pass


class UnexpectedRootError(ParseError):
    def __init__(self, root_name: str):
        super().__init__(f"Expected root element 'TextureAtlas', found '{root_name}'")
        self.root_name = root_name


class MissingAttributeError(ParseError):
    # Only raised when parsing in strict mode
    def __init__(self, attribute: str, index: int):
        super().__init__(f"SubTexture #{index} is missing the '{attribute}' attribute")
        self.attribute = attribute
        self.index = index


class ImporterError(Exception):
    """Failure reported by the image importer while reading or applying metadata."""


class SliceBlockedError(Exception):
    pass

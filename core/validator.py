from .atlas import Descriptor

def needs_resize(descriptor: Descriptor, actual_width: int, actual_height: int) -> bool:
    return descriptor.wanted_width > actual_width or descriptor.wanted_height > actual_height

def minimum_size_message(descriptor: Descriptor) -> str:
    return (f"Texture size too small. It needs to be at least "
            f"{descriptor.wanted_width} by {descriptor.wanted_height} pixels!")

"""
Decode errors
"""


class DecodeError(ValueError):
    """Base class for everything that can make a BlurHash fail to decode."""
    pass


class TooShortError(DecodeError):
    """The BlurHash has fewer than the 6 characters every hash needs."""
    
    def __init__(self, length):
        self.length = length
        super().__init__(
            f"BlurHash must be at least 6 characters, got {length}"
        )


class LengthMismatchError(DecodeError):
    """The BlurHash length does not match the grid declared in its header."""
    
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"BlurHash length {actual} does not match the {expected} "
            f"characters its header requires"
        )


class InvalidSizeError(DecodeError):
    """Requested output width or height is below one pixel."""
    
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"Invalid output size {width}x{height}")


class BufferAllocationError(DecodeError):
    """The pixel buffer for the requested size could not be allocated."""
    
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(
            f"Could not allocate a {width}x{height} RGB pixel buffer"
        )

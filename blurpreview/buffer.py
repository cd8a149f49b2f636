"""
PixelBuffer - Packed RGB output of a decode
"""

import numpy as np
from PIL import Image


class PixelBuffer:
    """
    Row-major packed RGB bytes, three bytes per pixel and no row padding.
    
    Byte (x, y, channel) lives at 3 * x + channel + y * width * 3.
    """
    
    def __init__(self, width, height, data):
        if len(data) != width * height * 3:
            raise ValueError(
                f"Buffer of {len(data)} bytes does not hold {width}x{height} RGB pixels"
            )
        self.width = width
        self.height = height
        self.data = bytes(data)
    
    @property
    def size(self):
        return (self.width, self.height)
    
    @property
    def stride(self):
        return self.width * 3
    
    def __len__(self):
        return len(self.data)
    
    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and self.data == other.data
    
    def __repr__(self):
        return f"PixelBuffer(width={self.width}, height={self.height})"
    
    def pixel(self, x, y):
        """Get the (r, g, b) tuple at pixel (x, y)."""
        offset = 3 * x + y * self.stride
        return tuple(self.data[offset:offset + 3])
    
    def to_array(self):
        """Return a (height, width, 3) uint8 numpy array copy."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, 3
        ).copy()
    
    def to_image(self):
        """Return the buffer as an RGB PIL Image."""
        return Image.frombytes('RGB', self.size, self.data)

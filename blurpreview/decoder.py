"""
BlurHash Decoder - Reconstructs placeholder images from BlurHash strings
"""

import logging
from abc import ABC, abstractmethod
from collections import namedtuple

import numpy as np

from .base83 import decode83
from .buffer import PixelBuffer
from .color import linear_to_srgb_array, sign_pow, srgb_to_linear
from .errors import (
    BufferAllocationError,
    InvalidSizeError,
    LengthMismatchError,
    TooShortError,
)

logger = logging.getLogger(__name__)

MIN_LENGTH = 6

Header = namedtuple('Header', ['num_x', 'num_y', 'quantised_maximum', 'maximum_value'])

LinearColor = namedtuple('LinearColor', ['r', 'g', 'b'])


def expected_length(num_x, num_y):
    """Number of characters a hash with a num_x by num_y grid must have."""
    return 4 + 2 * num_x * num_y


def parse_header(blur_hash):
    """
    Parse the size flag and quantised maximum AC value.
    
    Args:
        blur_hash: BlurHash string
        
    Returns:
        Header: Grid dimensions and maximum AC amplitude
    """
    if len(blur_hash) < MIN_LENGTH:
        raise TooShortError(len(blur_hash))
    
    size_flag = decode83(blur_hash[0])
    num_y = size_flag // 9 + 1
    num_x = size_flag % 9 + 1
    
    quantised_maximum = decode83(blur_hash[1])
    maximum_value = (quantised_maximum + 1) / 166.0
    
    return Header(num_x, num_y, quantised_maximum, maximum_value)


def decode_dc(value):
    """Decode the 24-bit average colour into linear light."""
    return LinearColor(
        srgb_to_linear(value >> 16),
        srgb_to_linear((value >> 8) & 255),
        srgb_to_linear(value & 255)
    )


def decode_ac(value, maximum_value):
    """
    Decode one AC component.
    
    The value packs three base-19 digits, one per channel, each a signed
    quantisation of [-1, 1] on a squared curve.
    
    Args:
        value: Decoded integer of the two-character component
        maximum_value: Amplitude of the strongest component, punch included
        
    Returns:
        LinearColor: Component weights
    """
    quant_r = value // (19 * 19)
    quant_g = (value // 19) % 19
    quant_b = value % 19
    return LinearColor(
        sign_pow((quant_r - 9) / 9.0, 2.0) * maximum_value,
        sign_pow((quant_g - 9) / 9.0, 2.0) * maximum_value,
        sign_pow((quant_b - 9) / 9.0, 2.0) * maximum_value
    )


def average_color(blur_hash):
    """
    Get the 8-bit sRGB average colour stored in a BlurHash.
    
    The bytes come straight from the DC term, no linear round trip. Four
    base83 digits can hold more than 24 bits, so red is capped at 255 the
    same way rendering clamps it.
    
    Args:
        blur_hash: BlurHash string
        
    Returns:
        tuple: (r, g, b) channel values
    """
    if len(blur_hash) < MIN_LENGTH:
        raise TooShortError(len(blur_hash))
    value = decode83(blur_hash[2:6])
    return (min(255, value >> 16), (value >> 8) & 255, value & 255)


def decode_components(blur_hash, punch=1.0):
    """
    Decode the header and every colour component of a BlurHash.
    
    Args:
        blur_hash: BlurHash string
        punch: Contrast multiplier applied to the AC components
        
    Returns:
        tuple: (Header, list of LinearColor ordered i + j * num_x)
    """
    header = parse_header(blur_hash)
    
    length = expected_length(header.num_x, header.num_y)
    if len(blur_hash) != length:
        raise LengthMismatchError(length, len(blur_hash))
    
    components = [decode_dc(decode83(blur_hash[2:6]))]
    ac_maximum = header.maximum_value * punch
    for k in range(1, header.num_x * header.num_y):
        start = 4 + k * 2
        components.append(decode_ac(decode83(blur_hash[start:start + 2]), ac_maximum))
    
    return header, components


class BlurHashDecoding(ABC):
    """Anything that can turn a BlurHash into a PixelBuffer."""
    
    @abstractmethod
    def decode(self, blur_hash, size, punch=None):
        """Decode blur_hash into a PixelBuffer of the given (width, height)."""
    
    def decode_image(self, blur_hash, size, punch=None):
        """Decode blur_hash into an RGB PIL Image."""
        return self.decode(blur_hash, size, punch).to_image()


class BlurHashDecoder(BlurHashDecoding):
    """
    Decodes BlurHash strings into packed RGB pixel buffers.
    
    The decoder:
    1. Parses the grid size and maximum AC value from the header
    2. Decodes the average colour and AC components
    3. Sums the cosine basis functions of every component for each pixel
    4. Converts the linear result back to 8-bit sRGB
    
    Decoding keeps no state between calls, so one instance can be shared
    between threads.
    """
    
    def __init__(self, punch=1.0):
        """
        Initialize the decoder.
        
        Args:
            punch: Default contrast multiplier for the AC components
                (0 gives a flat average colour, above 1 exaggerates contrast)
        """
        self.punch = punch
    
    def decode(self, blur_hash, size, punch=None):
        """
        Decode a BlurHash.
        
        Args:
            blur_hash: BlurHash string
            size: (width, height) of the output in pixels
            punch: Contrast multiplier, defaults to the decoder's punch
            
        Returns:
            PixelBuffer: Decoded pixels
            
        Raises:
            TooShortError, LengthMismatchError, InvalidSizeError,
            BufferAllocationError
        """
        if punch is None:
            punch = self.punch
        
        header, components = decode_components(blur_hash, punch)
        
        width, height = int(size[0]), int(size[1])
        if width < 1 or height < 1:
            raise InvalidSizeError(width, height)
        
        logger.debug(
            "Decoding %dx%d component hash to %dx%d (max AC %.4f, punch %s)",
            header.num_x, header.num_y, width, height, header.maximum_value, punch
        )
        
        pixels = self._synthesize(components, header.num_x, header.num_y, width, height)
        if pixels is None:
            raise BufferAllocationError(width, height)
        
        return PixelBuffer(width, height, pixels.tobytes())
    
    def average_color(self, blur_hash):
        """8-bit sRGB average colour of blur_hash as (r, g, b)."""
        return average_color(blur_hash)
    
    def _synthesize(self, components, num_x, num_y, width, height):
        """
        Render the components at the requested size.
        
        Returns:
            numpy array: (height, width, 3) uint8 pixels, or None if the
            output could not be allocated
        """
        try:
            pixels = np.empty((height, width, 3), dtype=np.uint8)
        except (MemoryError, ValueError):
            logger.warning("Pixel buffer allocation failed for %dx%d", width, height)
            return None
        
        colours = np.array(components, dtype=np.float64).reshape(num_y, num_x, 3)
        
        # basis(x, y, i, j) = cos(pi * x * i / width) * cos(pi * y * j / height)
        basis_x = np.cos(np.pi * np.outer(np.arange(width), np.arange(num_x)) / width)
        basis_y = np.cos(np.pi * np.outer(np.arange(height), np.arange(num_y)) / height)
        
        for y in range(height):
            # Collapse the vertical frequencies first, leaving one colour per i
            row_colours = np.tensordot(basis_y[y], colours, axes=(0, 0))
            pixels[y] = linear_to_srgb_array(basis_x @ row_colours)
        
        return pixels


_default_decoder = BlurHashDecoder()


def decode(blur_hash, size, punch=1.0):
    """Decode blur_hash with a shared BlurHashDecoder."""
    return _default_decoder.decode(blur_hash, size, punch)

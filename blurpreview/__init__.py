"""
blurpreview - BlurHash placeholder decoding
Turns short BlurHash strings into low-fidelity RGB previews
"""

__version__ = "0.1.0"

from .decoder import BlurHashDecoder, BlurHashDecoding, decode
from .buffer import PixelBuffer
from .errors import (
    DecodeError,
    TooShortError,
    LengthMismatchError,
    InvalidSizeError,
    BufferAllocationError,
)
from .picture import Picture

__all__ = [
    "BlurHashDecoder",
    "BlurHashDecoding",
    "decode",
    "PixelBuffer",
    "DecodeError",
    "TooShortError",
    "LengthMismatchError",
    "InvalidSizeError",
    "BufferAllocationError",
    "Picture",
]

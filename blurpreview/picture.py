"""
Picture - Image metadata carrying a BlurHash placeholder
"""

import math
from collections import namedtuple

from .decoder import BlurHashDecoder

PictureURLs = namedtuple('PictureURLs', ['raw', 'full', 'regular', 'small', 'thumb'])

# One placeholder pixel per this many source pixels
PLACEHOLDER_SCALE = 100


def _dimension(data, field):
    """Read a positive pixel dimension from a picture dict."""
    try:
        value = float(data[field])
    except (TypeError, ValueError):
        raise ValueError(f"Picture {field} must be a number, got {data[field]!r}")
    if not (math.isfinite(value) and value > 0):
        raise ValueError(f"Picture {field} must be a positive finite number, got {value}")
    return value


def _blur_hash(data):
    blur_hash = data['blur_hash']
    if not isinstance(blur_hash, str):
        raise ValueError(f"Picture blur_hash must be a string, got {blur_hash!r}")
    return blur_hash


class Picture:
    """
    A remote picture as described by an image listing API.
    
    Only the metadata is held here; fetching the URLs is left to callers.
    """
    
    def __init__(self, description, urls, width, height, blur_hash):
        self.description = description
        self.urls = urls
        self.width = width
        self.height = height
        self.blur_hash = blur_hash
    
    @classmethod
    def from_dict(cls, data):
        """
        Build a Picture from a decoded JSON object.
        
        Args:
            data: dict with 'description', 'urls', 'width', 'height', 'blur_hash'
            
        Returns:
            Picture
            
        Raises:
            KeyError: A required field is missing
            ValueError: A field has the wrong type
        """
        urls = data.get('urls') or {}
        if not isinstance(urls, dict):
            raise ValueError("Picture urls must be an object")
        return cls(
            description=data.get('description'),
            urls=PictureURLs(*(urls.get(field, '') for field in PictureURLs._fields)),
            width=_dimension(data, 'width'),
            height=_dimension(data, 'height'),
            blur_hash=_blur_hash(data)
        )
    
    @property
    def ratio(self):
        """Width to height aspect ratio."""
        return self.width / self.height
    
    @property
    def blur_hash_size(self):
        """(width, height) to decode the placeholder at, at least 1x1."""
        return (
            max(1, int(self.width / PLACEHOLDER_SCALE)),
            max(1, int(self.height / PLACEHOLDER_SCALE))
        )
    
    def placeholder(self, decoder=None, punch=1.0):
        """
        Decode the placeholder image.
        
        Args:
            decoder: BlurHashDecoding implementation, BlurHashDecoder by default
            punch: Contrast multiplier
            
        Returns:
            PIL Image: Placeholder at blur_hash_size
        """
        if decoder is None:
            decoder = BlurHashDecoder()
        return decoder.decode_image(self.blur_hash, self.blur_hash_size, punch)

"""
Color conversion between 8-bit sRGB and linear light
"""

import math

import numpy as np


def srgb_to_linear(value):
    """Convert an 8-bit sRGB channel value to linear light in [0, 1]."""
    v = value / 255.0
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value):
    """
    Convert a linear light value to an 8-bit sRGB channel value.
    
    The input is clamped to [0, 1] first and the result rounded half up.
    
    Args:
        value: Linear light intensity, any float
        
    Returns:
        int: Channel value 0-255
    """
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        return int(v * 12.92 * 255 + 0.5)
    return int((1.055 * v ** (1 / 2.4) - 0.055) * 255 + 0.5)


def sign_pow(value, exp):
    """Raise |value| to exp, keeping the sign of value."""
    return math.copysign(abs(value) ** exp, value)


def srgb_to_linear_array(values):
    """Vectorised srgb_to_linear for an array of channel values."""
    v = np.asarray(values, dtype=np.float64) / 255.0
    return np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)


def linear_to_srgb_array(values):
    """
    Vectorised linear_to_srgb.
    
    Args:
        values: Array of linear light values
        
    Returns:
        numpy array of uint8 channel values, same shape as the input
    """
    v = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= 0.0031308,
        v * 12.92 * 255,
        (1.055 * np.power(v, 1 / 2.4) - 0.055) * 255
    )
    return np.floor(srgb + 0.5).astype(np.uint8)

"""
Tests for Picture
"""

import unittest
from PIL import Image

from blurpreview.picture import Picture, PictureURLs

PICTURE_JSON = {
    'description': 'A green field',
    'urls': {
        'raw': 'https://images.example.com/raw',
        'full': 'https://images.example.com/full',
        'regular': 'https://images.example.com/regular',
        'small': 'https://images.example.com/small',
        'thumb': 'https://images.example.com/thumb',
    },
    'width': 4000,
    'height': 3000,
    'blur_hash': 'LEHV6nWB2yk8pyo0adR*.7kCMdnj',
}


class TestPicture(unittest.TestCase):
    """Test picture metadata."""
    
    def setUp(self):
        self.picture = Picture.from_dict(PICTURE_JSON)
    
    def test_from_dict(self):
        """Test fields are read from JSON."""
        self.assertEqual(self.picture.description, 'A green field')
        self.assertEqual(self.picture.urls.thumb, 'https://images.example.com/thumb')
        self.assertEqual(self.picture.width, 4000)
        self.assertEqual(self.picture.blur_hash, PICTURE_JSON['blur_hash'])
    
    def test_from_dict_missing_urls(self):
        """Test missing urls become empty strings."""
        data = dict(PICTURE_JSON)
        del data['urls']
        picture = Picture.from_dict(data)
        
        self.assertEqual(picture.urls, PictureURLs('', '', '', '', ''))
    
    def test_from_dict_missing_required(self):
        """Test a picture needs a blur hash."""
        data = dict(PICTURE_JSON)
        del data['blur_hash']
        
        with self.assertRaises(KeyError):
            Picture.from_dict(data)
    
    def test_from_dict_bad_dimension(self):
        """Test non-numeric or non-positive sizes are rejected."""
        for bad in ['wide', None, [3], 0, -10, float('inf')]:
            data = dict(PICTURE_JSON, width=bad)
            with self.assertRaises(ValueError):
                Picture.from_dict(data)
    
    def test_from_dict_numeric_string(self):
        """Test numeric strings are accepted as sizes."""
        picture = Picture.from_dict(dict(PICTURE_JSON, height='1500'))
        self.assertEqual(picture.blur_hash_size, (40, 15))
    
    def test_from_dict_bad_urls(self):
        """Test urls must be an object."""
        with self.assertRaises(ValueError):
            Picture.from_dict(dict(PICTURE_JSON, urls=['x']))
    
    def test_from_dict_bad_blur_hash(self):
        """Test the blur hash must be a string."""
        with self.assertRaises(ValueError):
            Picture.from_dict(dict(PICTURE_JSON, blur_hash=12345678))
    
    def test_ratio(self):
        """Test aspect ratio."""
        self.assertAlmostEqual(self.picture.ratio, 4 / 3)
    
    def test_blur_hash_size(self):
        """Test the placeholder is one pixel per hundred."""
        self.assertEqual(self.picture.blur_hash_size, (40, 30))
    
    def test_blur_hash_size_small_picture(self):
        """Test tiny pictures still get a 1x1 placeholder."""
        picture = Picture(None, None, 50, 250, PICTURE_JSON['blur_hash'])
        self.assertEqual(picture.blur_hash_size, (1, 2))
    
    def test_placeholder(self):
        """Test decoding the placeholder image."""
        image = self.picture.placeholder()
        
        self.assertIsInstance(image, Image.Image)
        self.assertEqual(image.size, (40, 30))
    
    def test_placeholder_zero_punch(self):
        """Test punch is passed to the decoder."""
        image = self.picture.placeholder(punch=0.0)
        self.assertEqual(image.getpixel((20, 15)), (151, 150, 149))


if __name__ == '__main__':
    unittest.main()

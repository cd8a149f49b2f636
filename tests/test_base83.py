"""
Tests for base83 decoding
"""

import unittest

from blurpreview.base83 import ALPHABET, decode83


class TestDecode83(unittest.TestCase):
    """Test base83 integer decoding."""
    
    def test_alphabet(self):
        """Test the alphabet has 83 distinct symbols in format order."""
        self.assertEqual(len(ALPHABET), 83)
        self.assertEqual(len(set(ALPHABET)), 83)
        self.assertEqual(ALPHABET[:11], '0123456789A')
        self.assertEqual(ALPHABET[-1], '~')
    
    def test_single_digits(self):
        """Test each symbol decodes to its index."""
        for index, char in enumerate(ALPHABET):
            self.assertEqual(decode83(char), index)
    
    def test_positional(self):
        """Test most significant digit comes first."""
        self.assertEqual(decode83('10'), 83)
        self.assertEqual(decode83('~~'), 83 * 83 - 1)
        self.assertEqual(decode83('EHV6'), 8124710)
    
    def test_empty(self):
        """Test the empty string decodes to zero."""
        self.assertEqual(decode83(''), 0)
    
    def test_unknown_characters_skipped(self):
        """Test characters outside the alphabet are ignored."""
        self.assertEqual(decode83('A!B'), decode83('AB'))
        self.assertEqual(decode83(' 1/0 '), 83)
        self.assertEqual(decode83('!'), 0)


if __name__ == '__main__':
    unittest.main()

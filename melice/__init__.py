"""Building blocks for small 2D games: geometry, hitboxes, directions, animations,
shooting patterns, controller and crank helpers, 1-bit bitmaps, an integer-keyed
hash table, SHA-256 and base64."""

__version__ = "0.1.0"
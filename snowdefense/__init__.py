"""Snowball cannon arcade game: defend the iceberg from penguin paratroopers."""

__version__ = "1.0.0"
__all__ = ["cannon", "penguin", "snowball", "game", "app"]
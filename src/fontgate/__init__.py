"""fontgate: gate web-font declarations behind a fonts-loaded marker class."""

from fontgate.config import FontsLoadedConfig
from fontgate.stylesheet import parse_css, stringify
from fontgate.transforms import FontsLoadedClassTransform, fonts_loaded_class

__version__ = "0.1.0"

__all__ = [
    "FontsLoadedConfig",
    "FontsLoadedClassTransform",
    "fonts_loaded_class",
    "parse_css",
    "stringify",
]

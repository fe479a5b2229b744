from fontgate.transforms.base import Transform
from fontgate.transforms.fonts_loaded import (
    FontsLoadedClassTransform,
    fonts_loaded_class,
    gated_selector,
    is_web_font,
)

__all__ = [
    "Transform",
    "FontsLoadedClassTransform",
    "apply_transforms",
    "fonts_loaded_class",
    "gated_selector",
    "is_web_font",
]


def apply_transforms(root, transforms):
    """Apply each transform in *transforms* to *root*, in order."""
    for t in transforms:
        root = t.apply(root)
    return root

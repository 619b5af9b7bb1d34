from .registry import TRANSFORMS, ColorTransform, get_transform, register_transform

from .color import Color, WHITE, BLACK
from .brightness import get_brightness
from .mixing import mix

from .engine import harmonize
from .resolver import HarmonySpec, resolve_harmony
from .weight import get_mix_weight

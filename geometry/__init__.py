from .vectors import subtract, cross, dot
from .volume import signed_volume

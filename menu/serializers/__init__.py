from . import input_serializers as InS
from . import output_serializers as OpS
from . import order as OrS

__all__ = ["InS", "OpS", "OrS"]

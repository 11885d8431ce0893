"""
Layers for byonn.

Linear layers and element-wise activations, both implementing the
forward/backward contract of ``byonn.nn.layer.Layer``.
"""

from .linear import Linear
from .activation import Activation, ActivationType

__all__ = [
    "Linear",
    "Activation",
    "ActivationType",
]

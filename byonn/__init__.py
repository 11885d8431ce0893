"""
byonn - Build Your Own Neural Network

A small numerical core for training feed-forward networks: a 1D/2D tensor,
layers with hand-written forward/backward passes, losses and a sequential
network trained by gradient descent.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .nn.tensor import Tensor, TensorError, InvalidRankError, InconsistentDataError, ShapeMismatchError
from .nn.layer import Layer
from .nn.losses import l1_loss, mse_loss, mse_loss_gradient, bce_sigmoid_delta
from .nn.network import Network, NetworkBuilder, NetworkBuildError
from .modules.linear import Linear
from .modules.activation import Activation, ActivationType
from .utils.rng import Rng, SimpleRng
from .utils.backend import xp

__all__ = [
    "Tensor",
    "TensorError",
    "InvalidRankError",
    "InconsistentDataError",
    "ShapeMismatchError",
    "Layer",
    "l1_loss",
    "mse_loss",
    "mse_loss_gradient",
    "bce_sigmoid_delta",
    "Network",
    "NetworkBuilder",
    "NetworkBuildError",
    "Linear",
    "Activation",
    "ActivationType",
    "Rng",
    "SimpleRng",
    "xp",
]

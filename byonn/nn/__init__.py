"""
Neural network components for byonn.

This module contains the core building blocks: tensors, the layer contract,
losses and the sequential network.
"""

from .tensor import Tensor, TensorError, InvalidRankError, InconsistentDataError, ShapeMismatchError
from .layer import Layer
from .losses import l1_loss, mse_loss, mse_loss_gradient, bce_sigmoid_delta
from .network import Network, NetworkBuilder, NetworkBuildError

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
]

import logging
from typing import List, Optional

from .tensor import Tensor
from .layer import Layer
from .losses import LossFunction, LossGradient
from ..utils.logger import train_logger


class NetworkBuildError(ValueError):
    pass


class Network:
    """Layers applied in order, trained with full-batch gradient descent.

    Built through ``NetworkBuilder``. ``forward`` and ``fit`` update the
    cached inputs of the layers, so a network must not be used from two call
    chains at once.
    """

    def __init__(self, layers: List[Layer], loss_grad_fn: LossGradient, loss_fn: Optional[LossFunction] = None):
        self._layers = layers
        self.loss_grad_fn = loss_grad_fn
        self.loss_fn = loss_fn

    @property
    def layers(self):
        return tuple(self._layers)

    def __len__(self):
        return len(self._layers)

    def forward(self, x: Tensor) -> Tensor:
        if not self._layers:
            return x

        out = x
        for layer in self._layers:
            out = layer.forward(out)
        return out

    def __call__(self, x):
        return self.forward(x)

    def fit(self, x_train: Tensor, y_train: Tensor, epochs: int, learning_rate: float, log_every: int = 1000):
        if log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {log_every}")
        monitor = self.loss_fn is not None and train_logger.isEnabledFor(logging.DEBUG)

        train_logger.info(f"Training {len(self._layers)} layers for {epochs} epochs, lr={learning_rate}")

        for epoch in range(epochs):
            y_hat = self.forward(x_train.copy())

            if monitor and epoch % log_every == 0:
                loss = self.loss_fn(y_hat, y_train)
                train_logger.debug(f"Epoch {epoch}, Loss: {loss.data[0]}")

            grad = self.loss_grad_fn(y_hat, y_train)
            for layer in reversed(self._layers):
                grad = layer.backward(grad, learning_rate)

        train_logger.info(f"Finished training after {epochs} epochs")


class NetworkBuilder:
    def __init__(self):
        self._layers: List[Layer] = []
        self._loss_grad_fn: Optional[LossGradient] = None
        self._loss_fn: Optional[LossFunction] = None

    def add_layer(self, layer: Layer):
        self._layers.append(layer)
        return self

    def loss_gradient(self, fn: LossGradient):
        self._loss_grad_fn = fn
        return self

    def loss(self, fn: LossFunction):
        # only used to report progress while fitting
        self._loss_fn = fn
        return self

    def build(self) -> Network:
        if self._loss_grad_fn is None:
            raise NetworkBuildError("Loss gradient function is required")

        layers, self._layers = self._layers, []
        return Network(layers, self._loss_grad_fn, self._loss_fn)

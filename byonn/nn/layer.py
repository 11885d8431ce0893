from .tensor import Tensor


class Layer:
    """A stateful step of a network with a paired forward/backward pass.

    ``forward`` caches whatever ``backward`` needs, so a layer instance is not
    reentrant: every ``backward`` call uses the input of the most recent
    ``forward`` call on the same instance. Interleaving passes from different
    batches on one layer is undefined.
    """

    def __init__(self):
        self.input = Tensor.empty()

    def forward(self, x: Tensor) -> Tensor:
        raise NotImplementedError("Child class must implement forward()")

    def backward(self, output_error: Tensor, learning_rate: float) -> Tensor:
        raise NotImplementedError("Child class must implement backward()")

    def __call__(self, x):
        return self.forward(x)

from ..nn.tensor import Tensor, ShapeMismatchError
from ..nn.layer import Layer
from ..utils.backend import xp
from ..utils.rng import Rng


class Linear(Layer):
    """Fully connected layer computing ``x @ weight``.

    There is no bias term. To learn one, append a constant ``1.0`` column to
    the input and size ``in_features`` accordingly.
    """

    def __init__(self, in_features: int, out_features: int, rng: Rng):
        super().__init__()
        self.in_features = in_features
        self.out_features = out_features

        weights = xp.array([rng.next_f32() for _ in range(in_features * out_features)], dtype=xp.float32)
        self._weight = Tensor(weights, (in_features, out_features))

    @property
    def weight(self):
        return self._weight.copy()

    @weight.setter
    def weight(self, value: Tensor):
        if value.shape != self._weight.shape:
            raise ShapeMismatchError(f"Expected weight of shape {self._weight.shape}, got {value.shape}")
        self._weight = value.copy()

    @property
    def shape(self):
        return self._weight.shape

    def forward(self, x: Tensor) -> Tensor:
        # backward needs the input for dL/dW = input.T @ output_error
        self.input = x.copy()
        return x.matmul(self._weight)

    def backward(self, output_error: Tensor, learning_rate: float) -> Tensor:
        input_error = output_error.matmul(self._weight.transpose())
        weight_grad = self.input.transpose().matmul(output_error)

        self._weight = self._weight.sub(weight_grad.scale(learning_rate))
        return input_error

from enum import Enum

from ..nn.tensor import Tensor
from ..nn.layer import Layer


class ActivationType(Enum):
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"


def sigmoid(x: Tensor) -> Tensor:
    one = Tensor.one(x.shape)
    return one.div(one.add(x.scale(-1.0).exp()))


def tanh(x: Tensor) -> Tensor:
    exp_x = x.exp()
    exp_neg_x = x.scale(-1.0).exp()
    return exp_x.sub(exp_neg_x).div(exp_x.add(exp_neg_x))


class Activation(Layer):
    """Element-wise non-linearity. Output has the same shape as the input."""

    def __init__(self, kind):
        super().__init__()
        if isinstance(kind, str):
            kind = kind.lower()
        self.kind = ActivationType(kind)

    def forward(self, x: Tensor) -> Tensor:
        self.input = x.copy()

        if self.kind is ActivationType.RELU:
            return x.relu()
        elif self.kind is ActivationType.SIGMOID:
            return sigmoid(x)
        return tanh(x)

    def backward(self, output_error: Tensor, learning_rate: float = 0.0) -> Tensor:
        # nothing to learn, learning_rate is unused
        if self.kind is ActivationType.RELU:
            derivative = self.input.relu_prime()
        elif self.kind is ActivationType.SIGMOID:
            a = sigmoid(self.input)
            derivative = a.mul(Tensor.one(a.shape).sub(a))
        else:
            t = tanh(self.input)
            derivative = Tensor.one(t.shape).sub(t.mul(t))

        return output_error.mul(derivative)

    def __repr__(self):
        return f"Activation({self.kind.name})"

from typing import Callable

from .tensor import Tensor, ShapeMismatchError, f32_divide

LossFunction = Callable[[Tensor, Tensor], Tensor]
LossGradient = Callable[[Tensor, Tensor], Tensor]


def _check_shapes(predicted: Tensor, actual: Tensor):
    if predicted.shape != actual.shape:
        raise ShapeMismatchError(f"Predicted shape {predicted.shape} does not match actual shape {actual.shape}")


def l1_loss(predicted: Tensor, actual: Tensor) -> Tensor:
    _check_shapes(predicted, actual)
    return predicted.sub(actual).abs().mean()


def mse_loss(predicted: Tensor, actual: Tensor) -> Tensor:
    _check_shapes(predicted, actual)
    return predicted.sub(actual).powf(2.0).mean()


def mse_loss_gradient(predicted: Tensor, actual: Tensor) -> Tensor:
    """Gradient of the squared error averaged over the batch.

    Divides by the batch size (first dimension), not by the element count
    ``mse_loss`` uses. The two agree only for single-column outputs.
    """
    _check_shapes(predicted, actual)
    batch_size = predicted.shape[0]
    return predicted.sub(actual).scale(f32_divide(2.0, batch_size))


def bce_sigmoid_delta(predicted: Tensor, actual: Tensor) -> Tensor:
    """Closed form of the mean binary cross-entropy gradient through a sigmoid.

    ``predicted`` must already be the sigmoid output. Only meant as the seed
    gradient for backpropagation; it is not a BCE value.
    """
    _check_shapes(predicted, actual)
    return predicted.sub(actual).scale(f32_divide(1.0, predicted.size))

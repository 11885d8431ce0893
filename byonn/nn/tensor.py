import numpy as np
from ..utils.backend import xp


class TensorError(ValueError):
    pass


class InvalidRankError(TensorError):
    pass


class InconsistentDataError(TensorError):
    pass


class ShapeMismatchError(TensorError):
    pass


def _format_scalar(value):
    # shortest repr that round-trips through float32, e.g. 0.1 rather than 0.10000000149011612
    return np.format_float_positional(np.float32(value), unique=True, trim='0')


class Tensor:
    """A 1D or 2D block of float32 values stored as a flat row-major buffer.

    Every operation returns a new Tensor; nothing shares a buffer with its
    operands. Shape problems raise a ``TensorError`` subclass instead of
    being coerced.
    """

    def __init__(self, data, shape):
        shape = tuple(int(d) for d in shape)
        if len(shape) == 0 or len(shape) > 2:
            raise InvalidRankError(f"Only 1D and 2D tensors are supported, got shape {shape}")

        data = xp.array(data, dtype=xp.float32).reshape(-1)
        if any(d < 0 for d in shape) or data.size != _prod(shape):
            raise InconsistentDataError(f"Data length {data.size} does not match shape {shape}")

        self.data = data
        self._shape = shape

    @classmethod
    def _from_flat(cls, data, shape):
        # internal constructor for results whose shape is already known to be valid
        out = cls.__new__(cls)
        out.data = data
        out._shape = tuple(shape)
        return out

    @classmethod
    def one(cls, shape):
        shape = tuple(int(d) for d in shape)
        return cls(xp.ones(max(_prod(shape), 0), dtype=xp.float32), shape)

    @classmethod
    def empty(cls):
        """Placeholder for a value that has not been computed yet."""
        return cls._from_flat(xp.zeros(0, dtype=xp.float32), ())

    @classmethod
    def from_array(cls, array):
        array = xp.asarray(array, dtype=xp.float32)
        return cls(array.reshape(-1), array.shape)

    @property
    def shape(self):
        return self._shape

    @property
    def ndim(self):
        return len(self._shape)

    @property
    def size(self):
        return int(self.data.size)

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def is_empty(self):
        return self.ndim == 0

    @property
    def T(self):
        return self.transpose()

    def __len__(self):
        return self._shape[0] if self._shape else 0

    def copy(self):
        return Tensor._from_flat(self.data.copy(), self._shape)

    def to_array(self):
        if self.is_empty:
            return self.data.copy()
        return self.data.reshape(self._shape).copy()

    def _require_rank(self):
        if self.ndim not in (1, 2):
            raise InvalidRankError(f"Only 1D and 2D tensors are supported, got shape {self._shape}")

    # ELEMENT-WISE -----------------------------------------------------------

    def _element_wise_op(self, other, op, name):
        if not isinstance(other, Tensor):
            raise TypeError(f"{name} expects a Tensor, got {type(other).__name__}")
        self._require_rank()
        if self._shape != other._shape:
            raise ShapeMismatchError(f"Shapes {self._shape} and {other._shape} do not match for {name}")

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            data = op(self.data, other.data)
        return Tensor._from_flat(data, self._shape)

    def _unary_op(self, op):
        self._require_rank()
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            data = op(self.data)
        return Tensor._from_flat(data.astype(xp.float32, copy=False), self._shape)

    def add(self, other):
        return self._element_wise_op(other, xp.add, "add")

    def sub(self, other):
        return self._element_wise_op(other, xp.subtract, "sub")

    def mul(self, other):
        return self._element_wise_op(other, xp.multiply, "mul")

    def div(self, other):
        return self._element_wise_op(other, xp.divide, "div")

    def abs(self):
        return self._unary_op(xp.abs)

    def powf(self, p):
        p = xp.float32(p)
        return self._unary_op(lambda d: xp.power(d, p))

    def scale(self, k):
        k = xp.float32(k)
        return self._unary_op(lambda d: d * k)

    def exp(self):
        return self._unary_op(xp.exp)

    def relu(self):
        return self._unary_op(lambda d: xp.maximum(d, xp.float32(0)))

    def relu_prime(self):
        # the kink at 0 takes derivative 0
        return self._unary_op(lambda d: (d > 0).astype(xp.float32))

    def __add__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.div(other)

    def __pow__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.powf(other)

    def __neg__(self):
        return self.scale(-1.0)

    def __abs__(self):
        return self.abs()

    # SHAPING ------------------------------------------------------------------

    def transpose(self):
        self._require_rank()
        if self.ndim == 1:
            return self.copy()
        rows, cols = self._shape
        data = self.data.reshape(rows, cols).T.copy().reshape(-1)
        return Tensor._from_flat(data, (cols, rows))

    # MATMUL -------------------------------------------------------------------

    def _matmul_dims(self, other):
        if not isinstance(other, Tensor):
            raise TypeError(f"matmul expects a Tensor, got {type(other).__name__}")
        self._require_rank()
        other._require_rank()

        # a 1D left operand is a row, a 1D right operand is a column
        a_rows, a_cols = (1, self._shape[0]) if self.ndim == 1 else self._shape
        b_rows, b_cols = (other._shape[0], 1) if other.ndim == 1 else other._shape
        if a_cols != b_rows:
            raise ShapeMismatchError(f"Cannot multiply shapes {self._shape} and {other._shape}")

        if self.ndim == 1 and other.ndim == 1:
            out_shape = (1,)
        elif self.ndim == 1:
            out_shape = (b_cols,)
        elif other.ndim == 1:
            out_shape = (a_rows,)
        else:
            out_shape = (a_rows, b_cols)
        return a_rows, a_cols, b_cols, out_shape

    def matmul_naive(self, other):
        """Textbook (row, col, inner) matrix product.

        Walks ``other`` column-wise, so it strides through memory for every
        inner step. Kept as the reference for ``matmul``.
        """
        a_rows, a_cols, b_cols, out_shape = self._matmul_dims(other)
        a, b = self.data, other.data
        out = xp.zeros(a_rows * b_cols, dtype=xp.float32)

        for i in range(a_rows):
            for j in range(b_cols):
                acc = xp.float32(0)
                for k in range(a_cols):
                    a_ik = a[i * a_cols + k]
                    if a_ik == 0:
                        continue
                    acc = acc + a_ik * b[k * b_cols + j]
                out[i * b_cols + j] = acc
        return Tensor._from_flat(out, out_shape)

    def matmul(self, other):
        """Matrix product in (i, k, j) order.

        For every ``a[i, k]`` the whole row ``b[k, :]`` is scaled and added to
        output row ``i`` in one contiguous vector operation. Each output cell
        still accumulates in ascending ``k`` with float32 rounding after every
        multiply and add, so the result is bit-identical to ``matmul_naive``.
        """
        a_rows, a_cols, b_cols, out_shape = self._matmul_dims(other)
        a = self.data.reshape(a_rows, a_cols)
        b = other.data.reshape(a_cols, b_cols)
        out = xp.zeros((a_rows, b_cols), dtype=xp.float32)

        for i in range(a_rows):
            out_row = out[i]
            a_row = a[i]
            for k in range(a_cols):
                a_ik = a_row[k]
                if a_ik == 0:
                    continue
                out_row += a_ik * b[k]
        return Tensor._from_flat(out.reshape(-1), out_shape)

    def __matmul__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.matmul(other)

    # REDUCTIONS ---------------------------------------------------------------

    def sum(self, axis=None):
        self._require_rank()
        if axis is not None and (isinstance(axis, bool) or not isinstance(axis, int) or axis not in (0, 1)):
            raise InvalidRankError(f"Invalid axis {axis} for sum, expected None, 0 or 1")

        if axis is None or self.ndim == 1:
            total = xp.sum(self.data, dtype=xp.float32)
            return Tensor._from_flat(xp.array([total], dtype=xp.float32), (1,))

        rows, cols = self._shape
        data = xp.sum(self.data.reshape(rows, cols), axis=axis, dtype=xp.float32)
        return Tensor._from_flat(data, (cols,) if axis == 0 else (rows,))

    def mean(self):
        return self.sum().scale(f32_divide(1.0, self.size))

    # COMPARISON / DISPLAY -----------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and bool(xp.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self):
        return f"Tensor(data={self.data}, shape={self._shape}, dtype={self.data.dtype})"

    def __str__(self):
        values = self.data.tolist()
        if self.ndim != 2:
            return "[" + ", ".join(_format_scalar(v) for v in values) + "]"

        rows, cols = self._shape
        lines = []
        for row in range(rows):
            cells = ", ".join(f"{v:>8.4f}" for v in values[row * cols:(row + 1) * cols])
            lines.append(f"  |{cells}|")
        return "\n".join(lines)


def f32_divide(a, b):
    # float32 division, so a zero-size divisor gives inf/NaN like the element-wise ops
    with np.errstate(divide='ignore', invalid='ignore'):
        return xp.float32(a) / xp.float32(b)


def _prod(shape):
    n = 1
    for d in shape:
        n *= d
    return n

import unittest

import torch

from byonn.nn.tensor import Tensor, ShapeMismatchError, InvalidRankError
from byonn.modules.linear import Linear
from byonn.utils.rng import SimpleRng
from byonn.utils.backend import xp, set_seed


class TestLinear(unittest.TestCase):
    def assert_close(self, a, b, atol=1e-5):
        is_all_close = xp.allclose(a, b, atol=atol)
        self.assertTrue(is_all_close)

    def setUp(self):
        set_seed(0)
        self.in_features = 10
        self.out_features = 20
        self.batch = 4
        self.my_linear = Linear(self.in_features, self.out_features, SimpleRng())
        self.x = xp.random.randn(self.batch, self.in_features).astype(xp.float32)

    def test_weight_initialised_from_rng(self):
        rng = SimpleRng()
        expected = [rng.next_f32() for _ in range(self.in_features * self.out_features)]

        self.assertEqual(self.my_linear.weight.shape, (self.in_features, self.out_features))
        self.assertTrue(xp.array_equal(self.my_linear.weight.data, xp.array(expected, dtype=xp.float32)))

    def test_linear(self):
        weight = self.my_linear.weight.to_array()
        g = xp.random.randn(self.batch, self.out_features).astype(xp.float32)
        lr = 0.01

        pt_x = torch.tensor(self.x, requires_grad=True)
        pt_w = torch.tensor(weight, requires_grad=True)
        pt_output = pt_x @ pt_w
        pt_output.backward(torch.tensor(g))

        my_output = self.my_linear.forward(Tensor.from_array(self.x))
        input_error = self.my_linear.backward(Tensor.from_array(g), lr)

        self.assertEqual(my_output.shape, (self.batch, self.out_features))
        self.assertEqual(input_error.shape, (self.batch, self.in_features))
        self.assert_close(my_output.to_array(), pt_output.detach().numpy())
        self.assert_close(input_error.to_array(), pt_x.grad.numpy())
        self.assert_close(self.my_linear.weight.to_array(), weight - lr * pt_w.grad.numpy())

    def test_backward_uses_weight_before_update(self):
        weight = self.my_linear.weight
        g = Tensor.one((self.batch, self.out_features))

        self.my_linear.forward(Tensor.from_array(self.x))
        input_error = self.my_linear.backward(g, 1.0)

        self.assertEqual(input_error, g.matmul(weight.transpose()))
        self.assertNotEqual(self.my_linear.weight, weight)

    def test_zero_learning_rate_keeps_weight(self):
        weight = self.my_linear.weight

        self.my_linear.forward(Tensor.from_array(self.x))
        self.my_linear.backward(Tensor.one((self.batch, self.out_features)), 0.0)

        self.assertEqual(self.my_linear.weight, weight)

    def test_forward_caches_copy_of_input(self):
        x = Tensor.from_array(self.x)
        self.my_linear.forward(x)

        self.assertEqual(self.my_linear.input, x)
        self.assertIsNot(self.my_linear.input, x)

    def test_forward_shape_mismatch(self):
        with self.assertRaises(ShapeMismatchError):
            self.my_linear.forward(Tensor.one((self.batch, self.in_features + 1)))

    def test_backward_before_forward(self):
        with self.assertRaises(InvalidRankError):
            self.my_linear.backward(Tensor.one((self.batch, self.out_features)), 0.1)

    def test_weight_getter_returns_copy(self):
        before = self.my_linear.weight
        exposed = self.my_linear.weight
        exposed.data[0] = 1000.0

        self.assertEqual(self.my_linear.weight, before)

    def test_set_weight(self):
        new_weight = Tensor.one((self.in_features, self.out_features))
        self.my_linear.weight = new_weight

        self.assertEqual(self.my_linear.weight, new_weight)

        with self.assertRaises(ShapeMismatchError):
            self.my_linear.weight = Tensor.one((self.out_features, self.in_features))


if __name__ == "__main__":
    unittest.main()

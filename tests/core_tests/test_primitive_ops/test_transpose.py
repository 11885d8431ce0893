import unittest

import torch

from byonn.nn.tensor import Tensor, InvalidRankError
from byonn.utils.backend import xp, set_seed


class TestTranspose(unittest.TestCase):
    def setUp(self):
        set_seed(0)

    def test_transpose_matches_torch(self):
        for shape in [(2, 3), (1, 5), (5, 1), (4, 4)]:
            a_my = Tensor.from_array(xp.random.randn(*shape).astype(xp.float32))
            a_pt = torch.tensor(a_my.to_array())

            b_my = a_my.transpose()

            self.assertEqual(b_my.shape, (shape[1], shape[0]))
            self.assertTrue(xp.array_equal(b_my.to_array(), a_pt.T.numpy()))

    def test_index_mapping(self):
        r, c = 2, 3
        a = Tensor(list(range(r * c)), (r, c))
        t = a.transpose()

        for i in range(r):
            for j in range(c):
                self.assertEqual(t.data[j * r + i], a.data[i * c + j])

    def test_double_transpose_is_identity(self):
        for shape in [(2, 3), (1, 7), (6, 6)]:
            a = Tensor.from_array(xp.random.randn(*shape).astype(xp.float32))

            self.assertEqual(a.transpose().transpose(), a)
            self.assertEqual(a.T.T, a)

    def test_vector_transpose_is_copy(self):
        a = Tensor([1.0, 2.0, 3.0], (3,))
        t = a.transpose()
        t.data[0] = 9.0

        self.assertEqual(t.shape, (3,))
        self.assertEqual(a.data.tolist(), [1.0, 2.0, 3.0])

    def test_transpose_does_not_alias(self):
        a = Tensor([1.0, 2.0, 3.0], (1, 3))
        t = a.transpose()
        t.data[0] = 9.0

        self.assertEqual(a.data.tolist(), [1.0, 2.0, 3.0])

    def test_transpose_empty(self):
        with self.assertRaises(InvalidRankError):
            Tensor.empty().transpose()


if __name__ == "__main__":
    unittest.main()

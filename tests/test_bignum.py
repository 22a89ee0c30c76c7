import unittest

from sigkeys import N_MINUS_2, add_one_to_array, is_bigger_than_n_minus_2
from sigkeys.bignum import P256_ORDER


class TestAddOneToArray(unittest.TestCase):

    def test_no_carry(self) -> None:
        value = bytearray(32)
        value[31] = 0xFE

        result = add_one_to_array(value)

        self.assertEqual(len(result), 32)
        self.assertEqual(result[31], 0xFF)
        self.assertEqual(result[30], 0x00)

    def test_carry(self) -> None:
        value = bytearray(32)
        value[29:32] = b'\xfe\xff\xff'

        result = add_one_to_array(value)

        self.assertEqual(len(result), 32)
        self.assertEqual(result[29:32], b'\xff\x00\x00')

    def test_carry_past_most_significant_byte(self) -> None:
        result = add_one_to_array(b'\xff' * 32)

        self.assertEqual(len(result), 33)
        self.assertEqual(result, b'\x01' + bytes(32))

    def test_input_not_mutated(self) -> None:
        value = bytearray(b'\x00\xff')

        add_one_to_array(value)

        self.assertEqual(value, bytearray(b'\x00\xff'))

    def test_preserves_leading_zeros(self) -> None:
        self.assertEqual(add_one_to_array(bytes(4)), b'\x00\x00\x00\x01')


class TestIsBiggerThanNMinus2(unittest.TestCase):

    def test_constant(self) -> None:
        self.assertEqual(len(N_MINUS_2), 32)
        self.assertEqual(int.from_bytes(N_MINUS_2, 'big'), P256_ORDER - 2)
        self.assertEqual(N_MINUS_2[-1], 0x4F)

    def test_smaller(self) -> None:
        self.assertFalse(is_bigger_than_n_minus_2(bytes(32)))

        value = bytearray(N_MINUS_2)
        value[31] -= 1
        self.assertFalse(is_bigger_than_n_minus_2(value))

    def test_equal(self) -> None:
        self.assertFalse(is_bigger_than_n_minus_2(N_MINUS_2))

    def test_bigger(self) -> None:
        value = bytearray(32)
        value[0:5] = b'\xff\xff\xff\xff\x01'
        self.assertTrue(is_bigger_than_n_minus_2(value))

        value = bytearray(N_MINUS_2)
        value[31] += 1
        self.assertTrue(is_bigger_than_n_minus_2(value))


if __name__ == '__main__':
    unittest.main(verbosity=2)

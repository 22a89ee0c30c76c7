import unittest

from sigkeys import BoundedKeyCache, KeyDerivationConfig


class TestBoundedKeyCache(unittest.TestCase):

    def test_get_missing_key(self) -> None:
        cache = BoundedKeyCache()

        self.assertIsNone(cache.get(('secret', 'date')))

    def test_returns_stored_object(self) -> None:
        cache = BoundedKeyCache()
        value = bytes(range(32))

        cache.put('key', value)

        self.assertIs(cache.get('key'), value)
        self.assertIs(cache.get('key'), value)

    def test_default_capacity(self) -> None:
        cache = BoundedKeyCache()
        for i in range(60):
            cache.put(i, bytes([i]))

        self.assertEqual(len(cache), 50)
        self.assertNotIn(9, cache)
        self.assertIn(10, cache)

    def test_evicts_in_insertion_order(self) -> None:
        cache = BoundedKeyCache(max_size=3)
        values = [bytes([i]) for i in range(4)]
        for i in range(3):
            cache.put(i, values[i])

        # reads do not refresh an entry
        cache.get(0)
        cache.put(3, values[3])

        self.assertIsNone(cache.get(0))
        self.assertIs(cache.get(1), values[1])
        self.assertIs(cache.get(3), values[3])

    def test_overwrite_keeps_insertion_slot(self) -> None:
        cache = BoundedKeyCache(max_size=2)
        cache.put('a', b'1')
        cache.put('b', b'2')
        cache.put('a', b'3')

        cache.put('c', b'4')

        self.assertNotIn('a', cache)
        self.assertEqual(cache.get('b'), b'2')

    def test_clear(self) -> None:
        cache = BoundedKeyCache()
        cache.put('a', b'1')

        cache.clear()

        self.assertEqual(len(cache), 0)
        self.assertIsNone(cache.get('a'))

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            BoundedKeyCache(max_size=0)


class TestKeyDerivationConfig(unittest.TestCase):

    def test_defaults(self) -> None:
        config = KeyDerivationConfig()

        self.assertEqual(config.cache_size, 50)
        self.assertEqual(config.max_sigv4a_attempts, 254)

    def test_validation(self) -> None:
        for kwargs in ({'cache_size': 0}, {'max_sigv4a_attempts': 0}, {'max_sigv4a_attempts': 255}):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    KeyDerivationConfig(**kwargs)


if __name__ == '__main__':
    unittest.main(verbosity=2)

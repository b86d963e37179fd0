"""Tests for the Alea random source."""

from py_chance.core.alea_prng import AleaPRNG, Mash


class TestAleaPRNG:
    """Test the random source contract."""

    def test_values_in_unit_interval(self):
        """Test every draw falls in [0, 1)."""
        prng = AleaPRNG("unit-interval")
        for _ in range(10000):
            value = prng.random()
            assert 0 <= value < 1

    def test_same_seed_same_sequence(self):
        """Test that the same seed produces the same sequence."""
        prng1 = AleaPRNG(42)
        prng2 = AleaPRNG(42)

        assert [prng1.random() for _ in range(1000)] == [prng2.random() for _ in range(1000)]

    def test_string_and_integer_seeds_hash_alike(self):
        """Test that seeds are hashed through their string form."""
        prng1 = AleaPRNG(1234)
        prng2 = AleaPRNG("1234")

        assert [prng1.random() for _ in range(10)] == [prng2.random() for _ in range(10)]

    def test_different_seeds_diverge(self):
        """Test that different seeds produce different sequences."""
        prng1 = AleaPRNG("alpha")
        prng2 = AleaPRNG("beta")

        pairs = [(prng1.random(), prng2.random()) for _ in range(1000)]
        assert sum(1 for a, b in pairs if a == b) == 0

    def test_not_constant(self):
        """Test that draws are spread out."""
        prng = AleaPRNG("spread")
        values = [prng.random() for _ in range(1000)]

        assert len(set(values)) > 990
        assert min(values) < 0.1
        assert max(values) > 0.9

    def test_call_count(self):
        """Test that every draw advances the counter by one."""
        prng = AleaPRNG("count")
        for _ in range(7):
            prng.random()
        assert prng.call_count == 7


class TestMash:
    def test_deterministic(self):
        assert Mash()("hello") == Mash()("hello")

    def test_range(self):
        mash = Mash()
        for data in [" ", "seed", 0, 9007199254740991, "ünïcødé"]:
            assert 0 <= mash(data) < 1

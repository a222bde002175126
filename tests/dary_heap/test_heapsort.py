import numpy as np
import pytest

from src.dary_heap.exceptions import ConfigurationError
from src.dary_heap.heapsort import heapsort


class TestHeapsort:
    def test_heapsort_empty(self):
        assert heapsort([]) == []

    def test_heapsort_single(self):
        assert heapsort([7]) == [7]

    @pytest.mark.parametrize("branching_factor", [2, 3, 4, 10])
    def test_heapsort_random(self, branching_factor):
        rng = np.random.default_rng(7)
        values = rng.integers(-1000, 1000, size=500).tolist()
        assert heapsort(values, branching_factor) == sorted(values)

    def test_heapsort_does_not_modify_input(self):
        values = [3, 1, 2]
        assert heapsort(values) == [1, 2, 3]
        assert values == [3, 1, 2]

    def test_heapsort_strings(self):
        assert heapsort(["b", "c", "a"], branching_factor=3) == ["a", "b", "c"]

    def test_heapsort_invalid_branching_factor(self):
        with pytest.raises(ConfigurationError):
            heapsort([1, 2], branching_factor=1)

"""Tests for the bundled demo generator."""

import numpy as np
import pytest

from terraineditor.controller.demo_generator import SEGMENTS_PER_BRANCH, generate_river
from terraineditor.errors import MalformedBufferError

SQUARE = [-1000.0, -1000.0, 1000.0, -1000.0, 1000.0, 1000.0, -1000.0, 1000.0]
FLAT = [0.0] * 625


class TestDemoGenerator:
    def test_output_is_whole_edges(self):
        river = generate_river(0.2, 0.7, 0.1, FLAT, SQUARE)

        assert len(river) == 4 * SEGMENTS_PER_BRANCH * 6
        assert all(isinstance(v, float) for v in river)

    def test_deterministic(self):
        a = generate_river(0.2, 0.7, 0.1, FLAT, SQUARE)
        b = generate_river(0.2, 0.7, 0.1, FLAT, SQUARE)

        assert a == b

    def test_branches_start_at_centroid(self):
        edges = np.asarray(generate_river(0.2, 0.7, 0.1, FLAT, SQUARE)).reshape(-1, 6)
        first_edges = edges[::SEGMENTS_PER_BRANCH]

        np.testing.assert_allclose(first_edges[:, :3], 0.0)

    def test_flat_slope_map_stays_at_zero_elevation(self):
        edges = np.asarray(generate_river(0.2, 0.7, 0.1, FLAT, SQUARE)).reshape(-1, 6)

        assert not edges[:, [2, 5]].any()

    def test_painted_slope_raises_elevation(self):
        river = generate_river(0.2, 0.7, 0.1, [0.3] * 625, SQUARE)
        elevations = np.asarray(river)[2::3]

        assert elevations.max() > 0.0

    def test_segments_are_connected(self):
        edges = np.asarray(generate_river(0.5, 0.3, 0.2, [0.1] * 625, SQUARE)).reshape(-1, 6)

        for branch in edges.reshape(-1, SEGMENTS_PER_BRANCH, 6):
            np.testing.assert_allclose(branch[1:, :3], branch[:-1, 3:])

    def test_rejects_malformed_contour(self):
        with pytest.raises(MalformedBufferError):
            generate_river(0.2, 0.7, 0.1, FLAT, [0.0, 0.0, 1.0])

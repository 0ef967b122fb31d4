"""Tests for the buffer-to-PolyData conversions."""

import numpy as np
import pytest

from terraineditor.errors import MalformedBufferError
from terraineditor.view.widgets.vtk_utils import VtkUtils


class TestRiverPolyData:
    def test_axis_mapping_and_scales(self):
        pd = VtkUtils.river_to_polydata([100.0, 200.0, 5.0, 300.0, 400.0, 10.0])

        # (x, y, elevation) -> (x * 0.002, elevation * 0.02, y * 0.002)
        np.testing.assert_allclose(pd.points, [[0.2, 0.1, 0.4], [0.6, 0.2, 0.8]])

    def test_each_point_pair_is_one_segment(self):
        buffer = [float(i) for i in range(18)]
        pd = VtkUtils.river_to_polydata(buffer)

        assert pd.n_points == 6
        assert pd.n_cells == 3
        np.testing.assert_array_equal(pd.lines, [2, 0, 1, 2, 2, 3, 2, 4, 5])

    def test_rejects_length_not_multiple_of_six(self):
        with pytest.raises(MalformedBufferError) as exc:
            VtkUtils.river_to_polydata([0.0] * 9)

        assert exc.value.length == 9

    def test_empty_buffer_gives_empty_scene_geometry(self):
        pd = VtkUtils.river_to_polydata([])

        assert pd.n_cells == 0


class TestContourPolyData:
    def test_closed_loop_on_ground_plane(self):
        pd = VtkUtils.contour_to_polydata([0.0, 0.0, 500.0, 0.0, 0.0, 500.0])

        np.testing.assert_allclose(pd.points, [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        np.testing.assert_array_equal(pd.lines, [4, 0, 1, 2, 0])

    @pytest.mark.parametrize("length", [0, 4, 7])
    def test_rejects_bad_lengths(self, length):
        with pytest.raises(MalformedBufferError):
            VtkUtils.contour_to_polydata([0.0] * length)

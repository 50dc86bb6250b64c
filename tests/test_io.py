import numpy as np
import pytest

from minboundinggeo.config import SAMPLE_POINTS_PATH
from minboundinggeo.model.geometry_primitives import Point
from minboundinggeo.model.io import PointIO


@pytest.mark.unit
def test_points_from_array():
    points = PointIO.points_from_array(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert points == [Point(1.0, 2.0, 0.0), Point(3.0, 4.0, 0.0)]
    assert PointIO.points_from_array(np.empty((0, 3))) == []
    assert PointIO.points_from_array(np.array([1.0, 2.0, 3.0])) == [Point(1.0, 2.0, 3.0)]


@pytest.mark.unit
def test_points_from_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        PointIO.points_from_array(np.zeros((3, 4)))
    with pytest.raises(ValueError):
        PointIO.points_from_array(np.zeros((2, 2, 2)))


@pytest.mark.integration
def test_load_sample_points():
    points = PointIO.load_points(SAMPLE_POINTS_PATH)
    assert len(points) == 8
    assert points[0] == Point(1.0, 3.0, 0.0)
    assert points[-1] == Point(-2.0, 0.0, 0.0)


@pytest.mark.integration
def test_load_csv_without_header(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("0,0\n1.5,2\n\n# a comment\n-3,4.25\n", encoding="utf-8")
    points = PointIO.load_points(str(path))
    assert points == [Point(0.0, 0.0), Point(1.5, 2.0), Point(-3.0, 4.25)]


@pytest.mark.integration
def test_load_single_row(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("x,y,z\n1,2,3\n", encoding="utf-8")
    assert PointIO.load_points(str(path)) == [Point(1.0, 2.0, 3.0)]


@pytest.mark.integration
@pytest.mark.parametrize("content", ["", "# nothing here\n", "x,y,z\n"])
def test_load_empty_file(tmp_path, content):
    path = tmp_path / "empty.csv"
    path.write_text(content, encoding="utf-8")
    assert PointIO.load_points(str(path)) == []


@pytest.mark.integration
def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PointIO.load_points(str(tmp_path / "missing.csv"))


@pytest.mark.integration
def test_load_rejects_unknown_extension(tmp_path):
    path = tmp_path / "points.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        PointIO.load_points(str(path))


@pytest.mark.integration
def test_load_rejects_wrong_column_count(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("1,2,3,4\n5,6,7,8\n", encoding="utf-8")
    with pytest.raises(ValueError):
        PointIO.load_points(str(path))


@pytest.mark.integration
@pytest.mark.parametrize("name", ["hull.csv", "hull.npy"])
def test_save_and_load(tmp_path, name):
    points = [Point(0.1, -2.0, 3.0), Point(1e-9, 7.5, 0.0), Point(123456.789, 0.3, -1.0)]
    path = str(tmp_path / name)
    PointIO.save_points(points, path)
    assert PointIO.load_points(path) == points


@pytest.mark.integration
def test_save_rejects_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        PointIO.save_points([Point(0.0, 0.0)], str(tmp_path / "hull.json"))

import pytest

from gladtpc.padmap import N_PADS, PadMap, PadPlane


@pytest.fixture(scope="module")
def generated_map():
    pad_map = PadMap()
    pad_map.generate_pad_plane()
    return pad_map


def _square_plane():
    plane = PadPlane()
    plane.add_bin([0, 0, 1, 1, 0], [0, 1, 1, 0, 0])
    plane.add_bin([1, 1, 2, 2, 1], [0, 1, 1, 0, 0])
    return plane


def test_add_bin_numbers_from_one():
    plane = PadPlane()
    assert plane.add_bin([0, 0, 1, 1], [0, 1, 1, 0]) == 1
    assert plane.add_bin([1, 1, 2, 2], [0, 1, 1, 0]) == 2
    assert len(plane) == 2


def test_add_bin_rejects_degenerate_polygon():
    with pytest.raises(ValueError):
        PadPlane().add_bin([0, 1], [0, 1])


def test_find_bin_inside_each_square():
    plane = _square_plane()
    assert plane.find_bin(0.5, 0.5) == 1
    assert plane.find_bin(1.5, 0.5) == 2


def test_find_bin_outside_is_overflow():
    plane = _square_plane()
    assert plane.find_bin(5.0, 0.5) < 0
    assert plane.find_bin(0.5, -3.0) < 0
    assert plane.find_bin(5.0, 0.5) != plane.find_bin(0.5, -3.0)


def test_fill_accumulates_weight_and_reset_clears():
    plane = _square_plane()
    assert plane.fill(0.5, 0.5, 2.0) == 1
    plane.fill(0.25, 0.75, 3.0)
    plane.fill(1.5, 0.5)
    assert plane.content(1) == 5.0
    assert plane.content(2) == 1.0
    plane.reset()
    assert plane.content(1) == 0.0
    assert list(plane.contents()) == [0.0, 0.0]
    assert len(plane) == 2


def test_fill_outside_goes_to_overflow():
    plane = _square_plane()
    code = plane.fill(10.0, 10.0, 4.0)
    assert code < 0
    assert plane.content(code) == 4.0
    assert sum(plane.contents()) == 0.0


def test_content_of_unknown_bin_raises():
    with pytest.raises(IndexError):
        _square_plane().content(3)


def test_generated_plane_has_one_bin_per_pad(generated_map):
    assert len(generated_map.pad_plane) == N_PADS


def test_pad_plane_is_named(generated_map):
    plane = generated_map.pad_plane
    assert plane.name == "R3BGTPC_Plane"
    assert plane.title == "R3BGTPC_Plane"


@pytest.mark.parametrize("pad", [0, 1, 43, 44, 1000, N_PADS - 1])
def test_pad_center_lies_in_its_bin(generated_map, pad):
    x, y = generated_map.pad_center(pad)
    assert generated_map.pad_plane.find_bin(x, y) == pad + 1


@pytest.mark.parametrize("pad", [-1, N_PADS])
def test_pad_center_out_of_range(generated_map, pad):
    assert generated_map.pad_center(pad) == (-9999.0, -9999.0)


def test_pad_corners_form_square(generated_map):
    corners = generated_map.pad_coords[100]
    assert corners[1][1] - corners[0][1] == 2.0
    assert corners[2][0] - corners[1][0] == 2.0
    assert corners[3][1] == corners[0][1]


def test_neighbouring_pads_share_an_edge(generated_map):
    first = generated_map.pad_coords[0]
    second = generated_map.pad_coords[1]
    assert second[0] == first[1]


def test_plane_bounds_span_all_pads(generated_map):
    x_min, x_max, y_min, y_max = generated_map.pad_plane.bounds
    assert (x_min, y_min) == (0.0, 0.0)
    assert x_max == generated_map.pad_coords[N_PADS - 1][2][0]
    assert y_max == generated_map.pad_coords[N_PADS - 1][2][1]


def test_bin_to_pad_is_zero(generated_map):
    assert generated_map.bin_to_pad(17) == 0
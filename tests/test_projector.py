import random

import pytest

from gladtpc.drift import MAX_TIME_BIN, N_TIME_BINS, X_OFFSET, Z_OFFSET, DriftParameters
from gladtpc.point import GTPCPoint, MCTrack
from gladtpc.projector import OutputMode, PointLogicError, Projector

X_LAB = X_OFFSET + 0.45
Z_LAB = Z_OFFSET + 0.55


def _params(**overrides):
    values = dict(
        e_ionization=1.0,
        drift_velocity=1.0,
        trans_diff=0.0,
        long_diff=0.0,
        fano_factor=0.0,
        half_size_x=4.4,
        half_size_y=10.0,
        half_size_z=12.8,
    )
    values.update(overrides)
    return DriftParameters(**values)


def _segment(energy=3.0, time=0.0, exit_status=10100, track_id=0):
    return [
        GTPCPoint(track_id=track_id, x=X_LAB, y=0.0, z=Z_LAB, track_status=11000),
        GTPCPoint(
            track_id=track_id,
            x=X_LAB,
            y=0.0,
            z=Z_LAB,
            energy_loss=energy,
            time=time,
            track_status=exit_status,
            event_id=7,
        ),
    ]


def _tracks():
    return [MCTrack(pdg_code=2212, mother_id=-1, start_x=1.0, pz=2.0)]


def _projector(mode=OutputMode.CAL_DATA, **overrides):
    return Projector(_params(**overrides), output_mode=mode, rng=random.Random(3))


def test_cal_output_collects_all_electrons_on_one_pad():
    projector = _projector()
    result = projector.execute(_segment(), _tracks())
    assert len(result) == 1
    cal = result[0]
    assert len(cal.adc) == N_TIME_BINS
    assert sum(cal.adc) == 3
    assert cal.adc[0] == 3


def test_cal_pad_matches_pad_plane_lookup():
    projector = _projector()
    (cal,) = projector.execute(_segment(), _tracks())
    expected = projector.pad_plane.find_bin((Z_LAB - Z_OFFSET) * 10.0, (X_LAB - X_OFFSET) * 10.0)
    assert cal.pad_id == expected
    assert cal.pad_id > 0
    assert projector.pad_plane.content(cal.pad_id) == 3


def test_late_times_fill_last_bucket():
    projector = _projector()
    (cal,) = projector.execute(_segment(time=1e7), _tracks())
    assert cal.adc[MAX_TIME_BIN] == 3


def test_proj_point_output():
    projector = _projector(OutputMode.PROJ_POINTS)
    result = projector.execute(_segment(), _tracks())
    assert len(result) == 1
    proj = result[0]
    assert proj.charge == 3
    assert proj.pdg_code == 2212
    assert proj.mother_id == -1
    assert proj.x0 == 1.0
    assert proj.pz0 == 2.0
    assert proj.time_distr.total() == 3
    assert proj.time_distr.name == f"event 7: pad {proj.virtual_pad_id}"


def test_spread_segment_conserves_electrons():
    projector = _projector()
    points = [
        GTPCPoint(track_id=0, x=X_LAB, y=0.0, z=Z_LAB, track_status=11000),
        GTPCPoint(
            track_id=0, x=X_LAB + 1.0, y=0.0, z=Z_LAB + 2.0, energy_loss=20.0, track_status=10100
        ),
    ]
    result = projector.execute(points, _tracks())
    assert sum(sum(cal.adc) for cal in result) == 20
    assert len({cal.pad_id for cal in result}) == len(result)
    assert len(result) > 1


def test_too_few_points_give_no_output():
    projector = _projector()
    assert projector.execute(_segment()[:1], _tracks()) == []


def test_zero_energy_produces_nothing():
    projector = _projector()
    assert projector.execute(_segment(energy=0.0), _tracks()) == []


def test_track_mismatch_raises():
    projector = _projector()
    points = _segment()
    points[1].track_id = 1
    with pytest.raises(PointLogicError):
        projector.execute(points, _tracks() * 2)


def test_point_after_exit_raises():
    projector = _projector()
    points = _segment() + [
        GTPCPoint(track_id=0, x=X_LAB, y=0.0, z=Z_LAB, energy_loss=1.0, track_status=1)
    ]
    with pytest.raises(PointLogicError):
        projector.execute(points, _tracks())


def test_set_drift_parameters_and_pad_size():
    projector = _projector()
    projector.set_drift_parameters(2.0, 0.5, 0.1, 0.2, 0.3)
    projector.set_size_of_virtual_pad(5.0)
    p = projector.params
    assert (p.e_ionization, p.drift_velocity, p.trans_diff, p.long_diff, p.fano_factor) == (
        2.0,
        0.5,
        0.1,
        0.2,
        0.3,
    )
    assert p.size_of_virtual_pad == 5.0


def test_output_reset_between_events():
    projector = _projector()
    projector.execute(_segment(), _tracks())
    second = projector.execute(_segment(), _tracks())
    assert len(second) == 1
    assert sum(second[0].adc) == 3
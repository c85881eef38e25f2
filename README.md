# gladtpc

Tools for simulating and handling data from a time projection chamber (TPC)
that sits inside a large dipole magnet. Lengths are in cm, times in ns and
energies in GeV unless a docstring says otherwise.

## What is in the package

- **Data containers**
  - `gladtpc.caldata.CalData`: a pad id and its time-bucket ADC spectrum.
    `add_time` increments one bucket and raises `IndexError` when the bucket
    is outside the spectrum.
  - `gladtpc.hitdata.HitData` and `HitClusterData`.
  - `gladtpc.mappeddata.MappedData`.
  - `gladtpc.trackdata.TrackData`, with `add_hit` and `add_cluster_hit`.
  - `gladtpc.point.GTPCPoint` (with `describe()`) and `MCTrack`.
  - `gladtpc.projpoint.ProjPoint` and its `TimeHistogram` of arrival times.
- **Pad plane map** (`gladtpc.padmap`)
  - `PadMap.generate_pad_plane()` builds a 128 × 44 grid of 2 mm pads.
  - `PadMap.pad_plane` is a polygon-binned `PadPlane` histogram. It supports
    `add_bin`, `find_bin`, `fill`, `content` and `reset`.
  - `PadMap.pad_center(pad)` gives the centre of a pad, or `(-9999, -9999)`
    for an unknown pad.
- **Mapped-to-calibrated step** (`gladtpc.mapped2cal`)
  - `Mapped2Cal.execute(mapped_data)` copies the ADC spectrum of the last
    mapped entry of an event into a `CalData`.
  - No calibration is applied yet.
- **Electron drift and projection**
  - `gladtpc.projector.Projector` turns the energy deposits of consecutive
    `GTPCPoint`s into ionisation electrons. It diffuses them onto the pad plane
    and returns either `CalData` time spectra or `ProjPoint`s, chosen with
    `OutputMode`.
  - Inconsistent point sequences raise `PointLogicError`.
  - Helpers live in `gladtpc.drift`: `DriftParameters`, `primary_electrons`,
    `clamp_to_pad_plane` and `time_bin`.
- **Langevin drift helpers** (`gladtpc.langevin`)
  - `drift_velocity` gives the drift velocity in crossed E and B fields.
  - `virtual_pad_id` gives the number of a virtual pad.
  - `initial_height` gives the starting height of the grid-test electrons for
    event ids 0 to 4. Any other id raises `ValueError`.
- **Event-generation helpers**
  - `gladtpc.kinematics` provides `LorentzVector`, `two_body_decay`,
    `sample_target_vertex` and `sample_decay_time`.
  - `gladtpc.incl_background` turns lists of collision fragments (`Particle`,
    momenta in MeV) into ASCII background events with `write_background`.
  - `gladtpc.asciiformat` holds unit constants, `progress_bar`,
    `show_progress` and `ensure_folder`.

## Installation

```
pip install .
```

## Projecting points onto the pad plane

```python
from gladtpc.projector import Projector, OutputMode

projector = Projector(output_mode=OutputMode.CAL_DATA)
projector.set_drift_parameters(2.0e-8, 0.0048, 2.16e-6, 2.16e-6, 0.1)
result = projector.execute(points, tracks)
```

Here `points` is a sequence of `GTPCPoint` and `tracks` is a sequence of
`MCTrack` indexed by track id. Events with fewer than two points produce no
output.

## Writing background events

```python
import random
from gladtpc.incl_background import Particle, write_background

events = [[Particle(a=1, z=1, pdg_code=2212, px=10.0, py=0.0, pz=900.0, ekin=400.0)]]
with open("background.dat", "w") as out:
    write_background(events, out, random.Random(1))
```

## What the package does not do

- It installs no command-line program. Event files are written by calling the
  functions above from Python.
- It does not read collision files itself. You pass the fragment lists to
  `write_background`.
- It has no ready-made hypertriton decay generator. `gladtpc.kinematics`
  gives the building blocks: two-body decays, target vertices and decay times.
- It has no task that steps electrons through a magnetic field map on the
  test grid. Only the single-step formulas in `gladtpc.langevin` are provided.

## Running the tests

```
pip install .[test]
pytest
```
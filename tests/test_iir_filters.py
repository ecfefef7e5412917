import pytest

from advutils.iir_filters import IIRFilter

INPUT = (
    [0.0] * 10 + [13.0] * 25 + [-13.0] * 25 + [13.0] * 25 + [-13.0] * 25 + [13.0]
)

FILT_TRUE = [
    0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 0.00000, 5.08737, 13.38217, 14.40819,
    12.40480, 12.94420, 13.13717, 12.96024, 12.98783, 13.01228, 12.99784, 12.99839, 13.00102, 12.99994, 12.99982, 13.00008, 13.00001,
    12.99998, 13.00001, 13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 2.82527, -13.76435, -15.81639, -11.80960,
    -12.88839, -13.27434, -12.92048, -12.97567, -13.02456, -12.99569, -12.99678, -13.00203, -12.99988, -12.99965, -13.00015, -13.00001, -12.99997,
    -13.00001, -13.00000, -13.00000, -13.00000, -13.00000, -13.00000, -13.00000, -13.00000, -2.82527, 13.76435, 15.81639, 11.80960, 12.88839,
    13.27434, 12.92048, 12.97567, 13.02456, 12.99569, 12.99678, 13.00203, 12.99988, 12.99965, 13.00015, 13.00001, 12.99997, 13.00001,
    13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 13.00000, 2.82527, -13.76435, -15.81639, -11.80960, -12.88839, -13.27434,
    -12.92048, -12.97567, -13.02456, -12.99569, -12.99678, -13.00203, -12.99988, -12.99965, -13.00015, -13.00001, -12.99997, -13.00001, -13.00000,
    -13.00000, -13.00000, -13.00000, -13.00000, -13.00000, -13.00000, -2.82527,
]


def test_init():
    f = IIRFilter(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0)
    assert (f.n0, f.n1, f.n2, f.n3) == pytest.approx((1.0, 2.0, 3.0, 4.0), abs=1e-5)
    assert (f.d1, f.d2, f.d3) == pytest.approx((5.0, 6.0, 7.0), abs=1e-5)
    assert (f.i1, f.i2, f.i3, f.o1, f.o2, f.o3) == (0.0,) * 6


def test_low_pass():
    f = IIRFilter.low_pass(100.0, 1.0)
    assert f.n0 == pytest.approx(6.74552e-2, abs=1e-7)
    assert f.n1 == pytest.approx(1.34911e-1, abs=1e-6)
    assert f.n2 == pytest.approx(6.74552e-2, abs=1e-7)
    assert f.n3 == pytest.approx(0.0, abs=1e-6)
    assert f.d1 == pytest.approx(-1.14298, abs=1e-6)
    assert f.d2 == pytest.approx(4.12801e-1, abs=1e-6)
    assert f.d3 == pytest.approx(0.0, abs=1e-6)


def test_high_pass():
    f = IIRFilter.high_pass(100.0, 1.0)
    assert f.n0 == pytest.approx(6.38946e-1, abs=1e-6)
    assert f.n1 == pytest.approx(-1.277891, abs=1e-6)
    assert f.n2 == pytest.approx(6.38946e-1, abs=1e-6)
    assert f.n3 == pytest.approx(0.0, abs=1e-6)
    assert f.d1 == pytest.approx(-1.14298, abs=1e-6)
    assert f.d2 == pytest.approx(4.12802e-1, abs=1e-6)
    assert f.d3 == pytest.approx(0.0, abs=1e-6)


def test_band_pass():
    f = IIRFilter.band_pass(1000.0, 500.0, 0.1)
    assert f.n0 == pytest.approx(1.28120e-1, abs=1e-6)
    assert f.n1 == pytest.approx(0.0, abs=1e-6)
    assert f.n2 == pytest.approx(-1.28120e-1, abs=1e-6)
    assert f.n3 == pytest.approx(0.0, abs=1e-6)
    assert f.d1 == pytest.approx(-1.41073, abs=1e-5)
    assert f.d2 == pytest.approx(7.43761e-1, abs=1e-6)
    assert f.d3 == pytest.approx(0.0, abs=1e-6)


def test_band_stop():
    f = IIRFilter.band_stop(1000.0, 500.0, 0.1)
    assert f.n0 == pytest.approx(8.71880e-1, abs=1e-6)
    assert f.n1 == pytest.approx(-1.41073, abs=1e-5)
    assert f.n2 == pytest.approx(8.71880e-1, abs=1e-6)
    assert f.n3 == pytest.approx(0.0, abs=1e-6)
    assert f.d1 == pytest.approx(-1.41073, abs=1e-5)
    assert f.d2 == pytest.approx(7.43761e-1, abs=1e-6)
    assert f.d3 == pytest.approx(0.0, abs=1e-6)


def test_process_low_pass_sequence():
    f = IIRFilter.low_pass(3.0, 100)
    outputs = [f.process(x) for x in INPUT]
    assert len(outputs) == len(FILT_TRUE) == 111
    assert outputs == pytest.approx(FILT_TRUE, abs=1e-5)


def test_reset_restarts_sequence():
    f = IIRFilter.low_pass(3.0, 100)
    for x in INPUT[:20]:
        f.process(x)
    f.reset()
    outputs = [f.process(x) for x in INPUT[:15]]
    assert outputs == pytest.approx(FILT_TRUE[:15], abs=1e-5)


def test_low_pass_above_nyquist_rejected():
    with pytest.raises(ValueError):
        IIRFilter.low_pass(500.0, 1.0)


def test_high_pass_above_nyquist_rejected():
    with pytest.raises(ValueError):
        IIRFilter.high_pass(600.0, 1.0)


def test_band_pass_above_nyquist_rejected():
    with pytest.raises(ValueError):
        IIRFilter.band_pass(4800.0, 500.0, 0.1)


def test_band_stop_above_nyquist_rejected():
    with pytest.raises(ValueError):
        IIRFilter.band_stop(4800.0, 500.0, 0.1)
"""Discrete-time IIR filters of up to third order."""

from __future__ import annotations

import math


def _check_below_nyquist(frequency: float, dt_ms: float) -> None:
    if not frequency < 0.5 / (dt_ms * 1e-3):
        raise ValueError("frequency must be below the Nyquist frequency")


class IIRFilter:
    """Filter y = n0*x + n1*x1 + n2*x2 + n3*x3 - d1*y1 - d2*y2 - d3*y3."""

    def __init__(
        self,
        n0: float,
        n1: float,
        n2: float,
        n3: float = 0.0,
        d1: float = 0.0,
        d2: float = 0.0,
        d3: float = 0.0,
    ) -> None:
        self.n0, self.n1, self.n2, self.n3 = n0, n1, n2, n3
        self.d1, self.d2, self.d3 = d1, d2, d3
        self.reset()

    @classmethod
    def low_pass(cls, lp_freq: float, dt_ms: float) -> IIRFilter:
        """Second-order Butterworth low-pass filter."""
        _check_below_nyquist(lp_freq, dt_ms)
        lam = 1.0 / math.tan(math.pi * lp_freq * dt_ms * 1e-3)
        q = math.sqrt(2.0)
        n0 = 1.0 / (1.0 + q * lam + lam * lam)
        d1 = 2.0 * (1.0 - lam * lam) * n0
        d2 = (1.0 - q * lam + lam * lam) * n0
        return cls(n0, 2.0 * n0, n0, 0.0, d1, d2, 0.0)

    @classmethod
    def high_pass(cls, hp_freq: float, dt_ms: float) -> IIRFilter:
        """Second-order Butterworth high-pass filter."""
        _check_below_nyquist(hp_freq, dt_ms)
        lam = 1.0 / math.tan(math.pi * hp_freq * dt_ms * 1e-3)
        q = math.sqrt(2.0)
        base = 1.0 / (1.0 + q * lam + lam * lam)
        n1 = -2.0 * base * lam * lam
        d1 = 2.0 * (1.0 - lam * lam) * base
        d2 = (1.0 - q * lam + lam * lam) * base
        n0 = base * lam * lam
        return cls(n0, n1, n0, 0.0, d1, d2, 0.0)

    @classmethod
    def band_pass(cls, center_freq: float, bandwidth: float, dt_ms: float) -> IIRFilter:
        """Second-order band-pass filter."""
        _check_below_nyquist(center_freq + 0.5 * bandwidth, dt_ms)
        quality = center_freq / bandwidth
        c = math.tan(math.pi * center_freq * dt_ms * 1e-3)
        d = 1.0 / (1.0 + c / quality + c * c)
        n0 = c / quality * d
        d1 = 2.0 * (c * c - 1.0) * d
        d2 = (1.0 - c / quality + c * c) * d
        return cls(n0, 0.0, -n0, 0.0, d1, d2, 0.0)

    @classmethod
    def band_stop(cls, center_freq: float, bandwidth: float, dt_ms: float) -> IIRFilter:
        """Second-order band-stop (notch) filter."""
        _check_below_nyquist(center_freq + 0.5 * bandwidth, dt_ms)
        quality = center_freq / bandwidth
        c = math.tan(math.pi * center_freq * dt_ms * 1e-3)
        d = 1.0 / (1.0 + c / quality + c * c)
        n0 = (1.0 + c * c) * d
        n1 = 2.0 * (c * c - 1.0) * d
        d2 = (1.0 - c / quality + c * c) * d
        return cls(n0, n1, n0, 0.0, n1, d2, 0.0)

    def process(self, value: float) -> float:
        """Feed one sample and return the filtered output."""
        output = (
            self.n0 * value
            + self.n1 * self.i1
            + self.n2 * self.i2
            + self.n3 * self.i3
            - self.d1 * self.o1
            - self.d2 * self.o2
            - self.d3 * self.o3
        )
        self.i3, self.i2, self.i1 = self.i2, self.i1, value
        self.o3, self.o2, self.o1 = self.o2, self.o1, output
        return output

    def reset(self) -> None:
        """Clear the filter's input and output history."""
        self.i1 = self.i2 = self.i3 = 0.0
        self.o1 = self.o2 = self.o3 = 0.0

    def __repr__(self) -> str:
        return (
            f"IIRFilter(n0={self.n0!r}, n1={self.n1!r}, n2={self.n2!r}, n3={self.n3!r}, "
            f"d1={self.d1!r}, d2={self.d2!r}, d3={self.d3!r})"
        )
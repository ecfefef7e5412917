"""Discrete PID controller with several anti-windup strategies.

The integral uses the trapezoidal rule and the derivative is filtered
with a first-order low-pass of cut-off ``nd``.
"""

from __future__ import annotations

from advutils.basic_math import constrain


class PID:
    """PID controller; the last computed value is kept in ``output``."""

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        nd: float,
        kb: float,
        dt_ms: float,
        sat_min: float,
        sat_max: float,
    ) -> None:
        self.dt = dt_ms * 1e-3
        self.kp = kp
        self.ki = 0.5 * ki * self.dt
        self.nd = nd
        self.kb = 0.5 * kb * self.dt
        self.kd = (2 * kd * nd) / (2 + nd * self.dt)
        self.kf = (2 - nd * self.dt) / (2 + nd * self.dt)
        self.set_integral_saturation(sat_min, sat_max)
        self.integral_term = 0.0
        self.derivative_term = 0.0
        self.output = 0.0

    def set_integral_saturation(self, sat_min: float, sat_max: float) -> None:
        """Set the output (and integral) saturation limits."""
        self.sat_min = sat_min
        self.sat_max = sat_max

    def _saturated(self) -> bool:
        return self.output == self.sat_max or self.output == self.sat_min

    def calc(self, set_point: float, measure: float) -> float:
        """Step without anti-windup; return the clamped output."""
        e = set_point - measure
        self.integral_term += self.ki * e
        self.derivative_term += self.kd * e
        self.output = constrain(
            self.kp * e + self.integral_term + self.derivative_term,
            self.sat_min,
            self.sat_max,
        )
        self.integral_term += self.ki * e
        self.derivative_term = self.kf * self.derivative_term - self.kd * e
        return self.output

    def calc_aero_clamp(self, set_point: float, measure: float) -> bool:
        """Step clamping the integral term; return True if it saturated."""
        e = set_point - measure
        self.integral_term = constrain(
            self.integral_term + self.ki * e, self.sat_min, self.sat_max
        )
        self.derivative_term += self.kd * e
        self.output = self.kp * e + self.integral_term + self.derivative_term
        self.derivative_term = self.kf * self.derivative_term - self.kd * e
        if self.integral_term in (self.sat_min, self.sat_max):
            return True
        self.integral_term += self.ki * e
        return False

    def calc_integral_clamp(self, set_point: float, measure: float) -> bool:
        """Step with conditional integration; return True if output saturated."""
        e = set_point - measure
        self.integral_term += self.ki * e
        self.derivative_term += self.kd * e
        self.output = self.kp * e + self.integral_term + self.derivative_term
        if e * self.output > 0 and (self.output < self.sat_min or self.output > self.sat_max):
            self.integral_term -= self.ki * e
            self.output -= self.ki * e
        else:
            self.integral_term += self.ki * e
        self.output = constrain(self.output, self.sat_min, self.sat_max)
        self.derivative_term = self.kf * self.derivative_term - self.kd * e
        return self._saturated()

    def calc_back_calc(self, set_point: float, measure: float) -> bool:
        """Step with back-calculation anti-windup; return True if saturated."""
        e = set_point - measure
        self.derivative_term += self.kd * e
        self.output = self.kp * e + self.integral_term + self.derivative_term
        if self.output > self.sat_max:
            back = self.sat_max - self.output
        elif self.output < self.sat_min:
            back = self.sat_min - self.output
        else:
            back = 0.0
        self.integral_term += self.ki * e + self.kb * back
        self.output = constrain(
            self.kp * e + self.integral_term + self.derivative_term,
            self.sat_min,
            self.sat_max,
        )
        self.integral_term += self.ki * e + self.kb * back
        self.derivative_term = self.kf * self.derivative_term - self.kd * e
        return self._saturated()
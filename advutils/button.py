"""Debounced push button with detection of short, multiple and long presses.

Ticks are unsigned 32-bit counters, so differences between them wrap
around the same way a free-running system tick counter does.
"""

from __future__ import annotations

from enum import IntEnum

_TICK_MASK = 0xFFFFFFFF
_MAX_PARAM_TICKS = 0xFFFF


class ButtonStatus(IntEnum):
    """Physical state of a button."""

    RELEASED = 0
    PRESSED = 1


class ButtonType(IntEnum):
    """Normal buttons report press patterns; pulsating ones report activity."""

    NORMAL = 0
    PULSATING = 1


class PressType(IntEnum):
    """Kind of press detected by :meth:`Button.get_press`."""

    NO_PRESS = 0
    SHORT_PRESS = 1
    DOUBLE_PRESS = 2
    TRIPLE_PRESS = 3
    MULTIPLE_PRESS = 4
    PULSATING_PRESS = 5
    LONG_PRESS = 8
    VERYLONG_PRESS = 9
    RELEASE_PRESS = 10


_PULSE_PRESSES = {
    1: PressType.SHORT_PRESS,
    2: PressType.DOUBLE_PRESS,
    3: PressType.TRIPLE_PRESS,
}


def _elapsed(later: int, earlier: int) -> int:
    return (later - earlier) & _TICK_MASK


def _check_param(name: str, value: int) -> int:
    if not 0 <= value <= _MAX_PARAM_TICKS:
        raise ValueError(f"{name} must be between 0 and {_MAX_PARAM_TICKS}")
    return value


class Button:
    """A button fed with edge events and polled for press types.

    ``event`` is called on every edge (from an interrupt or a timer) and
    ``get_press`` from the main loop.
    """

    def __init__(
        self,
        button_type: ButtonType,
        debounce_ticks: int,
        reset_ticks: int,
        long_press_ticks: int,
        very_long_press_ticks: int,
    ) -> None:
        self.button_type = ButtonType(button_type)
        self.status = ButtonStatus.RELEASED
        self.press = PressType.NO_PRESS
        self.valid_tick = [1, 0]
        self.last_tick = [0, 0]
        self.pulses = 0
        self.armed = True
        self.debounce_ticks = _check_param("debounce_ticks", debounce_ticks)
        self.reset_ticks = _check_param("reset_ticks", max(reset_ticks, debounce_ticks))
        self.long_press_ticks = _check_param("long_press_ticks", long_press_ticks)
        self.very_long_press_ticks = _check_param(
            "very_long_press_ticks", very_long_press_ticks
        )

    def event(self, status: ButtonStatus, ticks: int) -> None:
        """Record a change of the button to ``status`` at ``ticks``."""
        status = ButtonStatus(status)
        if self.status == status:
            return
        ticks &= _TICK_MASK
        new = int(status)
        old = 1 - new
        self.last_tick[new] = ticks
        self.status = status
        if _elapsed(self.last_tick[new], self.last_tick[old]) < self.debounce_ticks:
            return
        self.armed = self.armed or bool(new)
        self.valid_tick[old] = self.last_tick[old]
        if old and (
            self.button_type == ButtonType.PULSATING
            or _elapsed(self.last_tick[0], self.valid_tick[1]) < self.very_long_press_ticks
        ):
            if _elapsed(self.valid_tick[1], self.valid_tick[0]) > self.reset_ticks:
                self.pulses = 1
            else:
                self.pulses = (self.pulses + 1) & 0xFF

    def get_press(self, ticks: int) -> PressType:
        """Return the press detected at ``ticks``, consuming it."""
        ticks &= _TICK_MASK
        self.press = PressType.NO_PRESS

        if self.button_type == ButtonType.NORMAL:
            if (
                self.status == ButtonStatus.PRESSED
                and not self.pulses
                and _elapsed(ticks, self.last_tick[1]) > self.very_long_press_ticks
                and self.armed
            ):
                self.press = PressType.VERYLONG_PRESS
                self.armed = False
                self.pulses = 0
            elif (
                self.pulses == 1
                and _elapsed(self.last_tick[0], self.valid_tick[1]) > self.long_press_ticks
            ):
                self.press = PressType.LONG_PRESS
                self.armed = False
                self.pulses = 0
            elif (
                self.status == ButtonStatus.RELEASED
                and not self.pulses
                and _elapsed(ticks, self.last_tick[0]) > self.debounce_ticks
                and not self.armed
            ):
                self.press = PressType.RELEASE_PRESS
                self.armed = True
            elif _elapsed(ticks, self.valid_tick[1]) > self.reset_ticks and self.pulses:
                self.press = _PULSE_PRESSES.get(self.pulses, PressType.MULTIPLE_PRESS)
                self.armed = False
                self.pulses = 0
        else:
            if (
                self.pulses
                and self.status == ButtonStatus.RELEASED
                and _elapsed(ticks, self.last_tick[0]) > self.reset_ticks
            ):
                self.press = PressType.RELEASE_PRESS
                self.pulses = 0
            elif self.pulses:
                self.press = PressType.PULSATING_PRESS
        return self.press

    def get_status(self, ticks: int) -> ButtonStatus:
        """Return the debounced status of the button at ``ticks``."""
        current = int(self.status)
        other = 1 - current
        stable = self.valid_tick[current] > self.valid_tick[other] or (
            _elapsed(ticks & _TICK_MASK, self.last_tick[current]) > self.debounce_ticks
        )
        return ButtonStatus(current if stable else other)
# advutils

A collection of small building blocks for control loops and embedded-style
code. It needs nothing beyond the standard library.

| Module | What it provides |
| --- | --- |
| `advutils.hash_functions` | `hash_fnv1a`, `hash_djb` and `hash_sdbm`. Each returns an unsigned 32-bit hash of a `str` (encoded as UTF-8) or `bytes` key. Hashing stops at the first zero byte. |
| `advutils.basic_math` | `fast_sqrt`, `fast_inv_sqrt`, `fast_sin` and `fast_cos` use single-precision float arithmetic. `fast_sqrt` and `fast_inv_sqrt` return NaN for negative input. `constrain(value, low, high)` clamps a value. |
| `advutils.linked_list` | `LinkedList(capacity)` is a bounded list with `push`, `push_front`, `insert`, `update`, `pop`, `pop_back`, `remove`, `peek`, `peek_back`, `peek_at` and `clear`. It supports `len()` and iteration. Adding to a full list raises `CapacityError`. Empty or out-of-range access raises `IndexError`. |
| `advutils.lk_hash_table` | `LinkedHashTable(size)` is a string-keyed table that chains entries within FNV-1a buckets. It holds at most `size` entries. |
| `advutils.lp_hash_table` | `LinearProbingHashTable(size, resizable=True)` is a string-keyed open-addressing table. When resizable, it doubles before reaching 70% fill and halves when it drops to 20% fill. Its `size` property gives the current number of slots. |
| `advutils.button` | `Button` debounces a push button and reports a `PressType`. The press types are short, double, triple, multiple, long, very long, release and pulsating. `ButtonStatus` and `ButtonType` describe the button's state and kind. |
| `advutils.iir_filters` | `IIRFilter` is a filter of up to third order. It has the class methods `low_pass`, `high_pass`, `band_pass` and `band_stop`, plus `process` and `reset`. A cut-off at or above the Nyquist frequency raises `ValueError`. |
| `advutils.pid` | `PID` is a controller with a trapezoidal integral and a filtered derivative. Its `calc` method returns the clamped output. `calc_aero_clamp`, `calc_integral_clamp` and `calc_back_calc` apply anti-windup and return `True` when the controller saturated. |
| `advutils.event` | `Event(event_type, size)` holds up to `size` callbacks. A `BASIC` event uses `register` and `dispatch`. An `EXTENDED` event uses `register_ex` and `dispatch_ex(value)`. Using the wrong style raises `TypeError`. Registering beyond `size` raises `EventFullError`. |

Both hash tables have `put`, `get`, `pop`, `clear`, `len()` and `in`:

- A missing key raises `KeyError`.
- Adding to a full table raises `CapacityError`.
- A `None` key or value raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Filter a signal with a 3 Hz low-pass filter sampled every 100 ms:

```python
from advutils.iir_filters import IIRFilter

lp = IIRFilter.low_pass(3.0, 100)
smoothed = [lp.process(x) for x in (0.0, 13.0, 13.0, 13.0)]
```

Detect button presses from edge events and a tick counter:

```python
from advutils.button import Button, ButtonStatus, ButtonType, PressType

button = Button(ButtonType.NORMAL, 20, 400, 1000, 2000)
button.event(ButtonStatus.PRESSED, 210)
button.event(ButtonStatus.RELEASED, 230)
assert button.get_press(630) is PressType.SHORT_PRESS
```

Run a PID controller with output saturation:

```python
from advutils.pid import PID

pid = PID(kp=1.0, ki=0.5, kd=0.0, nd=10.0, kb=0.0, dt_ms=10, sat_min=-1.0, sat_max=1.0)
output = pid.calc(set_point=1.0, measure=0.2)
```

Store values in a hash table keyed by strings:

```python
from advutils.lp_hash_table import LinearProbingHashTable

table = LinearProbingHashTable(8, resizable=True)
table.put("alpha", 1)
assert table.get("alpha") == 1
assert "alpha" in table
```

Call several handlers at once:

```python
from advutils.event import Event, EventType

on_sample = Event(EventType.EXTENDED, 4)
on_sample.register_ex(print)
on_sample.dispatch_ex(42)
```

## What it does not do

This is a library only. It has no command-line tool.

It does not talk to hardware or read the clock. `Button` is fed edge events and tick counts by the caller. `PID` and `IIRFilter` work on samples the caller passes in at the sample period they were built with.
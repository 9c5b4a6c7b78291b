# heartwave

A simulated heart-rate-variability (HRV) coherence trainer. It models a small
handheld device that runs breathing sessions, reads a coherence score every
five seconds, lights a low / medium / high indicator according to the chosen
challenge level, and keeps a log of each finished session.

The sessions are simulations: three built-in data sets give a high, medium or
low coherence run.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the simulator

```
heartwave
```

This starts a console version of the device. It reads one command per line
from standard input and prints the screen after each one:

| Command           | Effect                                              |
|-------------------|-----------------------------------------------------|
| `up`, `down`      | move the selection, wrapping at either end          |
| `select`          | act on the selected row                             |
| `back`            | return to the previous screen                       |
| `menu`            | go to the home screen, ending any active session    |
| `power`           | turn the device on or off                           |
| `recharge`        | charge the battery to 100%                          |
| `skin on`/`off`   | put the sensor on or take it off the skin           |
| `wait <seconds>`  | let simulated time pass                             |
| `help`            | list the commands                                   |
| `quit`, `exit`    | stop                                                |

From the home menu you can start a new session, change settings (challenge
level 1–4, breath pacer interval 1–30, restore the device) or view the history
of saved sessions. A session cannot start while the sensor is off the skin,
and taking it off during a session ends the session at the next reading.

Simulated time drives three timers: the breath pacer steps every second, the
session takes a reading every five seconds (printing `Beep.`), and while the
device is on the battery drains 2% every fifteen seconds. At 20% or less the
battery is shown as low; when it runs out the device turns off and the power
button does nothing until it is recharged.

Ending a session (select, back, or the sensor leaving the skin) shows its
summary, where `DELETE` discards the log just saved and `RETURN` keeps it. The
menu and power buttons end a session and save its log without a summary.

## Using the library

The device model can be driven directly from Python:

```python
from datetime import datetime

from heartwave.device import Device

device = Device()
device.start_session(0)      # 0 = high, 1 = medium, anything else = low coherence data
for _ in range(6):           # each update is five seconds of session time
    device.update()
    print(device.indicator())  # 0 = low (red), 1 = medium (blue), 2 = high (green)

log = device.save_recording(datetime.now())   # `now` may be left out
```

Every call to `indicator()` counts five seconds towards the time spent at
that coherence level; `save_recording` turns the current session into a
`SessionLog`, appends it to `device.logs` and returns it. A log holds the date
(`dd.mm.yyyy hh:mm:ss`), challenge level, breath interval, session length,
average coherence, the percentage of time at each level (truncated to one
decimal place), the achievement score and the full heart-rate graph.

Other pieces:

- `heartwave.recording.Recording` — a single session: plot points, coherence
  scores, achievement score (the sum of coherence scores), `average_coherence()`
  and `latest_plot_points()`.
- `heartwave.session_log.SessionLog` and `truncate_percentage` — the frozen
  session summary and its percentage rounding.
- `heartwave.consts.session_data(option)` — the built-in plot points and
  coherence scores for a session option.
- `heartwave.device.DeviceState` — the screens the device can be on.
- `heartwave.controller.Controller` — the button and timer logic of the
  device's user interface, usable without a terminal: `press_up`,
  `press_down`, `press_select`, `press_back`, `press_menu`, `press_power`,
  `tick_session`, `tick_breath`, `tick_battery`, `recharge_battery`,
  `advance(seconds)` and `render()`.

The medium-coherence band for each challenge level is:

| Level | Medium range |
|-------|--------------|
| 1     | 0.5 – 0.9    |
| 2     | 0.6 – 2.1    |
| 3     | 1.8 – 4.0    |
| 4     | 4.0 – 6.0    |

Scores below the band are low, scores above it are high.

## What it does not do

- There is no graphical window. The console shows text only; the heart-rate
  graphs are kept as lists of points and are not drawn.
- Session logs live in memory only. They are lost when the program exits and
  are not written to or read from disk.
- Readings come from the built-in data sets; no real sensor is read.
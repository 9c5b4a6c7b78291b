"""Headless front panel of the device: buttons, menus, timers and displays."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from heartwave.device import Device, DeviceState

_LOG = logging.getLogger(__name__)

HOME_MENU_OPTIONS = ("START NEW SESSION", "SETTINGS", "VIEW HISTORY")
SESSION_OPTIONS = (
    "Start High Coherence Session Simulation",
    "Start Medium Coherence Session Simulation",
    "Start Low Coherence Session Simulation",
)
SETTINGS_MENU_OPTIONS = ("CHANGE CHALLENGE LEVEL", "CHANGE BREATH PACER INTERVAL", "RESTORE DEVICE")
BREATH_PACER_OPTIONS = tuple(str(n) for n in range(1, 31))
CHALLENGE_LEVEL_OPTIONS = ("1", "2", "3", "4")
DETAIL_OPTIONS = ("RETURN", "DELETE")

INDICATOR_NAMES = ("red", "blue", "green")

SESSION_PERIOD = 5
BREATH_PERIOD = 1
BATTERY_PERIOD = 15
BATTERY_TICK = 2
BATTERY_WARNING_LEVEL = 20

_TITLE_PREFIX = "Log Summary: "
_DELETE_ROW = 1


@dataclass
class ListView:
    """A list of items with a current row; -1 means no row is selected."""

    items: list[str] = field(default_factory=list)
    row: int = -1

    def show(self, items: Iterable[str], row: int = 0) -> None:
        self.items = list(items)
        self.select(row)

    def select(self, row: int) -> None:
        self.row = row if 0 <= row < len(self.items) else -1

    def up(self) -> None:
        self.select(len(self.items) - 1 if self.row == 0 else self.row - 1)

    def down(self) -> None:
        self.select(0 if self.row == len(self.items) - 1 else self.row + 1)

    @property
    def current(self) -> str | None:
        return self.items[self.row] if self.row >= 0 else None


def _number(value: float) -> str:
    return f"{value:.6g}"


class Controller:
    """Reacts to button presses and timer ticks, keeping the display in sync with a device."""

    def __init__(self, device: Device | None = None) -> None:
        self.device = device if device is not None else Device()
        self.menu = ListView()
        self.menu.show(HOME_MENU_OPTIONS)
        self.detail_list = ListView(list(DETAIL_OPTIONS))

        self.menu_visible = True
        self.session_visible = False
        self.log_visible = False

        self.applied_to_skin = True
        self.reading_active = False
        self.lit_indicator: int | None = None

        self.active_graph: list[tuple[int, float]] = []
        self.log_graph: list[tuple[int, float]] = []
        self.log_title = ""
        self.log_labels: list[str] = []

        self.coherence_label = "0"
        self.length_label = "0 s"
        self.achievement_label = "0"

        self.breath_value = 0
        self.breath_maximum = self.device.breath_pace

        self.battery_bar = self.device.battery_level
        self.battery_warning = False

        self.session_running = False
        self.breath_running = False

    # Session display logic

    def _start_session_display(self) -> None:
        self.session_running = True
        self.breath_running = True
        self.menu_visible = False
        self.session_visible = True
        self.active_graph.clear()
        self.breath_value = 0
        self.coherence_label = "0"
        self.length_label = "0 s"
        self.achievement_label = "0"

    def _end_session(self) -> None:
        self.session_running = False
        self.breath_running = False
        self.lit_indicator = None

    def _finish_session_to_summary(self) -> None:
        self._end_session()
        self.device.save_recording()
        self._display_log(len(self.device.logs) - 1)
        self.device.state = DeviceState.SESSION_END
        self.reading_active = False

    def _update_menu(self, state: DeviceState) -> None:
        device = self.device
        if state is DeviceState.HOME:
            self.menu.show(HOME_MENU_OPTIONS)
        elif state is DeviceState.SESSION_SELECT:
            self.menu.show(SESSION_OPTIONS)
        elif state is DeviceState.SETTINGS:
            self.menu.show(SETTINGS_MENU_OPTIONS)
        elif state is DeviceState.LOGS:
            self.menu.show(f"{number}: {log.date}" for number, log in enumerate(device.logs, start=1))
        elif state is DeviceState.CHALLENGE_LEVEL:
            self.menu.show(CHALLENGE_LEVEL_OPTIONS, device.challenge_level)
        elif state is DeviceState.BREATH_PACER:
            self.menu.show(BREATH_PACER_OPTIONS, device.breath_pace)
        else:
            self.menu.show(())

    def _go(self, state: DeviceState) -> None:
        self._update_menu(state)
        self.device.state = state

    def _display_log(self, index: int) -> None:
        if not 0 <= index < len(self.device.logs):
            raise IndexError(f"no log at index {index}")
        self.menu_visible = False
        self.session_visible = False
        log = self.device.logs[index]
        self.log_title = _TITLE_PREFIX + log.date
        self.log_labels = [
            f"Challenge Level: {log.challenge_level + 1}",
            f"Session Length: {log.length_of_session} s",
            f"Achievement Score: {_number(log.achievement_score)}",
            f"Average Coherence: {log.average_coherence:.1f}",
            f"Low: {log.low_percentage:.1f}%",
            f"Med: {log.medium_percentage:.1f}%",
            f"High: {log.high_percentage:.1f}%",
        ]
        self.log_graph = list(enumerate(log.plot_points))
        self.log_visible = True
        self.detail_list.select(0)

    def _close_log(self) -> None:
        self.log_visible = False
        self.menu_visible = True

    # Buttons

    def _list_for_navigation(self) -> ListView:
        if self.device.state in (DeviceState.LOG, DeviceState.SESSION_END):
            return self.detail_list
        return self.menu

    def press_up(self) -> None:
        """Move the selection up, wrapping to the last row."""
        if self.device.turned_on:
            self._list_for_navigation().up()

    def press_down(self) -> None:
        """Move the selection down, wrapping to the first row."""
        if self.device.turned_on:
            self._list_for_navigation().down()

    def press_select(self) -> None:
        """Act on the selected row according to the current screen."""
        device = self.device
        if not device.turned_on:
            return
        state = device.state
        row = self.menu.row
        detail_row = self.detail_list.row

        if state is DeviceState.HOME:
            targets = (DeviceState.SESSION_SELECT, DeviceState.SETTINGS, DeviceState.LOGS)
            if 0 <= row < len(targets):
                self._go(targets[row])
        elif state is DeviceState.SESSION_SELECT:
            if not self.applied_to_skin:
                _LOG.debug("Not applied to skin. Cannot start session.")
                return
            if 0 <= row < len(SESSION_OPTIONS):
                device.start_session(row)
            self._start_session_display()
            device.state = DeviceState.ACTIVE_SESSION
            self.reading_active = True
        elif state is DeviceState.SETTINGS:
            if row == 0:
                self._go(DeviceState.CHALLENGE_LEVEL)
            elif row == 1:
                self._go(DeviceState.BREATH_PACER)
            elif row == 2:
                device.restore()
                self._go(DeviceState.HOME)
                self.breath_maximum = device.breath_pace
        elif state is DeviceState.CHALLENGE_LEVEL:
            device.challenge_level = row
            self._go(DeviceState.SETTINGS)
        elif state is DeviceState.BREATH_PACER:
            device.breath_pace = row
            self.breath_maximum = device.breath_pace
            self._go(DeviceState.SETTINGS)
        elif state is DeviceState.LOGS:
            device.state = DeviceState.LOG
            self._display_log(row)
        elif state is DeviceState.ACTIVE_SESSION:
            self._finish_session_to_summary()
        elif state is DeviceState.SESSION_END:
            if detail_row == _DELETE_ROW:
                device.delete_log(len(device.logs) - 1)
            device.state = DeviceState.SESSION_SELECT
            self._close_log()
            self._update_menu(DeviceState.SESSION_SELECT)
        elif state is DeviceState.LOG:
            if detail_row == _DELETE_ROW:
                device.delete_log(device.log_index_by_date(self.log_title))
            device.state = DeviceState.LOGS
            self._close_log()
            self._update_menu(DeviceState.LOGS)

    def press_back(self) -> None:
        """Return to the screen the current one was reached from."""
        device = self.device
        if not device.turned_on:
            return
        state = device.state
        if state in (DeviceState.SESSION_SELECT, DeviceState.SETTINGS, DeviceState.LOGS):
            self._go(DeviceState.HOME)
        elif state in (DeviceState.CHALLENGE_LEVEL, DeviceState.BREATH_PACER):
            self._go(DeviceState.SETTINGS)
        elif state is DeviceState.LOG:
            self._close_log()
            self._go(DeviceState.LOGS)
        elif state is DeviceState.ACTIVE_SESSION:
            self._finish_session_to_summary()
        elif state is DeviceState.SESSION_END:
            self._go(DeviceState.SESSION_SELECT)
            self._close_log()

    def press_menu(self) -> None:
        """Go straight to the home screen, ending any active session."""
        device = self.device
        if not device.turned_on:
            return
        state = device.state
        if state is DeviceState.ACTIVE_SESSION:
            self._end_session()
            device.save_recording()
            self.session_visible = False
            self.reading_active = False
        elif state in (DeviceState.SESSION_END, DeviceState.LOG):
            self.log_visible = False
        self.menu_visible = True
        self._go(DeviceState.HOME)

    def press_power(self) -> None:
        """Toggle power; turning off ends any active session and returns home."""
        device = self.device
        if device.battery_level <= 0:
            return
        device.toggle_power()
        state = device.state
        if device.turned_on:
            self.menu_visible = True
            return
        if state is DeviceState.ACTIVE_SESSION:
            self._end_session()
            device.save_recording()
        self._go(DeviceState.HOME)
        self.menu_visible = False
        self.session_visible = False
        self.log_visible = False
        self.reading_active = False

    # Timers

    def tick_session(self) -> None:
        """Five-second session step: read the sensor and refresh the display."""
        if not self.session_running:
            return
        device = self.device
        if not self.applied_to_skin:
            _LOG.debug("Sensor removed from skin. Ending session.")
            if device.state is DeviceState.ACTIVE_SESSION:
                self._finish_session_to_summary()
            return

        device.update()
        recording = device.recording
        length = recording.length_of_session
        latest = recording.latest_plot_points()
        self.active_graph.extend(
            (length - len(latest) + offset, point) for offset, point in enumerate(latest)
        )
        self.coherence_label = f"{recording.coherence_score():.1f}"
        self.length_label = f"{length} s"
        self.achievement_label = f"{recording.achievement_score:.1f}"
        self.lit_indicator = device.indicator()
        print("Beep.")

    def tick_breath(self) -> None:
        """Advance the breath pacer, wrapping to zero past its maximum."""
        if not self.breath_running:
            return
        self.breath_value = 0 if self.breath_value == self.breath_maximum else self.breath_value + 1

    def tick_battery(self) -> None:
        """Drain the battery while on; an empty battery turns the device off."""
        device = self.device
        if not device.turned_on:
            return
        device.battery_level -= BATTERY_TICK
        level = device.battery_level
        if level <= 0:
            self.battery_bar = 0
            device.battery_level = 1
            self.press_power()
            device.battery_level = 0
        else:
            self.battery_bar = level
            self.battery_warning = level <= BATTERY_WARNING_LEVEL

    def recharge_battery(self) -> None:
        """Charge the battery to full."""
        self.device.reset_battery()
        self.battery_bar = self.device.battery_level
        self.battery_warning = False

    # Simulated time

    def advance(self, seconds: int, start: int = 0) -> int:
        """Run the timers for a number of simulated seconds; return the new clock."""
        clock = start
        for _ in range(seconds):
            clock += 1
            if clock % BREATH_PERIOD == 0:
                self.tick_breath()
            if clock % SESSION_PERIOD == 0:
                self.tick_session()
            if clock % BATTERY_PERIOD == 0:
                self.tick_battery()
        return clock

    def render(self) -> str:
        """Describe what the screen currently shows."""
        device = self.device
        warning = " (low)" if self.battery_warning else ""
        power = "on" if device.turned_on else "off"
        lines = [f"[{device.state.name}] power {power}, battery {self.battery_bar}%{warning}"]
        if self.menu_visible:
            lines.extend(
                f"{'>' if index == self.menu.row else ' '} {item}"
                for index, item in enumerate(self.menu.items)
            )
        if self.session_visible:
            indicator = INDICATOR_NAMES[self.lit_indicator] if self.lit_indicator is not None else "none"
            lines.append(
                f"coherence {self.coherence_label}  length {self.length_label}  "
                f"achievement {self.achievement_label}  indicator {indicator}  "
                f"breath {self.breath_value}/{self.breath_maximum}"
            )
        if self.log_visible:
            lines.append(self.log_title)
            lines.extend(f"  {label}" for label in self.log_labels)
            lines.extend(
                f"{'>' if index == self.detail_list.row else ' '} {item}"
                for index, item in enumerate(self.detail_list.items)
            )
        return "\n".join(lines)


_HELP = (
    "commands: up, down, select, back, menu, power, recharge, "
    "skin on|off, wait <seconds>, help, quit"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Drive the device from commands read on standard input."""
    parser = argparse.ArgumentParser(prog="heartwave", description="Simulated heart-coherence device.")
    parser.parse_args(argv)

    controller = Controller(Device())
    buttons = {
        "up": controller.press_up,
        "down": controller.press_down,
        "select": controller.press_select,
        "back": controller.press_back,
        "menu": controller.press_menu,
        "power": controller.press_power,
        "recharge": controller.recharge_battery,
    }
    clock = 0
    print(_HELP)
    print(controller.render())
    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            break
        if command in buttons:
            buttons[command]()
        elif command == "skin" and args and args[0] in ("on", "off"):
            controller.applied_to_skin = args[0] == "on"
        elif command == "wait" and len(args) == 1 and args[0].isdigit():
            clock = controller.advance(int(args[0]), clock)
        else:
            print(_HELP)
            continue
        print(controller.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
# UI.py
""""PySide6 user interface for the Scientific Calculator.

Structure
---------
- Calculator UI: main window with expression line, result display and the two button panels
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display and the button grid from keypad
- Turn button clicks and keyboard keys into InputStateMachine.press calls
- Render the returned DisplayState as it is
- Repeat digits / backspace while a button is held
- Shift + click on the display copies the result (pyperclip)

Responsibilities (Settings)
---------------------------
- Load Current Settings and Settings Descriptions via config_manager
- Save and apply theme changes immediately

Everything runs on the Qt thread: a key press is always finished before the next one.
"""""

import logging
import sys
from pathlib import Path

import pyperclip
from pynput.keyboard import Controller
from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, Signal, QTimer

from . import config_manager as config_manager
from . import error as E
from . import keypad as keypad
from .InputStateMachine import InputStateMachine

logger = logging.getLogger(__name__)

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Buttons that repeat while held
HOLD_BUTTONS = ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', '←']

# Physical keyboard -> keypad label
KEYBOARD_MAP = {
    Qt.Key.Key_Plus: '+',
    Qt.Key.Key_Minus: '-',
    Qt.Key.Key_Asterisk: '×',
    Qt.Key.Key_Slash: '÷',
    Qt.Key.Key_ParenLeft: '(',
    Qt.Key.Key_ParenRight: ')',
    Qt.Key.Key_Period: '.',
    Qt.Key.Key_Comma: '.',
    Qt.Key.Key_AsciiCircum: 'xʸ',
    Qt.Key.Key_Return: '=',
    Qt.Key.Key_Enter: '=',
    Qt.Key.Key_Equal: '=',
    Qt.Key.Key_Backspace: '←',
    Qt.Key.Key_Escape: 'C',
    Qt.Key.Key_Delete: 'C',
}

PANEL_COLUMNS = 4


def is_shift_pressed():
    """Whether shift is held right now (used for "shift to copy")."""
    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class ResultDisplay(QtWidgets.QLineEdit):
    """Read only result line that reports clicks, so shift + click can copy it."""

    clicked = Signal()

    def mousePressEvent(self, event):
        super().mousePressEvent(event)
        self.clicked.emit()


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Every setting in config.json is a boolean and gets a checkbox,
    labelled with its description from ui_strings.json.

    """""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> checkbox

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_settings()
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            if not isinstance(value, bool):
                logger.warning("Setting %s is not a boolean, skipped in the dialog", key_value)
                continue
            description = self.setting_description_list.get(key_value, key_value)
            checkbox = QtWidgets.QCheckBox(description)
            checkbox.setChecked(value)
            main_layout.addWidget(checkbox)
            self.widgets[key_value] = checkbox

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, checkbox in self.widgets.items():
            self.setting_value_list[key_value] = checkbox.isChecked()

        saved_settings = config_manager.save_setting(self.setting_value_list)

        if saved_settings != {}:
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 5001: {E.ERROR_MESSAGES['5001']}config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QCheckBox {color: white;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    # --- Button hold timing (ms) ---
    initial_delay = 500
    repeat_interval = 100

    def __init__(self, machine=None):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_settings()

        # --- 2. State ---
        self.machine = machine or InputStateMachine.from_settings(self.setting_value_list)
        self.button_objects = {}  # label -> QPushButton
        self.was_held = False
        self.held_button_value = None
        self.hold_timer = QTimer(self)
        self.hold_timer.timeout.connect(self.handle_hold_tick)

        # --- 3. Window Setup ---
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.setWindowTitle("Scientific Calculator")
        self.setMinimumSize(360, 600)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        header = QtWidgets.QHBoxLayout()
        self.settings_button = QtWidgets.QPushButton("⚙")
        self.settings_button.clicked.connect(self.open_settings)
        self.angle_label = QtWidgets.QLabel()
        header.addWidget(self.settings_button)
        header.addStretch(1)
        header.addWidget(self.angle_label)
        main_v_layout.addLayout(header)

        self.expression_line = QtWidgets.QLabel()
        self.expression_line.setAlignment(Qt.AlignmentFlag.AlignRight)
        main_v_layout.addWidget(self.expression_line)

        self.display = ResultDisplay("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(32)
        self.display.setFont(font)
        self.display.clicked.connect(self.copy_display)
        main_v_layout.addWidget(self.display)

        # --- 5. Button Panels ---
        for panel in (keypad.SCIENTIFIC_PANEL, keypad.STANDARD_PANEL):
            container = QtWidgets.QWidget()
            grid = QtWidgets.QGridLayout(container)
            grid.setSpacing(2)
            grid.setContentsMargins(0, 0, 0, 0)
            main_v_layout.addWidget(container, len(panel) // PANEL_COLUMNS)

            for index, key in enumerate(panel):
                button = QtWidgets.QPushButton(key.label)
                button.setSizePolicy(expanding_policy)

                if key.label in HOLD_BUTTONS:
                    button.pressed.connect(lambda val=key.label: self.handle_button_pressed_hold(val))
                    button.released.connect(self.handle_button_released_hold)
                    button.clicked.connect(lambda checked=False, val=key.label: self.handle_button_clicked_hold(val))
                else:
                    button.clicked.connect(lambda checked=False, val=key.label: self.handle_button_press(val))

                grid.addWidget(button, index // PANEL_COLUMNS, index % PANEL_COLUMNS)
                self.button_objects[key.label] = button

        self.update_darkmode()
        self.render(self.machine.state)

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        self.was_held = False
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # A click after a hold was already handled by the ticks
        if not self.was_held:
            self.handle_button_press(value)

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)

        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        label = KEYBOARD_MAP.get(event.key())
        if label is None and event.text() in keypad.KEY_TABLE:
            label = event.text()
        if label is None:
            super().keyPressEvent(event)
            return
        self.handle_button_press(label)

    def handle_button_press(self, value):
        try:
            state = self.machine.press(value)
        except E.InputError as e:
            logger.error("Error %s: %s", e.code, e.message)
            return
        self.render(state)

    def render(self, state):
        self.display.setText(state.display_buffer)
        self.expression_line.setText(state.expression_text)
        self.angle_label.setText(state.angle_mode.value)
        mode_button = self.button_objects.get(keypad.MODE_KEY)
        if mode_button:
            mode_button.setText(state.angle_mode.value)

    def copy_display(self):
        shift_held = bool(QtWidgets.QApplication.keyboardModifiers() & Qt.KeyboardModifier.ShiftModifier)
        if self.setting_value_list["shift_to_copy"] and (shift_held or is_shift_pressed()):
            pyperclip.copy(self.display.text())
            logger.debug("Copied %r to the clipboard", self.display.text())

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            for button in self.button_objects.values():
                button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            equals_button = self.button_objects.get('=')
            if equals_button:
                equals_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212; color: white;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            for button in self.button_objects.values():
                button.setStyleSheet("font-weight: normal;")
            equals_button = self.button_objects.get('=')
            if equals_button:
                equals_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload so theme and evaluation changes apply; the running session keeps its angle mode
        self.setting_value_list = config_manager.load_settings()
        self.machine.apply_settings(self.setting_value_list)
        self.update_darkmode()


def main():
    app = QtWidgets.QApplication()
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

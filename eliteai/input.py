"""Input codes, input events and a queue that answers input queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class InputType(Enum):
    """Where an input action comes from."""

    DEFAULT = 0
    KEYBOARD = 1
    MOUSE_BUTTON = 2
    MOUSE_WHEEL = 3
    MOUSE_MOTION = 4


class InputState(Enum):
    """Whether an input is held down or released."""

    DOWN = 0
    RELEASED = 1


class InputMouseButton(IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class InputScancode(IntEnum):
    """Keyboard scancodes, following the USB usage page numbering."""

    UNKNOWN = 0
    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29

    NUM_1 = 30
    NUM_2 = 31
    NUM_3 = 32
    NUM_4 = 33
    NUM_5 = 34
    NUM_6 = 35
    NUM_7 = 36
    NUM_8 = 37
    NUM_9 = 38
    NUM_0 = 39

    RETURN = 40
    ESCAPE = 41
    BACKSPACE = 42
    TAB = 43
    SPACE = 44

    MINUS = 45
    EQUALS = 46
    LEFT_BRACKET = 47
    RIGHT_BRACKET = 48
    BACKSLASH = 49
    NONUSLASH = 50
    SEMICOLON = 51
    APOSTROPHE = 52
    GRAVE = 53
    COMMA = 54
    PERIOD = 55
    SLASH = 56

    CAPSLOCK = 57

    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69

    PRINT_SCREEN = 70
    SCROLL_LOCK = 71
    PAUSE = 72
    INSERT = 73
    HOME = 74
    PAGE_UP = 75
    DELETE = 76
    END = 77
    PAGE_DOWN = 78
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82

    NUM_LOCK_CLEAR = 83
    KP_DIVIDE = 84
    KP_MULTIPLY = 85
    KP_MINUS = 86
    KP_PLUS = 87
    KP_ENTER = 88
    KP_1 = 89
    KP_2 = 90
    KP_3 = 91
    KP_4 = 92
    KP_5 = 93
    KP_6 = 94
    KP_7 = 95
    KP_8 = 96
    KP_9 = 97
    KP_0 = 98
    KP_PERIOD = 99

    F13 = 104
    F14 = 105
    F15 = 106
    F16 = 107
    F17 = 108
    F18 = 109
    F19 = 110
    F20 = 111
    F21 = 112
    F22 = 113
    F23 = 114
    F24 = 115

    VOLUME_UP = 128
    VOLUME_DOWN = 129
    LOCKING_CAPS_LOCK = 130
    LOCKING_NUM_LOCK = 131
    LOCKING_SCROLL_LOCK = 132
    KP_COMMA = 133
    KP_EQUALS_AS400 = 134

    LCTRL = 224
    LSHIFT = 225
    LALT = 226
    LGUI = 227
    RCTRL = 228
    RSHIFT = 229
    RALT = 230
    RGUI = 231


@dataclass(frozen=True)
class KeyboardData:
    time_stamp: int = 0
    scan_code: InputScancode = InputScancode.UNKNOWN


@dataclass(frozen=True)
class MouseData:
    """Mouse event data; x/y hold a position or, for the wheel, a scroll amount."""

    time_stamp: int = 0
    button: InputMouseButton = InputMouseButton.NONE
    x: int = 0
    y: int = 0
    x_rel: int = 0
    y_rel: int = 0


@dataclass(frozen=True)
class InputAction:
    input_type: InputType = InputType.DEFAULT
    state: InputState = InputState.DOWN
    data: KeyboardData | MouseData = field(default_factory=KeyboardData)


def _code(data: KeyboardData | MouseData) -> int:
    """The key or button code an action carries, whichever kind it is."""
    if isinstance(data, KeyboardData):
        return int(data.scan_code)
    return int(data.button)


class InputManager:
    """Collects the input actions of a frame and answers queries on them."""

    def __init__(self) -> None:
        self._actions: list[InputAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self):
        return iter(self._actions)

    def add_input_action(self, action: InputAction) -> None:
        self._actions.append(action)

    def flush(self) -> None:
        self._actions.clear()

    def _is_present(self, input_type: InputType, state: InputState, code: int) -> bool:
        return any(
            action.input_type is input_type
            and action.state is state
            and _code(action.data) == code
            for action in self._actions
        )

    def is_keyboard_key_down(self, key: InputScancode) -> bool:
        return self._is_present(InputType.KEYBOARD, InputState.DOWN, key)

    def is_keyboard_key_up(self, key: InputScancode) -> bool:
        return self._is_present(InputType.KEYBOARD, InputState.RELEASED, key)

    def is_mouse_button_down(self, button: InputMouseButton) -> bool:
        return self._is_present(InputType.MOUSE_BUTTON, InputState.DOWN, button)

    def is_mouse_button_up(self, button: InputMouseButton) -> bool:
        return self._is_present(InputType.MOUSE_BUTTON, InputState.RELEASED, button)

    def is_mouse_scrolling(self) -> bool:
        return self._is_present(InputType.MOUSE_WHEEL, InputState.DOWN, InputMouseButton.NONE)

    def is_mouse_moving(self) -> bool:
        return self._is_present(InputType.MOUSE_MOTION, InputState.DOWN, InputMouseButton.NONE)

    def get_mouse_data(
        self,
        input_type: InputType,
        button: InputMouseButton = InputMouseButton.NONE,
    ) -> MouseData:
        """First mouse data of the given type and button, or empty data if none."""
        for action in self._actions:
            if (
                action.input_type is input_type
                and isinstance(action.data, MouseData)
                and action.data.button == button
            ):
                return action.data
        return MouseData()
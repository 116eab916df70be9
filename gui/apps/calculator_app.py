import FreeSimpleGUI as sg

from calc_core.engine import CalculatorEngine
from calc_core.symbols import BUTTON_LABELS, CLEAR, DECIMAL_POINT, EQUALS, SQUARE, is_operator

DISPLAY_KEY = '-DISPLAY-'

KEY_MAP = {
    'Escape': CLEAR, 'Return': EQUALS, 'equal': EQUALS, 'KP_Enter': EQUALS,
    'plus': '+', 'minus': '-', 'asterisk': '*', 'slash': '/',
    'period': DECIMAL_POINT, 'comma': DECIMAL_POINT,
    'asciicircum': SQUARE, '^': SQUARE, 'x^2': SQUARE,
}


def normalize_event(event):
    """Map a window or keyboard event to a calculator button symbol."""
    if not isinstance(event, str):
        return event
    if ':' in event:
        event = event.split(':')[0]
    event = event.strip()
    if event.startswith('KP_') and event[3:].isdigit():
        event = event[3:]
    return KEY_MAP.get(event, event)


class CalculatorApp:
    BUTTON_SIZE = (5, 2)
    BUTTON_FONT = ('Helvetica', 16, 'bold')
    DISPLAY_FONT = ('Helvetica', 32, 'bold')

    def __init__(self, engine=None, window=None, logger=None):
        self.engine = engine or CalculatorEngine(logger=logger)
        self.window = window or self._build_window()
        self.window[DISPLAY_KEY].update(self.engine.display)

    def _button_color(self, label):
        if label == CLEAR:
            return ('white', '#d35400')
        if label == EQUALS:
            return ('white', '#27ae60')
        if is_operator(label):
            return ('white', '#2980b9')
        return ('white', '#34495e')

    def _build_window(self):
        layout = [[sg.Text(
            '', size=(12, 1), key=DISPLAY_KEY, justification='right',
            font=self.DISPLAY_FONT, background_color='#222',
            text_color='#1565c0', pad=((8, 8), (18, 18)), relief='groove', border_width=2
        )]]
        for row in BUTTON_LABELS:
            layout.append([
                sg.Button(label, size=self.BUTTON_SIZE, font=self.BUTTON_FONT,
                          button_color=self._button_color(label))
                for label in row
            ])
        layout.append([sg.Button('Close', size=(23, 1), font=('Helvetica', 12), button_color=('white', '#c0392b'))])
        return sg.Window(
            'Calculator', layout, finalize=True, element_justification='center',
            background_color='#222', return_keyboard_events=True
        )

    def handle_event(self, event, values):
        if event in (sg.WIN_CLOSED, 'Close'):
            return 'close'
        symbol = normalize_event(event)
        self.window[DISPLAY_KEY].update(self.engine.handle_input(symbol))

    def run(self):
        while True:
            event, values = self.window.read()
            result = self.handle_event(event, values)
            if result == 'close':
                break
        self.window.close()


def main():
    app = CalculatorApp()
    app.run()


if __name__ == '__main__':
    main()

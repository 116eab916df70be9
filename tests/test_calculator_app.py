import unittest
from unittest.mock import MagicMock, Mock

import FreeSimpleGUI as sg

from calc_core.engine import CalculatorEngine
from gui.apps.calculator_app import DISPLAY_KEY, CalculatorApp, normalize_event


class TestNormalizeEvent(unittest.TestCase):

    def test_buttons_pass_through(self):
        for label in ('7', '+', '√', 'x²', '±', 'C', '='):
            self.assertEqual(normalize_event(label), label)

    def test_keyboard_events(self):
        self.assertEqual(normalize_event('Return:36'), '=')
        self.assertEqual(normalize_event('Escape:9'), 'C')
        self.assertEqual(normalize_event('period:60'), '.')
        self.assertEqual(normalize_event('KP_7'), '7')
        self.assertEqual(normalize_event('x^2'), 'x²')

    def test_non_string_events(self):
        self.assertIsNone(normalize_event(None))


class TestCalculatorApp(unittest.TestCase):

    def setUp(self):
        self.window = MagicMock()
        self.app = CalculatorApp(window=self.window)

    def shown(self):
        return self.window[DISPLAY_KEY].update.call_args[0][0]

    def test_initial_display(self):
        self.assertEqual(self.shown(), '0')

    def test_button_events_drive_engine(self):
        for event in ('1', '2', '+', '3', '='):
            self.app.handle_event(event, {})
        self.assertEqual(self.shown(), '15')

    def test_keyboard_events_drive_engine(self):
        for event in ('9', 'asterisk:63', '2', 'Return:36'):
            self.app.handle_event(event, {})
        self.assertEqual(self.shown(), '18')

    def test_close_events(self):
        self.assertEqual(self.app.handle_event(sg.WIN_CLOSED, {}), 'close')
        self.assertEqual(self.app.handle_event('Close', {}), 'close')

    def test_unknown_event_leaves_display(self):
        self.app.handle_event('4', {})
        self.app.handle_event('Shift_L:50', {})
        self.assertEqual(self.shown(), '4')

    def test_run_loop_closes_window(self):
        self.window.read.side_effect = [('5', {}), ('Close', {})]
        self.app.run()
        self.assertEqual(self.shown(), '5')
        self.window.close.assert_called_once()

    def test_injected_engine_and_logger(self):
        logger = Mock()
        engine = CalculatorEngine(logger=logger)
        app = CalculatorApp(engine=engine, window=MagicMock())
        self.assertIs(app.engine, engine)
        app.handle_event('Shift_L:50', {})
        logger.assert_called_once()


if __name__ == '__main__':
    unittest.main()

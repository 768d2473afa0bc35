import unittest
from json import loads
from unittest.mock import patch, MagicMock

from dotflat.shared.output import output_json, output_table


class TestOutputModule(unittest.TestCase):

    @patch("builtins.print")
    def test_output_json(self, mock_print):
        flat = {'a.b': 1, 'c': [1, 2], 'd': None}

        output_json(flat)

        mock_print.assert_called_once()
        self.assertEqual(loads(mock_print.call_args.args[0]), flat)

    @patch("builtins.print")
    def test_output_json_not_serialisable(self, mock_print):
        output_json({'a': {1, 2}, 'b': object})

        printed = loads(mock_print.call_args.args[0])
        self.assertEqual(printed['a'], '{1, 2}')
        self.assertEqual(printed['b'], str(object))

    @patch("dotflat.shared.output.Console")
    def test_output_table(self, mock_console_class):
        mock_console = MagicMock()
        mock_console_class.return_value = mock_console

        output_table({'a.b': 1, 'c': '[red]x'}, 'Title')

        mock_console.print.assert_called_once()
        table = mock_console.print.call_args.args[0]
        self.assertEqual(table.title, 'Title')
        self.assertEqual([col.header for col in table.columns], ['Key', 'Value'])
        self.assertEqual(table.row_count, 2)

        keys = [str(cell) for cell in table.columns[0].cells]
        values = [str(cell) for cell in table.columns[1].cells]
        self.assertEqual(keys, ['a.b', 'c'])
        self.assertEqual(values, ['1', '"[red]x"'])

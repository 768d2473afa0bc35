# Copyright 2026 The dotflat Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from json import dumps
from rich.console import Console
from rich.table import Table
from rich.text import Text


def output_json(flat: dict) -> None:
    '''
        Outputs the flattened mapping in JSON

        Args: (dict) flat - flattened mapping

        Returns: prints output to stdout
    '''
    print(dumps(flat, default=str))


def output_table(flat: dict, title: str) -> None:
    '''
        Outputs the flattened mapping in CLI rich Table

        Args: (dict) flat - flattened mapping
              (str) title - Table title

        Returns: prints output to stdout
    '''
    table = Table(title=title)

    table.add_column('Key', header_style='cyan', justify='left')
    table.add_column('Value', header_style='cyan', justify='left')

    # Text keeps rich from reading brackets in values as markup
    for key, value in flat.items():
        table.add_row(Text(str(key)), Text(dumps(value, default=str)))

    console = Console()
    console.print(table)

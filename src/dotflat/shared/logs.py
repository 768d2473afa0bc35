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
'''
    Logging setup shared by the command line tool.
'''
import logging
from os import getenv
from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVEL = getenv('DOTFLAT_LOG_LEVEL', DEFAULT_LOG_LEVEL)

log = logging.getLogger(__name__)


def setup_logging(level: str = None) -> None:
    '''
        Sends log records to stderr through rich.

        Unknown level names fall back to WARNING.

        Args: (str) level=None - level name, DOTFLAT_LOG_LEVEL when omitted
    '''
    requested = (level or LOG_LEVEL).upper()

    # getLevelName returns an int only for registered level names
    known = isinstance(logging.getLevelName(requested), int)

    logging.basicConfig(
        level=requested if known else DEFAULT_LOG_LEVEL,
        format='%(message)s',
        datefmt='[%X]',
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )

    if not known:
        log.warning(f'Unknown log level {requested}, using {DEFAULT_LOG_LEVEL}')

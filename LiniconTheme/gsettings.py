# This file is part of LiniconTheme
# Copyright: 2026 LiniconTheme contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import subprocess
from typing import Sequence

from LiniconTheme.parsers import ThemeSourceError

GSETTINGS_COMMAND = ('gsettings', 'get', 'org.gnome.desktop.interface', 'icon-theme')


def run_gsettings(command: Sequence[str] = GSETTINGS_COMMAND) -> str:
    """Run *command* and return its standard output as text.

    The exit status is not checked: a failing command normally prints
    nothing to ``stdout``, which is reported the same way as any other
    unusable output.
    """

    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise ThemeSourceError(str(exc)) from exc

    if not completed.stdout:
        raise ThemeSourceError(f'{command[0]} printed nothing '
                               f'(exit status {completed.returncode})')
    try:
        return completed.stdout.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise ThemeSourceError(f'{command[0]} output is not UTF-8') from exc


def clean_gsettings_output(text: str) -> str:
    # gsettings prints GVariant strings, like 'Adwaita'
    text = text.removesuffix('\n')
    text = text.removeprefix("'")
    return text.removesuffix("'")

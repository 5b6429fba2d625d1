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

import os


def get_home_dir():
    return os.environ.get('HOME')

def get_config_dir(home):
    """Return the directory holding user configuration files.

    ``$XDG_CONFIG_HOME`` is used verbatim when it is set to a non-empty
    value, otherwise ``<home>/.config``.
    """
    xdg_config_home = os.environ.get('XDG_CONFIG_HOME')
    if xdg_config_home:
        return xdg_config_home
    return home + '/.config'

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

"""Get the user's current icon theme on Linux.

There is no single standard place for the icon theme on Linux, so several
places where it might be stored are checked in turn::

    from LiniconTheme import get_icon_theme
    print('Your current icon theme is:', get_icon_theme())
"""

from LiniconTheme.icontheme import (
    DEFAULT_ORDER,
    Check,
    get_icon_theme,
    get_icon_theme_order,
)

__version__ = '1.0.0'

probe = get_icon_theme_order
probe_default = get_icon_theme

__all__ = [
    'Check',
    'DEFAULT_ORDER',
    'get_icon_theme',
    'get_icon_theme_order',
    'probe',
    'probe_default',
]

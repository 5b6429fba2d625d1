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

from PyQt6.QtGui import QIcon

from LiniconTheme.icontheme import get_icon_theme, get_icon_theme_order


def setIconThemeFromSystem(themeName='', order=None):
    """Make *themeName* the QIcon theme, falling back to the system one.

    If *themeName* is empty, or Qt only knows the ``hicolor`` fallback
    theme, the system icon theme is looked up (using *order* if given)
    and applied when found. Returns the resulting theme name.
    """
    QIcon.setThemeName(themeName)
    if QIcon.themeName() in ('hicolor', ''):
        if order is None:
            systemTheme = get_icon_theme()
        else:
            systemTheme = get_icon_theme_order(order)
        if systemTheme is not None:
            QIcon.setThemeName(systemTheme)
    return QIcon.themeName()

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

import logging
from enum import Enum
from os.path import join

from LiniconTheme.gsettings import clean_gsettings_output, run_gsettings
from LiniconTheme.parsers import (
    ThemeSourceError,
    read_desktop_entry_attr,
    read_ini_value,
)
from LiniconTheme.paths import get_config_dir, get_home_dir

logger = logging.getLogger(__name__)


class Check(Enum):
    """Places where the icon theme may be stored."""

    #: ``$XDG_CONFIG_HOME/kdeglobals`` -> Icons -> Theme
    KDE_GLOBALS = 'kdeglobals'
    #: Output of ``gsettings get org.gnome.desktop.interface icon-theme``
    GSETTINGS = 'gsettings'
    #: ``$XDG_CONFIG_HOME/gtk-3.0/settings.ini`` -> Settings -> gtk-icon-theme-name
    GTK3 = 'gtk3'
    #: ``$HOME/.gtkrc-2.0`` -> gtk-icon-theme-name
    GTK2 = 'gtk2'
    #: ``$XDG_CONFIG_HOME/theme.conf`` -> Settings -> icon-theme-name
    THEME_CONF = 'theme.conf'


DEFAULT_ORDER = (
    Check.KDE_GLOBALS,
    Check.GSETTINGS,
    Check.GTK3,
    Check.GTK2,
    Check.THEME_CONF,
)


def get_from_kdeglobals(home):
    path = join(get_config_dir(home), 'kdeglobals')
    try:
        return read_desktop_entry_attr(path, 'Icons', 'Theme')
    except ThemeSourceError as error:
        logger.debug('kdeglobals: %s', error)

def get_from_gsettings():
    try:
        output = run_gsettings()
    except ThemeSourceError as error:
        logger.debug('gsettings: %s', error)
        return
    return clean_gsettings_output(output)

def get_from_gtk3(home):
    path = join(get_config_dir(home), 'gtk-3.0', 'settings.ini')
    try:
        return read_ini_value(path, 'Settings', 'gtk-icon-theme-name')
    except ThemeSourceError as error:
        logger.debug('gtk3: %s', error)

def get_from_gtk2(home):
    # GTK 2 does not follow XDG, the file is always in $HOME
    path = home + '/.gtkrc-2.0'
    try:
        return read_ini_value(path, None, 'gtk-icon-theme-name')
    except ThemeSourceError as error:
        logger.debug('gtk2: %s', error)

def get_from_theme_conf(home):
    path = join(get_config_dir(home), 'theme.conf')
    try:
        return read_ini_value(path, 'Settings', 'icon-theme-name')
    except ThemeSourceError as error:
        logger.debug('theme.conf: %s', error)


def _check_source(check, home):
    if check is Check.KDE_GLOBALS:
        return get_from_kdeglobals(home)
    elif check is Check.GSETTINGS:
        return get_from_gsettings()
    elif check is Check.GTK3:
        return get_from_gtk3(home)
    elif check is Check.GTK2:
        return get_from_gtk2(home)
    elif check is Check.THEME_CONF:
        return get_from_theme_conf(home)
    raise ValueError(f'Unknown icon theme source: {check!r}')

def get_icon_theme_order(order):
    """Return the icon theme from the first source in *order* that has one.

    *order* is an iterable of :class:`Check` members. Sources are tried
    one by one and the remaining ones are skipped as soon as a theme is
    found. Returns None if ``$HOME`` is not set or no source has a theme.
    """
    home = get_home_dir()
    if home is None:
        logger.debug('HOME is not set, cannot look up the icon theme')
        return
    for check in order:
        theme = _check_source(check, home)
        if theme is not None:
            logger.debug('Found icon theme %r in %s', theme, check.value)
            return theme
    return None

def get_icon_theme():
    """Return the user's icon theme, or None if it can't be found.

    The following places are checked in order:

    - ``$XDG_CONFIG_HOME/kdeglobals`` -> Icons -> Theme
    - output of ``gsettings get org.gnome.desktop.interface icon-theme``
    - ``$XDG_CONFIG_HOME/gtk-3.0/settings.ini`` -> Settings -> gtk-icon-theme-name
    - ``$HOME/.gtkrc-2.0`` -> gtk-icon-theme-name
    - ``$XDG_CONFIG_HOME/theme.conf`` -> Settings -> icon-theme-name
    """
    return get_icon_theme_order(DEFAULT_ORDER)

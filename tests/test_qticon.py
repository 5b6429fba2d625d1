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
import sys
import unittest
from unittest.mock import patch

import pytest

pytest.importorskip('PyQt6.QtGui')

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication

from LiniconTheme import Check
from LiniconTheme.qticon import setIconThemeFromSystem

# Keep a reference so the application is not garbage collected.
app = QApplication.instance() or QApplication(sys.argv)


class TestQtIconTheme(unittest.TestCase):
    def setUp(self):
        self.previousTheme = QIcon.themeName()

    def tearDown(self):
        patch.stopall()
        QIcon.setThemeName(self.previousTheme)

    def test_explicitThemeWins(self):
        probe = patch('LiniconTheme.qticon.get_icon_theme', return_value='Papirus').start()
        self.assertEqual(setIconThemeFromSystem('breeze'), 'breeze')
        probe.assert_not_called()

    def test_systemThemeUsedWhenEmpty(self):
        patch('LiniconTheme.qticon.get_icon_theme', return_value='Papirus').start()
        self.assertEqual(setIconThemeFromSystem(), 'Papirus')
        self.assertEqual(QIcon.themeName(), 'Papirus')

    def test_hicolorIsReplaced(self):
        patch('LiniconTheme.qticon.get_icon_theme', return_value='Adwaita').start()
        self.assertEqual(setIconThemeFromSystem('hicolor'), 'Adwaita')

    def test_customOrder(self):
        probe = patch('LiniconTheme.qticon.get_icon_theme_order', return_value='Yaru').start()
        order = [Check.GSETTINGS]
        self.assertEqual(setIconThemeFromSystem(order=order), 'Yaru')
        probe.assert_called_once_with(order)

    def test_nothingFound(self):
        patch('LiniconTheme.qticon.get_icon_theme', return_value=None).start()
        self.assertEqual(setIconThemeFromSystem('hicolor'), 'hicolor')

if __name__ == '__main__':
    unittest.main()

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

import configparser

# Name of the section that holds keys preceding any section header
_TOP_LEVEL = '__top_level__'
# Cannot appear in a section header, so no section inherits keys from it
_NO_DEFAULTS = '\0'


class ThemeSourceError(RuntimeError):
    pass


def _read_file(path):
    try:
        with open(path, encoding='utf-8') as config_file:
            return config_file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeSourceError(f'cannot read {path}: {exc}') from exc

def _parse(path, text, delimiters):
    parser = configparser.ConfigParser(interpolation=None,
                                       delimiters=delimiters,
                                       strict=False,
                                       default_section=_NO_DEFAULTS)
    parser.optionxform = str
    # Indented lines are entries of their own, not continuations
    text = '\n'.join(line.lstrip() for line in text.splitlines())
    try:
        parser.read_string(text, source=path)
    except configparser.Error as exc:
        raise ThemeSourceError(f'cannot parse {path}: {exc}') from exc
    return parser

def _lookup(parser, path, section, key):
    if not parser.has_section(section):
        raise ThemeSourceError(f'{path} has no [{section}] section')
    if not parser.has_option(section, key):
        raise ThemeSourceError(f'{path} has no {key} in [{section}]')
    return parser.get(section, key)

def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value


def read_desktop_entry_attr(path, section, attr):
    """Return attribute *attr* of group *section* in a desktop entry file.

    Keys are case sensitive and only ``=`` separates keys from values.
    Raises :class:`ThemeSourceError` if the file cannot be read or parsed,
    or if the group or attribute is missing.
    """
    parser = _parse(path, _read_file(path), ('=',))
    return _lookup(parser, path, section, attr)

def read_ini_value(path, section, key):
    """Return *key* of *section* in an INI-style file.

    When *section* is None, *key* is looked up among the entries that
    come before the first section header. One pair of surrounding quotes
    is removed from the value.
    """
    text = _read_file(path)
    if section is None:
        text = f'[{_TOP_LEVEL}]\n' + text
        section = _TOP_LEVEL
    parser = _parse(path, text, ('=', ':'))
    return _unquote(_lookup(parser, path, section, key))

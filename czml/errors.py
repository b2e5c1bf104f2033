# -*- coding: utf-8 -*-
# Copyright (C) 2013  Christian Ledermann
#
# This library is free software; you can redistribute it and/or
#    modify it under the terms of the GNU Lesser General Public
#    License as published by the Free Software Foundation; either
#    version 2.1 of the License, or (at your option) any later version.
#
#    This library is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
#    Lesser General Public License for more details.
#
#    You should have received a copy of the GNU Lesser General Public
#    License along with this library; if not, write to the Free Software
#    Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA
"""Errors raised while reading and writing CZML, and the decode report."""


def format_path(path):
    """Render a decode path such as ``(2, 'billboard', 'scale')``.

    Integers are packet or interval indexes, strings are JSON keys.

    :param path: tuple of indexes and keys
    :return: ``[2].billboard.scale``

    """
    parts = []
    for p in path:
        if isinstance(p, int):
            parts.append('[%d]' % p)
        elif parts:
            parts.append('.%s' % p)
        else:
            parts.append(p)
    return ''.join(parts) or '<root>'


class DecodeError(ValueError):
    """A JSON value does not have the shape expected for a CZML element."""

    def __init__(self, message, path=()):
        super(DecodeError, self).__init__(message)
        self.message = message
        self.path = tuple(path)

    def prefixed(self, *keys):
        """Return a copy of this error located below ``keys``."""
        return DecodeError(self.message, tuple(keys) + self.path)

    @property
    def location(self):
        return format_path(self.path)

    def __str__(self):
        if self.path:
            return '%s: %s' % (self.location, self.message)
        return self.message


class EncodeError(ValueError):
    """A typed value cannot be written as CZML.

    Values built through the constructors are always encodable, this is
    only raised for states that cannot be reached that way.

    """


class DecodeProblem(object):
    """Something that was skipped while decoding, and where."""

    def __init__(self, path, message):
        self.path = tuple(path)
        self.message = message

    @property
    def location(self):
        return format_path(self.path)

    def __eq__(self, other):
        return (isinstance(other, DecodeProblem) and
                self.path == other.path and self.message == other.message)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return 'DecodeProblem(%r, %r)' % (self.location, self.message)


class DecodeReport(object):
    """Collects what a tolerant decode left out.

    ``problems`` lists malformed fields, properties and packets that were
    skipped; ``ignored`` lists the paths of keys that are not part of the
    object model.

    """

    def __init__(self):
        self.problems = []
        self.ignored = []

    def skip(self, error, path=()):
        """Record a :class:`DecodeError` raised below ``path``."""
        problem = DecodeProblem(tuple(path) + error.path, error.message)
        self.problems.append(problem)
        return problem

    def ignore(self, path):
        self.ignored.append(tuple(path))

    @property
    def ok(self):
        return not self.problems

    def __len__(self):
        return len(self.problems)

    def __iter__(self):
        return iter(self.problems)

    def __repr__(self):
        return '<DecodeReport problems=%d ignored=%d>' % (
            len(self.problems), len(self.ignored))

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
"""Read and write whole CZML documents from and to files."""
import io
import logging
import sys

from .czml import parse, dumps

logger = logging.getLogger(__name__)


def read_document(path, encoding='utf-8'):
    """Read and parse a CZML file.

    :param path: file name
    :param encoding:
    :return: DecodeResult
    :raises OSError: the file cannot be read

    """
    with io.open(path, 'r', encoding=encoding) as f:
        text = f.read()
    logger.debug('read %d characters from %s', len(text), path)
    result = parse(text)
    if result.status != result.SUCCESS:
        logger.debug('%s: %s with %d problems', path, result.status,
                     len(result.report))
    return result


def write_document(document, path_or_stream=None, indent=None,
                   encoding='utf-8', **kwargs):
    """Write a CZML document as JSON text.

    :param document: CZML
    :param path_or_stream: file name, an open text stream or None for
        ``sys.stdout``
    :param indent: pretty print with this indent, compact if None
    :param kwargs: passed on to ``json.dumps``
    :return: the number of characters written

    """
    text = dumps(document, indent=indent, **kwargs)
    if path_or_stream is None:
        path_or_stream = sys.stdout
    if hasattr(path_or_stream, 'write'):
        path_or_stream.write(text)
    else:
        with io.open(path_or_stream, 'w', encoding=encoding) as f:
            f.write(text)
    logger.debug('wrote %d characters to %s', len(text),
                 getattr(path_or_stream, 'name', path_or_stream))
    return len(text)

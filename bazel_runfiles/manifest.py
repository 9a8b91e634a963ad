# Copyright 2021, 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Functions to read runfiles manifests.

A runfiles manifest is a text file with one entry per line.  Each entry
consists of a runfile name, a single space, and the real filename of the
runfile.  Runfile names use forward slashes on all platforms; real filenames
are platform-native and may contain further spaces.  An entry with an empty
real filename marks a runfile that is known not to exist."""

from collections.abc import Iterable, Iterator
import logging
import os
from typing import Union

def read(file: Union[str, os.PathLike[str]]) -> dict[str, str]:
    """Reads the manifest file with the given name.

    Raises:
      OSError if the manifest can’t be opened or read
      ValueError if the manifest contains a malformed line
    """
    name = os.fspath(file)
    with open(name, mode='rt', encoding='utf-8') as stream:
        result = parse(stream, name)
    _logger.debug('read %d entries from runfiles manifest %s',
                  len(result), name)
    return result


def parse(lines: Iterable[str], name: str = '<manifest>') -> dict[str, str]:
    """Parses manifest lines into a mapping of runfile names to filenames.

    If a runfile name occurs more than once, the last entry wins.
    """
    result: dict[str, str] = {}
    for key, value in entries(lines, name):
        if key in result and result[key] != value:
            _logger.warning('duplicate entry for runfile “%s” in %s, '
                            'using “%s”', key, name, value)
        result[key] = value
    return result


def entries(lines: Iterable[str],
            name: str = '<manifest>') -> Iterator[tuple[str, str]]:
    """Yields (runfile name, real filename) pairs in file order."""
    for number, line in enumerate(lines, start=1):
        line = line.rstrip('\n')
        if not line:
            continue
        key, sep, value = line.partition(' ')
        if not sep or not key:
            raise ValueError(
                f'malformed line {number} in runfiles manifest {name}: '
                f'“{line}”')
        yield key, value


_logger = logging.getLogger('bazel_runfiles.manifest')

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

"""Runfiles lookup strategies.

This is an internal helper library for bazel_runfiles.  Don’t rely on it in
any way outside that package; use bazel_runfiles.runfiles instead.  The
resolvers here don’t validate their arguments."""

from collections.abc import Mapping
import logging
import os
import posixpath
from typing import Optional, Protocol, Union

from bazel_runfiles import manifest

class Resolver(Protocol):
    """Looks up runfile names."""

    def resolve(self, path: str) -> Optional[str]:
        """Returns the real filename of a runfile, or None if unknown."""

    def environment(self) -> Mapping[str, str]:
        """Returns environment variables for subprocesses."""


class ManifestResolver:
    """Looks up runfiles in a runfiles manifest.

    The manifest is read and parsed once when the object is constructed.
    """

    def __init__(self, manifest_file: Union[str, os.PathLike[str]]) -> None:
        self._manifest_file = os.fspath(manifest_file)
        self._entries = manifest.read(self._manifest_file)
        self._directories = _directories(self._entries)
        _logger.info('loaded runfiles manifest %s with %d entries '
                     'and %d directories', self._manifest_file,
                     len(self._entries), len(self._directories))

    def resolve(self, path: str) -> Optional[str]:
        """Returns the real filename of a runfile, or None if unknown.

        An exact entry always wins, even if its value is empty.  Otherwise the
        longest directory entry that contains the runfile is used.
        """
        if path in self._entries:
            return self._entries[path] or None
        prefix = path
        while True:
            prefix, sep, _ = prefix.rpartition('/')
            if not sep:
                return None
            if prefix in self._directories:
                return self._entries[prefix] + path[len(prefix):]

    def environment(self) -> Mapping[str, str]:
        """Returns environment variables for subprocesses."""
        directory = _runfiles_dir(self._manifest_file)
        return {
            'RUNFILES_MANIFEST_FILE': self._manifest_file,
            'RUNFILES_DIR': directory,
            'JAVA_RUNFILES': directory,
        }

    def __repr__(self) -> str:
        return f'ManifestResolver({self._manifest_file!r})'


class DirectoryResolver:
    """Looks up runfiles below a runfiles directory.

    This never reports a runfile as unknown and doesn’t access the filesystem.
    """

    def __init__(self, directory: Union[str, os.PathLike[str]]) -> None:
        self._directory = os.fspath(directory)

    def resolve(self, path: str) -> str:
        """Returns the filename of a runfile below the runfiles directory."""
        if self._directory.endswith('/'):
            return self._directory + path
        return self._directory + '/' + path

    def environment(self) -> Mapping[str, str]:
        """Returns environment variables for subprocesses."""
        return {
            'RUNFILES_DIR': self._directory,
            'JAVA_RUNFILES': self._directory,
        }

    def __repr__(self) -> str:
        return f'DirectoryResolver({self._directory!r})'


def _directories(entries: Mapping[str, str]) -> frozenset[str]:
    """Returns the manifest keys that have other keys below them."""
    result = set()
    for key in entries:
        parent = posixpath.dirname(key)
        while parent:
            if entries.get(parent):
                result.add(parent)
            parent = posixpath.dirname(parent)
    return frozenset(result)


def _runfiles_dir(manifest_file: str) -> str:
    # Bazel places the manifest either inside the runfiles directory or next
    # to it.
    if manifest_file.endswith(('/MANIFEST', '\\MANIFEST')):
        return manifest_file[:-len('/MANIFEST')]
    if manifest_file.endswith('.runfiles_manifest'):
        return manifest_file[:-len('_manifest')]
    return ''


_logger = logging.getLogger('bazel_runfiles.private.resolvers')

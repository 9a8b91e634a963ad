# Copyright 2021-2023, 2025, 2026 Google LLC
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

"""Contains a class to access Bazel runfiles.

Usage:

    run_files = runfiles.create()
    filename = run_files.resolve('my_workspace/data/input.txt')
    if filename is None:
        ...  # the runfile is definitely unknown

The returned filename isn’t checked for existence; callers have to do that
themselves."""

from collections.abc import Mapping
import os
import pathlib
import re
from typing import Optional, Union

from bazel_runfiles.private import resolvers
from bazel_runfiles.private import strategy

class Runfiles:
    """Represents a set of Bazel runfiles.

    The environment is read once when the object is constructed; later changes
    to the process environment have no effect.  Instances are immutable and can
    be shared between threads.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        # Copy the environment so that later changes to the mapping don’t
        # leak into the object.
        snapshot = dict(os.environ if env is None else env)
        self._impl: resolvers.Resolver = strategy.select(snapshot)

    def resolve(self, path: Union[str, os.PathLike[str]]) -> Optional[str]:
        """Resolves a runfile name to a real filename.

        Returns None if the runfile is definitely unknown.  A non-None result
        doesn’t guarantee that the file exists.

        Raises:
          ValueError if the runfile name is empty, absolute, or contains
            uplevel references
        """
        path = _check(path)
        return self._impl.resolve(path)

    def locate(self, name: pathlib.PurePosixPath) -> pathlib.Path:
        """Resolves a runfile name to an absolute filename.

        Raises:
          ValueError if the runfile name is invalid
          FileNotFoundError if the runfile wasn’t found in the manifest
        """
        result = self.resolve(name.as_posix())
        if not result:
            raise FileNotFoundError(f'Runfile “{name}” not found')
        return pathlib.Path(os.path.abspath(result))

    def environment(self) -> Mapping[str, str]:
        """Returns an environment variable map for subprocesses."""
        return dict(self._impl.environment())

    def __repr__(self) -> str:
        return f'Runfiles({self._impl!r})'


def create(env: Optional[Mapping[str, str]] = None) -> Runfiles:
    """Returns a new Runfiles object.

    If env is None, use a snapshot of the current process environment.

    Raises:
      FileNotFoundError if neither a manifest nor a directory is configured
      OSError if the manifest file can’t be read
      ValueError if the manifest file is malformed
    """
    return Runfiles(env)


def _check(path: Union[str, os.PathLike[str]]) -> str:
    if not isinstance(path, (str, os.PathLike)):
        raise TypeError(f'runfile name must be a string, not {type(path)}')
    path = os.fspath(path)
    if not isinstance(path, str):
        raise TypeError(f'runfile name must be a string, not {type(path)}')
    if not path:
        raise ValueError('Missing runfile name')
    if '..' in path:
        raise ValueError(f'Runfile name “{path}” contains uplevel references')
    if (path.startswith(('/', os.sep)) or os.path.isabs(path)
            or (_WINDOWS and _DRIVE.match(path))):
        raise ValueError(f'Runfile name “{path}” is absolute')
    return path


_WINDOWS = os.name == 'nt'
_DRIVE = re.compile(r'[A-Za-z]:')

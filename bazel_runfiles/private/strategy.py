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

"""Selects a runfiles lookup strategy from environment variables.

This is an internal helper library for bazel_runfiles.  Don’t rely on it in
any way outside that package."""

from collections.abc import Mapping
import logging

from bazel_runfiles.private import resolvers

MANIFEST_ONLY = 'RUNFILES_MANIFEST_ONLY'
MANIFEST_FILE = 'RUNFILES_MANIFEST_FILE'
RUNFILES_DIR = 'RUNFILES_DIR'
TEST_SRCDIR = 'TEST_SRCDIR'


def select(env: Mapping[str, str]) -> resolvers.Resolver:
    """Returns a resolver for the given environment variables.

    If RUNFILES_MANIFEST_ONLY is 1, the result is manifest-based and reads the
    manifest named by RUNFILES_MANIFEST_FILE.  Otherwise the result is
    directory-based, using RUNFILES_DIR or, if that is unset or empty,
    TEST_SRCDIR.

    Raises:
      FileNotFoundError if the required environment variables aren’t set
      OSError if the manifest file can’t be read
      ValueError if the manifest file is malformed
    """
    if env.get(MANIFEST_ONLY) == '1':
        # On Windows, Bazel sets RUNFILES_MANIFEST_ONLY=1.  On other platforms
        # it also sets RUNFILES_MANIFEST_FILE, but RUNFILES_DIR is faster.
        manifest_file = env.get(MANIFEST_FILE)
        if not manifest_file:
            raise FileNotFoundError(
                f'Cannot load runfiles manifest: ${MANIFEST_ONLY} is 1 but '
                f'${MANIFEST_FILE} is empty or undefined')
        _logger.debug('using runfiles manifest %s', manifest_file)
        return resolvers.ManifestResolver(manifest_file)
    for var in (RUNFILES_DIR, TEST_SRCDIR):
        directory = env.get(var)
        if directory:
            _logger.debug('using runfiles directory %s from $%s',
                          directory, var)
            return resolvers.DirectoryResolver(directory)
    raise FileNotFoundError(
        f'Cannot find runfiles: ${RUNFILES_DIR} and ${TEST_SRCDIR} are both '
        'unset or empty')


_logger = logging.getLogger('bazel_runfiles.private.strategy')

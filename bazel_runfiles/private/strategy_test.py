# Copyright 2021-2025, 2026 Google LLC
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

"""Unit tests for bazel_runfiles.private.strategy."""

import pathlib
import tempfile

from absl.testing import absltest

from bazel_runfiles.private import resolvers
from bazel_runfiles.private import strategy


class SelectTest(absltest.TestCase):
    """Unit tests for the strategy.select function."""

    def test_manifest(self) -> None:
        """RUNFILES_MANIFEST_ONLY=1 selects the manifest."""
        with tempfile.TemporaryDirectory() as directory:
            file = pathlib.Path(directory) / 'MANIFEST'
            file.write_text('a/b c/d\n', encoding='utf-8')
            resolver = strategy.select({
                'RUNFILES_MANIFEST_ONLY': '1',
                'RUNFILES_MANIFEST_FILE': str(file),
                'RUNFILES_DIR': 'ignored in manifest-only mode',
                'TEST_SRCDIR': 'always ignored',
            })
        self.assertIsInstance(resolver, resolvers.ManifestResolver)
        self.assertEqual(resolver.resolve('a/b'), 'c/d')

    def test_manifest_missing(self) -> None:
        """Manifest-only mode requires a manifest file."""
        for env in ({'RUNFILES_MANIFEST_ONLY': '1'},
                    {'RUNFILES_MANIFEST_ONLY': '1',
                     'RUNFILES_MANIFEST_FILE': '',
                     'RUNFILES_DIR': '/x'}):
            with self.subTest(env=env):
                with self.assertRaisesRegex(FileNotFoundError,
                                            'RUNFILES_MANIFEST_FILE'):
                    strategy.select(env)

    def test_manifest_unreadable(self) -> None:
        """Errors reading the manifest are propagated."""
        with tempfile.TemporaryDirectory() as directory:
            with self.assertRaises(FileNotFoundError):
                strategy.select({
                    'RUNFILES_MANIFEST_ONLY': '1',
                    'RUNFILES_MANIFEST_FILE': str(
                        pathlib.Path(directory) / 'missing'),
                })

    def test_runfiles_dir(self) -> None:
        """RUNFILES_DIR takes precedence over TEST_SRCDIR."""
        resolver = strategy.select({
            'RUNFILES_DIR': '/x',
            'TEST_SRCDIR': '/y',
            'RUNFILES_MANIFEST_FILE': 'ignored unless manifest-only',
        })
        self.assertIsInstance(resolver, resolvers.DirectoryResolver)
        self.assertEqual(resolver.resolve('a/b'), '/x/a/b')

    def test_test_srcdir(self) -> None:
        """TEST_SRCDIR is used if RUNFILES_DIR is unset or empty."""
        for env in ({'TEST_SRCDIR': '/y'},
                    {'RUNFILES_DIR': '', 'TEST_SRCDIR': '/y'}):
            with self.subTest(env=env):
                resolver = strategy.select(env)
                self.assertIsInstance(resolver, resolvers.DirectoryResolver)
                self.assertEqual(resolver.resolve('a/b'), '/y/a/b')

    def test_manifest_only_other_values(self) -> None:
        """Only the literal value 1 enables manifest-only mode."""
        for value in ('0', 'true', '', ' 1'):
            with self.subTest(value=value):
                resolver = strategy.select({
                    'RUNFILES_MANIFEST_ONLY': value,
                    'RUNFILES_DIR': '/x',
                })
                self.assertIsInstance(resolver, resolvers.DirectoryResolver)

    def test_nothing(self) -> None:
        """Without any configuration, selection fails."""
        for env in ({}, {'FOO': 'bar'},
                    {'RUNFILES_DIR': '', 'TEST_SRCDIR': ''},
                    {'RUNFILES_MANIFEST_FILE': 'not used'}):
            with self.subTest(env=env):
                with self.assertRaisesRegex(FileNotFoundError,
                                            'RUNFILES_DIR and .TEST_SRCDIR'):
                    strategy.select(env)


if __name__ == '__main__':
    absltest.main()

# Copyright 2025 The Aztec Numerals Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Pytest fixture parsing absl flags before the tests access them."""

import os
import sys

from absl import flags
# Defines `--test_srcdir` and `--test_tmpdir` used by `create_tempfile`.
from absl.testing import absltest  # pylint: disable=unused-import
import pytest


@pytest.fixture(scope="session", autouse=True)
def parse_flags() -> None:
  # Pytest arguments are not absl flags, keep the program name only.
  if not flags.FLAGS.is_parsed():
    flags.FLAGS(sys.argv[:1])
  if not os.path.exists(flags.FLAGS.test_tmpdir):
    os.makedirs(flags.FLAGS.test_tmpdir)

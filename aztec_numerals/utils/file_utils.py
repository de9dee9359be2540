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

"""Miscellaneous file-related utilities."""

import logging
import os


def read_text_file(path: str) -> str:
  """Reads the entire contents of a UTF-8 text file.

  Args:
    path: Path to the file.

  Returns:
    File contents.

  Raises:
    FileNotFoundError: if the file does not exist.
  """
  if not os.path.isfile(path):
    raise FileNotFoundError(f"Input file {path} not found")
  logging.info("Reading %s ...", path)
  with open(path, mode="rt", encoding="utf-8") as f:
    return f.read()


def write_text_file(path: str, contents: str) -> None:
  """Writes contents to a UTF-8 text file.

  The parent directory is created if it does not exist.

  Args:
    path: Path to the file.
    contents: Text to write.
  """
  output_dir = os.path.dirname(path)
  if output_dir and not os.path.exists(output_dir):
    logging.info("Making directory %s ...", output_dir)
    os.makedirs(output_dir, exist_ok=True)
  logging.info("Writing %d characters to %s ...", len(contents), path)
  with open(path, mode="wt", encoding="utf-8") as f:
    f.write(contents)

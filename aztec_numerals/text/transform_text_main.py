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

r"""Replaces the numbers in text with Aztec numeral glyphs.

See `rich_text.py`, `encoder.py` and `symbol_table.py` for the definitions of
the other relevant flags.

Example:
--------
  python aztec_numerals/text/transform_text_main.py \
    --input_text "The price is 123 and we have 20 items." \
    --output_format html \
    --glyph_image_dir https://example.com/glyphs \
    --output_file /tmp/aztec.html \
    --logtostderr
"""

import enum
import logging
import sys

from absl import app
from absl import flags
from aztec_numerals.numerals import encoder
from aztec_numerals.numerals import symbol_table as table_lib
from aztec_numerals.text import rich_text
from aztec_numerals.text import scanner
from aztec_numerals.utils import file_utils


class OutputFormat(enum.StrEnum):
  """Serialization of the transformed text."""

  # HTML fragment suitable for pasting as rich text.
  HTML = "html"

  # Standalone HTML page.
  PAGE = "page"

  # Plain text with glyphs written as bracketed values.
  TEXT = "text"

  # Segments and glyph identifiers in JSON format.
  JSON = "json"


_INPUT_TEXT = flags.DEFINE_string(
    "input_text", None,
    "Text containing the numbers to convert."
)

_INPUT_FILE = flags.DEFINE_string(
    "input_file", None,
    "Path to the UTF-8 text file containing the numbers to convert."
)

_OUTPUT_FILE = flags.DEFINE_string(
    "output_file", None,
    "Output file. If unset, the result is printed to standard output."
)

_OUTPUT_FORMAT = flags.DEFINE_enum_class(
    "output_format", OutputFormat.HTML, OutputFormat,
    "Output serialization."
)


def render(segments: list[scanner.Segment], output_format: OutputFormat) -> str:
  """Serializes the segments in the requested format."""
  if output_format == OutputFormat.HTML:
    return rich_text.render_html(segments)
  elif output_format == OutputFormat.PAGE:
    return rich_text.render_html_document(segments)
  elif output_format == OutputFormat.TEXT:
    return rich_text.render_plain_text(segments)
  elif output_format == OutputFormat.JSON:
    return rich_text.render_json(segments)
  else:
    raise ValueError(f"Unsupported output format: {output_format}")


def _input_text() -> str:
  if (_INPUT_TEXT.value is None) == (_INPUT_FILE.value is None):
    raise app.UsageError("Specify exactly one of --input_text or --input_file!")
  if _INPUT_FILE.value is not None:
    if not _INPUT_FILE.value:
      raise app.UsageError("--input_file must not be empty!")
    return file_utils.read_text_file(_INPUT_FILE.value)
  return _INPUT_TEXT.value


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")

  text = _input_text()
  table = table_lib.load_or_default_symbol_table()
  segments = scanner.transform_text(
      text, table=table, max_value=encoder.max_number()
  )
  logging.info(
      "Converted %d numbers in %d characters.",
      scanner.count_numbers(segments), len(text)
  )
  result = render(segments, _OUTPUT_FORMAT.value)
  if _OUTPUT_FILE.value:
    file_utils.write_text_file(_OUTPUT_FILE.value, result)
  else:
    sys.stdout.write(result)
    if not result.endswith("\n"):
      sys.stdout.write("\n")


if __name__ == "__main__":
  app.run(main)

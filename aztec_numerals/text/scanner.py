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

"""Finds decimal numbers in free text and replaces them with glyphs."""

import dataclasses
import re
from typing import Any, Optional

from absl import logging
from aztec_numerals.numerals import encoder
from aztec_numerals.numerals import symbol_table as table_lib

# Digit runs which are not part of a longer alphanumeric token.
_DIGIT_RUN_REGEX = re.compile(r"\b\d+\b", flags=re.ASCII)


@dataclasses.dataclass(frozen=True)
class Segment:
  """A span of the original text.

  Literal spans carry no tokens. Number spans keep the original digits in
  `source` and their encoding in `tokens`.
  """

  source: str
  tokens: tuple[encoder.GlyphToken, ...] = ()

  @property
  def is_number(self) -> bool:
    return bool(self.tokens)

  def to_json_dict(self) -> dict[str, Any]:
    if not self.is_number:
      return {"text": self.source}
    return {
        "number": self.source,
        "tokens": [token.to_json_dict() for token in self.tokens],
    }


def transform_text(
    text: str,
    table: table_lib.SymbolTable = table_lib.AZTEC_SYMBOL_TABLE,
    max_value: Optional[int] = None,
) -> list[Segment]:
  """Splits the text into literal spans and encoded numbers.

  Args:
    text: Arbitrary input text.
    table: Symbol table used for encoding the numbers.
    max_value: Largest number to encode. Defaults to `--max_number`.

  Returns:
    Segments in the original order. Concatenating their sources gives back
    the input text.
  """
  if max_value is None:
    max_value = encoder.max_number()
  segments = []
  position = 0
  for match in _DIGIT_RUN_REGEX.finditer(text):
    if match.start() > position:
      segments.append(Segment(source=text[position:match.start()]))
    digits = match.group()
    if len(digits.lstrip("0")) > len(str(max_value)):
      # Very long digit runs are never parsed.
      tokens = [encoder.literal(encoder.TOO_LARGE_SENTINEL)]
    else:
      tokens = encoder.encode_number(int(digits), table, max_value=max_value)
    if encoder.is_literal_only(tokens) and digits.strip("0"):
      logging.warning("Number %s replaced with `%s`.", digits, tokens[0].text)
    segments.append(Segment(source=digits, tokens=tuple(tokens)))
    position = match.end()
  if position < len(text):
    segments.append(Segment(source=text[position:]))
  return segments


def flatten(segments: list[Segment]) -> list[encoder.GlyphToken]:
  """Returns a single token sequence with literal spans as literal tokens."""
  tokens = []
  for segment in segments:
    if segment.is_number:
      tokens.extend(segment.tokens)
    else:
      tokens.append(encoder.literal(segment.source))
  return tokens


def count_numbers(segments: list[Segment]) -> int:
  return sum(1 for segment in segments if segment.is_number)

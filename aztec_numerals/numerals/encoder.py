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

"""Converts decimal integers to sequences of Aztec numeral glyphs.

The decomposition is greedy, largest base first. A base that is counted more
than once (or that is followed by smaller bases) is preceded by a multiplier
run of unit glyphs, e.g. 40 is written as two dots followed by a flag. A
number which is exactly equal to one of the bases is written as that glyph
alone. Leftovers below the smallest base are written as plain unit glyphs.
"""

import dataclasses
import enum
import math
import numbers
from typing import Any, Iterable, Optional

from absl import flags
from aztec_numerals.numerals import symbol_table as table_lib

# Bounds the length of the multiplier runs, which grow linearly with the
# number (125000 unit glyphs for the largest bag count).
DEFAULT_MAX_NUMBER = 10**9

_MAX_NUMBER = flags.DEFINE_integer(
    "max_number", DEFAULT_MAX_NUMBER,
    "Largest number converted to glyphs. Larger numbers are replaced with "
    "a textual marker."
)

# Literal markers for the inputs without glyph representation.
ZERO_LITERAL = "0"
NEGATIVE_SENTINEL = "(Negative numbers not supported)"
TOO_LARGE_SENTINEL = "(Number too large)"
UNSUPPORTED_SENTINEL = "(Unsupported number)"


class TokenKind(enum.StrEnum):
  """Type of the output token."""

  # One of the bases from the symbol table.
  SYMBOL = "symbol"

  # Unit glyph, either standalone or as part of a multiplier run.
  UNIT = "unit"

  # Literal text fragment.
  LITERAL = "literal"


@dataclasses.dataclass(frozen=True)
class GlyphToken:
  """A reference to a glyph or a literal text fragment."""

  kind: TokenKind
  symbol: Optional[table_lib.SymbolDefinition] = None
  text: Optional[str] = None

  @property
  def is_glyph(self) -> bool:
    return self.kind != TokenKind.LITERAL

  @property
  def glyph_id(self) -> Optional[str]:
    return self.symbol.glyph_id if self.symbol else None

  @property
  def value(self) -> Optional[int]:
    return self.symbol.value if self.symbol else None

  def to_json_dict(self) -> dict[str, Any]:
    if self.is_glyph:
      return {"kind": str(self.kind), "glyph_id": self.glyph_id,
              "value": self.value}
    return {"kind": str(self.kind), "text": self.text}


def literal(text: str) -> GlyphToken:
  return GlyphToken(kind=TokenKind.LITERAL, text=text)


def _unit(table: table_lib.SymbolTable) -> GlyphToken:
  return GlyphToken(kind=TokenKind.UNIT, symbol=table.unit)


def _symbol(symbol: table_lib.SymbolDefinition) -> GlyphToken:
  return GlyphToken(kind=TokenKind.SYMBOL, symbol=symbol)


def max_number() -> int:
  """Returns the configured upper bound for the conversion."""
  return _MAX_NUMBER.value


def _unsupported_reason(number: Any, max_value: int) -> Optional[str]:
  """Returns the sentinel for numbers we cannot represent, if any."""
  if isinstance(number, bool) or not isinstance(number, numbers.Real):
    return UNSUPPORTED_SENTINEL
  if not isinstance(number, numbers.Integral):
    if not math.isfinite(number) or not float(number).is_integer():
      return UNSUPPORTED_SENTINEL
  if number < 0:
    return NEGATIVE_SENTINEL
  if number > max_value:
    return TOO_LARGE_SENTINEL
  return None


def encode_number(
    number: int,
    table: table_lib.SymbolTable = table_lib.AZTEC_SYMBOL_TABLE,
    max_value: Optional[int] = None,
) -> list[GlyphToken]:
  """Converts a non-negative integer to a sequence of glyph tokens.

  Args:
    number: Integer to convert. Integral floats are accepted as well.
    table: Symbol table defining the bases.
    max_value: Largest supported number. If unset, the `--max_number` flag
      value is used.

  Returns:
    List of tokens. Zero and unsupported inputs (negative, non-integral,
    non-finite or too large) produce a single literal token instead of
    raising.
  """
  if max_value is None:
    max_value = max_number()
  reason = _unsupported_reason(number, max_value)
  if reason:
    return [literal(reason)]
  number = int(number)
  if number == 0:
    return [literal(ZERO_LITERAL)]

  tokens = []
  remaining = number
  first = True
  for symbol in table:
    if symbol.value > remaining:
      continue
    count = remaining // symbol.value
    if first and count == 1 and remaining == symbol.value:
      # Exact match: the glyph alone stands for its value.
      tokens.append(_symbol(symbol))
    else:
      tokens.extend([_unit(table)] * count)
      tokens.append(_symbol(symbol))
    remaining -= count * symbol.value
    first = False

  tokens.extend([_unit(table)] * remaining)
  return tokens


def is_literal_only(tokens: list[GlyphToken]) -> bool:
  """Checks whether encoding is zero or an unsupported-input marker."""
  return len(tokens) == 1 and not tokens[0].is_glyph


def decode_tokens(tokens: Iterable[GlyphToken]) -> int:
  """Recovers the number from its glyph tokens.

  A run of unit glyphs immediately preceding a base symbol multiplies it, a
  base symbol without such run counts once and trailing unit glyphs count one
  each.

  Args:
    tokens: Tokens produced by `encode_number`.

  Returns:
    Decoded integer.

  Raises:
    ValueError: if the tokens contain literals other than the zero literal.
  """
  tokens = list(tokens)
  if len(tokens) == 1 and tokens[0].kind == TokenKind.LITERAL:
    if tokens[0].text == ZERO_LITERAL:
      return 0
  total = 0
  multiplier = 0
  for token in tokens:
    if token.kind == TokenKind.UNIT:
      multiplier += 1
    elif token.kind == TokenKind.SYMBOL:
      total += max(multiplier, 1) * token.value
      multiplier = 0
    else:
      raise ValueError(f"Cannot decode literal token: {token.text!r}")
  return total + multiplier

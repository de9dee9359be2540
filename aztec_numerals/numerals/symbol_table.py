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

"""Place-value bases of the Aztec numeral system and their glyphs."""

import dataclasses
import json
import os
from typing import Any, Iterator, Optional

from absl import flags
from absl import logging

_SYMBOL_TABLE_FILE = flags.DEFINE_string(
    "symbol_table_file",
    None,
    "Symbol table in JSON format overriding the built-in Aztec bases. Should "
    "contain a `symbols` list of {value, glyph_id, description} records "
    "ordered from the largest base down and a `unit` record with value 1."
)

# Value of the unit glyph.
UNIT_VALUE = 1


@dataclasses.dataclass(frozen=True)
class SymbolDefinition:
  """A single glyph together with the value it stands for."""

  value: int
  glyph_id: str
  description: str = ""

  @property
  def alt_text(self) -> str:
    return str(self.value)

  def to_json_dict(self) -> dict[str, Any]:
    return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class SymbolTable:
  """Ordered bases of the numeral system, largest first, plus the unit glyph.

  The smallest base defines the threshold below which numbers are written
  with unit glyphs only. Unit glyphs also serve as the multiplier run that
  precedes a base symbol.
  """

  symbols: tuple[SymbolDefinition, ...]
  unit: SymbolDefinition

  def __post_init__(self):
    # Lists are stored as tuples.
    object.__setattr__(self, "symbols", tuple(self.symbols))
    if not self.symbols:
      raise ValueError("Symbol table needs at least one base symbol!")
    if (isinstance(self.unit.value, bool) or
        not isinstance(self.unit.value, int) or
        self.unit.value != UNIT_VALUE):
      raise ValueError(
          f"Unit glyph `{self.unit.glyph_id}` must have value {UNIT_VALUE}, "
          f"got {self.unit.value}"
      )
    previous = None
    for symbol in self.symbols:
      if isinstance(symbol.value, bool) or not isinstance(symbol.value, int):
        raise ValueError(f"Invalid value for `{symbol.glyph_id}`!")
      if symbol.value <= UNIT_VALUE:
        raise ValueError(
            f"Base `{symbol.glyph_id}` must be larger than the unit, "
            f"got {symbol.value}"
        )
      if previous is not None and symbol.value >= previous.value:
        raise ValueError(
            "Bases must be unique and strictly descending: "
            f"{previous.value} followed by {symbol.value}"
        )
      previous = symbol
    glyph_ids = self.glyph_ids()
    if len(set(glyph_ids)) != len(glyph_ids):
      raise ValueError(f"Duplicate glyph IDs in {glyph_ids}")

  def __iter__(self) -> Iterator[SymbolDefinition]:
    return iter(self.symbols)

  def __len__(self) -> int:
    return len(self.symbols)

  @property
  def smallest_base(self) -> int:
    return self.symbols[-1].value

  def glyph_ids(self) -> list[str]:
    """Returns the identifiers of all the glyphs, unit last."""
    return [symbol.glyph_id for symbol in self.symbols] + [self.unit.glyph_id]

  def find_by_glyph_id(self, glyph_id: str) -> Optional[SymbolDefinition]:
    if glyph_id == self.unit.glyph_id:
      return self.unit
    for symbol in self.symbols:
      if symbol.glyph_id == glyph_id:
        return symbol
    return None

  def to_json_dict(self) -> dict[str, Any]:
    return {
        "symbols": [symbol.to_json_dict() for symbol in self.symbols],
        "unit": self.unit.to_json_dict(),
    }


def _symbol_from_json(json_data: dict[str, Any]) -> SymbolDefinition:
  try:
    return SymbolDefinition(
        value=json_data["value"],
        glyph_id=json_data["glyph_id"],
        description=json_data.get("description", ""),
    )
  except (KeyError, TypeError) as e:
    raise ValueError(f"Invalid symbol definition: {json_data}") from e


def symbol_table_from_json_dict(json_data: dict[str, Any]) -> SymbolTable:
  """Builds and validates the table from its JSON representation."""
  if "symbols" not in json_data or "unit" not in json_data:
    raise ValueError("Symbol table requires `symbols` and `unit` entries!")
  return SymbolTable(
      symbols=tuple(_symbol_from_json(s) for s in json_data["symbols"]),
      unit=_symbol_from_json(json_data["unit"]),
  )


# The bases are 20^3, 20^2 and 20 with the quarter-filled feather for 100.
AZTEC_SYMBOL_TABLE = SymbolTable(
    symbols=(
        SymbolDefinition(8000, "image_eight_thousand", "Bag (xiquipilli)"),
        SymbolDefinition(400, "image_four_hundred", "Feather (tzontli)"),
        SymbolDefinition(100, "image_one_hundred", "Quarter-filled feather"),
        SymbolDefinition(20, "image_twenty", "Flag (pantli)"),
    ),
    unit=SymbolDefinition(UNIT_VALUE, "image_one", "Dot"),
)


def load_symbol_table(table_file: str) -> SymbolTable:
  """Loads the symbol table from JSON file."""
  if not os.path.exists(table_file):
    raise FileNotFoundError(f"Symbol table file `{table_file}` does not exist!")
  logging.info("Reading symbol table from %s ...", table_file)
  with open(table_file, mode="rt", encoding="utf-8") as f:
    table = symbol_table_from_json_dict(json.load(f))
  logging.info("Loaded %d bases.", len(table))
  return table


def load_or_default_symbol_table(
    table_file: Optional[str] = None,
) -> SymbolTable:
  """Returns the configured symbol table or the built-in Aztec one."""
  if not table_file and _SYMBOL_TABLE_FILE.value:
    table_file = _SYMBOL_TABLE_FILE.value
  if table_file:
    return load_symbol_table(table_file)
  return AZTEC_SYMBOL_TABLE

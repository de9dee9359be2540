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

"""Tests for finding and replacing numbers in text."""

from absl.testing import absltest
from absl.testing import parameterized
from aztec_numerals.numerals import encoder
from aztec_numerals.numerals import symbol_table as table_lib
from aztec_numerals.text import scanner as lib

_SMALL_TABLE = table_lib.SymbolTable(
    symbols=(
        table_lib.SymbolDefinition(400, "s400"),
        table_lib.SymbolDefinition(100, "s100"),
        table_lib.SymbolDefinition(20, "s20"),
        table_lib.SymbolDefinition(10, "s10"),
    ),
    unit=table_lib.SymbolDefinition(1, "unit"),
)


class ScannerTest(parameterized.TestCase):

  @parameterized.parameters(
      "", "No numbers here.", "  \n\t spaces ", "abc12 12px x_1 v2.",
  )
  def test_no_digit_runs(self, text: str) -> None:
    segments = lib.transform_text(text, _SMALL_TABLE)
    self.assertEqual(0, lib.count_numbers(segments))
    self.assertEqual(text, "".join(s.source for s in segments))
    if text:
      self.assertLen(segments, 1)
    else:
      self.assertEmpty(segments)

  def test_price_sentence(self) -> None:
    text = "Price: 123 and 20 units"
    segments = lib.transform_text(text, _SMALL_TABLE)
    self.assertEqual(
        ["Price: ", "123", " and ", "20", " units"],
        [s.source for s in segments])
    self.assertEqual(
        [False, True, False, True, False], [s.is_number for s in segments])
    self.assertEqual(
        tuple(encoder.encode_number(123, _SMALL_TABLE)), segments[1].tokens)
    self.assertEqual(["s20"], [t.glyph_id for t in segments[3].tokens])

  def test_order_preserved(self) -> None:
    text = "1,2;  (30)\n40. -5 and 007!"
    segments = lib.transform_text(text, _SMALL_TABLE)
    self.assertEqual(text, "".join(s.source for s in segments))
    self.assertEqual(
        ["1", "2", "30", "40", "5", "007"],
        [s.source for s in segments if s.is_number])
    # The minus sign is kept as punctuation.
    self.assertIn(". -", [s.source for s in segments])

  def test_number_at_edges(self) -> None:
    segments = lib.transform_text("20", _SMALL_TABLE)
    self.assertLen(segments, 1)
    self.assertTrue(segments[0].is_number)
    segments = lib.transform_text("0 items", _SMALL_TABLE)
    self.assertEqual(
        [encoder.literal("0")], list(segments[0].tokens))

  def test_too_large_continues(self) -> None:
    text = "Huge 123456789012345678901234567890 then 20"
    segments = lib.transform_text(text, _SMALL_TABLE, max_value=1000)
    self.assertEqual(
        [encoder.literal(encoder.TOO_LARGE_SENTINEL)],
        list(segments[1].tokens))
    self.assertEqual(["s20"], [t.glyph_id for t in segments[3].tokens])

    segments = lib.transform_text("1001 1000", _SMALL_TABLE, max_value=1000)
    self.assertEqual(encoder.TOO_LARGE_SENTINEL, segments[0].tokens[0].text)
    self.assertEqual(
        ["unit", "unit", "s400", "unit", "unit", "s100"],
        [t.glyph_id for t in segments[2].tokens])

  def test_very_long_digit_run(self) -> None:
    segments = lib.transform_text("9" * 10000)
    self.assertEqual(encoder.TOO_LARGE_SENTINEL, segments[0].tokens[0].text)

  def test_flatten(self) -> None:
    tokens = lib.flatten(lib.transform_text("a 20 b 0", _SMALL_TABLE))
    self.assertEqual(
        [encoder.literal("a "),
         encoder.GlyphToken(encoder.TokenKind.SYMBOL, _SMALL_TABLE.symbols[2]),
         encoder.literal(" b "),
         encoder.literal("0")],
        tokens)

  def test_segment_json(self) -> None:
    segments = lib.transform_text("x 20", _SMALL_TABLE)
    self.assertEqual({"text": "x "}, segments[0].to_json_dict())
    self.assertEqual(
        {"number": "20",
         "tokens": [{"kind": "symbol", "glyph_id": "s20", "value": 20}]},
        segments[1].to_json_dict())


if __name__ == "__main__":
  absltest.main()

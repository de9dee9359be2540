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

"""Serializes transformed text to rich (HTML) and plain text payloads."""

import html
import json
import os
from typing import Optional

from absl import flags
from aztec_numerals.numerals import encoder
from aztec_numerals.text import scanner

_GLYPH_IMAGE_DIR = flags.DEFINE_string(
    "glyph_image_dir", "/",
    "Directory or URL prefix housing the glyph images."
)

_GLYPH_IMAGE_EXTENSION = flags.DEFINE_string(
    "glyph_image_extension", "png",
    "File extension of the glyph images."
)

_GLYPH_IMAGE_HEIGHT = flags.DEFINE_integer(
    "glyph_image_height", 24,
    "Height of the glyph images (in pixels)."
)

DEFAULT_TITLE = "Decimal to Aztec Converter"

# CSS class of the elements wrapping the glyphs of a single number.
NUMBER_CLASS = "aztec-number"

# HTML header.
_HTML_HEADER = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>@TITLE@</title>
</head>
<body>"""

# HTML decorations wrapping the transformed text.
_HTML_FRAGMENT = """
<p style="white-space: pre-wrap">@TEXT@</p>
"""

# HTML footer.
_HTML_FOOTER = "</body></html>"


def glyph_image_path(
    glyph_id: str,
    image_dir: Optional[str] = None,
    image_extension: Optional[str] = None,
) -> str:
  """Returns the image reference for the glyph, e.g. `/image_twenty.png`."""
  if image_dir is None:
    image_dir = _GLYPH_IMAGE_DIR.value
  if image_extension is None:
    image_extension = _GLYPH_IMAGE_EXTENSION.value
  file_name = f"{glyph_id}.{image_extension.lstrip('.')}"
  if not image_dir:
    return file_name
  return os.path.join(image_dir, file_name)


def _glyph_html(
    token: encoder.GlyphToken,
    image_dir: Optional[str],
    image_extension: Optional[str],
    image_height: int,
) -> str:
  src = glyph_image_path(token.glyph_id, image_dir, image_extension)
  return (
      f'<img src="{html.escape(src)}" '
      f'alt="{html.escape(token.symbol.alt_text)}" height={image_height}>'
  )


def render_html(
    segments: list[scanner.Segment],
    image_dir: Optional[str] = None,
    image_extension: Optional[str] = None,
    image_height: Optional[int] = None,
) -> str:
  """Renders segments as HTML fragment with one image per glyph.

  Args:
    segments: Output of `scanner.transform_text`.
    image_dir: Directory or URL prefix of glyph images. Defaults to
      `--glyph_image_dir`.
    image_extension: Image file extension. Defaults to
      `--glyph_image_extension`.
    image_height: Height of the images. Defaults to `--glyph_image_height`.

  Returns:
    HTML string.
  """
  if image_height is None:
    image_height = _GLYPH_IMAGE_HEIGHT.value
  parts = []
  for segment in segments:
    if not segment.is_number:
      parts.append(f"<span>{html.escape(segment.source)}</span>")
    elif encoder.is_literal_only(list(segment.tokens)):
      # Zero and unsupported numbers are written as text.
      parts.append(f"<span>{html.escape(segment.tokens[0].text)}</span>")
    else:
      glyphs = "".join(
          _glyph_html(token, image_dir, image_extension, image_height)
          for token in segment.tokens
      )
      parts.append(f'<span class="{NUMBER_CLASS}">{glyphs}</span>')
  return "".join(parts)


def render_html_document(
    segments: list[scanner.Segment],
    title: str = DEFAULT_TITLE,
    **kwargs,
) -> str:
  """Renders segments as a standalone HTML page."""
  fragment = _HTML_FRAGMENT.replace(
      "@TEXT@", render_html(segments, **kwargs)
  ).strip()
  header = _HTML_HEADER.replace("@TITLE@", html.escape(title))
  return f"{header}\n{fragment}\n{_HTML_FOOTER}\n"


def render_plain_text(segments: list[scanner.Segment]) -> str:
  """Renders segments as plain text with glyphs as bracketed values.

  Text without numbers is returned unchanged.
  """
  parts = []
  for segment in segments:
    if not segment.is_number:
      parts.append(segment.source)
      continue
    for token in segment.tokens:
      if token.is_glyph:
        parts.append(f"[{token.symbol.alt_text}]")
      else:
        parts.append(token.text)
  return "".join(parts)


def render_json(segments: list[scanner.Segment]) -> str:
  """Renders segments in JSON format."""
  return json.dumps(
      {"segments": [segment.to_json_dict() for segment in segments]},
      ensure_ascii=False,
  )

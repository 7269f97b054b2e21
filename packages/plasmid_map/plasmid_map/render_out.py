#--------------------------------------------------------------------------
#     This file is part of plasmid_map - a circular genetic map renderer
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#--------------------------------------------------------------------------

# Standard Library
import os

# local repo modules
from . import svg_out


#============================================
def _resolve_format(filename, format_override):
	if format_override:
		output_format = format_override.lower()
		if output_format not in ("svg", "png", "pdf"):
			raise ValueError(f"Unsupported output format: {format_override}")
		return output_format
	extension = os.path.splitext(filename)[1].lower().lstrip(".")
	if extension in ("svg", "png", "pdf"):
		return extension
	raise ValueError(
		"Output format could not be determined; use format=svg|png|pdf or a matching filename."
	)


#============================================
def record_to_output(record, filename, width, height, format=None, **style):
	"""Render a sequence record to SVG or Cairo-backed output using a single entry point.

	Returns filename, or None when the scene was empty and nothing was written
	by the Cairo backends.
	"""
	output_format = _resolve_format(filename, format)
	if output_format == "svg":
		svg_text = svg_out.record_to_svg_text(record, width, height, style=style or None)
		with open(filename, "w", encoding="utf-8") as handle:
			handle.write(svg_text)
		return filename
	try:
		from . import cairo_out
	except ImportError as exc:
		raise RuntimeError("Cairo output requires pycairo.") from exc
	return cairo_out.record_to_cairo(record, filename, width, height,
			format=output_format, style=style or None)

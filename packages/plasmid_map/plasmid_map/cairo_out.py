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
#
#--------------------------------------------------------------------------

"""Bitmap and PDF export of a finished map scene through Cairo.

The scene is cropped to its bounding box plus a fixed padding on every side,
painted over a white background and written out. Export never alters the
ops it reads.
"""

# Standard Library
import io
import os

# Third Party
import cairo

# local repo modules
from . import map_renderer
from . import render_ops


EXPORT_PADDING = 20


#============================================
class ExportError(RuntimeError):
	"""Raised when rasterizing or encoding a scene fails."""


#============================================
def export_filename(name):
	return f"{name}_vector.png"


#============================================
def export_canvas_size(bbox, padding=EXPORT_PADDING):
	"""Return (width, height) in pixels for a scene bbox plus padding.

	Fractional sizes are truncated, so a partial trailing pixel row or
	column is dropped rather than added.
	"""
	x1, y1, x2, y2 = bbox
	width = int((x2 - x1) + 2 * padding)
	height = int((y2 - y1) + 2 * padding)
	return (width, height)


#============================================
def _paint_scene(context, ops, bbox, width, height, padding):
	context.set_source_rgb(1, 1, 1)
	context.rectangle(0, 0, width, height)
	context.fill()
	context.translate(-bbox[0] + padding, -bbox[1] + padding)
	render_ops.ops_to_cairo(context, ops)


#============================================
def ops_to_png_bytes(ops, padding=EXPORT_PADDING):
	"""Rasterize ops to PNG bytes, or None when the scene is empty."""
	bbox = render_ops.ops_bbox(ops)
	if bbox is None:
		return None
	width, height = export_canvas_size(bbox, padding)
	buffer = io.BytesIO()
	try:
		surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
		context = cairo.Context(surface)
		_paint_scene(context, ops, bbox, width, height, padding)
		surface.write_to_png(buffer)
		surface.finish()
	except cairo.Error as exc:
		raise ExportError(f"PNG export failed: {exc}") from exc
	return buffer.getvalue()


#============================================
def _ops_to_pdf(ops, filename, padding):
	bbox = render_ops.ops_bbox(ops)
	if bbox is None:
		return None
	width, height = export_canvas_size(bbox, padding)
	try:
		surface = cairo.PDFSurface(filename, width, height)
		context = cairo.Context(surface)
		_paint_scene(context, ops, bbox, width, height, padding)
		surface.finish()
	except cairo.Error as exc:
		raise ExportError(f"PDF export failed: {exc}") from exc
	return filename


#============================================
def ops_to_cairo_file(ops, filename, format="png", padding=EXPORT_PADDING):
	"""Write ops to filename as png or pdf; returns None for an empty scene."""
	if format == "pdf":
		return _ops_to_pdf(ops, filename, padding)
	if format != "png":
		raise ValueError(f"Unsupported Cairo output format: {format}")
	data = ops_to_png_bytes(ops, padding=padding)
	if data is None:
		return None
	try:
		with open(filename, "wb") as handle:
			handle.write(data)
	except OSError as exc:
		raise ExportError(f"Could not write {filename}: {exc}") from exc
	return filename


#============================================
def export_png(ops, name, directory="."):
	"""Save the scene as <name>_vector.png in directory and return the path."""
	path = os.path.join(directory, export_filename(name))
	return ops_to_cairo_file(ops, path, format="png")


#============================================
def record_to_cairo(record, filename, width, height, format="png", style=None):
	ops = map_renderer.record_to_ops(record, width, height, style=style)
	return ops_to_cairo_file(ops, filename, format=format)

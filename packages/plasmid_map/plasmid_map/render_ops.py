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

"""Render ops for shared Cairo/SVG drawing of map scenes.

A scene is an ordered sequence of the four op types below, painted in order.
Arcs, circles and connector lines are plain strokes; PathOp only carries
"M" and "ARC" commands.
"""

# Standard Library
import dataclasses
import json
import math

# local repo modules
from . import dom_extensions


# estimated glyph advance relative to font size, shared with label fitting
CHAR_WIDTH_FACTOR = 0.6


#============================================
@dataclasses.dataclass(frozen=True)
class LineOp:
	p1: tuple[float, float]
	p2: tuple[float, float]
	width: float
	color: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class CircleOp:
	center: tuple[float, float]
	radius: float
	fill: str | None
	stroke: str | None = None
	stroke_width: float = 0.0


#============================================
@dataclasses.dataclass(frozen=True)
class PathOp:
	commands: tuple[tuple[str, tuple[float, ...]], ...]
	fill: str | None
	stroke: str | None = None
	stroke_width: float = 0.0


#============================================
@dataclasses.dataclass(frozen=True)
class TextOp:
	x: float
	y: float
	text: str
	font_size: float
	font_name: str = "Arial, Helvetica, sans-serif"
	anchor: str = "start"
	baseline: str = ""
	color: str | None = None


#============================================
def color_to_hex(color):
	"""Normalize a color string to lowercase #rrggbb; "none" passes through."""
	if not color or not color.strip():
		return None
	text = color.strip()
	if text.lower() == "none":
		return "none"
	if not text.startswith("#"):
		return text
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		return text
	return "#" + value.lower()


#============================================
def _color_to_rgb(color):
	text = color_to_hex(color)
	if not text or not text.startswith("#") or len(text) != 7:
		return None
	return tuple(int(text[index:index + 2], 16) / 255.0 for index in (1, 3, 5))


#============================================
def _serialize_number(value, digits):
	if isinstance(value, float):
		return round(value, digits)
	return value


#============================================
def _serialize_list(value, digits):
	return [ _serialize_number(item, digits) for item in value ]


#============================================
def ops_to_json_dict(ops, round_digits=3):
	serialized = []
	for op in ops:
		if isinstance(op, LineOp):
			entry = {
				"kind": "line",
				"p1": _serialize_list(op.p1, round_digits),
				"p2": _serialize_list(op.p2, round_digits),
				"width": _serialize_number(op.width, round_digits),
				"color": color_to_hex(op.color),
			}
		elif isinstance(op, CircleOp):
			entry = {
				"kind": "circle",
				"center": _serialize_list(op.center, round_digits),
				"radius": _serialize_number(op.radius, round_digits),
				"fill": color_to_hex(op.fill),
				"stroke": color_to_hex(op.stroke),
				"stroke_width": _serialize_number(op.stroke_width, round_digits),
			}
		elif isinstance(op, PathOp):
			entry = {
				"kind": "path",
				"commands": [ [cmd, _serialize_list(payload, round_digits)] for cmd, payload in op.commands ],
				"fill": color_to_hex(op.fill),
				"stroke": color_to_hex(op.stroke),
				"stroke_width": _serialize_number(op.stroke_width, round_digits),
			}
		elif isinstance(op, TextOp):
			entry = {
				"kind": "text",
				"x": _serialize_number(op.x, round_digits),
				"y": _serialize_number(op.y, round_digits),
				"text": op.text,
				"font_size": _serialize_number(op.font_size, round_digits),
				"font_name": op.font_name,
				"anchor": op.anchor,
				"baseline": op.baseline,
				"color": color_to_hex(op.color),
			}
		else:
			continue
		serialized.append(entry)
	return serialized


#============================================
def ops_to_json_text(ops, round_digits=3):
	return json.dumps(ops_to_json_dict(ops, round_digits=round_digits), indent=2, sort_keys=True)


#============================================
def _arc_extreme_points(cx, cy, r, angle1, angle2):
	"""Endpoints of an arc plus every axis extreme the sweep passes through."""
	points = [
		(cx + r * math.cos(angle1), cy + r * math.sin(angle1)),
		(cx + r * math.cos(angle2), cy + r * math.sin(angle2)),
	]
	low = min(angle1, angle2)
	high = max(angle1, angle2)
	quarter = math.pi / 2.0
	step = math.ceil(low / quarter)
	while step * quarter <= high:
		angle = step * quarter
		points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
		step += 1
	return points


#============================================
def text_box(op):
	"""Estimated (x1, y1, x2, y2) box of one TextOp."""
	width = CHAR_WIDTH_FACTOR * op.font_size * len(op.text)
	if op.anchor == "end":
		x1 = op.x - width
	elif op.anchor == "middle":
		x1 = op.x - width / 2.0
	else:
		x1 = op.x
	if op.baseline == "middle":
		y1 = op.y - op.font_size / 2.0
	else:
		y1 = op.y - op.font_size * 0.75
	return (x1, y1, x1 + width, y1 + op.font_size)


#============================================
def ops_bbox(ops):
	"""Return (minx, miny, maxx, maxy) for a list of render ops, or None."""
	minx = miny = float("inf")
	maxx = maxy = float("-inf")

	def take_point(x, y):
		nonlocal minx, miny, maxx, maxy
		minx = min(minx, x)
		miny = min(miny, y)
		maxx = max(maxx, x)
		maxy = max(maxy, y)

	for op in ops:
		if isinstance(op, LineOp):
			take_point(op.p1[0], op.p1[1])
			take_point(op.p2[0], op.p2[1])
		elif isinstance(op, CircleOp):
			cx, cy = op.center
			r = op.radius
			take_point(cx - r, cy - r)
			take_point(cx + r, cy + r)
		elif isinstance(op, PathOp):
			for cmd, payload in op.commands:
				if cmd == "M":
					take_point(payload[0], payload[1])
					continue
				for x, y in _arc_extreme_points(*payload):
					take_point(x, y)
		elif isinstance(op, TextOp):
			x1, y1, x2, y2 = text_box(op)
			take_point(x1, y1)
			take_point(x2, y2)
	if minx > maxx:
		return None
	return (minx, miny, maxx, maxy)


#============================================
def _svg_arc_parts(payload):
	cx, cy, r, angle1, angle2 = payload
	sweep_angle = angle2 - angle1
	if abs(sweep_angle) < 2 * math.pi - 1e-9:
		return [(r, angle1, angle2)]
	# a full turn has identical endpoints and would draw nothing in SVG
	middle = angle1 + sweep_angle / 2.0
	return [(r, angle1, middle), (r, middle, angle2)]


#============================================
def _path_d_text(commands):
	d_parts = []
	for cmd, payload in commands:
		if cmd == "M":
			d_parts.append("M %s %s" % (payload[0], payload[1]))
			continue
		cx, cy = payload[0], payload[1]
		for r, angle1, angle2 in _svg_arc_parts(payload):
			x = cx + r * math.cos(angle2)
			y = cy + r * math.sin(angle2)
			large_arc = 1 if abs(angle2 - angle1) > math.pi else 0
			sweep = 1 if angle2 >= angle1 else 0
			d_parts.append("A %s %s 0 %s %s %s %s" % (r, r, large_arc, sweep, x, y))
	return " ".join(d_parts)


#============================================
def _stroke_attrs(fill, stroke, stroke_width):
	attrs = (( 'fill', color_to_hex(fill) or "none"),)
	stroke = color_to_hex(stroke)
	if stroke:
		return attrs + (( 'stroke', stroke),
				( 'stroke-width', str(stroke_width)))
	return attrs + (( 'stroke', "none"),)


#============================================
def ops_to_svg(parent, ops):
	for op in ops:
		if isinstance(op, LineOp):
			attrs = (( 'x1', str(op.p1[0])),
					( 'y1', str(op.p1[1])),
					( 'x2', str(op.p2[0])),
					( 'y2', str(op.p2[1])),
					( 'stroke-width', str(op.width)),
					( 'stroke', color_to_hex(op.color) or "#000"))
			dom_extensions.elementUnder(parent, 'line', attrs)
		elif isinstance(op, CircleOp):
			attrs = (( 'cx', str(op.center[0])),
					( 'cy', str(op.center[1])),
					( 'r', str(op.radius)))
			attrs += _stroke_attrs(op.fill, op.stroke, op.stroke_width)
			dom_extensions.elementUnder(parent, 'circle', attrs)
		elif isinstance(op, PathOp):
			attrs = (( 'd', _path_d_text(op.commands)),)
			attrs += _stroke_attrs(op.fill, op.stroke, op.stroke_width)
			dom_extensions.elementUnder(parent, 'path', attrs)
		elif isinstance(op, TextOp):
			attrs = (( 'x', str(op.x)),
					( 'y', str(op.y)),
					( 'text-anchor', op.anchor),
					( 'font-size', "%spx" % op.font_size),
					( 'font-family', op.font_name),
					( 'fill', color_to_hex(op.color) or "#000"))
			if op.baseline:
				attrs += (( 'dominant-baseline', op.baseline),)
			dom_extensions.textOnlyElementUnder(parent, 'text', op.text, attrs)


#============================================
def _set_cairo_color(context, color):
	rgb = _color_to_rgb(color) or (0.0, 0.0, 0.0)
	context.set_source_rgb(*rgb)


#============================================
def _fill_and_stroke(context, fill, stroke, stroke_width):
	if fill and fill != "none":
		_set_cairo_color(context, fill)
		if stroke:
			context.fill_preserve()
		else:
			context.fill()
	if stroke:
		_set_cairo_color(context, stroke)
		context.set_line_width(stroke_width)
		context.stroke()
	else:
		context.new_path()


#============================================
def _cairo_text(context, op):
	family = op.font_name.split(",")[0].strip() or "sans-serif"
	context.select_font_face(family)
	context.set_font_size(op.font_size)
	extents = context.text_extents(op.text)
	x = op.x
	if op.anchor == "middle":
		x -= extents.x_advance / 2.0
	elif op.anchor == "end":
		x -= extents.x_advance
	y = op.y
	if op.baseline == "middle":
		y -= extents.y_bearing + extents.height / 2.0
	_set_cairo_color(context, op.color)
	context.move_to(x, y)
	context.show_text(op.text)
	context.new_path()


#============================================
def ops_to_cairo(context, ops):
	for op in ops:
		if isinstance(op, LineOp):
			context.set_line_width(op.width)
			_set_cairo_color(context, op.color)
			context.move_to(op.p1[0], op.p1[1])
			context.line_to(op.p2[0], op.p2[1])
			context.stroke()
		elif isinstance(op, CircleOp):
			context.new_path()
			context.arc(op.center[0], op.center[1], op.radius, 0, 2 * math.pi)
			_fill_and_stroke(context, op.fill, op.stroke, op.stroke_width)
		elif isinstance(op, PathOp):
			context.new_path()
			for cmd, payload in op.commands:
				if cmd == "M":
					context.move_to(payload[0], payload[1])
					continue
				cx, cy, r, angle1, angle2 = payload
				if angle2 >= angle1:
					context.arc(cx, cy, r, angle1, angle2)
				else:
					context.arc_negative(cx, cy, r, angle1, angle2)
			_fill_and_stroke(context, op.fill, op.stroke, op.stroke_width)
		elif isinstance(op, TextOp):
			_cairo_text(context, op)

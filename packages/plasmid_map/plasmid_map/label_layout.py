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

"""Feature label placement: font fitting, anchor side and dogleg connectors.

Labels sit in two vertical columns beside the map. Features whose midpoint
falls on the right half of the clock face (0 to 180 degrees) are labelled in
the right column with left-aligned text, the rest in the left column with
right-aligned text. Label-vs-label overlap is not resolved; one global font
shrink keeps the longest name inside the horizontal space.
"""

# Standard Library
import math

# local repo modules
from . import map_layout
from . import render_ops


# layout-like distances, multiplied by the scale factor
LABEL_OFFSET = 80.0
DOGLEG_OFFSET = 50.0
TEXT_PADDING = 5.0
BASE_FONT_SIZE = 24.0


#============================================
def longest_label(features) -> str:
	"""Name with the most characters; the first one wins ties."""
	longest = ""
	for feature in features:
		if len(feature.name) > len(longest):
			longest = feature.name
	return longest


#============================================
def available_label_space(layout: map_layout.MapLayout) -> float:
	"""Horizontal room between the label column and the effective box edge."""
	label_offset = LABEL_OFFSET * layout.scale_factor
	left = layout.center_x - layout.outer_radius - label_offset - layout.offset_x
	right = (layout.offset_x + layout.effective_width - layout.center_x
		- layout.outer_radius - label_offset)
	return min(left, right)


#============================================
def estimated_text_width(text: str, font_size: float) -> float:
	return font_size * render_ops.CHAR_WIDTH_FACTOR * len(text)


#============================================
def label_font_size(features, layout: map_layout.MapLayout) -> float:
	"""Common font size for all feature labels.

	Starts from the base size and shrinks uniformly by available/estimated
	when the longest name would overflow. Never negative.
	"""
	base_font_size = BASE_FONT_SIZE * layout.scale_factor
	estimated = estimated_text_width(longest_label(features), base_font_size)
	available = available_label_space(layout)
	if estimated <= available:
		return base_font_size
	if available <= 0:
		return 0.0
	return base_font_size * (available / estimated)


#============================================
def feature_mid_angle(start_angle: float, stop_angle: float) -> float:
	"""Screen angle of the middle of a raw-angle span."""
	if stop_angle < start_angle:
		stop_angle += 2 * math.pi
	return (start_angle + stop_angle) / 2.0 - math.pi / 2


#============================================
def clock_degrees(mid_angle: float) -> float:
	"""Clockwise degrees from 12 o'clock in [0, 360)."""
	return math.degrees(mid_angle + math.pi / 2) % 360.0


#============================================
def label_anchor_for_degrees(degrees: float) -> str:
	# exactly 180 belongs to the left column
	if 0.0 <= degrees < 180.0:
		return "start"
	return "end"


#============================================
def feature_label_geometry(feature, length, layout: map_layout.MapLayout) -> dict:
	"""Connector points and text position for one feature label."""
	scale = layout.scale_factor
	start_angle = (feature.start / length) * 2 * math.pi
	stop_angle = (feature.stop / length) * 2 * math.pi
	mid_angle = feature_mid_angle(start_angle, stop_angle)
	degrees = clock_degrees(mid_angle)
	anchor = label_anchor_for_degrees(degrees)
	column_offset = layout.outer_radius + LABEL_OFFSET * scale
	if anchor == "start":
		label_x = layout.center_x + column_offset
		text_x = label_x + TEXT_PADDING * scale
	else:
		label_x = layout.center_x - column_offset
		text_x = label_x - TEXT_PADDING * scale
	arc_mid = map_layout.point_on_circle(layout, layout.inner_radius, mid_angle)
	elbow = map_layout.point_on_circle(layout, layout.outer_radius + DOGLEG_OFFSET * scale, mid_angle)
	column_point = (label_x, elbow[1])
	return {
		"mid_angle": mid_angle,
		"degrees": degrees,
		"anchor": anchor,
		"arc_mid": arc_mid,
		"elbow": elbow,
		"column_point": column_point,
		"text_x": text_x,
		"text_y": elbow[1],
	}


#============================================
def build_label_ops(feature, length, layout, font_size, line_width=2.25,
		font_name="Arial, Helvetica, sans-serif", color="#000"):
	geom = feature_label_geometry(feature, length, layout)
	return [
		render_ops.LineOp(geom["arc_mid"], geom["elbow"], width=line_width, color=color),
		render_ops.LineOp(geom["elbow"], geom["column_point"], width=line_width, color=color),
		render_ops.TextOp(
			x=geom["text_x"],
			y=geom["text_y"],
			text=feature.name,
			font_size=font_size,
			font_name=font_name,
			anchor=geom["anchor"],
			baseline="middle",
			color=color,
		),
	]

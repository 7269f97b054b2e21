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

"""Pure geometry helpers for directional feature arrows."""

# Standard Library
import math

# local repo modules
from . import render_ops


# arrowhead dimensions are scene units and do not follow the scale factor
ARROW_SIZE = 12.0
ARROW_BASE_FRACTION = 0.4
ARROW_BASE_WIDENING = 1.5
ARROWHEAD_SPLAY = math.pi / 3


#============================================
def position_angle(position, length):
	"""Raw angle of a base pair position, 0 at 12 o'clock, growing clockwise."""
	return (position / length) * 2 * math.pi


#============================================
def arrow_angle_delta(arc_radius, arrow_size=ARROW_SIZE):
	"""Angle subtended by an arrowhead of arrow_size along a circle of arc_radius."""
	return arrow_size / (arc_radius * 2 * math.pi) * 2 * math.pi


#============================================
def arrow_base_offset(arrow_size=ARROW_SIZE):
	"""Distance from the arc end to each arrowhead base point."""
	return arrow_size * ARROW_BASE_FRACTION * ARROW_BASE_WIDENING


#============================================
def feature_arc_angles(start_angle, stop_angle, delta, antisense):
	"""Shrink a feature span to leave room for its arrowhead.

	Sense features lose delta at the stop end, antisense features at the
	start end. When the result has no positive sweep a full turn is added
	to the end angle.

	Returns:
		(arc_start, arc_end) raw angles with arc_end > arc_start.
	"""
	if antisense:
		arc_start = start_angle + delta
		arc_end = stop_angle
	else:
		arc_start = start_angle
		arc_end = stop_angle - delta
	if arc_end <= arc_start:
		arc_end += 2 * math.pi
	return (arc_start, arc_end)


#============================================
def _polar(center, radius, angle):
	return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


#============================================
def feature_arrow_geometry(feature, length, layout, arrow_size=ARROW_SIZE):
	"""Compute arc, arrowhead and end-cap geometry for one feature.

	Raw angles count clockwise from 12 o'clock; the quarter-turn offset to
	screen angles is applied only when points are produced.

	Args:
		feature: Feature with start, stop and orientation.
		length: total sequence length in base pairs.
		layout: MapLayout from map_layout.solve_layout.
		arrow_size: arrowhead length in scene units.

	Returns:
		dict: raw and screen angles, arc path commands, arrowhead points
		(tip, base1, base2, arc_point) and end-cap endpoints.
	"""
	center = layout.center
	arc_radius = layout.inner_radius
	antisense = feature.is_antisense
	start_angle = position_angle(feature.start, length)
	stop_angle = position_angle(feature.stop, length)
	delta = arrow_angle_delta(arc_radius, arrow_size)
	arc_start, arc_end = feature_arc_angles(start_angle, stop_angle, delta, antisense)
	screen_start = arc_start - math.pi / 2
	screen_end = arc_end - math.pi / 2

	arc_commands = (
		("M", _polar(center, arc_radius, screen_start)),
		("ARC", (center[0], center[1], arc_radius, screen_start, screen_end)),
	)

	if antisense:
		decorated_angle = screen_start
		undecorated_angle = screen_end
		tangent_angle = decorated_angle - math.pi / 2
	else:
		decorated_angle = screen_end
		undecorated_angle = screen_start
		tangent_angle = decorated_angle + math.pi / 2
	arc_point = _polar(center, arc_radius, decorated_angle)
	base_offset = arrow_base_offset(arrow_size)
	tip = _polar(arc_point, arrow_size, tangent_angle)
	base1 = _polar(arc_point, base_offset, tangent_angle - ARROWHEAD_SPLAY)
	base2 = _polar(arc_point, base_offset, tangent_angle + ARROWHEAD_SPLAY)

	# end cap runs radially, total length matches the arrowhead base
	cap_center = _polar(center, arc_radius, undecorated_angle)
	cap_p1 = _polar(cap_center, base_offset, undecorated_angle)
	cap_p2 = _polar(cap_center, -base_offset, undecorated_angle)
	return {
		"start_angle": start_angle,
		"stop_angle": stop_angle,
		"arrow_angle_delta": delta,
		"arc_start": arc_start,
		"arc_end": arc_end,
		"arc_radius": arc_radius,
		"arc_commands": arc_commands,
		"decorated_angle": decorated_angle,
		"undecorated_angle": undecorated_angle,
		"tangent_angle": tangent_angle,
		"arc_point": arc_point,
		"tip": tip,
		"base1": base1,
		"base2": base2,
		"cap_p1": cap_p1,
		"cap_p2": cap_p2,
	}


#============================================
def build_feature_ops(feature, length, layout, line_width=3.0, arrow_line_width=2.25,
		color="#000"):
	geom = feature_arrow_geometry(feature, length, layout)
	return [
		render_ops.PathOp(
			commands=geom["arc_commands"],
			fill="none",
			stroke=color,
			stroke_width=line_width,
		),
		render_ops.LineOp(geom["base1"], geom["tip"], width=arrow_line_width, color=color),
		render_ops.LineOp(geom["base2"], geom["tip"], width=arrow_line_width, color=color),
		render_ops.LineOp(geom["arc_point"], geom["tip"], width=arrow_line_width, color=color),
		render_ops.LineOp(geom["cap_p1"], geom["cap_p2"], width=arrow_line_width, color=color),
	]

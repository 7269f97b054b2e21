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

"""Backbone circles, tick marks and the center title."""

# Standard Library
import math

# local repo modules
from . import map_layout
from . import render_ops


TICK_INTERVAL = 100
BASE_FONT_SIZE = 24.0
TITLE_OFFSET = 20.0


#============================================
def tick_positions(length, tick_interval=TICK_INTERVAL):
	"""Base pair positions that get a tick: 0, interval, ... below floor(length/interval)."""
	count = int(math.floor(length / tick_interval))
	return [i * tick_interval for i in range(count)]


#============================================
def tick_angle(position, length):
	"""Screen angle of a base pair position; 0 bp sits at 12 o'clock, clockwise."""
	return (position / length) * 2 * math.pi - math.pi / 2


#============================================
def build_backbone_ops(record, layout, line_width=3.0, tick_line_width=1.5,
		tick_interval=TICK_INTERVAL, font_name="Arial, Helvetica, sans-serif", color="#000"):
	ops = []
	for radius in (layout.outer_radius, layout.outer_radius2):
		ops.append(render_ops.CircleOp(
			center=layout.center,
			radius=radius,
			fill="none",
			stroke=color,
			stroke_width=line_width,
		))
	for position in tick_positions(record.length, tick_interval):
		angle = tick_angle(position, record.length)
		ops.append(render_ops.LineOp(
			map_layout.point_on_circle(layout, layout.outer_radius, angle),
			map_layout.point_on_circle(layout, layout.outer_radius2, angle),
			width=tick_line_width,
			color=color,
		))
	font_size = BASE_FONT_SIZE * layout.scale_factor
	offset = TITLE_OFFSET * layout.scale_factor
	ops.append(render_ops.TextOp(
		x=layout.center_x,
		y=layout.center_y + offset,
		text=str(record.name),
		font_size=font_size,
		font_name=font_name,
		anchor="middle",
		color=color,
	))
	ops.append(render_ops.TextOp(
		x=layout.center_x,
		y=layout.center_y - offset,
		text="%s bp" % record.length,
		font_size=font_size,
		font_name=font_name,
		anchor="middle",
		color=color,
	))
	return ops

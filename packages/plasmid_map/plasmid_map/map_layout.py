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

"""Layout solver: drawing box, center, radii and scale factor."""

# Standard Library
import dataclasses
import math


ASPECT_RATIO = 3.0
REFERENCE_SIZE = 800.0
RADIUS_FRACTION = 0.30
# scene units, not multiplied by the scale factor
BACKBONE_GAP = 15.0


#============================================
@dataclasses.dataclass(frozen=True)
class MapLayout:
	width: float
	height: float
	effective_width: float
	effective_height: float
	offset_x: float
	offset_y: float
	scale_factor: float
	center_x: float
	center_y: float
	inner_radius: float
	outer_radius: float
	outer_radius2: float

	@property
	def center(self) -> tuple[float, float]:
		return (self.center_x, self.center_y)


#============================================
def effective_size(width: float, height: float) -> tuple[float, float]:
	"""Largest 3:1 box that fits inside width x height."""
	if width / height > ASPECT_RATIO:
		return (height * ASPECT_RATIO, height)
	return (width, width / ASPECT_RATIO)


#============================================
def solve_layout(width: float, height: float) -> MapLayout | None:
	"""Compute the layout for the given bounds.

	Returns None when either bound is missing or non-positive, which the
	renderer turns into an empty scene.
	"""
	if not width or not height or width <= 0 or height <= 0:
		return None
	effective_width, effective_height = effective_size(width, height)
	offset_x = (width - effective_width) / 2.0
	offset_y = (height - effective_height) / 2.0
	min_side = min(effective_width, effective_height)
	inner_radius = min_side * RADIUS_FRACTION
	outer_radius = inner_radius + BACKBONE_GAP
	return MapLayout(
		width=width,
		height=height,
		effective_width=effective_width,
		effective_height=effective_height,
		offset_x=offset_x,
		offset_y=offset_y,
		scale_factor=min_side / REFERENCE_SIZE,
		center_x=offset_x + effective_width / 2.0,
		center_y=offset_y + effective_height / 2.0,
		inner_radius=inner_radius,
		outer_radius=outer_radius,
		outer_radius2=outer_radius + BACKBONE_GAP,
	)


#============================================
def point_on_circle(layout: MapLayout, radius: float, angle: float) -> tuple[float, float]:
	"""Point at radius from the map center; angle 0 points right, y grows down."""
	return (
		layout.center_x + radius * math.cos(angle),
		layout.center_y + radius * math.sin(angle),
	)

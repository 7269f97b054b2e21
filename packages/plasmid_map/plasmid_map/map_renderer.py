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

"""Scene producer for shared Cairo/SVG drawing of circular maps."""

# local repo modules
from . import backbone
from . import feature_geometry
from . import label_layout
from . import map_layout
from . import sequence_record


_DEFAULT_STYLE = {
	"font_name": "Arial, Helvetica, sans-serif",
	"color": "#000",
	"backbone_line_width": 3.0,
	"tick_line_width": 1.5,
	"feature_line_width": 3.0,
	"arrow_line_width": 2.25,
	"tick_interval": backbone.TICK_INTERVAL,
}


#============================================
def _resolve_style(style):
	resolved = dict(_DEFAULT_STYLE)
	if style:
		for key in style:
			if key not in resolved:
				raise ValueError(f"Unknown map style option: {key}")
		resolved.update(style)
	return resolved


#============================================
def record_to_ops(record, width, height, style=None):
	"""Convert one sequence record into an immutable render-ops sequence.

	record may be a SequenceRecord or an already parsed mapping. The result
	is rebuilt from scratch on every call; an empty tuple means nothing to
	draw (no record or non-positive bounds).
	"""
	used_style = _resolve_style(style)
	record = sequence_record.coerce_record(record)
	if record is None:
		return ()
	layout = map_layout.solve_layout(width, height)
	if layout is None:
		return ()
	font_name = str(used_style["font_name"])
	color = used_style["color"]
	ops = backbone.build_backbone_ops(
		record,
		layout,
		line_width=float(used_style["backbone_line_width"]),
		tick_line_width=float(used_style["tick_line_width"]),
		tick_interval=used_style["tick_interval"],
		font_name=font_name,
		color=color,
	)
	if record.length <= 0:
		return tuple(ops)
	font_size = label_layout.label_font_size(record.features, layout)
	for feature in record.features:
		ops.extend(feature_geometry.build_feature_ops(
			feature,
			record.length,
			layout,
			line_width=float(used_style["feature_line_width"]),
			arrow_line_width=float(used_style["arrow_line_width"]),
			color=color,
		))
		ops.extend(label_layout.build_label_ops(
			feature,
			record.length,
			layout,
			font_size,
			line_width=float(used_style["arrow_line_width"]),
			font_name=font_name,
			color=color,
		))
	return tuple(ops)

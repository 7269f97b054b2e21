"""Coverage for the record to render-ops pipeline."""

# Standard Library
import collections
import json
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_plasmid_map_to_sys_path()

# local repo modules
import plasmid_map
from plasmid_map import map_renderer
from plasmid_map import render_ops
from plasmid_map import sequence_record


#============================================
def _record_dict():
	return {
		"name": "pDemo",
		"length": 1000,
		"features": [
			{"name": "ampR", "start": 100, "stop": 400, "orientation": "sense"},
			{"name": "ori", "start": 600, "stop": 800, "orientation": "antisense"},
		],
	}


#============================================
def _record():
	return sequence_record.record_from_dict(_record_dict())


#============================================
def test_scene_composition():
	ops = map_renderer.record_to_ops(_record(), 1200, 400)
	assert isinstance(ops, tuple)
	# 2 circles, 10 ticks, 2 center texts, then 8 ops per feature
	assert len(ops) == 2 + 10 + 2 + 2 * 8
	assert isinstance(ops[0], render_ops.CircleOp)
	assert isinstance(ops[1], render_ops.CircleOp)
	assert isinstance(ops[-1], render_ops.TextOp)
	assert ops[-1].text == "ori"
	paths = [op for op in ops if isinstance(op, render_ops.PathOp)]
	assert len(paths) == 2


#============================================
def test_render_is_deterministic():
	first = map_renderer.record_to_ops(_record(), 1200, 400)
	second = map_renderer.record_to_ops(_record(), 1200, 400)
	assert first == second
	assert render_ops.ops_to_json_dict(first) == render_ops.ops_to_json_dict(second)
	snapshot = json.loads(render_ops.ops_to_json_text(first))
	assert snapshot == render_ops.ops_to_json_dict(first)


#============================================
def test_mapping_input_matches_record_input():
	from_dict = map_renderer.record_to_ops(_record_dict(), 900, 300)
	from_record = map_renderer.record_to_ops(_record(), 900, 300)
	assert from_dict == from_record


#============================================
@pytest.mark.parametrize("width, height", [(0, 400), (1200, 0), (-5, -5), (None, None)])
def test_non_positive_bounds_render_nothing(width, height):
	assert map_renderer.record_to_ops(_record(), width, height) == ()


#============================================
def test_missing_record_renders_nothing():
	assert map_renderer.record_to_ops(None, 1200, 400) == ()


#============================================
@pytest.mark.parametrize("missing", ["name", "length", "features"])
def test_missing_required_field_fails_fast(missing):
	data = _record_dict()
	del data[missing]
	with pytest.raises(plasmid_map.RecordFieldError, match=missing):
		map_renderer.record_to_ops(data, 1200, 400)


#============================================
def test_malformed_features_do_not_raise():
	data = _record_dict()
	data["features"].append({"name": "inverted", "start": 900, "stop": 100})
	data["features"].append({"name": "outside", "start": -20, "stop": 5000})
	ops = map_renderer.record_to_ops(data, 1200, 400)
	assert len(ops) == 2 + 10 + 2 + 4 * 8


#============================================
def test_non_positive_length_draws_backbone_only():
	record = sequence_record.SequenceRecord(
		name="empty", length=0, features=(sequence_record.Feature("a", 0, 0),),
	)
	ops = map_renderer.record_to_ops(record, 1200, 400)
	assert [type(op) for op in ops] == [
		render_ops.CircleOp, render_ops.CircleOp, render_ops.TextOp, render_ops.TextOp,
	]


#============================================
def test_labels_share_one_font_size():
	data = _record_dict()
	data["features"].append({"name": "a much longer feature label " * 3, "start": 850, "stop": 950})
	ops = map_renderer.record_to_ops(data, 1200, 400)
	feature_names = {feature["name"] for feature in data["features"]}
	sizes = {op.font_size for op in ops if isinstance(op, render_ops.TextOp) and op.text in feature_names}
	assert len(sizes) == 1
	assert sizes.pop() < 12.0


#============================================
def test_style_overrides_color_and_widths():
	ops = map_renderer.record_to_ops(
		_record(), 1200, 400, style={"color": "#d94a2d", "tick_line_width": 0.5},
	)
	lines = [op for op in ops if isinstance(op, render_ops.LineOp)]
	assert all(op.color == "#d94a2d" for op in lines)
	assert lines[0].width == 0.5


#============================================
def test_unknown_style_option_rejected():
	with pytest.raises(ValueError):
		map_renderer.record_to_ops(_record(), 1200, 400, style={"glow": True})


#============================================
def test_package_level_entry_point():
	assert plasmid_map.record_to_ops(_record(), 1200, 400) == map_renderer.record_to_ops(_record(), 1200, 400)


#============================================
def _arrow_tips(ops):
	# an arrowhead is three lines meeting at one apex
	endpoints = collections.Counter(op.p2 for op in ops if isinstance(op, render_ops.LineOp))
	return [point for point, count in endpoints.items() if count == 3]


#============================================
@pytest.mark.parametrize("orientation", ["sense", "antisense"])
def test_origin_crossing_feature_draws_one_arrow_and_label(orientation):
	record = {
		"name": "p",
		"length": 1000,
		"features": [{"name": "ori", "start": 900, "stop": 100, "orientation": orientation}],
	}
	ops = map_renderer.record_to_ops(record, 1200, 400)
	assert len(_arrow_tips(ops)) == 1
	texts = [op.text for op in ops if isinstance(op, render_ops.TextOp)]
	assert texts == ["p", "1000 bp", "ori"]
	paths = [op for op in ops if isinstance(op, render_ops.PathOp)]
	assert len(paths) == 1
	_cmd, (_cx, _cy, radius, angle1, angle2) = paths[0].commands[1]
	# 200 bp through the origin, less the arrowhead room
	assert angle2 - angle1 == pytest.approx(0.2 * 2 * math.pi - 12.0 / radius)

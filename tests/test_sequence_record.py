"""Tests for sequence record parsing."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_plasmid_map_to_sys_path()

# local repo modules
from plasmid_map import sequence_record


FIXTURE_PATH = conftest.tests_path("fixtures", "example_circular.json")


#============================================
def test_load_fixture_record():
	record = sequence_record.load_record_json(FIXTURE_PATH)
	assert record.name == "pUC19"
	assert record.length == 2686
	assert len(record.features) == 6
	assert record.features[0].is_antisense
	assert not record.features[-1].is_antisense


#============================================
def test_orientation_defaults_to_sense():
	record = sequence_record.record_from_dict({
		"name": "p", "length": 100,
		"features": [{"name": "a", "start": 1, "stop": 5}],
	})
	assert record.features[0].orientation == sequence_record.SENSE


#============================================
def test_missing_feature_field_names_path():
	data = {
		"name": "p", "length": 100,
		"features": [
			{"name": "a", "start": 1, "stop": 5},
			{"name": "b", "start": 1},
		],
	}
	with pytest.raises(sequence_record.RecordFieldError, match=r"features\[1\]\.stop"):
		sequence_record.record_from_dict(data)


#============================================
def test_null_field_counts_as_missing():
	with pytest.raises(sequence_record.RecordFieldError):
		sequence_record.record_from_dict({"name": None, "length": 10, "features": []})


#============================================
def test_record_field_error_is_value_error():
	assert issubclass(sequence_record.RecordFieldError, ValueError)


#============================================
def test_coerce_record_passthrough():
	record = sequence_record.SequenceRecord(name="p", length=10)
	assert sequence_record.coerce_record(record) is record
	assert sequence_record.coerce_record(None) is None


#============================================
def test_origin_crossing_span_kept_as_one_feature():
	record = sequence_record.record_from_dict({
		"name": "p", "length": 1000,
		"features": [{"name": "ori", "start": 900, "stop": 100, "orientation": "antisense"}],
	})
	assert record.features == (sequence_record.Feature("ori", 900, 100, sequence_record.ANTISENSE),)

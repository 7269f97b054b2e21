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

"""Sequence record and feature data model."""

# Standard Library
import dataclasses
import json


SENSE = "sense"
ANTISENSE = "antisense"


#============================================
class RecordFieldError(ValueError):
	"""Raised when a required record or feature field is absent."""


#============================================
@dataclasses.dataclass(frozen=True)
class Feature:
	name: str
	start: int
	stop: int
	orientation: str = SENSE

	@property
	def is_antisense(self):
		return self.orientation == ANTISENSE


#============================================
@dataclasses.dataclass(frozen=True)
class SequenceRecord:
	name: str
	length: int
	features: tuple[Feature, ...] = ()


#============================================
def _require(data, key, path):
	if not isinstance(data, dict) or key not in data or data[key] is None:
		raise RecordFieldError(f"Missing required field: {path}")
	return data[key]


#============================================
def feature_from_dict(data, index=0):
	path = f"features[{index}]"
	name = _require(data, "name", path + ".name")
	start = _require(data, "start", path + ".start")
	stop = _require(data, "stop", path + ".stop")
	orientation = data.get("orientation") or SENSE
	return Feature(name=str(name), start=start, stop=stop, orientation=orientation)


#============================================
def record_from_dict(data):
	"""Build a SequenceRecord from an already parsed mapping.

	Only structural presence is checked. Coordinates are taken as given. A
	feature with stop < start is a span that runs through the origin and is
	drawn as one wrapped arc; out-of-range positions draw degenerate arcs.

	Raises:
		RecordFieldError: when name, length or features (or a feature's
			name, start or stop) is missing.
	"""
	name = _require(data, "name", "name")
	length = _require(data, "length", "length")
	raw_features = _require(data, "features", "features")
	features = tuple(feature_from_dict(item, index) for index, item in enumerate(raw_features))
	return SequenceRecord(name=str(name), length=length, features=features)


#============================================
def coerce_record(record):
	if record is None or isinstance(record, SequenceRecord):
		return record
	return record_from_dict(record)


#============================================
def load_record_json(path):
	with open(path, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	return record_from_dict(data)


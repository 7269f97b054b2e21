# SPDX-License-Identifier: GPL-2.0-or-later

"""Command line renderer for circular plasmid maps.

Usage:
	plasmid-map example_circular.json
	plasmid-map example_circular.json -o map.svg --width 1500 --height 500
	plasmid-map example_circular.json --format pdf
"""

# Standard Library
import argparse
import json
import os

# local repo modules
from . import render_out
from . import sequence_record


DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 400


#============================================
def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description="Render a circular plasmid map from a JSON sequence record"
	)
	parser.add_argument(
		"input",
		help="JSON file with name, length and features"
	)
	parser.add_argument(
		"-o", "--out",
		dest="output",
		default=None,
		help="Output file path (default: <name>_vector.<format>)"
	)
	parser.add_argument(
		"--format",
		default=None,
		choices=["svg", "png", "pdf"],
		help="Output format (default: from output extension, else png)"
	)
	parser.add_argument(
		"--width",
		type=float,
		default=DEFAULT_WIDTH,
		help=f"Layout width in pixels (default: {DEFAULT_WIDTH})"
	)
	parser.add_argument(
		"--height",
		type=float,
		default=DEFAULT_HEIGHT,
		help=f"Layout height in pixels (default: {DEFAULT_HEIGHT})"
	)
	return parser.parse_args(argv)


#============================================
def default_output(record, output_format):
	return f"{record.name}_vector.{output_format or 'png'}"


#============================================
def main(argv=None):
	"""CLI entry point."""
	args = parse_args(argv)
	try:
		record = sequence_record.load_record_json(args.input)
	except (OSError, json.JSONDecodeError, sequence_record.RecordFieldError) as exc:
		print(f"ERROR: could not load {args.input}: {exc}")
		return 1
	output = args.output or default_output(record, args.format)
	output_format = args.format
	if output_format is None and not os.path.splitext(output)[1]:
		output_format = "png"

	print(f"Rendering {record.name} ({record.length} bp, {len(record.features)} features)...")
	try:
		written = render_out.record_to_output(
			record, output, args.width, args.height, format=output_format,
		)
	except (ValueError, RuntimeError, OSError) as exc:
		print(f"ERROR: {exc}")
		return 1
	if written is None:
		print("Nothing to draw; no file written")
		return 0
	file_size = os.path.getsize(written)
	print(f"Wrote {file_size} bytes to {written}")
	return 0

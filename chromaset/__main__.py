import argparse
import logging
import os
import typing

import yaml

import chromaset.codec
import chromaset.sets


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'chromaset.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		logger.warning(f"Config file {config_path} is not a mapping. Using defaults.")
		return {}

	return config


def parse_items (items: typing.Sequence[str]) -> chromaset.sets.PcSetInput:

	"""
	Turn command-line items into pcset input: a lone chroma or set number, or a list of names.
	"""

	if len(items) == 1:
		item = items[0]

		if chromaset.codec.is_chroma(item):
			return item

		if item.isdecimal() and item.isascii():
			return int(item)

	return list(items)


def describe (value: chromaset.sets.PcSetInput, normalize: bool = True) -> typing.List[str]:

	"""
	Return printable lines for a set and its modes.
	"""

	s = chromaset.sets.pcset(value)

	lines = [
		f"empty:      {s.empty}",
		f"set_num:    {s.set_num}",
		f"chroma:     {s.chroma}",
		f"normalized: {s.normalized}",
		f"intervals:  {' '.join(s.intervals)}",
		"modes:",
	]

	lines.extend(f"  {mode}" for mode in chromaset.sets.modes(s, normalize=normalize))

	return lines


def main (argv: typing.Optional[typing.Sequence[str]] = None) -> None:

	"""
	Describe a pitch-class set given on the command line.
	"""

	parser = argparse.ArgumentParser(prog="chromaset", description="Describe a pitch-class set.")
	parser.add_argument("items", nargs="+", help="a chroma, a set number, or note/interval names")
	parser.add_argument("--config", default="chromaset.yaml", help="YAML config file")
	parser.add_argument("--all-rotations", action="store_true", help="list all 12 rotations, not only modes")
	args = parser.parse_args(argv)

	config = load_config(args.config)

	logging.basicConfig(level=config.get('logging', {}).get('level', 'INFO'))

	normalize = config.get('modes', {}).get('normalize', True) and not args.all_rotations

	logger.info(f"Describing {' '.join(args.items)}")

	for line in describe(parse_items(args.items), normalize=normalize):
		print(line)


if __name__ == "__main__":
	main()

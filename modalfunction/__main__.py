import argparse
import logging
import os
import sys
import typing

import yaml

import modalfunction.exceptions
import modalfunction.modal_function


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "modalfunction.yaml"

RELATIONS = ("chord_key", "pivot_chord_keys", "roman_key")

OUTPUT_FORMATS = ("text", "yaml")

# Question attributes settable from the command line, in pattern order.
SLOT_OPTIONS = (
	"chord_note",
	"chord",
	"mode_note",
	"mode",
	"mode_function",
	"mode_roman",
	"key_note",
	"key",
	"key_function",
	"key_roman",
)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		logger.error(f"Config file {config_path} does not contain a mapping")
		raise modalfunction.exceptions.ConfigurationError(f"Config file {config_path} must contain a mapping")

	return config


def build_parser () -> argparse.ArgumentParser:

	"""
	Build the command line parser.
	"""

	parser = argparse.ArgumentParser(
		prog = "modalfunction",
		description = "Query chords, keys, modes and diatonic functions"
	)
	parser.add_argument("relation", choices=RELATIONS, help="Relation to query")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--verbose", action="store_true", help="Log queries and result counts")
	parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (default: text)")

	for slot in SLOT_OPTIONS:
		parser.add_argument("--" + slot.replace("_", "-"), dest=slot, default=None)

	return parser


def format_results (results: typing.Sequence[typing.Any], output_format: str) -> str:

	"""
	Render query results as comma-separated lines or a YAML list of mappings.
	"""

	if output_format == "yaml":
		return yaml.safe_dump([dict(result._asdict()) for result in results], sort_keys=False, allow_unicode=True)

	return "".join(", ".join(result) + "\n" for result in results)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the modalfunction command.
	"""

	args = build_parser().parse_args(argv)

	try:
		config = load_config(args.config)
	except (modalfunction.exceptions.ConfigurationError, yaml.YAMLError) as exc:
		logging.basicConfig(level=logging.INFO)
		logger.error(f"Invalid config: {exc}")
		return 1

	level_name = str((config.get('logging') or {}).get('level', 'INFO')).upper()
	level = logging.getLevelName(level_name)

	if args.verbose:
		level = logging.DEBUG

	elif not isinstance(level, int):
		logger.warning(f"Unknown log level {level_name!r}, using INFO")
		level = logging.INFO

	logging.basicConfig(level=level)

	output_format = args.format or (config.get('output') or {}).get('format', 'text')

	if output_format not in OUTPUT_FORMATS:
		logger.error(f"Unknown output format: {output_format!r}")
		return 1

	question = modalfunction.modal_function.ModalFunction(
		verbose = args.verbose,
		**{slot: getattr(args, slot) for slot in SLOT_OPTIONS}
	)

	try:
		results = getattr(question, args.relation)()
	except modalfunction.exceptions.ConfigurationError as exc:
		logger.error(f"Could not build the fact table: {exc}")
		return 1

	sys.stdout.write(format_results(results, output_format))

	return 0


if __name__ == "__main__":
	sys.exit(main())

#!/usr/bin/env python3

import argparse
import os
import sys
import yaml
from modplaylib.core.errors import ConfigError
from modplaylib.core.errors import InvalidMenuInput
from modplaylib.core.loader import SessionConfig
from modplaylib.core.loader import SessionLoader
from modplaylib.core.menu import MenuLoop
from modplaylib.core.reporter import Reporter
from modplaylib.core.session import PlayerSession

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="Modular Media Player")
	parser.add_argument('-y', '--yaml', dest='yamlfile',
		help='session yaml file with player settings and a starting playlist')
	parser.add_argument('-r', '--renderer', dest='renderer',
		choices=('hardware', 'software'),
		help='override the starting renderer')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='do not print playback output')
	parser.add_argument('-d', '--debug', dest='debug_log', action='store_true',
		help='write debug log to modplay.log in the current directory')
	parser.add_argument('-p', '--dump-playlist', dest='dump_playlist',
		action='store_true',
		help='print the starting playlist as yaml and exit')
	parser.set_defaults(quiet=False)
	args = parser.parse_args(argv)
	return args

#============================================

def load_config(args) -> SessionConfig:
	if args.yamlfile is None:
		config = SessionConfig()
		if args.renderer is not None:
			config.renderer = args.renderer
		return config
	loader = SessionLoader(args.yamlfile, renderer_override=args.renderer)
	return loader.load()

#============================================

def main(argv: list = None, read_line=input) -> int:
	args = parse_args(argv)
	try:
		config = load_config(args)
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 1
	if args.dump_playlist:
		print(yaml.safe_dump(config.playlist.to_dict(), sort_keys=False))
		return 0
	log_path = None
	if args.debug_log:
		log_path = os.path.join(os.getcwd(), "modplay.log")
	reporter = Reporter(quiet=args.quiet, log_path=log_path)
	session = PlayerSession.from_config(config, reporter)
	menu = MenuLoop(session, read_line=read_line)
	try:
		menu.run()
	except InvalidMenuInput as exc:
		reporter.write_log(f"input error: {exc}")
		print(f"error: {exc}", file=sys.stderr)
		return 1
	return 0


if __name__ == '__main__':
	sys.exit(main())

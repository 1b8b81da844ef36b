
DESC = '''
Print driving directions for a trip.

REQUEST (default: standard input) lists the locations to visit, in order.
Each leg follows a shortest route on the roads of MAP.
'''

import argparse, sys, os

import toml

from graphwalk.config import load_config
from graphwalk.util import log

from .mapfile import MapError, read_map, parse_request
from .route import NoRouteError, directions

def main(argv=None, prog=None):
	if argv is None:
		progname, *argv = sys.argv
		prog = prog or os.path.split(progname)[1]

	parser = argparse.ArgumentParser(prog=prog, description=DESC,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('-m', dest='map', metavar='MAP', help='map file (default: Map)')
	parser.add_argument('-o', dest='output', metavar='OUT', help='output file (default: standard output)')
	parser.add_argument('--config', metavar='PATH', help='TOML file with default paths')
	parser.add_argument('-v', '--verbose', action='count', default=0, help='log more (repeatable)')
	parser.add_argument('request', metavar='REQUEST', nargs='?', help='file listing the stops')

	args = parser.parse_args(argv)
	log.configure(args.verbose)

	try:
		config = load_config(args.config)
		roadmap = read_map(args.map or config.get_map())

		if args.request is None:
			text = sys.stdin.read()
		else:
			with open(args.request) as f:
				text = f.read()

		lines = directions(roadmap, parse_request(text, roadmap))

	except OSError as e:
		log.die('%s: %s', e.filename, e.strerror)
	except toml.TomlDecodeError as e:
		log.die('%s: %s', args.config, e)
	except (MapError, NoRouteError) as e:
		log.die('%s', e)

	try:
		if args.output is None:
			write_lines(sys.stdout, lines)
		else:
			with open(args.output, 'w') as f:
				write_lines(f, lines)
	except OSError as e:
		log.die('could not write %s: %s', e.filename, e.strerror)

def write_lines(f, lines):
	for line in lines:
		print(line, file=f)

if __name__ == '__main__':
	main()


DESC = '''
Print the commands needed to bring targets up to date.

Reads rules from MAKEFILE and the current state of the file system from
FILEINFO, then prints (but does not run) the commands of every target that is
missing or older than one of its prerequisites.  With no TARGET, builds the
first target in MAKEFILE.
'''

import argparse, sys, os

import toml

from graphwalk.config import load_config
from graphwalk.graph import CycleError
from graphwalk.util import log

from .rules import MakefileError, read_makefile, read_fileinfo
from .builder import make

def main(argv=None, prog=None):
	if argv is None:
		progname, *argv = sys.argv
		prog = prog or os.path.split(progname)[1]

	parser = argparse.ArgumentParser(prog=prog, description=DESC,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('-f', dest='makefile', metavar='MAKEFILE', help='rule file (default: Makefile)')
	parser.add_argument('-D', dest='fileinfo', metavar='FILEINFO', help='file times (default: fileinfo)')
	parser.add_argument('--config', metavar='PATH', help='TOML file with default paths')
	parser.add_argument('-v', '--verbose', action='count', default=0, help='log more (repeatable)')
	parser.add_argument('targets', metavar='TARGET', nargs='*', help='targets to build')

	args = parser.parse_args(argv)
	log.configure(args.verbose)

	try:
		config = load_config(args.config)
		makefile = args.makefile or config.get_makefile()
		fileinfo = args.fileinfo or config.get_fileinfo()

		rules = read_makefile(makefile)
		current_time, times = read_fileinfo(fileinfo)
		commands = make(rules, current_time, times, args.targets)

	except OSError as e:
		log.die('%s: %s', e.filename, e.strerror)
	except toml.TomlDecodeError as e:
		log.die('%s: %s', args.config, e)
	except (MakefileError, CycleError) as e:
		log.die('%s', e)

	for command in commands:
		print(command)

if __name__ == '__main__':
	main()

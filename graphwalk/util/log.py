'''
Logging helpers shared by the library and the command line tools.

Library modules get their logger through ``getLogger(__name__)`` and never
configure logging themselves; the command line entry points call
``configure`` once.
'''

import logging
import sys

ROOT = 'graphwalk'

def getLogger(name=None):
	# keep everything under our own root so that configure() only touches us
	if not name:
		return logging.getLogger(ROOT)
	if name != ROOT and not name.startswith(ROOT + '.'):
		name = ROOT + '.' + name
	return logging.getLogger(name)

def configure(verbosity=0, stream=None):
	''' Send our log records to ``stream`` (stderr by default).

	``verbosity`` counts ``-v`` flags: 0 is WARNING, 1 is INFO, 2+ is DEBUG. '''
	level = [logging.WARNING, logging.INFO][verbosity] if verbosity < 2 else logging.DEBUG

	handler = logging.StreamHandler(stream or sys.stderr)
	handler.setFormatter(logging.Formatter('%(levelname)s:%(name)s: %(message)s'))

	root = getLogger()
	root.handlers[:] = [handler]
	root.setLevel(level)
	root.propagate = False
	return root

def die(msg, *args, code=1):
	print('Fatal: ' + (msg % args), file=sys.stderr)
	sys.exit(code)

'''
Readers for the two inputs of ``graphwalk-make``.

A makefile is a list of rules::

    target: prereq1 prereq2
        command line
        another command line

Blank lines and lines starting with ``#`` are ignored.  Rules for the same
target are merged; at most one of them may have commands.

A file-info file gives the current time on its first line, followed by one
``name time`` line per existing file.
'''

import re

from graphwalk.util import unique

__all__ = [
	'Rule',
	'MakefileError',
	'parse_makefile',
	'read_makefile',
	'parse_fileinfo',
	'read_fileinfo',
]

TARGET_RE   = re.compile(r'^([^\s:=#]+):(.*)$')
COMMAND_RE  = re.compile(r'^\s+(\S.*?)\s*$')
FILEINFO_RE = re.compile(r'^\s*([^\s:=#]+)\s+([0-9]+)\s*$')
TIME_RE     = re.compile(r'^\s*([0-9]+)\s*$')

class MakefileError(ValueError):
	def __init__(self, msg, path=None, lineno=None):
		if path is not None and lineno is not None:
			msg = '{}:{}: {}'.format(path, lineno, msg)
		elif path is not None:
			msg = '{}: {}'.format(path, msg)
		super().__init__(msg)
		self.path = path
		self.lineno = lineno

class Rule:
	def __init__(self, target, prereqs=(), commands=()):
		self.target = target
		self.prereqs = unique(prereqs)
		self.commands = list(commands)

	def merge(self, other):
		''' Fold another rule for the same target into this one. '''
		assert other.target == self.target
		if self.commands and other.commands:
			raise ValueError('multiple command sets for target {!r}'.format(self.target))
		self.prereqs = unique(self.prereqs + other.prereqs)
		if not self.commands:
			self.commands = list(other.commands)

	def __repr__(self):
		return 'Rule({!r}, {!r}, {!r})'.format(self.target, self.prereqs, self.commands)

	def __eq__(self, other):
		return (type(self) is type(other)
			and (self.target, self.prereqs, self.commands)
			== (other.target, other.prereqs, other.commands))

def parse_makefile(lines, path='<makefile>'):
	'''
	Parse makefile lines into a list of ``Rule``, in order of first appearance.
	'''
	# (lineno, rule) for every rule header, before merging
	headers = []
	for lineno, line in enumerate(lines, start=1):
		line = line.rstrip('\n')
		if not line.strip() or line.startswith('#'):
			continue

		m = TARGET_RE.match(line)
		if m:
			headers.append((lineno, Rule(m.group(1), m.group(2).split())))
			continue

		m = COMMAND_RE.match(line)
		if m:
			if not headers:
				raise MakefileError('command line before first rule', path, lineno)
			headers[-1][1].commands.append(m.group(1))
			continue

		raise MakefileError('malformed line {!r}'.format(line), path, lineno)

	rules = {}
	for lineno, rule in headers:
		if rule.target not in rules:
			rules[rule.target] = rule
			continue
		try:
			rules[rule.target].merge(rule)
		except ValueError as e:
			raise MakefileError(str(e), path, lineno)
	return list(rules.values())

def read_makefile(path):
	with open(path) as f:
		return parse_makefile(f, path)

def parse_fileinfo(lines, path='<fileinfo>'):
	'''
	Parse file-info lines.

	Returns ``(current_time, times)`` where ``times`` maps file names to their
	integer change times.
	'''
	lines = iter(lines)
	first = next(lines, '')
	m = TIME_RE.match(first)
	if not m:
		raise MakefileError('first line must be the current time', path, 1)
	current_time = int(m.group(1))

	times = {}
	for lineno, line in enumerate(lines, start=2):
		if not line.strip():
			continue
		m = FILEINFO_RE.match(line)
		if not m:
			raise MakefileError('malformed line {!r}'.format(line.rstrip('\n')), path, lineno)
		times[m.group(1)] = int(m.group(2))
	return current_time, times

def read_fileinfo(path):
	with open(path) as f:
		return parse_fileinfo(f, path)

'''
Road map and trip request readers for ``graphwalk-trip``.

A map file has one entry per line::

    L name x y                       # a location
    R from road length dir to        # a road between two locations

``dir`` is one of ``NS``, ``SN``, ``EW`` or ``WE`` and gives the direction of
travel going from ``from`` to ``to`` (``NS``: north to south, so heading
south).  Blank lines are ignored.
'''

import math
import re

from graphwalk.graph import UndirectedGraph
from graphwalk.util import log

__all__ = [
	'Location',
	'Road',
	'RoadMap',
	'MapError',
	'parse_map',
	'read_map',
	'parse_request',
]

logger = log.getLogger(__name__)

_NAME   = r'([^\s:=#]+)'
_NUMBER = r'(-?[0-9]+(?:\.[0-9]*)?|-?\.[0-9]+)'

LOCATION_RE = re.compile(r'^L\s+{0}\s+{1}\s+{1}\s*$'.format(_NAME, _NUMBER))
ROAD_RE     = re.compile(r'^R\s+{0}\s+{0}\s+{1}\s+(NS|SN|EW|WE)\s+{0}\s*$'.format(_NAME, _NUMBER))

COMPASS = {'N': 'north', 'S': 'south', 'E': 'east', 'W': 'west'}

class MapError(ValueError):
	def __init__(self, msg, path=None, lineno=None):
		if path is not None and lineno is not None:
			msg = '{}:{}: {}'.format(path, lineno, msg)
		super().__init__(msg)
		self.path = path
		self.lineno = lineno

class Location:
	'''
	Vertex label for a point on the map.

	``weight`` is scratch space for shortest-path searches (the best known
	distance from the start).
	'''
	def __init__(self, name, x, y):
		self.name = name
		self.x = x
		self.y = y
		self.weight = math.inf

	def distance_to(self, other):
		return math.hypot(self.x - other.x, self.y - other.y)

	def __repr__(self):
		return 'Location({!r}, {}, {})'.format(self.name, self.x, self.y)

	def __str__(self):
		return self.name

class Road:
	''' Edge label for one stretch of road between ``start`` and ``end`` vertices. '''
	def __init__(self, name, length, direction, start, end):
		if length < 0:
			raise ValueError('negative road length')
		self.name = name
		self.length = length
		self.direction = direction
		self.start = start
		self.end = end

	@property
	def weight(self):
		return self.length

	def direction_from(self, origin):
		''' Compass direction (e.g. ``'north'``) of travel when leaving ``origin``. '''
		if origin is self.start:
			return COMPASS[self.direction[1]]
		if origin is self.end:
			return COMPASS[self.direction[0]]
		raise ValueError('{!r} is not an end of road {}'.format(origin, self.name))

	def __repr__(self):
		return 'Road({!r}, {}, {!r})'.format(self.name, self.length, self.direction)

	def __str__(self):
		return self.name

class RoadMap:
	''' An ``UndirectedGraph`` of ``Location``s and ``Road``s, indexed by location name. '''
	def __init__(self):
		self.graph = UndirectedGraph()
		self.locations = {}

	def add_location(self, name, x, y):
		if name in self.locations:
			raise ValueError('duplicate location {}'.format(name))
		v = self.graph.add_vertex(Location(name, x, y))
		self.locations[name] = v
		return v

	def add_road(self, name, length, direction, c0, c1):
		for c in (c0, c1):
			if c not in self.locations:
				raise ValueError('unknown location {}'.format(c))
		v0, v1 = self.locations[c0], self.locations[c1]
		return self.graph.add_edge(v0, v1, Road(name, length, direction, v0, v1))

	def location(self, name):
		try:
			return self.locations[name]
		except KeyError:
			raise MapError('location {} does not exist'.format(name))

def parse_map(lines, path='<map>'):
	roadmap = RoadMap()
	for lineno, line in enumerate(lines, start=1):
		line = line.strip()
		if not line:
			continue

		try:
			m = LOCATION_RE.match(line)
			if m:
				roadmap.add_location(m.group(1), float(m.group(2)), float(m.group(3)))
				continue

			m = ROAD_RE.match(line)
			if m:
				(c0, name, length, direction, c1) = m.groups()
				roadmap.add_road(name, float(length), direction, c0, c1)
				continue
		except ValueError as e:
			raise MapError(str(e), path, lineno)

		raise MapError('malformed line {!r}'.format(line), path, lineno)

	logger.debug('map has %d locations and %d roads',
		roadmap.graph.num_vertices(), roadmap.graph.num_edges())
	return roadmap

def read_map(path):
	with open(path) as f:
		return parse_map(f, path)

def parse_request(text, roadmap):
	'''
	Turn a request (location names separated by whitespace and/or commas) into vertices.
	'''
	names = text.replace(',', ' ').split()
	if len(names) < 2:
		raise MapError('origin and destination not specified')
	return [roadmap.location(name) for name in names]

'''
Turn-by-turn directions between consecutive stops of a trip.
'''

import collections

from graphwalk.graph import shortest_path
from graphwalk.util import log, window2

__all__ = [
	'NoRouteError',
	'Segment',
	'straight_line',
	'find_route',
	'condense',
	'directions',
]

logger = log.getLogger(__name__)

class NoRouteError(RuntimeError):
	pass

# One instruction: follow ``road`` heading ``direction`` for ``length`` miles.
Segment = collections.namedtuple('Segment', ['road', 'direction', 'length'])

def straight_line(a, b):
	''' Distance heuristic between two ``Location``s; never longer than a road route. '''
	return a.distance_to(b)

def find_route(roadmap, v0, v1):
	''' Shortest list of road edges from ``v0`` to ``v1``. '''
	path = shortest_path(roadmap.graph, v0, v1, straight_line)
	if path is None:
		raise NoRouteError('no route from {} to {}'.format(v0.label, v1.label))
	logger.debug('%s -> %s: %d roads, %.1f miles', v0.label, v1.label, len(path), v1.label.weight)
	return path

def condense(g, path, origin):
	'''
	Merge consecutive edges of ``path`` that stay on the same road in the same direction.

	``origin`` is the vertex the path starts from.  Returns a list of ``Segment``.
	'''
	segments = []
	v = origin
	for e in path:
		road = e.label
		heading = road.direction_from(v)
		if segments and segments[-1].road == road.name and segments[-1].direction == heading:
			last = segments.pop()
			segments.append(last._replace(length=last.length + road.length))
		else:
			segments.append(Segment(road.name, heading, road.length))
		v = g.edge_target_given_source(e, v)
	return segments

def directions(roadmap, stops):
	'''
	Directions for visiting ``stops`` (vertices of ``roadmap``) in order.

	Returns the output lines.  Instructions are numbered continuously over the
	whole trip; the last one of each leg names the stop it arrives at.
	'''
	lines = ['From {}:'.format(stops[0].label), '']
	number = 1
	for (v0, v1) in window2(stops):
		segments = condense(roadmap.graph, find_route(roadmap, v0, v1), v0)
		for i, seg in enumerate(segments):
			line = '{}. Take {} {} for {:.1f} miles'.format(number, seg.road, seg.direction, seg.length)
			if i == len(segments) - 1:
				line += ' to {}'.format(v1.label)
			lines.append(line + '.')
			number += 1
	return lines


'''
Graph algorithms written as clients of ``graphwalk.traversal``.
'''

import math

from graphwalk.traversal import Traversal, Visitor, PROCEED, REJECT, STOP

__all__ = [
	'CycleError',
	'reachable',
	'topological_order',
	'shortest_path',
]

class CycleError(RuntimeError):
	''' A directed cycle was found.  ``edge`` is an edge on the cycle, if known. '''
	def __init__(self, msg, vertex=None, edge=None):
		super().__init__(msg)
		self.vertex = vertex
		self.edge = edge

def reachable(g, start):
	''' Set of vertices reachable from ``start`` (including ``start``). '''
	found = set()
	Traversal(visit=lambda g, v: found.add(v)).breadth_first_traverse(g, start)
	return found

class _TopoVisitor(Visitor):
	def __init__(self):
		self.finished = []
		self.done = set()   # finished in an earlier run
		self.path = set()   # visited but not post-visited
		self.back_edge = None

	def visit(self, g, v):
		if v in self.done:
			return REJECT
		for e in g.out_edges(v):
			target = g.edge_target_given_source(e, v)
			if target is v or target in self.path:
				self.back_edge = e
				return STOP
		self.path.add(v)

	def post_visit(self, g, v):
		self.path.discard(v)
		self.done.add(v)
		self.finished.append(v)

def topological_order(g, roots=None):
	'''
	Order the vertices reachable from ``roots`` so that every edge points forward.

	``roots`` defaults to every vertex of ``g``.  Raises ``CycleError`` if a
	cycle is reachable.
	'''
	if not g.is_directed():
		raise ValueError('topological order requires a directed graph')
	if roots is None:
		roots = list(g.vertices())

	visitor = _TopoVisitor()
	trav = Traversal(visitor)
	for root in roots:
		trav.depth_first_traverse(g, root)
		if trav.is_paused():
			v = trav.last_stopping_vertex()
			raise CycleError('cycle through {!r}'.format(v.label), v, visitor.back_edge)

	return visitor.finished[::-1]

class _ShortestPathVisitor(Visitor):
	def __init__(self, dest):
		self.dest = dest
		self.parent_edge = {}

	def visit(self, g, v):
		if v is self.dest:
			return STOP

	def pre_visit(self, g, e, source):
		target = g.edge_target_given_source(e, source)
		weight = source.label.weight + e.label.weight
		if weight >= target.label.weight:
			return REJECT
		target.label.weight = weight
		self.parent_edge[target] = e
		return PROCEED

def shortest_path(g, v0, v1, h=None):
	'''
	Find a shortest path from ``v0`` to ``v1`` (A* search).

	Vertex labels must have a writable ``weight`` attribute and edge labels a
	(non-negative) ``weight`` attribute.  ``h(label, dest_label)`` must never
	overestimate the remaining distance; it defaults to zero (Dijkstra).

	Afterwards, the ``weight`` of each vertex label holds its tentative distance
	from ``v0`` (``inf`` if never reached).  Returns the list of edges from ``v0``
	to ``v1``, or ``None`` if ``v1`` is unreachable.
	'''
	if h is None:
		h = lambda a, b: 0.0

	for v in g.vertices():
		v.label.weight = math.inf
	v0.label.weight = 0.0

	dest_label = v1.label
	def key(label):
		return label.weight + h(label, dest_label)

	visitor = _ShortestPathVisitor(v1)
	trav = Traversal(visitor)
	trav.traverse(g, v0, key)

	if trav.last_stopping_vertex() is not v1:
		return None

	path = []
	v = v1
	while v is not v0:
		e = visitor.parent_edge[v]
		path.append(e)
		v = g.edge_source_given_target(e, v)
	path.reverse()
	return path


'''
Adjacency-list graphs for use with ``graphwalk.traversal``.

Vertices and edges are small objects compared by identity, each carrying a
mutable ``label``.  Two vertices with equal labels are still distinct.
'''

import networkx as nx

__all__ = [
	'Vertex',
	'Edge',
	'DirectedGraph',
	'UndirectedGraph',
	'from_networkx',
	'to_networkx',
]

class Vertex:
	__slots__ = ('label',)

	def __init__(self, label=None):
		self.label = label

	def __repr__(self):
		return 'Vertex({!r})'.format(self.label)

class Edge:
	__slots__ = ('label',)

	def __init__(self, label=None):
		self.label = label

	def __repr__(self):
		return 'Edge({!r})'.format(self.label)

# For methods which are not affected by directedness
# (or which are currently written in a directed-agnostic manner)
class AdjacencyListBase:

	def __init__(self):
		# dicts are used as insertion-ordered sets, so traversals are repeatable
		self._out = {}  # vertex -> {edge: None}
		self._in  = {}
		self._edge_endpoints = {}

	def num_vertices(self):
		return len(self._out)

	def num_edges(self):
		return len(self._edge_endpoints)

	def vertices(self):
		return iter(self._out)

	def edges(self):
		return iter(self._edge_endpoints)

	def edge_endpoints(self, e):
		try:
			return self._edge_endpoints[e]
		except KeyError:
			raise ValueError('Edge {!r} not in graph!'.format(e))

	def has_vertex(self, v):
		return v in self._out

	def has_edge(self, e):
		return e in self._edge_endpoints

	def _check_vertex(self, v):
		if not self.has_vertex(v):
			raise ValueError('Vertex {!r} not in graph!'.format(v))

	def add_vertex(self, label=None):
		v = Vertex(label)
		self._out[v] = {}
		self._in[v] = {}
		return v

	def add_vertices(self, labels):
		return [self.add_vertex(label) for label in labels]

	def find_vertex(self, label):
		''' Get the first vertex carrying ``label``, or ``None``. '''
		for v in self._out:
			if v.label == label:
				return v
		return None

	def add_edge(self, v1, v2, label=None):
		self._check_vertex(v1)
		self._check_vertex(v2)

		e = Edge(label)
		self._edge_endpoints[e] = (v1, v2)
		self._link(e, v1, v2)
		return e

	def delete_vertices(self, vs):
		vs = list(vs)
		for v in vs:
			self._check_vertex(v)

		es = set()
		for v in vs:
			es.update(self.incident_edges(v))

		self.delete_edges(es)
		for v in vs:
			del self._out[v]
			del self._in[v]

	def delete_edges(self, es):
		for e in list(es):
			v1, v2 = self.edge_endpoints(e)
			self._unlink(e, v1, v2)
			del self._edge_endpoints[e]

	def out_edges(self, v):
		self._check_vertex(v)
		return iter(list(self._out[v]))

	def in_edges(self, v):
		self._check_vertex(v)
		return iter(list(self._in[v]))

	def successors(self, v):
		return (self.edge_target_given_source(e, v) for e in self.out_edges(v))

	def predecessors(self, v):
		return (self.edge_source_given_target(e, v) for e in self.in_edges(v))

	def all_edges(self, v1, v2):
		result = []
		for e in self.out_edges(v1):
			if self.edge_target_given_source(e,v1) is v2:
				result.append(e)
		return result

	def arbitrary_edge(self, v1, v2):
		''' Get some edge leading from ``v1`` to ``v2``, or ``None``. '''
		es = self.all_edges(v1, v2)
		return es[0] if es else None

# Methods which must change to take directedness into account (keep this list small)
class DirectedGraph(AdjacencyListBase):

	def is_directed(self):
		return True

	def _link(self, e, v1, v2):
		self._out[v1][e] = None
		self._in[v2][e] = None

	def _unlink(self, e, v1, v2):
		del self._out[v1][e]
		del self._in[v2][e]

	def incident_edges(self, v):
		self._check_vertex(v)
		es = dict(self._out[v])
		es.update(self._in[v])
		return iter(list(es))

	def edge_target_given_source(self, e, v):
		source, target = self.edge_endpoints(e)
		if v is not source:
			raise ValueError('vertex {!r} is not the source of edge {!r}'.format(v, e))
		return target

	def edge_source_given_target(self, e, v):
		source, target = self.edge_endpoints(e)
		if v is not target:
			raise ValueError('vertex {!r} is not the target of edge {!r}'.format(v, e))
		return source

class UndirectedGraph(AdjacencyListBase):

	def is_directed(self):
		return False

	# in and out adjacency are kept identical
	def _link(self, e, v1, v2):
		for v in (v1, v2):
			self._out[v][e] = None
			self._in[v][e] = None

	def _unlink(self, e, v1, v2):
		for v in (v1, v2):
			self._out[v].pop(e, None)
			self._in[v].pop(e, None)

	def incident_edges(self, v):
		return self.out_edges(v)

	def _edge_other_endpoint_impl(self, e, v, name='an endpoint'):
		source,target = self.edge_endpoints(e)
		if   v is source:
			return target
		elif v is target:
			return source
		else:
			raise ValueError('vertex {!r} cannot be {} of edge'
				' {!r} (which connects {!r} to {!r})'.format(v,name,e,source,target))

	def edge_target_given_source(self, e, v):
		return self._edge_other_endpoint_impl(e, v, 'the source')

	def edge_source_given_target(self, e, v):
		return self._edge_other_endpoint_impl(e, v, 'the target')

def from_networkx(g):
	'''
	Copy a networkx ``Graph`` or ``DiGraph``.

	Vertex labels are the networkx nodes and edge labels are (copies of) the
	edge attribute dicts.  Returns ``(graph, vmap)`` where ``vmap`` maps each
	networkx node to its ``Vertex``.
	'''
	if g.is_multigraph():
		raise ValueError('Multigraphs not supported.')

	result = DirectedGraph() if g.is_directed() else UndirectedGraph()
	vmap = {}
	for node in g.nodes():
		vmap[node] = result.add_vertex(node)
	for s, t, data in g.edges(data=True):
		result.add_edge(vmap[s], vmap[t], dict(data))
	return result, vmap

def to_networkx(g):
	'''
	Inverse of ``from_networkx``, for graphs whose vertex labels are hashable and distinct.
	'''
	result = nx.DiGraph() if g.is_directed() else nx.Graph()
	for v in g.vertices():
		result.add_node(v.label)
	for e in g.edges():
		s, t = g.edge_endpoints(e)
		attrs = e.label if isinstance(e.label, dict) else {'label': e.label}
		result.add_edge(s.label, t.label, **attrs)
	return result

import math
import random
import unittest

import networkx as nx

from graphwalk.graph import *

class Place:
	def __init__(self, name, x=0.0, y=0.0):
		self.name = name
		self.x, self.y = x, y
		self.weight = None

class Length:
	def __init__(self, weight):
		self.weight = weight

def euclid(a, b):
	return math.hypot(a.x - b.x, a.y - b.y)

def weighted_graph(nxg, pos=None):
	''' Copy a networkx graph with 'weight' edge attributes into Place/Length labels. '''
	g = UndirectedGraph()
	vmap = {}
	for n in nxg.nodes():
		x, y = pos[n] if pos else (0.0, 0.0)
		vmap[n] = g.add_vertex(Place(n, x, y))
	for s, t, w in nxg.edges(data='weight'):
		g.add_edge(vmap[s], vmap[t], Length(w))
	return g, vmap

def path_cost(path):
	return sum(e.label.weight for e in path)

class ShortestPathTests(unittest.TestCase):
	def setUp(self):
		nxg = nx.Graph()
		nxg.add_weighted_edges_from([
			('A', 'B', 1.0),
			('B', 'C', 2.0),
			('A', 'C', 5.0),
			('C', 'D', 1.0),
			('B', 'D', 6.0),
		])
		self.g, self.vs = weighted_graph(nxg)

	def test_known_path(self):
		vs = self.vs
		path = shortest_path(self.g, vs['A'], vs['D'])

		self.assertEqual(len(path), 3)
		self.assertAlmostEqual(path_cost(path), 4.0)
		self.assertAlmostEqual(vs['D'].label.weight, 4.0)

		# walk it
		v = vs['A']
		names = ['A']
		for e in path:
			v = self.g.edge_target_given_source(e, v)
			names.append(v.label.name)
		self.assertListEqual(names, list('ABCD'))

	def test_same_vertex(self):
		self.assertListEqual(shortest_path(self.g, self.vs['B'], self.vs['B']), [])

	def test_unreachable(self):
		lonely = self.g.add_vertex(Place('E'))
		self.assertIsNone(shortest_path(self.g, self.vs['A'], lonely))
		self.assertEqual(lonely.label.weight, math.inf)

	def test_reusable(self):
		# a second search must not be confused by weights left from the first
		shortest_path(self.g, self.vs['A'], self.vs['D'])
		path = shortest_path(self.g, self.vs['D'], self.vs['B'])
		self.assertAlmostEqual(path_cost(path), 3.0)

	def test_against_networkx(self):
		for seed in range(5):
			rng = random.Random(seed)
			nxg = nx.gnp_random_graph(30, 0.12, seed=seed)
			for s, t in nxg.edges():
				nxg[s][t]['weight'] = rng.uniform(1.0, 10.0)
			g, vmap = weighted_graph(nxg)

			lengths = nx.single_source_dijkstra_path_length(nxg, 0)
			for target in nxg.nodes():
				path = shortest_path(g, vmap[0], vmap[target])
				if target in lengths:
					self.assertAlmostEqual(path_cost(path), lengths[target])
				else:
					self.assertIsNone(path)

	def test_heuristic_against_networkx(self):
		# roads are never shorter than the straight line, so euclid is admissible
		for seed in range(5):
			rng = random.Random(seed)
			nxg = nx.random_geometric_graph(40, 0.3, seed=seed)
			pos = nx.get_node_attributes(nxg, 'pos')
			for s, t in nxg.edges():
				nxg[s][t]['weight'] = math.dist(pos[s], pos[t]) * rng.uniform(1.0, 1.5)
			g, vmap = weighted_graph(nxg, pos)

			lengths = nx.single_source_dijkstra_path_length(nxg, 0)
			for target in lengths:
				path = shortest_path(g, vmap[0], vmap[target], euclid)
				self.assertAlmostEqual(path_cost(path), lengths[target])

class ReachableTests(unittest.TestCase):
	def test_against_networkx(self):
		for seed in range(5):
			nxg = nx.gnp_random_graph(20, 0.1, seed=seed, directed=True)
			g, vmap = from_networkx(nxg)
			found = {v.label for v in reachable(g, vmap[0])}
			self.assertSetEqual(found, nx.descendants(nxg, 0) | {0})

class TopologicalOrderTests(unittest.TestCase):
	def test_dag(self):
		for seed in range(5):
			rnd = nx.gnp_random_graph(20, 0.2, seed=seed, directed=True)
			dag = nx.DiGraph()
			dag.add_nodes_from(rnd.nodes())
			dag.add_edges_from((s, t) for (s, t) in rnd.edges() if s < t)
			g, vmap = from_networkx(dag)

			order = topological_order(g)
			self.assertEqual(len(order), g.num_vertices())
			index = {v: i for (i, v) in enumerate(order)}
			for e in g.edges():
				s, t = g.edge_endpoints(e)
				self.assertLess(index[s], index[t])

	def test_roots(self):
		g, vmap = from_networkx(nx.DiGraph([('a', 'b'), ('b', 'c'), ('x', 'c')]))
		order = [v.label for v in topological_order(g, [vmap['a']])]
		self.assertListEqual(order, ['a', 'b', 'c'])

	def test_cycle(self):
		g, vmap = from_networkx(nx.DiGraph([('a', 'b'), ('b', 'c'), ('c', 'a'), ('c', 'd')]))
		with self.assertRaises(CycleError) as cm:
			topological_order(g)
		s, t = g.edge_endpoints(cm.exception.edge)
		self.assertEqual((s.label, t.label), ('c', 'a'))

	def test_self_loop(self):
		g, vmap = from_networkx(nx.DiGraph([('a', 'a')]))
		with self.assertRaises(CycleError):
			topological_order(g)

	def test_undirected_refused(self):
		g, vmap = from_networkx(nx.path_graph(3))
		with self.assertRaises(ValueError):
			topological_order(g)

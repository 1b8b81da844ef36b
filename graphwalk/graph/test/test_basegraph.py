import unittest

import networkx as nx

from graphwalk.graph import DirectedGraph, UndirectedGraph, from_networkx, to_networkx

class UndirectedTester(unittest.TestCase):
	def setUp(self):
		self.g = UndirectedGraph()

	# adds vertices labeled from iterable to a graph and connects them in a circle
	def add_circle_component(self, iterable):
		vs = self.g.add_vertices(iterable)
		for i in range(-1, len(vs)-1): # -1 to include last<->first edge
			self.g.add_edge(vs[i], vs[i+1])
		return vs

	def test_equal_labels_distinct(self):
		a1, a2 = self.g.add_vertices(['a', 'a'])
		self.assertIsNot(a1, a2)
		self.assertNotEqual(a1, a2)
		self.assertEqual(self.g.num_vertices(), 2)

	# Multigraph functionality
	def test_double_edge(self):
		a, b = self.g.add_vertices('ab')
		e1 = self.g.add_edge(a, b)
		e2 = self.g.add_edge(a, b)

		self.assertEqual(self.g.num_edges(), 2)
		self.assertNotEqual(e1, e2)
		self.assertListEqual(self.g.all_edges(a, b), [e1, e2])

	# Undirectedness
	def test_back_edge(self):
		a, b = self.g.add_vertices('ab')
		e = self.g.add_edge(a, b)

		self.assertListEqual(list(self.g.out_edges(a)), [e])
		self.assertListEqual(list(self.g.out_edges(b)), [e])
		self.assertIs(self.g.edge_target_given_source(e, b), a)
		self.assertIs(self.g.arbitrary_edge(b, a), e)

	def test_self_loop(self):
		a, = self.g.add_vertices('a')
		e = self.g.add_edge(a, a)
		self.assertListEqual(list(self.g.out_edges(a)), [e])
		self.assertIs(self.g.edge_target_given_source(e, a), a)

	def test_not_an_endpoint(self):
		a, b, c = self.g.add_vertices('abc')
		e = self.g.add_edge(a, b)
		with self.assertRaises(ValueError):
			self.g.edge_target_given_source(e, c)

	def test_has_vertex(self):
		vs = self.g.add_vertices('abde')
		self.assertTrue(all(map(self.g.has_vertex, vs)))

		self.g.delete_vertices([vs[1]])
		self.assertFalse(self.g.has_vertex(vs[1]))
		self.assertEqual(self.g.num_vertices(), 3)
		self.assertIsNone(self.g.find_vertex('b'))
		self.assertIs(self.g.find_vertex('d'), vs[2])

	# checks that deleting a vertex does not orphan edges
	def test_edges_deleted_with_vertex(self):
		vs = self.add_circle_component('abcdefg')

		self.assertEqual(self.g.num_edges(), 7)

		self.g.delete_vertices([vs[1]])

		self.assertEqual(self.g.num_edges(), 5)
		self.assertListEqual(list(self.g.successors(vs[0])), [vs[6]])

	def test_unknown_vertex(self):
		other = UndirectedGraph()
		x = other.add_vertex('x')
		a = self.g.add_vertex('a')
		with self.assertRaises(ValueError):
			self.g.add_edge(a, x)
		with self.assertRaises(ValueError):
			list(self.g.out_edges(x))

class DirectedTester(unittest.TestCase):
	def setUp(self):
		self.g = DirectedGraph()

	def test_direction(self):
		a, b = self.g.add_vertices('ab')
		e = self.g.add_edge(a, b)

		self.assertListEqual(list(self.g.out_edges(a)), [e])
		self.assertListEqual(list(self.g.out_edges(b)), [])
		self.assertListEqual(list(self.g.in_edges(b)), [e])
		self.assertListEqual(list(self.g.predecessors(b)), [a])
		self.assertIsNone(self.g.arbitrary_edge(b, a))
		with self.assertRaises(ValueError):
			self.g.edge_target_given_source(e, b)

	def test_insertion_order(self):
		a, b, c, d = self.g.add_vertices('abcd')
		for v in (d, b, c):
			self.g.add_edge(a, v)
		self.assertListEqual([v.label for v in self.g.successors(a)], list('dbc'))

	def test_delete_edges(self):
		a, b = self.g.add_vertices('ab')
		e1 = self.g.add_edge(a, b)
		e2 = self.g.add_edge(b, a)
		self.g.delete_edges([e1])
		self.assertListEqual(list(self.g.edges()), [e2])
		self.assertListEqual(list(self.g.incident_edges(a)), [e2])

class NetworkxTester(unittest.TestCase):
	def test_roundtrip_directed(self):
		nxg = nx.DiGraph()
		nxg.add_edge('x', 'y', weight=2.5)
		nxg.add_edge('y', 'z', weight=1.0)

		g, vmap = from_networkx(nxg)
		self.assertTrue(g.is_directed())
		self.assertEqual(g.num_edges(), 2)
		e = g.arbitrary_edge(vmap['x'], vmap['y'])
		self.assertDictEqual(e.label, {'weight': 2.5})

		back = to_networkx(g)
		self.assertSetEqual(set(back.edges()), set(nxg.edges()))
		self.assertEqual(back['x']['y']['weight'], 2.5)

	def test_undirected(self):
		g, vmap = from_networkx(nx.cycle_graph(4))
		self.assertFalse(g.is_directed())
		self.assertCountEqual([v.label for v in g.successors(vmap[0])], [1, 3])

	def test_multigraph_refused(self):
		with self.assertRaises(ValueError):
			from_networkx(nx.MultiGraph())

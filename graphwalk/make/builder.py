'''
Decide which targets are out of date and emit their commands.

Each requested target gets one depth-first traversal of the dependency
graph (edges point from a target to its prerequisites).  A target is
examined on its post-visit, once all of its prerequisites are up to date.
'''

from graphwalk.graph import DirectedGraph, CycleError
from graphwalk.traversal import Traversal, Visitor, REJECT, STOP
from graphwalk.util import log

from .rules import MakefileError

__all__ = [
	'BuildVisitor',
	'build_graph',
	'make',
]

logger = log.getLogger(__name__)

def build_graph(rules, times):
	'''
	Build the dependency graph for ``rules``.

	Prerequisites without a rule must appear in ``times`` (i.e. they are existing
	files).  Returns ``(graph, vertices)`` where ``vertices`` maps names to
	``Vertex`` objects labeled with those names.
	'''
	g = DirectedGraph()
	vertices = {}
	for rule in rules:
		vertices[rule.target] = g.add_vertex(rule.target)

	for rule in rules:
		v = vertices[rule.target]
		for name in rule.prereqs:
			if name not in vertices:
				if name not in times:
					raise MakefileError('no rule to make {!r}, needed by {!r}'.format(name, rule.target))
				vertices[name] = g.add_vertex(name)
			g.add_edge(v, vertices[name])

	logger.debug('dependency graph has %d vertices and %d edges', g.num_vertices(), g.num_edges())
	return g, vertices

class BuildVisitor(Visitor):
	'''
	Brings targets up to date, collecting the commands that would do it.

	One visitor is meant to be shared by all of the traversals of a single
	``make`` invocation, so that nothing is rebuilt twice.
	'''
	def __init__(self, rules, current_time, times):
		self.rules = {rule.target: rule for rule in rules}
		self.current_time = current_time
		self.times = dict(times)  # updated as targets are rebuilt
		self.commands = []
		self.rebuilt = []

		self._path = set()   # visited but not yet post-visited
		self._done = set()
		self.cycle_edge = None

	def pre_visit(self, g, e, source):
		# catch the two-target cycle before we even step into the prerequisite
		prereq = g.edge_target_given_source(e, source)
		if any(v is source for v in g.successors(prereq)):
			self.cycle_edge = e
			return STOP

	def visit(self, g, v):
		if v in self._done:
			return REJECT
		for e in g.out_edges(v):
			prereq = g.edge_target_given_source(e, v)
			if prereq is v or prereq in self._path:
				self.cycle_edge = e
				return STOP
		self._path.add(v)

	def post_visit(self, g, v):
		self._path.discard(v)
		self._done.add(v)

		name = v.label
		time = self.times.get(name)
		newer = [p.label for p in g.successors(v) if time is None or self.times[p.label] > time]
		if time is not None and not newer:
			return

		if time is None:
			logger.info('%s: does not exist', name)
		else:
			logger.info('%s: older than %s', name, ', '.join(newer))

		rule = self.rules.get(name)
		if rule is not None:
			self.commands.extend(rule.commands)
		self.rebuilt.append(name)
		self.times[name] = self.current_time

def make(rules, current_time, times, targets=()):
	'''
	Compute the commands needed to bring ``targets`` up to date.

	``targets`` defaults to the target of the first rule.  Returns the list of
	command lines in the order they should run.  Raises ``MakefileError`` for an
	unknown target and ``CycleError`` for circular dependencies.
	'''
	rules = list(rules)
	targets = list(targets)
	if not targets:
		if not rules:
			raise MakefileError('no targets')
		targets = [rules[0].target]

	g, vertices = build_graph(rules, times)

	visitor = BuildVisitor(rules, current_time, times)
	trav = Traversal(visitor)
	for name in targets:
		if name not in vertices:
			if name in times:
				logger.info('%s: nothing to be done', name)
				continue
			raise MakefileError('no rule to make target {!r}'.format(name))

		trav.depth_first_traverse(g, vertices[name])
		if trav.is_paused():
			v = trav.last_stopping_vertex()
			raise CycleError('circular dependency involving {!r}'.format(v.label),
				v, visitor.cycle_edge)

	return visitor.commands

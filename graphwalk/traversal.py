'''
Generalized graph traversal.

At any given time there is a set of discovered but unprocessed vertices
(the "fringe").  A traversal repeatedly removes a vertex from the fringe,
visits it, and adds its undiscovered successors.  Which vertex comes out
next is what distinguishes the three algorithms:

  * ``depth_first_traverse`` treats the fringe as a stack.
  * ``breadth_first_traverse`` treats the fringe as a queue.
  * ``traverse`` treats the fringe as a priority queue ordered by a key
    function on vertex labels.

The first two revisit each vertex once all of its successors are done
(``post_visit``).  The ordered traversal has no post-visit.

A visitor steers the traversal through the value returned from its hooks
(see ``Action``).  ``Action.STOP`` pauses the traversal, which can later be
continued with ``Traversal.resume`` without revisiting anything.
'''

import enum
import heapq
import itertools
from collections import deque

from graphwalk.util import log

__all__ = [
	'Action',
	'Visitor',
	'Traversal',
	'make_visitor',
	'PROCEED',
	'REJECT',
	'STOP',
]

logger = log.getLogger(__name__)

class Action(enum.Enum):
	''' The result of a visitor hook. '''
	PROCEED = 'proceed'
	REJECT  = 'reject'
	STOP    = 'stop'

PROCEED = Action.PROCEED
REJECT  = Action.REJECT
STOP    = Action.STOP

class Visitor:
	def pre_visit(self, g, e, source):
		''' Invoked before the other end of ``e`` (seen from ``source``) joins the fringe.

		``REJECT`` keeps it out of the fringe via this edge only. '''
		return PROCEED

	def visit(self, g, v):
		''' Invoked once on each vertex, when it is taken from the fringe.

		``REJECT`` marks ``v`` visited but does not expand it (and, for depth-
		and breadth-first traversals, suppresses its post-visit). '''
		return PROCEED

	def post_visit(self, g, v):
		''' Invoked after all successors admitted from ``v`` have been processed.

		Only used by depth- and breadth-first traversals.  ``REJECT`` has no effect. '''
		return PROCEED

# Makes a visitor, overriding its member methods with functions provided by cb_dict.
def _make_visitor(cls, cb_dict):
	obj = cls()
	for k,v in cb_dict.items():
		if k not in cls.__dict__:
			raise KeyError('cannot override method {}; no such method'.format(k))
		obj.__dict__[k] = v
	return obj

def make_visitor(**kwargs):
	return _make_visitor(Visitor, kwargs)

# Handles the visitor and **callbacks arguments, either by returning the visitor,
#  or by constructing one from the callbacks.
def visitor_from_visitor_args(cls, visitor, callbacks):
	if visitor is None:
		visitor = _make_visitor(cls, callbacks)
	elif len(callbacks) > 0:
		raise RuntimeError('Received both a visitor and callbacks!')

	return visitor

# Hooks that fall off the end (returning None) mean PROCEED.
def _action(result):
	if result is None:
		return PROCEED
	if not isinstance(result, Action):
		raise TypeError('visitor hooks must return an Action, not {!r}'.format(result))
	return result

class Traversal:
	'''
	Traversal state for one visitor.

	Construct with either a ``Visitor`` or hook callbacks as keyword arguments:

	>>> order = []
	>>> trav = Traversal(visit=lambda g, v: order.append(v.label))

	then call one of ``traverse``, ``depth_first_traverse`` or
	``breadth_first_traverse``.  Each call starts a new run with fresh
	visited/post-visited sets; ``resume`` is the only way to continue a run.

	A ``Traversal`` is not reentrant: starting or resuming it from inside one
	of its own hooks raises ``RuntimeError``.
	'''

	DFS     = 'dfs'
	BFS     = 'bfs'
	ORDERED = 'ordered'

	def __init__(self, visitor=None, **callbacks):
		self.visitor = visitor_from_visitor_args(Visitor, visitor, callbacks)

		self._graph = None
		self._algorithm = None
		self._key = None
		self._paused = False
		self._running = False

		self._visited = set()
		self._post_visited = set()
		self._rejected = set()

		self._final_vertex = None
		self._final_edge = None

	#-----------------------------------------------------
	# Entry points

	def traverse(self, g, v, key):
		'''
		Ordered traversal of ``g`` over all vertices reachable from ``v``.

		The fringe is ordered by ``key(vertex.label)``, smallest first, with ties
		broken in insertion order.  The key is computed when a vertex enters the
		fringe; changing what it depends on while the vertex waits there does not
		reorder it.  Use ``functools.cmp_to_key`` to order by a comparator.
		'''
		self._start(g, self.ORDERED, key)
		self._run(v)

	def depth_first_traverse(self, g, v):
		'''
		Depth-first traversal of ``g`` over all vertices reachable from ``v``.

		Successors are explored in the order ``g.out_edges`` yields them.  Each
		vertex is post-visited after everything admitted from it.
		'''
		self._start(g, self.DFS)
		self._run(v)

	def breadth_first_traverse(self, g, v):
		'''
		Breadth-first traversal of ``g`` over all vertices reachable from ``v``.

		Each vertex is re-enqueued right behind its successors to be post-visited.
		'''
		self._start(g, self.BFS)
		self._run(v)

	def resume(self, v):
		'''
		Continue a paused traversal starting from ``v``.

		Uses the algorithm (and key) of the paused run and skips every vertex it
		already visited.  Does nothing unless the traversal is paused.
		'''
		self._check_not_running()
		if not self._paused:
			return
		logger.debug('resuming %s traversal from %r', self._algorithm, v)
		self._run(v)

	#-----------------------------------------------------
	# Queries

	def is_paused(self):
		return self._paused

	def last_stopping_vertex(self):
		''' The vertex being processed when the traversal paused, or ``None``. '''
		return self._final_vertex

	def last_stopping_edge(self):
		''' The edge passed to the ``pre_visit`` that paused the traversal, or ``None``. '''
		return self._final_edge

	def visited(self, v):
		return v in self._visited

	def post_visited(self, v):
		''' Whether ``post_visit`` has run on ``v`` (never true for a rejected vertex). '''
		return v in self._post_visited

	def rejected(self, v):
		''' Whether ``visit`` returned ``REJECT`` for ``v``. '''
		return v in self._rejected

	#-----------------------------------------------------

	def _check_not_running(self):
		if self._running:
			raise RuntimeError('traversal is already running')

	def _start(self, g, algorithm, key=None):
		self._check_not_running()
		self._graph = g
		self._algorithm = algorithm
		self._key = key
		self._paused = False
		self._visited = set()
		self._post_visited = set()
		self._rejected = set()

	def _run(self, v):
		impl = {
			self.DFS:     self._depth_first_impl,
			self.BFS:     self._breadth_first_impl,
			self.ORDERED: self._ordered_impl,
		}[self._algorithm]

		self._paused = False
		self._final_vertex = None
		self._final_edge = None
		self._running = True
		try:
			stop = impl(self._graph, v)
		finally:
			self._running = False

		if stop is not None:
			(self._final_vertex, self._final_edge) = stop
			self._paused = True
			logger.debug('%s traversal paused at vertex %r (edge %r)',
				self._algorithm, self._final_vertex, self._final_edge)

	# The hook wrappers record the outcome in the marker sets and hand back the Action.
	def _visit(self, g, v):
		action = _action(self.visitor.visit(g, v))
		if action is not STOP:
			self._visited.add(v)
		if action is REJECT:
			self._rejected.add(v)
		return action

	def _post_visit(self, g, v):
		action = _action(self.visitor.post_visit(g, v))
		if action is not STOP:
			self._post_visited.add(v)
		return action

	# Nothing is left to do for a visited vertex once it is post-visited or rejected.
	def _finished(self, v):
		return v in self._post_visited or v in self._rejected

	# Returns (targets, stopping_edge): the undiscovered neighbors of v that
	#  pre_visit admits, and the edge whose pre_visit said STOP (if any).
	def _expand(self, g, v):
		targets = []
		for e in g.out_edges(v):
			target = g.edge_target_given_source(e, v)
			if target in self._visited:
				continue

			action = _action(self.visitor.pre_visit(g, e, v))
			if action is STOP:
				return targets, e
			if action is PROCEED:
				targets.append(target)
		return targets, None

	# Each impl returns None when the fringe runs dry, or the
	#  (vertex, edge) pair describing where it stopped.

	def _ordered_impl(self, g, root):
		key = self._key
		counter = itertools.count()  # FIFO among equal keys; labels need not be comparable
		fringe = [(key(root.label), next(counter), root)]

		while fringe:
			(_, _, v) = heapq.heappop(fringe)
			if v in self._visited:
				continue

			action = self._visit(g, v)
			if action is STOP:
				return (v, None)
			if action is REJECT:
				continue

			targets, stop_edge = self._expand(g, v)
			if stop_edge is not None:
				return (v, stop_edge)
			for target in targets:
				heapq.heappush(fringe, (key(target.label), next(counter), target))
		return None

	def _depth_first_impl(self, g, root):
		stack = [root]

		while stack:
			v = stack.pop()

			if v in self._visited:
				if not self._finished(v):
					if self._post_visit(g, v) is STOP:
						return (v, None)
				continue

			action = self._visit(g, v)
			if action is STOP:
				return (v, None)
			if action is REJECT:
				continue

			targets, stop_edge = self._expand(g, v)
			if stop_edge is not None:
				return (v, stop_edge)

			# popped again once everything pushed after it is done
			stack.append(v)

			# reversed so that the first successor discovered is popped first
			stack.extend(reversed(targets))
		return None

	def _breadth_first_impl(self, g, root):
		queue = deque([root])

		while queue:
			v = queue.popleft()

			if v in self._visited:
				if not self._finished(v):
					if self._post_visit(g, v) is STOP:
						return (v, None)
				continue

			action = self._visit(g, v)
			if action is STOP:
				return (v, None)
			if action is REJECT:
				continue

			targets, stop_edge = self._expand(g, v)
			if stop_edge is not None:
				return (v, stop_edge)

			queue.extend(targets)
			queue.append(v)
		return None

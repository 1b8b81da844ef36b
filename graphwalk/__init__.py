'''
Generic graph traversal with pausable visitors, plus two sample clients:
``graphwalk.make`` (a dependency-build tool) and ``graphwalk.trip`` (a route
planner).
'''

from graphwalk.traversal import Traversal, Visitor, Action, make_visitor, PROCEED, REJECT, STOP

__version__ = '0.1'

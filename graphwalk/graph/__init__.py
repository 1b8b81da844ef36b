from .basegraph import *
from .algorithm import *

from .rules import *
from .builder import *

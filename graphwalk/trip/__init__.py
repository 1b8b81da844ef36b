from .mapfile import *
from .route import *

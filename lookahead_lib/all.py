from .errors import *
# from .utils import *
from .tagged_union import *
from .producers import *
from .pending import *
from .lookahead_stream import *

"""
LAMBDAS
~~~~~~~~~~~~~~~~~~~~~

Lambdas shows functions as values: inline lambdas, references to named functions
and references to constructors, all passed wherever a callable contract is expected.

>>> import lambdas
>>> lambdas.init_collection(set, "First", "Second") == {"First", "Second"}
True
"""

from .collection import init_collection as init_collection
from .config import DemoConfig as DemoConfig
from .converters import compare as compare
from .converters import parse_int as parse_int
from .converters import sort_strings as sort_strings
from .demo import Lambdas as Lambdas
from .errors import ContainerOperationError as ContainerOperationError
from .errors import InvalidFactoryError as InvalidFactoryError
from .errors import LambdasError as LambdasError
from .errors import ParseError as ParseError
from .interfaces import Comparator as Comparator
from .interfaces import ContainerFactory as ContainerFactory
from .interfaces import Converter as Converter
from .interfaces import PersonFactory as PersonFactory
from .models import Person as Person
from .models import Word as Word

VERSION = "1.0.0"

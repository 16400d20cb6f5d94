"""Go struct generation from compiled Scala case classes."""

from .config import BoundaryMode as BoundaryMode
from .config import MappingConfig as MappingConfig
from .config import load_config as load_config
from .errors import *
from .generator import Generator as Generator
from .generator import RunReport as RunReport
from .naming import declaration_name as declaration_name
from .naming import serialization_tag_name as serialization_tag_name
from .naming import split_boundaries as split_boundaries
from .resolver import TypeResolver as TypeResolver
from .resolver import resolve as resolve
from .resolver import resolve_signature as resolve_signature
from .signature import parse as parse
from .source import ClassRegistry as ClassRegistry
from .source import DirectorySource as DirectorySource
from .types import *
from .writer import GoWriter as GoWriter

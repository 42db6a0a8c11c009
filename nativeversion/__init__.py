# Derives native version resource information from a version number and
# generates the header that embeds it into a Windows binary.

from .derive import Derivation, deriveFields
from .emitters import CppEmitter, Emitter, getEmitter, iterEmitters
from .fieldset import FieldSet
from .versionnumber import VersionQuadruplet, parseVersion

__version__ = '1.0.0'

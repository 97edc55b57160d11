"""rubyish: Ruby-style convenience wrappers for Python values.

String, Symbol, Integer, Float and Boolean wrap scalars with predicate and
transform methods; Array, Hash and Range add Ruby's collection combinators.
Absence is reported with Option (`Some`/`Nothing`) and failed lookups with
Result (`Ok`/`Err`).

Flat imports (preferred):
    from rubyish import Array, Hash, Range, String, Symbol, Integer, Float, Boolean
    from rubyish import Some, Nothing, Ok, Err

Submodule imports (for organization):
    from rubyish.array import Array
    from rubyish.option import Some, Nothing, Option
    from rubyish.config import init, get_config
"""

# Wrappers
from rubyish.array import Array
from rubyish.boolean import Boolean

# Configuration
from rubyish.config import RubyishConfig, get_config, init

# Typeclasses
from rubyish.conversions import sort_key, to_s

# Errors
from rubyish.errors import KeyNotFound, KeyNotFoundError, RubyishError
from rubyish.hash import Hash, Pair
from rubyish.numeric import Float, Integer
from rubyish.option import (
    Nothing,
    NothingType,
    Option,
    Some,
)
from rubyish.range import Range
from rubyish.result import (
    Err,
    Ok,
    Result,
    collect,
)
from rubyish.string import String
from rubyish.symbol import Symbol
from rubyish.typeclass import NoInstanceError, typeclass

__all__ = [
    # Wrappers
    'Array',
    'Boolean',
    'Float',
    'Hash',
    'Integer',
    'Pair',
    'Range',
    'String',
    'Symbol',
    # Option / Result
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'collect',
    # Errors
    'KeyNotFound',
    'KeyNotFoundError',
    'NoInstanceError',
    'RubyishError',
    # Typeclasses
    'sort_key',
    'to_s',
    'typeclass',
    # Configuration
    'RubyishConfig',
    'get_config',
    'init',
]

__version__ = '0.1.0'

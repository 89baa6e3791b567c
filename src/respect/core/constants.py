from __future__ import annotations

# Default comparison limits. Both are overridable per call through RespectConfig.
MAX_DIFF = 10
FLOAT_PRECISION = 10

# Placeholders standing in for one side of a diagnostic.
NIL_POINTER = "<nil pointer>"
NIL_MAP = "<nil map>"
NIL_SLICE = "<nil slice>"
DOES_NOT_HAVE_KEY = "<does not have key>"
NOT_FOUND = "<not found>"
NO_VALUE = "<no value>"
NO_VALID_IDENTIFIER = "<non valid field identifier was found>"

# Synthetic path segments.
SEGMENT_TYPE = "<type>"
SEGMENT_LEN = "<len>"
SEGMENT_ITEM = "item"

OP_NOT_EQUAL = "!="
OP_LESS = "<"
OP_GREATER = ">"

EXIT_SUCCESS = 0
EXIT_MISMATCH = 1
EXIT_INTERNAL_ERROR = 2

ENV_MAX_DIFF = "RESPECT_MAX_DIFF"
ENV_FLOAT_PRECISION = "RESPECT_FLOAT_PRECISION"
ENV_OPTIONS = "RESPECT_OPTIONS"

"""Filter parameter naming constants.

Range filters read two keys per column from the filter map, built from
the column name plus one of these suffixes.
"""

RANGE_LOWER_SUFFIX = "_dari"
RANGE_UPPER_SUFFIX = "_sampai"

# Suffixes of the two entries registered by a boolean column.
BOOL_TEXT_SUFFIX = "_str"
BOOL_TAG_SUFFIX = "_class"

DEFAULT_TRUE_TAG = "success"
DEFAULT_FALSE_TAG = "danger"

"""Message parameter keys.

``FIELD`` is reserved: every failure carries it, seeded from the identifier.
The remaining keys are the documented vocabulary used by the built-in checks
and templates; the renderer itself treats all keys as opaque lookups.
"""

FIELD = "field"
VALUE = "value"

# String
MIN_LENGTH = "minLength"
MAX_LENGTH = "maxLength"
EXACT_LENGTH = "exactLength"
PATTERN = "pattern"
PREFIX = "prefix"
SUFFIX = "suffix"
SUBSTRING = "substring"
ALLOWED_VALUES = "allowedValues"

# Number
MIN = "min"
MAX = "max"

# Date/time
MIN_DATE = "minDate"
MAX_DATE = "maxDate"
REFERENCE_DATE = "referenceDate"
WEEKDAYS = "weekdays"
WEEKEND_DAYS = "weekendDays"
MONTH = "month"
YEAR = "year"

# Collection
MIN_SIZE = "minSize"
MAX_SIZE = "maxSize"
EXACT_SIZE = "exactSize"
ACTUAL_SIZE = "actualSize"
ELEMENT = "element"
ELEMENTS = "elements"

# Common
CONDITION = "condition"
CLASS_NAME = "className"
REFERENCE = "reference"

# Cross-cutting metadata mirrored into parameters
SEVERITY = "severity"
CATEGORY = "category"

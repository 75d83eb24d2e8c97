import re

# Decimal literal with optional sign, exponent (within double range) and a
# trailing ``d``/``D`` type suffix.
DOUBLE_PATTERN = re.compile(
    r"^[-+]?(\d+(\.\d*)?|\.\d+)"
    r"([eE]([-+]?([012]?\d{1,2}|30[0-7])|-3([01]?[4-9]|[012]?[0-3])))?"
    r"[dD]?$",
    re.ASCII,
)

TRUE = "true"
FALSE = "false"

MAILTO = "mailto:"
FORMULA_PREFIX = "="

# Cell attributes that force a content type
ATTR_STRING = "string"
ATTR_DOUBLE = "double"
ATTR_FORMULA = "formula"
ATTR_URL = "url"
ATTR_EMAIL = "email"
ATTR_DROP_DOWN_LIST = "dropDownList"

"""
Global constants used throughout the project
"""

# Tree building defaults
ID_FIELD = "id"
PARENT_FIELD = "parent_id"
ALIAS_FIELD = "name"
CHILDREN_FIELD = "_children"

# Parent values that mean "no parent"
EMPTY_PARENTS = (None, "")


# Separator strings for join()
JOIN_DEFAULTS = {
    "elements_glue": "",  # between key-value groups
    "key_value_glue": "",  # between a key and its value
    "value_wrapper": "",  # around each value
    "value_glue": "",  # between items of a list value
    "value_escape": "",  # replaces value_wrapper inside a value
}

JOIN_CSS = {
    "elements_glue": ";\n",
    "key_value_glue": ": ",
    "value_wrapper": "",
    "value_glue": " ",
    "value_escape": "",
}

JOIN_HTML = {
    "elements_glue": " ",
    "key_value_glue": "=",
    "value_wrapper": '"',
    "value_glue": " ",
    "value_escape": "&quot;",
}

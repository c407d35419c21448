"""Common literal values used across docs_site.

These constants keep resource names, reserved version tokens, and the fixed
404 copy centralized so the dispatcher, fallback resolver, templates, and
tests can import the same values without drifting.

Examples
--------
>>> from docs_site import _constants
>>> _constants.MENU_RESOURCE
'menu_docs.yml'
>>> _constants.LOCAL_VERSION
'local'
"""

MENU_RESOURCE = "menu_docs.yml"
CLASS_REFERENCE_RESOURCE = "class_reference.yml"
CHEATSHEET_RESOURCE = "cheatsheet.yml"

LOCAL_VERSION = "local"
INDEX_SLUG = "index"
CHEATSHEET_SLUG = "cheatsheet"

TREE_CONTENT_TYPE = "application/vnd.api+json"
# Kept for compatibility with existing tree consumers.
TREE_STATUS = 201

NOT_FOUND_MESSAGE = "Page does not exist."
NOT_FOUND_TITLE = "404 - Page not found"
NOT_FOUND_SOURCE = (
    "<h1>404 - Page not found</h1>"
    "This page could not be found. Please click one of the menu items in the "
    "sidebar, or use the search form to look for a specific keyword."
)

DEFAULT_INTERNAL_PREFIXES = ("_profiler", "_debug_toolbar", "static")

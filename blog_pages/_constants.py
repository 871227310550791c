"""Common literal values used across blog_pages.

These constants keep marker names, pagination field names, and metadata
filenames centralized so the patcher, validator, loaders, and tests import
the same values without drifting. Intended for internal use within the
blog_pages package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.PAGING_MARKER
'hasPagingParams'
>>> _constants.PAGE_KEY_TEMPLATE.format(directory="blog", number=2)
'blog/2.md'
"""

PAGING_MARKER = "hasPagingParams"

TOTAL_FIELD = "numberOfBlogs"
PAGES_FIELD = "numberOfPages"
PAGE_SIZE_FIELD = "pageLength"
START_FIELD = "pageStart"
CURRENT_FIELD = "pageNumber"
DESCRIPTOR_FIELD = "pagination"

PAGE_KEY_TEMPLATE = "{directory}/{number}.md"
PAGE_META_FILENAME = ".blog-pages-meta.json"
CONTENTS_KEY = "contents"
FRONT_MATTER_FENCE = "---"

"""
Path query evaluation for xmlentity trees.
"""

from xmlentity.query.path_query import (
    PATH_SEPARATOR,
    check_xpath,
    evaluate_segments,
    render_tag,
)

__all__ = [
    "PATH_SEPARATOR",
    "check_xpath",
    "evaluate_segments",
    "render_tag",
]

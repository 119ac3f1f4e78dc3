"""str_helpers.tools

`StringTools` binds a :class:`~str_helpers.config.Settings` instance to the
module-level helpers, so callers configure defaults once instead of passing
separators and limits at every call site.

Example Usage:
    from str_helpers import StringTools
    from str_helpers.config import Settings

    tools = StringTools(Settings(separator="_", truncate_limit=20))
    tools.slug("Héllo Wôrld!")          # 'hello_world'
    tools.truncate("a" * 30)            # 'aaaaaaaaaaaaaaaaaaaa...'
"""
from __future__ import annotations

from typing import Optional, Union

from .casing import to_camel_case, to_snake_case, to_studly_case
from .charmap import to_ascii
from .config import Settings
from .jsonsniff import JsonResult, parse_json_if_looks_like_json
from .slug import slugify, snake_case_safe
from .utils import Needles, contains_any, ends_with_any, starts_with_any, truncate


class StringTools:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def ascii(self, value: str) -> str:
        return to_ascii(value)

    def slug(self, title: str, separator: Optional[str] = None) -> str:
        if separator is None:
            separator = self.settings.separator
        return slugify(title, separator)

    def snake(self, value: str, delimiter: Optional[str] = None) -> str:
        if delimiter is None:
            delimiter = self.settings.snake_delimiter
        return to_snake_case(value, delimiter)

    def snake_safe(self, title: str, separator: Optional[str] = None) -> str:
        """Snake-case then slugify; uses the snake delimiter as the separator by default."""
        if separator is None:
            separator = self.settings.snake_delimiter
        return snake_case_safe(title, separator)

    def camel(self, value: str) -> str:
        return to_camel_case(value)

    def studly(self, value: str) -> str:
        return to_studly_case(value)

    def truncate(self, value: str, limit: Optional[int] = None, end: Optional[str] = None) -> str:
        if limit is None:
            limit = self.settings.truncate_limit
        if end is None:
            end = self.settings.truncate_end
        return truncate(value, limit, end)

    def starts_with(self, needles: Needles, haystack: str) -> bool:
        return starts_with_any(needles, haystack)

    def contains(self, needles: Needles, haystack: str) -> bool:
        return contains_any(needles, haystack)

    def ends_with(self, needles: Needles, haystack: str) -> bool:
        return ends_with_any(needles, haystack)

    def json(
        self,
        text: Union[str, bytes],
        return_decoded: bool = True,
        as_array: bool = False,
    ) -> JsonResult:
        return parse_json_if_looks_like_json(
            text,
            return_decoded=return_decoded,
            as_array=as_array,
            max_depth=self.settings.json_max_depth,
        )

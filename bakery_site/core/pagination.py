"""
Page slicing for the menu grid and the gallery
"""
import math


def parse_page(value, default=1):
    """Read a page number from a query string value"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Paginator:
    """One page of a list; pages are numbered from 1"""

    def __init__(self, items, per_page, page=1):
        if per_page < 1:
            raise ValueError('per_page must be at least 1')
        self.all_items = list(items)
        self.per_page = per_page
        self.total = len(self.all_items)
        self.total_pages = math.ceil(self.total / per_page)
        self.page = min(max(parse_page(page), 1), max(self.total_pages, 1))

    @property
    def offset(self):
        return (self.page - 1) * self.per_page

    @property
    def items(self):
        return self.all_items[self.offset:self.offset + self.per_page]

    @property
    def has_prev(self):
        return self.page > 1

    @property
    def has_next(self):
        return self.page < self.total_pages

    @property
    def prev_page(self):
        return self.page - 1 if self.has_prev else self.page

    @property
    def next_page(self):
        return self.page + 1 if self.has_next else self.page

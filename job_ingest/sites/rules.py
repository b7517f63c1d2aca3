"""Extraction rules.

A rule is a small callable that looks in one place of a parsed page and returns
the cleaned text it finds there, or "" when there is nothing. Extractors list
rules per field in priority order; `first_match` runs them lazily and keeps
the first non-empty value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import List, Sequence

from bs4 import BeautifulSoup, Tag

from ..normalize import clean
from ..utils import first_non_empty


class Rule(ABC):
    """Base class for extraction rules."""

    @abstractmethod
    def __call__(self, soup: BeautifulSoup) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Text(Rule):
    """Text of the first element matching `selector`."""

    selector: str

    def __call__(self, soup: BeautifulSoup) -> str:
        el = soup.select_one(self.selector)
        return clean(el.get_text()) if el else ""


@dataclass(frozen=True)
class LastText(Rule):
    """Text of the last element matching `selector`."""

    selector: str

    def __call__(self, soup: BeautifulSoup) -> str:
        matches = soup.select(self.selector)
        return clean(matches[-1].get_text()) if matches else ""


@dataclass(frozen=True)
class NthText(Rule):
    """Text of the element at zero-based `index` among matches of `selector`."""

    selector: str
    index: int

    def __call__(self, soup: BeautifulSoup) -> str:
        matches = soup.select(self.selector)
        if len(matches) <= self.index:
            return ""
        return clean(matches[self.index].get_text())


@dataclass(frozen=True)
class AllText(Rule):
    """Text of every element matching `selector`, joined in document order."""

    selector: str

    def __call__(self, soup: BeautifulSoup) -> str:
        return clean(" ".join(el.get_text() for el in soup.select(self.selector)))


@dataclass(frozen=True)
class Attr(Rule):
    """Attribute `name` of the first element matching `selector`."""

    selector: str
    name: str

    def __call__(self, soup: BeautifulSoup) -> str:
        el = soup.select_one(self.selector)
        if el is None:
            return ""
        value = el.get(self.name)
        if isinstance(value, list):
            value = " ".join(value)
        return clean(value)


@dataclass(frozen=True)
class FollowingLabel(Rule):
    """Text of the element right after the innermost `tag` containing `label`.

    Used for pages that lay out key/value pairs as sibling elements, e.g.
    `<div>Compensation</div><div>$40/hr</div>`.
    """

    tag: str
    label: str

    def __call__(self, soup: BeautifulSoup) -> str:
        for el in _innermost(soup.find_all(self.tag), self.tag, self.label):
            sibling = el.find_next_sibling()
            if sibling is not None:
                text = clean(sibling.get_text())
                if text:
                    return text
        return ""


def _innermost(candidates: List[Tag], tag: str, label: str) -> List[Tag]:
    labelled = [el for el in candidates if label in el.get_text()]
    return [
        el
        for el in labelled
        if not any(label in child.get_text() for child in el.find_all(tag))
    ]


def first_match(soup: BeautifulSoup, rules: Sequence[Rule]) -> str:
    """Return the first non-empty value produced by `rules`, else ""."""
    return first_non_empty(partial(rule, soup) for rule in rules)

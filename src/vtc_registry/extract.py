from __future__ import annotations

import logging
from typing import Dict, Union

import soupsieve
from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from vtc_registry.errors import ParseError
from vtc_registry.labels import LABEL_SELECTOR


logger = logging.getLogger("vtc.extract")


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"unparseable result page: {exc}") from exc


def first_text(node: Tag) -> str:
    """Return the first non-blank text child of `node`, trimmed.

    Only direct children are inspected; text inside nested elements is not
    considered. Comments and other non-content strings are skipped.
    """
    for child in node.children:
        if not isinstance(child, NavigableString) or isinstance(child, PreformattedString):
            continue
        value = child.strip()
        if value:
            return value
    return ""


def extract_labels(document: Tag, selector: str = LABEL_SELECTOR) -> Dict[str, str]:
    """Map each caption found on the page to the text sitting next to it.

    The value lives in the caption's parent, except where the caption is
    wrapped in a <span>: then it belongs to the grandparent. A caption seen
    twice keeps its last value. An empty dict means the page has no captions.
    """
    try:
        compiled = soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise ParseError(f"invalid label selector {selector!r}: {exc}") from exc

    mapped: Dict[str, str] = {}
    for node in compiled.select(document):
        parent = node.parent
        # one of the registry tables wraps its captions in a <span>
        if parent is not None and parent.name == "span" and parent.parent is not None:
            parent = parent.parent
        value = first_text(parent) if parent is not None else ""
        mapped[first_text(node)] = value
    logger.debug("extracted %d labels", len(mapped))
    return mapped


def extract_labels_from_html(html: Union[str, bytes], selector: str = LABEL_SELECTOR) -> Dict[str, str]:
    return extract_labels(parse_document(html), selector=selector)

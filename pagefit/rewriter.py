"""Apply a fit result to a page's boxes and content tree."""

from __future__ import annotations

import logging

from .fit import FitResult
from .types import FixedPage, Group, Rect

logger = logging.getLogger(__name__)


def rewrite_page(page: FixedPage, fit: FitResult) -> Group:
    """Resize ``page`` and move all of its content under one transformed group.

    Steps:
    1. Set the page extent to the target dimensions
    2. Set media, crop, bleed, trim and content boxes to ``(0, 0, w, h)``
    3. Create a group carrying ``[scale 0 0 scale dx dy]``
    4. Move every child, in order, from the page into the group
    5. Append the group as the page's only child

    A page without children ends up with a single empty group.

    Args:
        page: Page to mutate in place
        fit: Result of ``compute_fit`` for this page's extent

    Returns:
        The new group node
    """
    page.width = fit.target_width
    page.height = fit.target_height
    page.set_boxes(Rect.from_size(fit.target_width, fit.target_height))

    group = Group(fit.matrix)
    child = page.first_child
    while child is not None:
        next_child = child.next_sibling
        page.extract_child(child)
        group.append_child(child)
        child = next_child

    page.append_child(group)

    logger.debug(
        "Rewrapped %d node(s) on page %s: scale=%.4f dx=%.2f dy=%.2f",
        group.child_count(),
        page.number,
        fit.scale,
        fit.dx,
        fit.dy,
    )
    return group

"""Comment tree engine.

Turns the flat comment collection of one post into a nested thread, derives
the per-viewer display fields, and provides the sort/flatten operations the
API needs. Everything here is synchronous and side-effect free apart from
logging; malformed input is degraded, never raised.
"""

from collections import defaultdict
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Callable, Iterable, Mapping, Optional

import logfire

from board.domain.model.comment import Comment
from board.domain.value import CommentId, CommentSortOrder, PostId, ReactionKind
from board.util.markdown import render_markdown

OwnershipPredicate = Callable[[Comment], bool]


@dataclass
class CommentNode:
    """Comment as rendered in a thread.

    Mirrors the stored comment and adds the fields derived for the current
    viewer. ``replies`` holds the direct children in display order.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId]
    content: str
    content_html: str
    author_alias: Optional[str]
    created_at: datetime
    updated_at: datetime
    reaction_counts: dict[ReactionKind, int]
    viewer_reactions: set[ReactionKind]
    total_reaction_score: int
    was_edited: bool
    can_edit: bool
    can_moderate: bool
    replying_to_owner: bool = False
    depth: int = 0
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentTree:
    """Result of assembling a thread.

    ``dropped`` lists the ids of input records that are not part of the
    thread: orphans, cycles, self-references, repeated ids and replies nested
    past the depth limit. Every input record is either reachable from
    ``roots`` or listed here exactly once.
    """

    roots: list[CommentNode]
    dropped: list[CommentId]


def _materialize(
    comment: Comment,
    can_edit: bool,
    is_moderator: bool,
    edited_threshold: timedelta,
    viewer_reactions: frozenset[ReactionKind],
) -> CommentNode:
    counts = comment.reactions.as_dict()
    return CommentNode(
        id=comment.id,
        post_id=comment.post_id,
        parent_id=comment.parent_id,
        content=comment.content,
        content_html="",
        author_alias=comment.author_alias,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        reaction_counts=counts,
        viewer_reactions=set(viewer_reactions),
        total_reaction_score=sum(counts.values()),
        was_edited=comment.updated_at - comment.created_at > edited_threshold,
        can_edit=can_edit,
        can_moderate=can_edit or is_moderator,
    )


def build_comment_tree(
    comments: Iterable[Comment],
    is_owner: OwnershipPredicate,
    *,
    edited_threshold: timedelta = timedelta(seconds=60),
    max_depth: int = 200,
    is_moderator: bool = False,
    viewer_reactions: Optional[Mapping[CommentId, frozenset[ReactionKind]]] = None,
) -> CommentTree:
    """Assemble a flat comment collection into a thread.

    Records may arrive in any order: a reply seen before its parent waits in
    a buffer keyed by the parent id and is adopted as soon as the parent
    shows up. Replies keep the relative order of the input.

    Args:
        comments: Flat comments of a single post
        is_owner: Whether the current viewer holds a comment's token
        edited_threshold: Minimum gap between creation and update that counts
            as an edit
        max_depth: Deepest level kept (roots are depth 0)
        is_moderator: Whether the viewer holds moderation rights
        viewer_reactions: Reaction kinds the viewer has toggled, per comment

    Returns:
        Root nodes with their replies nested, plus the ids left out
    """
    records = list(comments)
    reactions = viewer_reactions or {}

    nodes: dict[CommentId, CommentNode] = {}
    pending: dict[CommentId, list[CommentNode]] = defaultdict(list)
    roots: list[CommentNode] = []

    for comment in records:
        if comment.id in nodes:
            # First record with an id wins
            continue

        node = _materialize(
            comment,
            can_edit=is_owner(comment),
            is_moderator=is_moderator,
            edited_threshold=edited_threshold,
            viewer_reactions=reactions.get(comment.id, frozenset()),
        )
        nodes[comment.id] = node

        parent_id = comment.parent_id
        if parent_id is None:
            roots.append(node)
        elif parent_id == comment.id:
            # Never attachable; left out of nodes reachable from the roots
            pass
        elif parent_id in nodes:
            nodes[parent_id].replies.append(node)
        else:
            pending[parent_id].append(node)

        # Adopt replies that arrived before this node; each already carries
        # whatever it adopted itself
        waiting = pending.pop(comment.id, None)
        if waiting:
            node.replies.extend(waiting)

    reachable = _finalize(roots, max_depth)
    dropped = _collect_dropped(records, reachable)

    if dropped:
        logfire.warn(
            "Comments left out of thread",
            dropped=len(dropped),
            orphaned_parents=len(pending),
        )

    return CommentTree(roots=roots, dropped=dropped)


def _finalize(roots: list[CommentNode], max_depth: int) -> set[CommentId]:
    """Walk the thread top-down, filling depth, owner flags and HTML.

    Replies below ``max_depth`` are cut off. Returns the ids kept.
    """
    reachable: set[CommentId] = set()
    stack: list[tuple[CommentNode, Optional[CommentNode]]] = [
        (root, None) for root in reversed(roots)
    ]

    while stack:
        node, parent = stack.pop()
        reachable.add(node.id)
        node.depth = 0 if parent is None else parent.depth + 1
        node.replying_to_owner = parent is not None and parent.can_edit
        node.content_html = render_markdown(node.content)

        if node.depth >= max_depth:
            node.replies = []
            continue

        for reply in reversed(node.replies):
            stack.append((reply, node))

    return reachable


def _collect_dropped(
    records: list[Comment], reachable: set[CommentId]
) -> list[CommentId]:
    dropped: list[CommentId] = []
    seen: set[CommentId] = set()
    for comment in records:
        if comment.id in seen or comment.id not in reachable:
            dropped.append(comment.id)
        seen.add(comment.id)
    return dropped


def _sort_key(order: CommentSortOrder) -> Callable[[CommentNode], tuple]:
    if order == CommentSortOrder.SUPPORT:
        return lambda node: (node.total_reaction_score, node.created_at)
    return lambda node: (node.created_at,)


def _copy_node(node: CommentNode) -> CommentNode:
    return replace(
        node,
        reaction_counts=dict(node.reaction_counts),
        viewer_reactions=set(node.viewer_reactions),
        replies=[],
    )


def sort_comment_tree(
    roots: list[CommentNode], order: CommentSortOrder
) -> list[CommentNode]:
    """Return a sorted deep copy of a thread.

    Roots and every reply list are ordered newest first (``recent``) or by
    total reactions with newest first on ties (``support``). Exact ties keep
    their current order. The input is left untouched.

    Args:
        roots: Root nodes of a thread
        order: Sort order

    Returns:
        Sorted copies of the roots
    """
    key = _sort_key(order)
    copies = [_copy_node(root) for root in roots]
    stack = list(zip(roots, copies))

    while stack:
        original, copy = stack.pop()
        for reply in original.replies:
            reply_copy = _copy_node(reply)
            copy.replies.append(reply_copy)
            stack.append((reply, reply_copy))
        copy.replies.sort(key=key, reverse=True)

    copies.sort(key=key, reverse=True)
    return copies


def flatten_comment_tree(roots: list[CommentNode]) -> list[CommentNode]:
    """List every node in pre-order (node first, then its replies)."""
    flat: list[CommentNode] = []
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        flat.append(node)
        stack.extend(reversed(node.replies))
    return flat


def replies_to_viewer(roots: list[CommentNode]) -> list[CommentNode]:
    """Direct replies to comments the viewer owns, in pre-order."""
    return [node for node in flatten_comment_tree(roots) if node.replying_to_owner]

"""Comment reply tree.

Comments for a post are stored and fetched as a flat list, each row knowing
only its direct ``parent_id``. This module rebuilds the reply structure for
rendering and is the only place that does so.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from tapestry.domain.model import Comment
from tapestry.domain.value import CommentId, PostId, UserId


@dataclass(frozen=True)
class CommentNode:
    """A comment with its author's display name and its direct replies.

    Replies keep the order of the flat input, i.e. oldest first.
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str
    created_at: datetime
    parent_id: CommentId | None
    full_name: str | None
    replies: list["CommentNode"] = field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment, full_name: str | None) -> "CommentNode":
        """Create a childless node from a fetched comment."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            parent_id=comment.parent_id,
            full_name=full_name,
        )


def build_comment_forest(
    comments: Sequence[Comment],
    name_lookup: Mapping[UserId, str | None],
) -> list[CommentNode]:
    """Assemble the flat comments of one post into a forest of reply trees.

    Two passes over the input: the first creates a node per comment and
    indexes it by id, the second attaches every node to its parent or, when it
    has none, to the returned list of roots.

    A comment is returned as a root when:
    - its ``parent_id`` is None (a direct reply to the post),
    - its parent is not part of the batch (an orphan, e.g. the parent was
      deleted), or
    - following parent links from it leads back to itself (a self reference
      or a longer cycle in the stored data).

    So every input comment appears exactly once in the result, and the result
    is always finite to walk.

    Args:
        comments: Comments of a single post, sorted by created_at ascending.
            Order is preserved, never re-sorted.
        name_lookup: user_id -> full_name. Missing users resolve to None.
            Not modified.

    Returns:
        Root nodes in input order, replies nested beneath them
    """
    index: dict[CommentId, CommentNode] = {}
    for comment in comments:
        index[comment.id] = CommentNode.from_comment(
            comment, full_name=name_lookup.get(comment.user_id)
        )

    parents: dict[CommentId, CommentId | None] = {
        comment.id: comment.parent_id for comment in comments
    }
    verdicts: dict[CommentId, bool] = {}

    roots: list[CommentNode] = []
    for comment in comments:
        node = index[comment.id]
        parent = index.get(comment.parent_id) if comment.parent_id else None

        if parent is None or _is_in_cycle(comment.id, parents, verdicts):
            roots.append(node)
        else:
            parent.replies.append(node)

    return roots


def flatten_forest(forest: Sequence[CommentNode]) -> list[tuple[CommentNode, int]]:
    """Walk a comment forest depth first, parents before their replies.

    Uses an explicit stack, so arbitrarily deep reply chains never hit the
    recursion limit.

    Args:
        forest: Root nodes as returned by ``build_comment_forest``

    Returns:
        (node, depth) pairs in display order, depth 0 for roots
    """
    ordered: list[tuple[CommentNode, int]] = []
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        ordered.append((node, depth))
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))
    return ordered


def count_comments(comments: Sequence[Comment]) -> int:
    """Number of comments in a batch, for the "N comments" badge."""
    return len(comments)


def _is_in_cycle(
    start: CommentId,
    parents: Mapping[CommentId, CommentId | None],
    verdicts: dict[CommentId, bool],
) -> bool:
    """Whether following parent links from ``start`` comes back to ``start``.

    ``verdicts`` caches the answer for every id a walk passes through, so each
    parent link is followed at most once per build. A walk that reaches an id
    with a verdict stops there: if that id were on a cycle with ``start``,
    ``start`` would already have a verdict of its own.
    """
    if start in verdicts:
        return verdicts[start]

    seen: set[CommentId] = set()
    path: list[CommentId] = []
    current = parents.get(start)

    while current is not None and current in parents and current not in verdicts:
        if current == start:
            verdicts[start] = True
            verdicts.update(dict.fromkeys(path, True))
            return True
        if current in seen:
            # Ran into a cycle further up that start is not part of
            entry = path.index(current)
            verdicts.update(dict.fromkeys(path[entry:], True))
            path = path[:entry]
            break
        seen.add(current)
        path.append(current)
        current = parents[current]

    verdicts[start] = False
    verdicts.update(dict.fromkeys(path, False))
    return False

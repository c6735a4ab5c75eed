"""Identifiers of board entities.

All ids are UUIDs; the distinct types keep a comment id from being passed
where a post id is expected.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
TagId = NewType("TagId", UUID)

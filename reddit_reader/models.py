from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Community:
    name: str
    display_name: str


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    selftext: str = ""
    author: str = "[deleted]"
    over_18: bool = False

    @property
    def is_eligible(self) -> bool:
        """Text posts that are marked as acceptable for people under 18."""
        return not self.over_18 and bool(self.selftext)


@dataclass(frozen=True)
class Comment:
    id: str
    body: str = ""
    author: str = "[deleted]"


class View(enum.Enum):
    MAIN_MENU = "main_menu"
    SELECTING_COMMUNITY = "selecting_community"
    VIEWING_POST = "viewing_post"
    VIEWING_AUTHOR = "viewing_author"
    VIEWING_COMMENTS = "viewing_comments"
    VIEWING_COMMENT = "viewing_comment"
    VIEWING_COMMENT_AUTHOR = "viewing_comment_author"
    QUIT = "quit"


@dataclass(frozen=True)
class Position:
    """Where the user is in an immutable listing of posts and, optionally, comments."""

    posts: Tuple[Post, ...] = ()
    post_index: int = 0
    comments: Optional[Tuple[Comment, ...]] = None
    comment_index: Optional[int] = None

    @property
    def post(self) -> Post:
        return self.posts[self.post_index]

    @property
    def comment(self) -> Comment:
        if self.comments is None or self.comment_index is None:
            raise LookupError("no comment is selected")
        return self.comments[self.comment_index]

    @property
    def has_next_post(self) -> bool:
        return self.post_index + 1 < len(self.posts)

    @property
    def has_next_comment(self) -> bool:
        if self.comments is None or self.comment_index is None:
            return False
        return self.comment_index + 1 < len(self.comments)

    def at_post(self, index: int) -> "Position":
        """Position on another post; the comment listing belongs to the old post and is dropped."""
        return Position(posts=self.posts, post_index=index)

    def next_post(self) -> "Position":
        return self.at_post(self.post_index + 1)

    def with_comments(self, comments: Tuple[Comment, ...], index: int = 0) -> "Position":
        return Position(
            posts=self.posts,
            post_index=self.post_index,
            comments=comments,
            comment_index=index,
        )

    def next_comment(self) -> "Position":
        if self.comments is None or self.comment_index is None:
            raise LookupError("no comment is selected")
        return self.with_comments(self.comments, self.comment_index + 1)


@dataclass(frozen=True)
class MenuOption:
    """A labelled request to move to ``view`` at ``position``."""

    label: str
    view: View
    position: Optional[Position] = None

"""Shared fakes for driving the reader without a terminal or Reddit."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pytest

from reddit_reader.errors import CommunityNotFound, NetworkUnavailable
from reddit_reader.menu import Console
from reddit_reader.models import Comment, Community, Post


class ScriptedConsole(Console):
    """Feeds canned answers and records everything written. Running out of answers reads as EOF."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers: List[str] = list(answers)
        self.lines: List[str] = []
        self.prompts: List[str] = []
        super().__init__(input_fn=self._answer, output_fn=self.lines.append)

    def _answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class FakeSession:
    """In-memory stand-in for ``reddit_reader.session.Session``."""

    def __init__(
        self,
        posts: Optional[Dict[str, List[Post]]] = None,
        comments: Optional[Dict[str, List[Comment]]] = None,
        user_name: str = "tester",
    ) -> None:
        self.posts = posts or {}
        self.comments = comments or {}
        self.user_name = user_name
        self.offline = False
        self.posts_offline = False
        self.comments_offline = False
        self.calls: List[tuple] = []

    @property
    def current_user_name(self) -> str:
        return self.user_name

    def fetch_community(self, name: str) -> Community:
        self.calls.append(("fetch_community", name))
        if self.offline:
            raise NetworkUnavailable("Network is unreachable")
        if name not in self.posts:
            raise CommunityNotFound(name)
        return Community(name=name, display_name=name)

    def fetch_eligible_posts(self, community: Community) -> List[Post]:
        self.calls.append(("fetch_eligible_posts", community.name))
        if self.posts_offline:
            raise NetworkUnavailable("Network is unreachable")
        return list(self.posts[community.name])

    def fetch_comments(self, post: Post) -> List[Comment]:
        self.calls.append(("fetch_comments", post.id))
        if self.comments_offline:
            raise NetworkUnavailable("Network is unreachable")
        return list(self.comments.get(post.id, []))


def make_posts(count: int, prefix: str = "p") -> List[Post]:
    return [
        Post(
            id=f"{prefix}{i}",
            title=f"Post number {i}",
            selftext=f"Body of post {i}",
            author=f"author{i}",
        )
        for i in range(count)
    ]


def make_comments(count: int) -> List[Comment]:
    return [Comment(id=f"c{i}", body=f"Comment body {i}", author=f"commenter{i}") for i in range(count)]


@pytest.fixture
def two_posts() -> List[Post]:
    return make_posts(2)


@pytest.fixture
def session(two_posts) -> FakeSession:
    return FakeSession(
        posts={"x": two_posts, "empty": []},
        comments={"p0": make_comments(2)},
    )

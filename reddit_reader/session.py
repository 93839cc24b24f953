"""
Authenticated, read-only access to Reddit through PRAW (OAuth password flow).

A Session is created once at startup by ``Session.connect`` and handed to the
navigator. Every fetch is a fresh round trip; nothing is cached.

PRAW and prawcore exceptions never leave this module: they are translated into
the errors in ``reddit_reader.errors``.
"""

from __future__ import annotations

import logging
from typing import Any, List

import praw
from prawcore import exceptions as praw_exceptions

from .config import AppConfig
from .errors import (
    AuthenticationError,
    CommunityNotFound,
    ConnectivityError,
    NetworkUnavailable,
)
from .models import Comment, Community, Post


logger = logging.getLogger(__name__)

_AUTH_STATUS_CODES = (401, 403)

# Dropped connections, and error statuses such as 5xx or 429 that a retry may clear.
_FETCH_ERRORS = (praw_exceptions.RequestException, praw_exceptions.ResponseException)


def _author_name(thing: Any) -> str:
    return str(thing.author) if thing.author else "[deleted]"


def _to_post(submission: Any) -> Post:
    return Post(
        id=submission.id,
        title=submission.title,
        selftext=submission.selftext or "",
        author=_author_name(submission),
        over_18=bool(submission.over_18),
    )


def _to_comment(comment: Any) -> Comment:
    body = comment.body if isinstance(comment.body, str) else str(comment.body)
    return Comment(id=comment.id, body=body, author=_author_name(comment))


def eligible_posts(posts: List[Post]) -> List[Post]:
    """Drop over-18 posts and posts without body text, keeping the listing order."""
    return [post for post in posts if post.is_eligible]


class Session:
    def __init__(self, reddit: praw.Reddit, user_name: str, *, post_limit: int = 25) -> None:
        self._reddit = reddit
        self._user_name = user_name
        self._post_limit = post_limit

    @classmethod
    def connect(cls, config: AppConfig) -> "Session":
        """Log in with the configured script-app credentials.

        Raises:
            AuthenticationError: Reddit rejected the credentials.
            ConnectivityError: Reddit could not be reached or answered unexpectedly.
        """
        reddit = praw.Reddit(
            client_id=config.reddit_client_id,
            client_secret=config.reddit_client_secret,
            username=config.reddit_username,
            password=config.reddit_password,
            user_agent=config.reddit_user_agent,
            timeout=config.request_timeout,
            ratelimit_seconds=config.ratelimit_seconds,
            check_for_async=False,
        )

        try:
            me = reddit.user.me()
        except praw_exceptions.OAuthException as exc:
            logger.warning("Reddit rejected the credentials: %s", exc)
            raise AuthenticationError("Reddit rejected the credentials") from exc
        except praw_exceptions.ResponseException as exc:
            if exc.response.status_code in _AUTH_STATUS_CODES:
                logger.warning("Reddit rejected the client credentials: %s", exc)
                raise AuthenticationError("Reddit rejected the client credentials") from exc
            logger.warning("Unexpected response while logging in: %s", exc)
            raise ConnectivityError(f"Unexpected response from Reddit: {exc}") from exc
        except praw_exceptions.RequestException as exc:
            logger.warning("Could not reach Reddit: %s", exc)
            raise ConnectivityError("Could not reach Reddit") from exc

        if me is None:
            raise AuthenticationError("Reddit did not return a user for these credentials")

        logger.info("Logged in as %s", me.name)
        return cls(reddit, str(me.name), post_limit=config.post_limit)

    @property
    def current_user_name(self) -> str:
        return self._user_name

    def fetch_community(self, name: str) -> Community:
        """Fetch the subreddit called ``name``.

        Raises:
            CommunityNotFound: no readable subreddit has that name.
            NetworkUnavailable: the connection dropped or Reddit answered with an error.
        """
        name = name.strip()
        try:
            subreddit = self._reddit.subreddit(name)
            # Subreddits are lazy; reading a fetched attribute forces the request.
            title = subreddit.title
            display_name = subreddit.display_name
        except ValueError as exc:
            raise CommunityNotFound(name) from exc
        except (
            praw_exceptions.Redirect,
            praw_exceptions.NotFound,
            praw_exceptions.Forbidden,
        ) as exc:
            logger.info("Subreddit %r not found: %s", name, exc)
            raise CommunityNotFound(name) from exc
        except _FETCH_ERRORS as exc:
            logger.warning("Network failure fetching subreddit %r: %s", name, exc)
            raise NetworkUnavailable("Network is unreachable") from exc

        logger.info("Found r/%s: %s", display_name, title)
        return Community(name=name, display_name=str(display_name))

    def fetch_eligible_posts(self, community: Community) -> List[Post]:
        """Fetch one page of the "hot" listing, keeping only eligible text posts.

        Raises:
            NetworkUnavailable: the connection dropped or Reddit answered with an error.
        """
        try:
            listing = self._reddit.subreddit(community.display_name).hot(limit=self._post_limit)
            posts = [_to_post(submission) for submission in listing]
        except _FETCH_ERRORS as exc:
            logger.warning("Network failure listing r/%s: %s", community.display_name, exc)
            raise NetworkUnavailable("Network is unreachable") from exc

        eligible = eligible_posts(posts)
        logger.info(
            "Fetched %d hot posts from r/%s, %d eligible",
            len(posts),
            community.display_name,
            len(eligible),
        )
        return eligible

    def fetch_comments(self, post: Post) -> List[Comment]:
        """Fetch every comment on ``post``, flattened, with "load more" stubs dropped.

        Raises:
            NetworkUnavailable: the connection dropped or Reddit answered with an error.
        """
        try:
            submission = self._reddit.submission(id=post.id)
            submission.comments.replace_more(limit=0)
            comments = [_to_comment(c) for c in submission.comments.list()]
        except _FETCH_ERRORS as exc:
            logger.warning("Network failure fetching comments for %s: %s", post.id, exc)
            raise NetworkUnavailable("Network is unreachable") from exc

        logger.debug("Fetched %d comments for post %s", len(comments), post.id)
        return comments

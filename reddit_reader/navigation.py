"""
Post and comment browsing.

The navigator is a small state machine: every view prints what the user asked
for, works out which moves are valid from the current position and hands them
to the menu. The chosen ``MenuOption`` names the next view and position, and
the loop in ``Navigator.run`` carries on from there until the user quits.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from .errors import CommunityNotFound, NetworkUnavailable
from .menu import QUIT_LABEL, Console, offer_options
from .models import MenuOption, Position, View
from .session import Session


logger = logging.getLogger(__name__)


def count_phrase(count: int, noun: str, suffix: str = "") -> str:
    """``There are no posts.`` / ``There is one post.`` / ``There are 3 posts.``"""
    if count == 0:
        return f"There are no {noun}s{suffix}."
    if count == 1:
        return f"There is one {noun}{suffix}."
    return f"There are {count} {noun}s{suffix}."


def _next_post_option(position: Position) -> List[MenuOption]:
    if position.has_next_post:
        return [MenuOption("Show next post", View.VIEWING_POST, position.next_post())]
    return []


def _next_comment_option(position: Position) -> List[MenuOption]:
    if position.has_next_comment:
        return [MenuOption("Show next comment", View.VIEWING_COMMENT, position.next_comment())]
    return []


def _post_again(position: Position) -> MenuOption:
    return MenuOption("Show post again", View.VIEWING_POST, position.at_post(position.post_index))


class Navigator:
    def __init__(self, session: Session, console: Optional[Console] = None) -> None:
        self._session = session
        self._console = console or Console()
        self._views: Dict[View, Callable[[Position], MenuOption]] = {
            View.MAIN_MENU: self.main_menu,
            View.SELECTING_COMMUNITY: self.select_community,
            View.VIEWING_POST: self.show_post,
            View.VIEWING_AUTHOR: self.show_post_author,
            View.VIEWING_COMMENTS: self.check_for_comments,
            View.VIEWING_COMMENT: self.show_comment,
            View.VIEWING_COMMENT_AUTHOR: self.show_comment_author,
        }

    def run(self, view: View = View.MAIN_MENU, position: Optional[Position] = None) -> None:
        """Drive the views until the user picks Quit."""
        position = position or Position()
        while view is not View.QUIT:
            logger.debug("Entering %s", view.name)
            option = self._views[view](position)
            view, position = option.view, option.position or Position()
        self._console.write("Goodbye.")

    def _offer(self, options: List[MenuOption]) -> MenuOption:
        return offer_options(options, self._console)

    def main_menu(self, position: Position) -> MenuOption:
        return self._offer([])

    def select_community(self, position: Position) -> MenuOption:
        while True:
            try:
                name = self._console.read_line("What subreddit would you like to select? ")
            except EOFError:
                return MenuOption(QUIT_LABEL, View.QUIT)

            try:
                community = self._session.fetch_community(name)
                self._console.write(f"You are now in {community.display_name}.")
                posts = self._session.fetch_eligible_posts(community)
            except CommunityNotFound:
                self._console.write("There is no subreddit with that name")
                continue
            except NetworkUnavailable:
                self._console.write("Network is unreachable.")
                return self._offer([MenuOption("Retry", View.SELECTING_COMMUNITY)])
            break

        self._console.write(count_phrase(len(posts), "post"))
        if not posts:
            return self._offer([])
        first = Position(posts=tuple(posts), post_index=0)
        return self._offer([MenuOption("Show first post", View.VIEWING_POST, first)])

    def show_post(self, position: Position) -> MenuOption:
        post = position.post
        self._console.write(post.title.upper())
        self._console.write()
        self._console.write(post.selftext)
        self._console.write()

        options = [
            MenuOption("Show post author", View.VIEWING_AUTHOR, position),
            MenuOption("Check for comments", View.VIEWING_COMMENTS, position),
        ]
        options += _next_post_option(position)
        return self._offer(options)

    def show_post_author(self, position: Position) -> MenuOption:
        self._console.write(f"Post author: {position.post.author}")

        options = [
            _post_again(position),
            MenuOption("Check for comments", View.VIEWING_COMMENTS, position),
        ]
        options += _next_post_option(position)
        return self._offer(options)

    def check_for_comments(self, position: Position) -> MenuOption:
        try:
            comments = self._session.fetch_comments(position.post)
        except NetworkUnavailable:
            self._console.write("Network is unreachable.")
            return self._offer(
                [
                    MenuOption("Retry", View.VIEWING_COMMENTS, position),
                    _post_again(position),
                ]
            )

        self._console.write(count_phrase(len(comments), "comment", " for this post"))

        options = [MenuOption("Show post author", View.VIEWING_AUTHOR, position)]
        options += _next_post_option(position)
        if comments:
            first = position.with_comments(tuple(comments), 0)
            options.insert(0, MenuOption("Show first comment", View.VIEWING_COMMENT, first))
        return self._offer(options)

    def show_comment(self, position: Position) -> MenuOption:
        self._console.write(f"Comment: {position.comment.body}")

        options = [
            MenuOption("Show comment author", View.VIEWING_COMMENT_AUTHOR, position),
            _post_again(position),
        ]
        options += _next_post_option(position)
        options += _next_comment_option(position)
        return self._offer(options)

    def show_comment_author(self, position: Position) -> MenuOption:
        self._console.write(f"Comment author: {position.comment.author}")

        options = [_post_again(position)]
        options += _next_post_option(position)
        options += _next_comment_option(position)
        return self._offer(options)

import logging

from typing import Any, Callable, Iterator, List, Optional


logger = logging.getLogger(__name__)

HEAD, TAIL = 0, 1


class ReplayBuffer:
    """Append-only record of everything an upstream sequence has produced.

    Any number of traversals may replay it at once. Only the traversal that
    runs past the end of `items` pulls from upstream, and each pull is
    appended before it is handed out, so a lagging traversal never causes a
    second pull for a position that is already buffered.

    If the upstream raises, the error is kept and raised again by every later
    traversal that needs a new position. Positions already buffered still
    replay.
    """
    __slots__ = ('upstream', 'items', 'iterator', 'done', 'pulls', 'error')

    def __init__(self, upstream):
        self.upstream = upstream
        self.items = []  # type: List[Any]
        self.iterator = None  # type: Optional[Iterator[Any]]
        self.done = False
        self.pulls = 0
        self.error = None  # type: Optional[BaseException]

    def fill(self, position: int) -> bool:
        items = self.items
        while position >= len(items):
            if self.done:
                return False
            if self.error is not None:
                raise self.error
            if self.iterator is None:
                logger.debug("Opening upstream %r", self.upstream)
                self.iterator = iter(self.upstream)
            try:
                item = next(self.iterator)
            except StopIteration:
                self.done = True
                logger.debug("Upstream exhausted after %d pulls", self.pulls)
                return False
            except Exception as e:
                self.error = e
                logger.debug("Upstream failed after %d pulls: %r", self.pulls, e)
                raise
            self.pulls += 1
            items.append(item)
        return True

    def replay(self) -> Iterator[Any]:
        position = 0
        while self.fill(position):
            yield self.items[position]
            position += 1

    def __repr__(self):
        return "<ReplayBuffer buffered={} done={!r}>".format(len(self.items), self.done)


class BranchBuffers:
    """Routes one shared upstream into two append-only branches.

    `classify(buffers, item)` returns HEAD or TAIL for every pulled item and
    may close a branch, after which that branch never pulls again.
    """
    __slots__ = ('upstream', 'classify', 'branches', 'closed', 'iterator', 'done', 'pulls', 'error')

    def __init__(self, upstream, classify: Callable[["BranchBuffers", Any], int]):
        self.upstream = upstream
        self.classify = classify
        self.branches = ([], [])
        self.closed = [False, False]
        self.iterator = None  # type: Optional[Iterator[Any]]
        self.done = False
        self.pulls = 0
        self.error = None  # type: Optional[BaseException]

    def close(self, branch: int):
        self.closed[branch] = True

    def fill(self, branch: int, position: int) -> bool:
        items = self.branches[branch]
        while position >= len(items):
            if self.done or self.closed[branch]:
                return False
            if self.error is not None:
                raise self.error
            if self.iterator is None:
                logger.debug("Opening shared upstream %r", self.upstream)
                self.iterator = iter(self.upstream)
            try:
                item = next(self.iterator)
            except StopIteration:
                self.done = True
                logger.debug(
                    "Shared upstream exhausted after %d pulls (head=%d, tail=%d)",
                    self.pulls, len(self.branches[HEAD]), len(self.branches[TAIL]),
                )
                return False
            except Exception as e:
                self.error = e
                logger.debug("Shared upstream failed after %d pulls: %r", self.pulls, e)
                raise
            self.pulls += 1
            self.branches[self.classify(self, item)].append(item)
        return True

    def replay(self, branch: int) -> Iterator[Any]:
        items = self.branches[branch]
        position = 0
        while self.fill(branch, position):
            yield items[position]
            position += 1

    def __repr__(self):
        return "<BranchBuffers head={} tail={} done={!r}>".format(
            len(self.branches[HEAD]), len(self.branches[TAIL]), self.done,
        )


__all__ = (
    'HEAD', 'TAIL',
    'ReplayBuffer', 'BranchBuffers',
)

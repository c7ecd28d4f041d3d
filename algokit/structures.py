"""Small container types: LRU cache, min stack, queue-backed stack, trie, news feed."""

from __future__ import annotations

import heapq
import itertools
from collections import OrderedDict, defaultdict, deque
from dataclasses import dataclass, field
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")

FEED_SIZE = 10


class LRUCache(Generic[K, V]):
    """A fixed-capacity mapping that evicts the least recently used key."""

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: OrderedDict[K, V] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get(self, key: K) -> V | int:
        """Return the value for ``key`` and mark it most recently used, or -1."""
        if key not in self._items:
            return self.MISSING
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, evicting the least recently used key if full."""
        if key in self._items:
            self._items.move_to_end(key)
        elif len(self._items) == self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value


class MinStack(Generic[T]):
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[T, T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, value: T) -> None:
        """Push ``value`` onto the stack."""
        if self._entries and self._entries[-1][1] < value:  # type: ignore[operator]
            self._entries.append((value, self._entries[-1][1]))
        else:
            self._entries.append((value, value))

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        return self._entries.pop()[0]

    def top(self) -> T:
        """Return the top element."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> T:
        """Return the smallest element on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


class QueueStack(Generic[T]):
    """A last-in first-out stack built from two first-in first-out queues."""

    def __init__(self) -> None:
        self._incoming: deque[T] = deque()
        self._stored: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._stored)

    def push(self, value: T) -> None:
        """Push ``value``; the stored queue then holds the newest element first."""
        self._incoming.append(value)
        while self._stored:
            self._incoming.append(self._stored.popleft())
        self._incoming, self._stored = self._stored, self._incoming

    def pop(self) -> T:
        """Remove and return the most recently pushed element."""
        if not self._stored:
            raise IndexError("pop from empty stack")
        return self._stored.popleft()

    def top(self) -> T:
        """Return the most recently pushed element."""
        if not self._stored:
            raise IndexError("top of empty stack")
        return self._stored[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._stored


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    end: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


class Twitter:
    """A tiny social feed: users post tweets and follow each other."""

    def __init__(self) -> None:
        self._clock = itertools.count()
        self._tweets: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
        self._following: defaultdict[int, set[int]] = defaultdict(set)

    def post_tweet(self, user_id: int, tweet_id: int) -> None:
        """Record a new tweet by ``user_id``."""
        self._tweets[user_id].append((next(self._clock), tweet_id))

    def get_news_feed(self, user_id: int) -> list[int]:
        """Return up to ten most recent tweet ids by the user and everyone followed."""
        followees = self._following[user_id]
        followees.add(user_id)
        tweets = itertools.chain.from_iterable(self._tweets[uid] for uid in followees)
        newest = heapq.nlargest(FEED_SIZE, tweets)
        return [tweet_id for _, tweet_id in newest]

    def follow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` follow ``followee_id``."""
        followees = self._following[follower_id]
        followees.add(follower_id)
        followees.add(followee_id)

    def unfollow(self, follower_id: int, followee_id: int) -> None:
        """Stop ``follower_id`` following ``followee_id``."""
        self._following[follower_id].discard(followee_id)
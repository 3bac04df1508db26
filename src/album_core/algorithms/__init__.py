from .heap import MinHeap
from .shortest_path import build_precedents, find_shortest_path, path_from_precedents
from .shortest_path_n import LayoutSearchError, find_shortest_path_length_n

__all__ = [
    "MinHeap",
    "build_precedents",
    "find_shortest_path",
    "path_from_precedents",
    "find_shortest_path_length_n",
    "LayoutSearchError",
]

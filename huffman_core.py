# filename: huffman_core.py

import heapq
import logging
from collections import Counter

logger = logging.getLogger(__name__)

# Byte value of the leaf added next to a lone symbol.
SYNTHETIC_BYTE = 0


class HuffmanNode:
    def __init__(self, byte=None, freq=0, left=None, right=None):
        self.byte = byte
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __eq__(self, other):
        # Shape and leaf values only; weights are not stored in the container.
        if not isinstance(other, HuffmanNode):
            return NotImplemented
        if self.is_leaf or other.is_leaf:
            return self.is_leaf and other.is_leaf and self.byte == other.byte
        return self.left == other.left and self.right == other.right

    __hash__ = None

    def __repr__(self):
        if self.is_leaf:
            return f"Leaf({self.byte})"
        return f"Node({self.left!r}, {self.right!r})"


class HuffmanLogic:
    def count_frequencies(self, data):
        # Frequency analysis of the input byte data
        return dict(Counter(data))

    def build_tree(self, freqs):
        if not freqs:
            raise ValueError("cannot build a Huffman tree from an empty frequency table")

        # Heap entries are (weight, serial, node); the serial makes ties pop in insertion order.
        priority_queue = []
        serial = 0
        for byte in sorted(freqs):
            heapq.heappush(priority_queue, (freqs[byte], serial, HuffmanNode(byte, freqs[byte])))
            serial += 1

        if len(priority_queue) == 1:
            heapq.heappush(priority_queue, (1, serial, HuffmanNode(SYNTHETIC_BYTE, 1)))
            serial += 1

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left_freq, _, left = heapq.heappop(priority_queue)
            right_freq, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left_freq + right_freq, left, right)
            heapq.heappush(priority_queue, (merged.freq, serial, merged))
            serial += 1

        root = priority_queue[0][2]
        logger.debug("built tree over %d symbols, total weight %d", len(freqs), root.freq)
        return root

    def generate_codes(self, node):
        codes = {}
        if node.is_leaf:
            codes[node.byte] = "0"
            return codes

        def walk(current, path):
            if current.is_leaf:
                codes[current.byte] = path
                return
            walk(current.left, path + "0")
            walk(current.right, path + "1")

        walk(node, "")
        return codes

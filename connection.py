# connection.py
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np

from topics import CATEGORY_COLORS, Topic

DEFAULT_COLOR = '#8b5cf6'
_HEX_COLOR = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)

@dataclass
class TopicConnection:
    """A line drawn between two related topic neurons."""
    source_id: str
    target_id: str
    start: Tuple[float, float, float]
    end: Tuple[float, float, float]
    strength: float
    color: str = DEFAULT_COLOR

    @property
    def length(self) -> float:
        return float(np.linalg.norm(np.subtract(self.end, self.start)))

    @property
    def opacity(self) -> float:
        return min(0.6, self.strength * 0.45)

def topic_similarity(a: Topic, b: Topic) -> float:
    """Score how related two topics are, between 0 and 1."""
    score = 0.0
    if a.category == b.category:
        score += 0.6
    if a.source == b.source:
        score += 0.3
    if abs(a.intensity - b.intensity) < 0.2:
        score += 0.1
    return score

def _hex_to_rgb(color: str) -> Tuple[int, int, int]:
    match = _HEX_COLOR.match(color)
    if match is None:
        raise ValueError(f"invalid hex color {color!r}")
    return tuple(int(channel, 16) for channel in match.groups())

def blend_colors(color_a: str, color_b: str) -> str:
    """Average two hex colors channel by channel."""
    a = _hex_to_rgb(color_a)
    b = _hex_to_rgb(color_b)
    # Round half up per channel
    return '#' + ''.join(f'{int((x + y) / 2 + 0.5):02x}' for x, y in zip(a, b))

def build_connections(topics: Sequence[Topic], min_similarity: float = 0.6,
                      max_distance: float = 4.0) -> List[TopicConnection]:
    """Connect every pair of nearby, related topics that have positions."""
    positioned = [t for t in topics if t.has_position]
    connections = []

    for i in range(len(positioned)):
        for j in range(i + 1, len(positioned)):
            a, b = positioned[i], positioned[j]
            similarity = topic_similarity(a, b)
            if similarity < min_similarity:
                continue

            distance = np.linalg.norm(np.subtract(a.position, b.position))
            if distance >= max_distance:
                continue

            if a.category == b.category:
                color = CATEGORY_COLORS[a.category]
            else:
                color = blend_colors(CATEGORY_COLORS[a.category], CATEGORY_COLORS[b.category])
            connections.append(TopicConnection(a.id, b.id, a.position, b.position, similarity, color))

    return connections

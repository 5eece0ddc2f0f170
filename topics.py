# topics.py
import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

class Category(Enum):
    TECH = "tech"
    POLITICS = "politics"
    ENTERTAINMENT = "entertainment"
    SCIENCE = "science"
    SPORTS = "sports"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> 'Category':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.OTHER

CATEGORY_COLORS: Dict[Category, str] = {
    Category.TECH: '#00d4ff',
    Category.POLITICS: '#ff4757',
    Category.ENTERTAINMENT: '#ffa502',
    Category.SCIENCE: '#1e90ff',
    Category.SPORTS: '#2ed573',
    Category.OTHER: '#a29bfe',
}

UNASSIGNED_COLOR = '#666666'

@dataclass
class Topic:
    """A trending item rendered as one neuron."""
    id: str
    name: str
    category: Category
    intensity: float  # 0-1 scale
    summary: str
    source: str
    timestamp: datetime
    position: Optional[Tuple[float, float, float]] = None
    url: Optional[str] = None
    ai_summary: Optional[str] = None
    score: Optional[int] = None     # Reddit upvotes
    comments: Optional[int] = None  # Reddit comment count

    def __post_init__(self):
        self.category = Category.parse(self.category)
        intensity = float(self.intensity)
        self.intensity = min(max(intensity, 0.0), 1.0) if math.isfinite(intensity) else 0.0

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self.category]

    @property
    def has_position(self) -> bool:
        p = self.position
        return (
            p is not None
            and len(p) == 3
            and all(isinstance(v, (int, float)) and math.isfinite(v) for v in p)
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Topic':
        """Parse one item of a trends feed payload."""
        if not isinstance(data, dict):
            raise ValueError(f"topic must be a JSON object, got {type(data).__name__}")
        for key in ('id', 'name'):
            if key not in data:
                raise ValueError(f"topic is missing required field {key!r}")
        try:
            intensity = float(data.get('intensity', 0.0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"topic {data['id']!r} has invalid intensity") from e
        if not math.isfinite(intensity):
            raise ValueError(f"topic {data['id']!r} has non-finite intensity")

        reddit = data.get('redditData') or {}
        if not isinstance(reddit, dict):
            raise ValueError(f"topic {data['id']!r} has invalid redditData")
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            category=Category.parse(data.get('category', 'other')),
            intensity=intensity,
            summary=data.get('summary', ''),
            source=data.get('source', ''),
            timestamp=_parse_timestamp(data.get('timestamp'), data['id']),
            position=_parse_position(data.get('position'), data['id']),
            url=data.get('url'),
            ai_summary=data.get('aiSummary'),
            score=reddit.get('score'),
            comments=reddit.get('comments'),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'category': self.category.value,
            'intensity': self.intensity,
            'summary': self.summary,
            'source': self.source,
            'timestamp': self.timestamp.isoformat(),
            'position': list(self.position) if self.position is not None else None,
        }
        if self.url:
            data['url'] = self.url
        if self.ai_summary:
            data['aiSummary'] = self.ai_summary
        if self.score is not None or self.comments is not None:
            data['redditData'] = {'score': self.score, 'comments': self.comments}
        return data

def _parse_position(value, topic_id) -> Optional[Tuple[float, float, float]]:
    if value is None:
        return None
    try:
        position = tuple(float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"topic {topic_id!r} has invalid position {value!r}") from e
    if len(position) != 3 or not all(math.isfinite(v) for v in position):
        raise ValueError(f"topic {topic_id!r} position must be three finite numbers")
    return position

def _parse_timestamp(value, topic_id) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)  # Epoch millis
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError as e:
        raise ValueError(f"topic {topic_id!r} has invalid timestamp {value!r}") from e

def attach_positions(topics: Sequence[Topic],
                     positions: Sequence[Tuple[float, float, float]]) -> List[Topic]:
    """Pair topics with positions by index; unplaced topics get no position."""
    return [
        replace(topic, position=tuple(positions[i]) if i < len(positions) else None)
        for i, topic in enumerate(topics)
    ]

def topics_from_feed(payload: Dict[str, Any], generator) -> List[Topic]:
    """Parse a ``{"topics": [...]}`` payload and position every topic."""
    items = payload.get('topics')
    if not isinstance(items, list):
        raise ValueError("feed payload must contain a 'topics' list")
    topics = [Topic.from_dict(item) for item in items]
    return attach_positions(topics, generator.generate(len(topics)))

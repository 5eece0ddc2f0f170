# mock_data.py
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from neuron_placement import NeuronPlacementGenerator
from topics import Category, Topic, attach_positions

# (name, category, intensity, summary, source, age in minutes)
MOCK_TOPICS = [
    ('AI Chip Breakthrough', Category.TECH, 0.9,
     'New neural processing units achieve 100x performance gains in machine learning tasks.',
     'Reddit r/technology', 60),
    ('Climate Summit 2025', Category.POLITICS, 0.75,
     'World leaders gather to discuss aggressive carbon reduction targets.',
     'Reddit r/worldnews', 120),
    ('Taylor Swift Tour', Category.ENTERTAINMENT, 0.85,
     'Record-breaking concert series announced for Asian cities.',
     'Reddit r/popculture', 30),
    ('Mars Colony Progress', Category.SCIENCE, 0.7,
     'SpaceX completes successful test of life support systems for Mars mission.',
     'Reddit r/space', 90),
    ('Cricket World Cup', Category.SPORTS, 0.95,
     'India advances to finals with stunning victory over Australia.',
     'Reddit r/cricket', 15),
    ('Quantum Computing', Category.TECH, 0.65,
     'IBM announces new quantum processor with 1000+ qubits.',
     'Reddit r/Futurology', 180),
    ('Electric Vehicle Sales', Category.TECH, 0.6,
     'EVs surpass 50% of new car sales in Europe for first time.',
     'Reddit r/electricvehicles', 240),
    ('New Movie Trailer', Category.ENTERTAINMENT, 0.8,
     'Highly anticipated sci-fi sequel drops surprise trailer.',
     'Reddit r/movies', 45),
]

def generate_mock_topics(generator: Optional[NeuronPlacementGenerator] = None,
                         now: Optional[datetime] = None) -> List[Topic]:
    """Offline sample feed, positioned inside the brain."""
    generator = generator or NeuronPlacementGenerator()
    now = now or datetime.now(timezone.utc)

    topics = [
        Topic(
            id=f'topic-{i}',
            name=name,
            category=category,
            intensity=intensity,
            summary=summary,
            source=source,
            timestamp=now - timedelta(minutes=age),
        )
        for i, (name, category, intensity, summary, source, age) in enumerate(MOCK_TOPICS)
    ]
    return attach_positions(topics, generator.generate(len(topics)))

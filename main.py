# main.py
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

from connection import build_connections
from logger import PlacementLogger
from mock_data import generate_mock_topics
from neuron_placement import NeuronPlacementGenerator
from placement_config import PlacementConfigError, default_config, load_config
from placement_stats import analyze_placement, summarize_trials
from visualization import plot_neuron_layout

def _write_json(data, path: str):
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(data, indent=2))
    print(f"Wrote {output}")

def run_generate(generator: NeuronPlacementGenerator, count: int,
                 output: Optional[str] = None, plot: Optional[str] = None):
    """Place ``count`` neurons and report on the layout."""
    regions = generator.generate_regions(count)
    report = analyze_placement(regions, generator.boundary, count)
    PlacementLogger().log_placement_report(report)

    positions = [tuple(float(v) for v in p) for r in regions for p in r.positions]
    if output:
        _write_json({
            'requested': count,
            'positions': [list(p) for p in positions],
            'regions': {r.name: {'quota': r.num_neurons, 'placed': r.placed} for r in regions},
        }, output)
    if plot:
        fig = plot_neuron_layout(positions, generator.boundary, save_path=plot)
        plt.close(fig)
        print(f"Saved preview to {plot}")
    return report

def run_mock(generator: NeuronPlacementGenerator, output: Optional[str] = None,
             plot: Optional[str] = None):
    """Position the bundled mock feed and connect related topics."""
    topics = generate_mock_topics(generator)
    connections = build_connections(topics)

    print(f"Positioned {sum(t.has_position for t in topics)}/{len(topics)} topics, "
          f"{len(connections)} connections")
    for topic in topics:
        where = 'unplaced' if topic.position is None else \
            '(' + ', '.join(f'{v:.2f}' for v in topic.position) + ')'
        print(f"- [{topic.category.value}] {topic.name}: {where}")

    if output:
        _write_json({
            'topics': [t.to_dict() for t in topics],
            'connections': [
                {'source': c.source_id, 'target': c.target_id,
                 'strength': c.strength, 'color': c.color}
                for c in connections
            ],
        }, output)
    if plot:
        placed = [t for t in topics if t.has_position]
        fig = plot_neuron_layout([t.position for t in placed], generator.boundary,
                                 topics=placed, connections=connections, save_path=plot)
        plt.close(fig)
        print(f"Saved preview to {plot}")
    return topics

def run_trials(generator: NeuronPlacementGenerator, count: int, trials: int):
    """Repeat placement to measure how reliably the geometry fills."""
    reports = []
    for _ in tqdm(range(trials), desc="Placement trials"):
        regions = generator.generate_regions(count)
        reports.append(analyze_placement(regions, generator.boundary, count))

    summary = summarize_trials(reports)
    print("\nTrial summary:")
    for key, value in summary.items():
        print(f"- {key}: {value}")
    return summary

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Trending-topic brain neuron placement')
    parser.add_argument('--mode', choices=['generate', 'mock', 'trials'], default='generate',
                        help='Operation mode')
    parser.add_argument('--count', type=int, default=40, help='Number of neurons to place')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible layouts')
    parser.add_argument('--config', type=str, help='Path to a JSON placement config')
    parser.add_argument('--trials', type=int, default=100,
                        help='Number of runs in trials mode')
    parser.add_argument('--output', type=str, help='Write results as JSON to this path')
    parser.add_argument('--plot', type=str, help='Save a preview image to this path')
    parser.add_argument('--no-log-file', action='store_true',
                        help='Only log to the console')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if not args.no_log_file:
            PlacementLogger().enable_file_logging()
        config = load_config(args.config) if args.config else default_config()
        if args.count < 0:
            raise ValueError(f"--count must be >= 0, got {args.count}")
        rng = np.random.default_rng(args.seed)
        generator = NeuronPlacementGenerator(config=config, rng=rng)

        if args.mode == 'mock':
            run_mock(generator, args.output, args.plot)
        elif args.mode == 'trials':
            if args.trials < 1:
                raise ValueError(f"--trials must be >= 1, got {args.trials}")
            run_trials(generator, args.count, args.trials)
        else:
            run_generate(generator, args.count, args.output, args.plot)

    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 1
    except (PlacementConfigError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
